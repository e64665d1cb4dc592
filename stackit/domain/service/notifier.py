"""Notifier interface."""

from abc import ABC, abstractmethod

from stackit.domain.model.event import DomainEvent


class Notifier(ABC):
    """Consumer of domain events.

    Services publish after their state change has been saved. What the
    notifier does with an event (store it, fan it out, drop it) is its own
    business.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish a domain event.

        Args:
            event: The event to publish
        """
        pass

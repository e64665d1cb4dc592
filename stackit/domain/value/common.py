"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around a single validated primitive.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, so wrappers like TagName and Handle serialize as
    plain strings in API responses and database rows.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)

"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span aggregates or need a
    repository: voting, acceptance, tag bookkeeping, notifications.
    """

    pass

"""Base service class for domain services."""

from uuid import UUID


class Service:
    """Base class for comment domain services.

    Services receive their repository and collaborators through the
    constructor and hold no other state.
    """

    pass


def span_id(value: UUID | None) -> str | None:
    """Render an optional id as a logfire attribute."""
    return str(value) if value else None

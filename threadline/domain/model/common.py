"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model.

    Repositories never mutate a stored comment; they replace it with
    ``model_copy(update=...)`` or map a fresh row.
    """

    model_config = ConfigDict(frozen=True)

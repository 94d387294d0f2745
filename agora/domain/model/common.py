"""Base model for forum entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable forum entity.

    Entities are never changed in place: services save a copy made with
    ``model_copy(update=...)`` and keep working with what the repository
    returns.
    """

    model_config = ConfigDict(frozen=True)

"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are immutable; changes go through ``model_copy(update=...)``
    or a repository update that returns a fresh instance.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Mappers must not smuggle unknown columns in
        arbitrary_types_allowed=True,
    )

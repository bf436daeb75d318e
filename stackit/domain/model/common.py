"""Shared configuration for StackIt entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Entities are never mutated in place: repositories hand back updated
    copies made with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

"""Shared configuration for StackIt value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, hashable, compared field by field."""

    model_config = ConfigDict(frozen=True)

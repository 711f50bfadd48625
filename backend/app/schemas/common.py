"""Shared schemas."""
from pydantic import BaseModel, ConfigDict


class WhereUniqueInput(BaseModel):
    """Reference to a single record by primary key."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class MetaQueryPayload(BaseModel):
    """Aggregate information about a list query."""

    count: int

"""Tag schemas."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator


class TagCreate(BaseModel):
    """Schema for creating a tag."""

    name: str


class TagUpdate(BaseModel):
    """Schema for updating a tag."""

    name: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


class Tag(TagCreate):
    """Schema for tag response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime

"""Author schemas."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class AuthorBase(BaseModel):
    """Base author schema."""

    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None


class AuthorCreate(AuthorBase):
    """Schema for creating an author."""

    pass


class AuthorUpdate(AuthorBase):
    """Schema for updating an author."""

    pass


class Author(AuthorBase):
    """Schema for author response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime

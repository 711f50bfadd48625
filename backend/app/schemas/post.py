"""Post schemas."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from app.schemas.common import WhereUniqueInput


class PostBase(BaseModel):
    """Fields shared by post requests and responses."""

    title: str
    draft: StrictBool | None = None
    content: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    featured_image: str | None = None


class PostCreate(PostBase):
    """Schema for creating a post.

    ``slug`` is accepted for compatibility with the admin form but is always
    replaced by one derived from ``title``.
    """

    slug: str | None = None
    author: WhereUniqueInput
    tags: list[WhereUniqueInput] | None = None


class PostUpdate(BaseModel):
    """Schema for updating a post.

    ``tags``, when present, replaces the post's whole tag set.
    """

    title: str | None = None
    slug: str | None = None
    draft: StrictBool | None = None
    content: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    featured_image: str | None = None
    author: WhereUniqueInput | None = None
    tags: list[WhereUniqueInput] | None = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("title cannot be null")
        return value


class Post(PostBase):
    """Schema for post response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str | None
    created_at: datetime
    updated_at: datetime
    author: WhereUniqueInput | None
    tags: list[WhereUniqueInput] = []

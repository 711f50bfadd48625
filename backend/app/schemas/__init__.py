"""Pydantic schemas for API request/response."""
from app.schemas.common import MetaQueryPayload, WhereUniqueInput
from app.schemas.author import Author, AuthorCreate, AuthorUpdate
from app.schemas.tag import Tag, TagCreate, TagUpdate
from app.schemas.post import Post, PostCreate, PostUpdate

__all__ = [
    "MetaQueryPayload",
    "WhereUniqueInput",
    "Author",
    "AuthorCreate",
    "AuthorUpdate",
    "Tag",
    "TagCreate",
    "TagUpdate",
    "Post",
    "PostCreate",
    "PostUpdate",
]

"""SQLAlchemy models."""
from app.models.post_tag import post_tags
from app.models.author import Author
from app.models.tag import Tag
from app.models.post import Post

__all__ = [
    "post_tags",
    "Author",
    "Tag",
    "Post",
]

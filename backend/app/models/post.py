"""Post model."""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.post_tag import post_tags


class Post(Base):
    """Blog post written by one author and labelled with tags."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    title = Column(Text, nullable=False)
    slug = Column(Text, nullable=True, index=True)  # derived from title on create
    draft = Column(Boolean, nullable=True)
    content = Column(Text, nullable=True)
    meta_title = Column(Text, nullable=True)
    meta_description = Column(Text, nullable=True)
    featured_image = Column(Text, nullable=True)
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=False, index=True)

    # Relationships
    author = relationship("Author", back_populates="posts")
    tags = relationship("Tag", secondary=post_tags, back_populates="posts")

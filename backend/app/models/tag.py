"""Tag model."""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.post_tag import post_tags


class Tag(Base):
    """Label attached to any number of posts."""

    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    name = Column(String(255), nullable=False)

    # Relationships
    posts = relationship("Post", secondary=post_tags, back_populates="tags")

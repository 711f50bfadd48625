"""Tag persistence."""
from typing import List, Optional

from app.models.post import Post
from app.models.tag import Tag
from app.services.crud import CrudService


class TagService(CrudService):
    """Stores tags."""

    model = Tag
    resource = "Tag"

    def find_posts(
        self, tag_id: int, *, skip: int = 0, take: Optional[int] = None
    ) -> List[Post]:
        """List the posts labelled with a tag, newest first."""
        self.get(tag_id)
        query = (
            self.db.query(Post)
            .filter(Post.tags.any(Tag.id == tag_id))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return self._paginate(query, skip, take)

"""Author persistence."""
from typing import List, Optional

from app.models.author import Author
from app.models.post import Post
from app.services.crud import CrudService


class AuthorService(CrudService):
    """Stores authors."""

    model = Author
    resource = "Author"

    def find_posts(
        self, author_id: int, *, skip: int = 0, take: Optional[int] = None
    ) -> List[Post]:
        """List the posts written by an author, newest first."""
        self.get(author_id)
        query = (
            self.db.query(Post)
            .filter(Post.author_id == author_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return self._paginate(query, skip, take)

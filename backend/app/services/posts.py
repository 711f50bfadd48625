"""Post persistence and write normalization."""
import logging
from typing import Any, Dict, List, Optional

from app.models.author import Author
from app.models.post import Post
from app.models.tag import Tag
from app.services.crud import CrudService
from app.services.exceptions import ReferenceNotFoundError
from app.services.write_normalizer import is_publish, prepare_create, prepare_update

logger = logging.getLogger(__name__)


class PostServiceBase(CrudService):
    """Stores posts, connecting author and tag references by id."""

    model = Post
    resource = "Post"

    def _apply_filters(self, query, filters: Dict[str, Any]):
        filters = dict(filters)
        tag_id = filters.pop("tag_id", None)
        if tag_id is not None:
            query = query.filter(Post.tags.any(Tag.id == tag_id))
        return super()._apply_filters(query, filters)

    def _assign(self, record: Post, data: Dict[str, Any]) -> None:
        author_ref = data.pop("author", None)
        tag_refs = data.pop("tags", None)
        if author_ref is not None:
            record.author = self._resolve_author(author_ref["id"])
        if tag_refs is not None:
            record.tags = self._resolve_tags([ref["id"] for ref in tag_refs])
        super()._assign(record, data)

    def _resolve_author(self, author_id: int) -> Author:
        author = self.db.query(Author).filter(Author.id == author_id).first()
        if author is None:
            raise ReferenceNotFoundError("Author", [author_id])
        return author

    def _resolve_tags(self, tag_ids: List[int]) -> List[Tag]:
        if not tag_ids:
            return []
        tags = self.db.query(Tag).filter(Tag.id.in_(tag_ids)).all()
        missing = set(tag_ids) - {tag.id for tag in tags}
        if missing:
            raise ReferenceNotFoundError("Tag", missing)
        by_id = {tag.id: tag for tag in tags}
        return [by_id[tag_id] for tag_id in dict.fromkeys(tag_ids)]

    def find_tags(
        self, post_id: int, *, skip: int = 0, take: Optional[int] = None
    ) -> List[Tag]:
        """List the tags of a post ordered by id."""
        self.get(post_id)
        query = (
            self.db.query(Tag)
            .filter(Tag.posts.any(Post.id == post_id))
            .order_by(Tag.id.asc())
        )
        return self._paginate(query, skip, take)

    def get_author(self, post_id: int) -> Optional[Author]:
        """Return the author of a post."""
        return self.get(post_id).author


class PostService(PostServiceBase):
    """Post service that derives computed fields before writing."""

    def create(self, data: Dict[str, Any]) -> Post:
        prepared = prepare_create(data)
        logger.debug("Derived slug %r for new post", prepared["slug"])
        return super().create(prepared)

    def update(self, args: Dict[str, Any]) -> Post:
        if is_publish(args):
            logger.info("Publishing post %s; refreshing timestamps", args["where"]["id"])
        return super().update(prepare_update(args))

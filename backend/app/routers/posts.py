"""Posts API router."""
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.errors import resolve_take, to_http_exception
from app.schemas.author import Author as AuthorSchema
from app.schemas.common import MetaQueryPayload
from app.schemas.post import Post as PostSchema, PostCreate, PostUpdate
from app.schemas.tag import Tag as TagSchema
from app.services.exceptions import StorageError
from app.services.posts import PostService

router = APIRouter()


@router.get("", response_model=list[PostSchema])
def list_posts(
    skip: int = Query(0, ge=0),
    take: int | None = Query(None, ge=1),
    draft: bool | None = None,
    author_id: int | None = None,
    tag_id: int | None = None,
    order: Literal["asc", "desc"] = "desc",
    db: Session = Depends(get_db),
):
    """List posts, newest first by default."""
    return PostService(db).find_many(
        skip=skip,
        take=resolve_take(take),
        order=order,
        draft=draft,
        author_id=author_id,
        tag_id=tag_id,
    )


@router.get("/_meta", response_model=MetaQueryPayload)
def posts_meta(
    draft: bool | None = None,
    author_id: int | None = None,
    tag_id: int | None = None,
    db: Session = Depends(get_db),
):
    """Count posts matching the list filters."""
    count = PostService(db).count(draft=draft, author_id=author_id, tag_id=tag_id)
    return {"count": count}


@router.post("", response_model=PostSchema)
def create_post(post: PostCreate, db: Session = Depends(get_db)):
    """Create a new post with a slug derived from its title."""
    try:
        return PostService(db).create(post.model_dump(exclude_unset=True))
    except StorageError as exc:
        raise to_http_exception(exc)


@router.get("/{post_id}", response_model=PostSchema)
def get_post(post_id: int, db: Session = Depends(get_db)):
    """Get a post by ID."""
    post = PostService(db).find_one(post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.put("/{post_id}", response_model=PostSchema)
def update_post(post_id: int, post_update: PostUpdate, db: Session = Depends(get_db)):
    """Update a post. Setting ``draft`` to false publishes it."""
    args = {
        "where": {"id": post_id},
        "data": post_update.model_dump(exclude_unset=True),
    }
    try:
        return PostService(db).update(args)
    except StorageError as exc:
        raise to_http_exception(exc)


@router.delete("/{post_id}", response_model=PostSchema)
def delete_post(post_id: int, db: Session = Depends(get_db)):
    """Delete a post and return it."""
    service = PostService(db)
    try:
        deleted = PostSchema.model_validate(service.get(post_id))
        service.delete({"where": {"id": post_id}})
    except StorageError as exc:
        raise to_http_exception(exc)
    return deleted


@router.get("/{post_id}/tags", response_model=list[TagSchema])
def list_post_tags(
    post_id: int,
    skip: int = Query(0, ge=0),
    take: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """List the tags of a post."""
    try:
        return PostService(db).find_tags(post_id, skip=skip, take=resolve_take(take))
    except StorageError as exc:
        raise to_http_exception(exc)


@router.get("/{post_id}/author", response_model=AuthorSchema | None)
def get_post_author(post_id: int, db: Session = Depends(get_db)):
    """Get the author of a post."""
    try:
        return PostService(db).get_author(post_id)
    except StorageError as exc:
        raise to_http_exception(exc)

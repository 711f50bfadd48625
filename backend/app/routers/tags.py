"""Tags API router."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.errors import resolve_take, to_http_exception
from app.schemas.tag import Tag as TagSchema, TagCreate, TagUpdate
from app.schemas.common import MetaQueryPayload
from app.schemas.post import Post as PostSchema
from app.services.tags import TagService
from app.services.exceptions import StorageError

router = APIRouter()


@router.get("", response_model=list[TagSchema])
def list_tags(
    skip: int = Query(0, ge=0),
    take: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """List tags."""
    return TagService(db).find_many(skip=skip, take=resolve_take(take))


@router.get("/_meta", response_model=MetaQueryPayload)
def tags_meta(db: Session = Depends(get_db)):
    """Count tags."""
    return {"count": TagService(db).count()}


@router.post("", response_model=TagSchema)
def create_tag(tag: TagCreate, db: Session = Depends(get_db)):
    """Create a new tag."""
    try:
        return TagService(db).create(tag.model_dump())
    except StorageError as exc:
        raise to_http_exception(exc)


@router.get("/{tag_id}", response_model=TagSchema)
def get_tag(tag_id: int, db: Session = Depends(get_db)):
    """Get a tag by ID."""
    tag = TagService(db).find_one(tag_id)
    if not tag:
        raise HTTPException(status_code=404, detail="Tag not found")
    return tag


@router.put("/{tag_id}", response_model=TagSchema)
def update_tag(
    tag_id: int, tag_update: TagUpdate, db: Session = Depends(get_db)
):
    """Update a tag."""
    args = {
        "where": {"id": tag_id},
        "data": tag_update.model_dump(exclude_unset=True),
    }
    try:
        return TagService(db).update(args)
    except StorageError as exc:
        raise to_http_exception(exc)


@router.delete("/{tag_id}", response_model=TagSchema)
def delete_tag(tag_id: int, db: Session = Depends(get_db)):
    """Delete a tag and detach it from its posts."""
    service = TagService(db)
    try:
        deleted = TagSchema.model_validate(service.get(tag_id))
        service.delete({"where": {"id": tag_id}})
    except StorageError as exc:
        raise to_http_exception(exc)
    return deleted


@router.get("/{tag_id}/posts", response_model=list[PostSchema])
def list_tag_posts(
    tag_id: int,
    skip: int = Query(0, ge=0),
    take: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """List the posts labelled with a tag."""
    try:
        return TagService(db).find_posts(tag_id, skip=skip, take=resolve_take(take))
    except StorageError as exc:
        raise to_http_exception(exc)

"""Authors API router."""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.errors import resolve_take, to_http_exception
from app.schemas.author import Author as AuthorSchema, AuthorCreate, AuthorUpdate
from app.schemas.common import MetaQueryPayload
from app.schemas.post import Post as PostSchema
from app.services.authors import AuthorService
from app.services.exceptions import StorageError

router = APIRouter()


@router.get("", response_model=list[AuthorSchema])
def list_authors(
    skip: int = Query(0, ge=0),
    take: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """List authors."""
    return AuthorService(db).find_many(skip=skip, take=resolve_take(take))


@router.get("/_meta", response_model=MetaQueryPayload)
def authors_meta(db: Session = Depends(get_db)):
    """Count authors."""
    return {"count": AuthorService(db).count()}


@router.post("", response_model=AuthorSchema)
def create_author(author: AuthorCreate, db: Session = Depends(get_db)):
    """Create a new author."""
    try:
        return AuthorService(db).create(author.model_dump())
    except StorageError as exc:
        raise to_http_exception(exc)


@router.get("/{author_id}", response_model=AuthorSchema)
def get_author(author_id: int, db: Session = Depends(get_db)):
    """Get an author by ID."""
    author = AuthorService(db).find_one(author_id)
    if not author:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


@router.put("/{author_id}", response_model=AuthorSchema)
def update_author(
    author_id: int, author_update: AuthorUpdate, db: Session = Depends(get_db)
):
    """Update an author."""
    args = {
        "where": {"id": author_id},
        "data": author_update.model_dump(exclude_unset=True),
    }
    try:
        return AuthorService(db).update(args)
    except StorageError as exc:
        raise to_http_exception(exc)


@router.delete("/{author_id}", response_model=AuthorSchema)
def delete_author(author_id: int, db: Session = Depends(get_db)):
    """Delete an author that no longer owns any posts."""
    service = AuthorService(db)
    try:
        deleted = AuthorSchema.model_validate(service.get(author_id))
        service.delete({"where": {"id": author_id}})
    except StorageError as exc:
        raise to_http_exception(exc)
    return deleted


@router.get("/{author_id}/posts", response_model=list[PostSchema])
def list_author_posts(
    author_id: int,
    skip: int = Query(0, ge=0),
    take: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """List the posts written by an author."""
    try:
        return AuthorService(db).find_posts(author_id, skip=skip, take=resolve_take(take))
    except StorageError as exc:
        raise to_http_exception(exc)

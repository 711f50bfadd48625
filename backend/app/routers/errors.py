"""Translation of service errors into HTTP errors."""
from fastapi import HTTPException

from app.config import settings
from app.services.exceptions import (
    ConstraintViolationError,
    RecordNotFoundError,
    ReferenceNotFoundError,
    StorageError,
)


def to_http_exception(exc: StorageError) -> HTTPException:
    """Map a storage error to the matching HTTP status."""
    if isinstance(exc, RecordNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, ReferenceNotFoundError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, ConstraintViolationError):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=500, detail=f"Storage error: {exc}")


def resolve_take(take: int | None) -> int:
    """Apply the default page size and cap requested page sizes."""
    if take is None:
        take = settings.default_page_size
    return min(take, settings.max_page_size)

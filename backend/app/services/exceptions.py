"""Errors raised by the persistence services."""
import json
from typing import Any, Iterable, Mapping


class StorageError(Exception):
    """Base exception for persistence errors."""

    pass


class RecordNotFoundError(StorageError):
    """Raised when the row targeted by a read, update or delete does not exist."""

    def __init__(self, resource: str, where: Mapping[str, Any]):
        self.resource = resource
        self.where = dict(where)
        super().__init__(f"No resource was found for {json.dumps(self.where)}")


class ReferenceNotFoundError(StorageError):
    """Raised when a write references related rows that do not exist."""

    def __init__(self, resource: str, ids: Iterable[int]):
        self.resource = resource
        self.ids = sorted(ids)
        joined = ", ".join(str(i) for i in self.ids)
        super().__init__(f"Referenced {resource} not found: {joined}")


class ConstraintViolationError(StorageError):
    """Raised when the database rejects a write."""

    def __init__(self, resource: str, detail: str):
        self.resource = resource
        self.detail = detail
        super().__init__(f"{resource} write rejected: {detail}")

"""Generic persistence service shared by all resources."""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.services.exceptions import (
    ConstraintViolationError,
    RecordNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.utcnow()


class CrudService:
    """Create, read, update and delete rows of one SQLAlchemy model.

    Writes take plain records: ``create`` receives the field values,
    ``update`` and ``delete`` receive ``{"where": {"id": ...}}`` with
    ``update`` adding a ``"data"`` mapping. Every write commits once or
    rolls back entirely.
    """

    model = None
    resource = ""

    def __init__(self, db: Session):
        self.db = db

    def _apply_filters(self, query, filters: Dict[str, Any]):
        """Filter ``query`` by column equality, ignoring ``None`` values."""
        columns = self.model.__table__.columns
        for field, value in filters.items():
            if value is None:
                continue
            if field not in columns:
                raise ValueError(f"Unknown filter for {self.resource}: {field}")
            query = query.filter(columns[field] == value)
        return query

    def _assign(self, record, data: Dict[str, Any]) -> None:
        for field, value in data.items():
            setattr(record, field, value)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConstraintViolationError(self.resource, str(exc.orig)) from exc

    def count(self, **filters: Any) -> int:
        """Count rows matching ``filters``."""
        return self._apply_filters(self.db.query(self.model), filters).count()

    def find_many(
        self,
        *,
        skip: int = 0,
        take: Optional[int] = None,
        order: str = "desc",
        **filters: Any,
    ) -> List[Any]:
        """List rows matching ``filters``, newest first unless ``order="asc"``."""
        query = self._apply_filters(self.db.query(self.model), filters)
        if order == "asc":
            query = query.order_by(self.model.created_at.asc(), self.model.id.asc())
        else:
            query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        return self._paginate(query, skip, take)

    @staticmethod
    def _paginate(query, skip: int, take: Optional[int]) -> List[Any]:
        if skip:
            query = query.offset(skip)
        if take is not None:
            query = query.limit(take)
        return query.all()

    def find_one(self, record_id: int):
        """Return the row with ``record_id`` or ``None``."""
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def get(self, record_id: int):
        """Return the row with ``record_id`` or raise ``RecordNotFoundError``."""
        record = self.find_one(record_id)
        if record is None:
            raise RecordNotFoundError(self.resource, {"id": record_id})
        return record

    def create(self, data: Dict[str, Any]):
        """Insert a row built from ``data``."""
        record = self.model()
        try:
            self._assign(record, dict(data))
            self.db.add(record)
            self._commit()
        except StorageError:
            self.db.rollback()
            raise
        self.db.refresh(record)
        logger.info("Created %s %s", self.resource, record.id)
        return record

    def update(self, args: Dict[str, Any]):
        """Apply ``args["data"]`` to the row identified by ``args["where"]``."""
        where = args["where"]
        record = self.get(where["id"])
        data = dict(args.get("data") or {})
        # Relation-only changes emit no UPDATE, so onupdate would not fire.
        if data and "updated_at" not in data:
            data["updated_at"] = _utcnow()
        try:
            self._assign(record, data)
            self._commit()
        except StorageError:
            self.db.rollback()
            raise
        self.db.refresh(record)
        logger.info("Updated %s %s", self.resource, record.id)
        return record

    def delete(self, args: Dict[str, Any]):
        """Delete the row identified by ``args["where"]`` and return it."""
        where = args["where"]
        record = self.get(where["id"])
        self.db.delete(record)
        self._commit()
        logger.info("Deleted %s %s", self.resource, where["id"])
        return record

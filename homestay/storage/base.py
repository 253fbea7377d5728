import logging
from contextlib import contextmanager
from typing import Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from homestay.storage.errors import DuplicateError, StorageError

logger = logging.getLogger(__name__)


class StoreAccess:
    """Holds the request's SQLAlchemy session and maps driver errors."""

    entity = "Record"
    unique_fields = ()

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str):
        """Roll back and translate driver errors into storage errors."""
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            field = self._duplicate_field(e)
            if field is not None:
                logger.error(f"{action}: duplicate {self.entity} {field}")
                raise DuplicateError(
                    f"{self.entity} with this {field} already exists", field=field
                ) from e
            logger.error(f"{action}: integrity error: {e}")
            raise StorageError(f"{action} failed") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{action}: store error: {e}")
            raise StorageError(f"{action} failed") from e

    def _duplicate_field(self, error: IntegrityError):
        text = str(error.orig).lower()
        if "unique" not in text and "duplicate" not in text:
            return None
        for field in self.unique_fields:
            if field in text:
                return field
        return None


class ReadCreateRepository(StoreAccess):
    """
    List, read, create and count over one table.

    Subclasses set ``model`` (SQLAlchemy class), ``read_schema`` (pydantic
    model returned to callers), ``list_fields`` (columns holding serialized
    lists) and ``unique_fields``. Rows never leave the repository: every
    result is converted to ``read_schema`` with list columns decoded.
    """

    model = None
    read_schema = None
    list_fields = ()

    # -- conversion ---------------------------------------------------

    def _to_read(self, row):
        data = {column.name: getattr(row, column.name) for column in row.__table__.columns}
        for field in self.list_fields:
            data[field.name] = field.decode(data[field.name])
        return self.read_schema(**data)

    def _to_columns(self, data: dict) -> dict:
        columns = dict(data)
        for field in self.list_fields:
            if field.name in columns:
                columns[field.name] = field.encode(columns[field.name])
        return columns

    def _order_by(self):
        return [self.model.id.desc()]

    # -- operations ---------------------------------------------------

    def list(self):
        with self._guard(f"list {self.entity}"):
            rows = self.db.query(self.model).order_by(*self._order_by()).all()
        logger.debug(f"Retrieved {len(rows)} {self.entity} rows")
        return [self._to_read(row) for row in rows]

    def get_by_id(self, record_id: int):
        with self._guard(f"get {self.entity} {record_id}"):
            row = self.db.query(self.model).filter(self.model.id == record_id).first()
        return self._to_read(row) if row else None

    def create(self, payload):
        data = payload.model_dump()
        data.pop("id", None)
        with self._guard(f"create {self.entity}"):
            row = self.model(**self._to_columns(data))
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        logger.debug(f"Created {self.entity}: {row.id}")
        return self._to_read(row)

    def count(self) -> int:
        with self._guard(f"count {self.entity}"):
            return self.db.query(func.count(self.model.id)).scalar() or 0


class Repository(ReadCreateRepository):
    """Full CRUD: adds partial update and delete."""

    def update(self, record_id: int, patch) -> Optional[object]:
        """Apply only the supplied fields. Returns ``None`` if no row has ``record_id``."""
        changes = patch.model_dump(exclude_unset=True)
        changes.pop("id", None)
        with self._guard(f"update {self.entity} {record_id}"):
            row = self.db.query(self.model).filter(self.model.id == record_id).first()
            if row is None:
                return None
            for key, value in self._to_columns(changes).items():
                setattr(row, key, value)
            self.db.commit()
            self.db.refresh(row)
        logger.debug(f"Updated {self.entity}: {record_id} fields={sorted(changes)}")
        return self._to_read(row)

    def delete(self, record_id: int) -> bool:
        with self._guard(f"delete {self.entity} {record_id}"):
            removed = (
                self.db.query(self.model)
                .filter(self.model.id == record_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        logger.debug(f"Deleted {self.entity} {record_id}: {bool(removed)}")
        return removed > 0

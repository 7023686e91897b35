"""
Generic repository over one SQLAlchemy model.

Every write runs in its own transaction. Subclasses hook derived-state
effects into ``_after_create`` / ``_after_update``; those run inside the
same transaction as the primary write, after it has been flushed.
"""
import enum
import logging
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from detailpro.config import Settings
from detailpro.store.errors import ConflictError
from detailpro.store.result import Found, Lookup, NotFound

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
SchemaT = TypeVar("SchemaT", bound=BaseModel)

Payload = Union[BaseModel, Dict[str, Any]]


def plain_values(values: Dict[str, Any]) -> Dict[str, Any]:
    """Replace enum members with their stored values."""
    return {
        key: value.value if isinstance(value, enum.Enum) else value
        for key, value in values.items()
    }


class Repository(Generic[ModelT]):
    """CRUD for one entity: create, get, update, delete."""

    model: Type[ModelT]
    create_schema: Type[BaseModel]
    update_schema: Optional[Type[BaseModel]] = None
    entity_name: str = "Record"

    def __init__(self, session_factory: sessionmaker, settings: Settings):
        self._session_factory = session_factory
        self.settings = settings

    # -------------------- sessions --------------------

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session for reads; nothing is committed."""
        db = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Session committed on success and rolled back on any error."""
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError(
                f"{self.entity_name} conflicts with an existing record: {exc.orig}"
            ) from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # -------------------- payloads --------------------

    @staticmethod
    def validate(schema: Type[SchemaT], data: Payload) -> SchemaT:
        """Coerce a dict or another schema instance into ``schema``."""
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        return schema.model_validate(data)

    def _create_values(self, payload: BaseModel) -> Dict[str, Any]:
        return plain_values(payload.model_dump(exclude_none=True))

    def _lookup(self, record: Optional[ModelT], record_id: Any) -> Lookup[ModelT]:
        if record is None:
            return NotFound(self.entity_name, record_id)
        return Found(record)

    # -------------------- operations --------------------

    def _insert(self, db: Session, payload: BaseModel) -> ModelT:
        record = self.model(**self._create_values(payload))
        db.add(record)
        db.flush()
        return record

    def create(self, data: Payload) -> ModelT:
        """Store a new record and return it with its id assigned."""
        payload = self.validate(self.create_schema, data)
        with self.transaction() as db:
            record = self._insert(db, payload)
            self._after_create(db, record, payload)
        logger.debug("Created %s %s", self.entity_name, record.id)
        return record

    def get(self, record_id: int) -> Lookup[ModelT]:
        with self.session() as db:
            record = db.get(self.model, record_id)
        return self._lookup(record, record_id)

    def update(self, record_id: int, data: Payload) -> Lookup[ModelT]:
        """Apply whitelisted fields; unknown fields are a validation error."""
        if self.update_schema is None:
            raise TypeError(f"{self.entity_name} records cannot be updated")
        payload = self.validate(self.update_schema, data)
        changes = plain_values(payload.model_dump(exclude_unset=True))

        with self.transaction() as db:
            record = db.get(self.model, record_id)
            if record is None:
                return NotFound(self.entity_name, record_id)

            previous = {field: getattr(record, field) for field in changes}
            for field, value in changes.items():
                setattr(record, field, value)
            db.flush()
            self._after_update(db, record, previous, changes)

        return Found(record)

    def delete(self, record_id: int) -> bool:
        """Remove a record. Returns False when it is absent or the delete is refused."""
        with self.transaction() as db:
            record = db.get(self.model, record_id)
            if record is None:
                return False
            return self._delete(db, record)

    # -------------------- hooks --------------------

    def _after_create(self, db: Session, record: ModelT, payload: BaseModel) -> None:
        pass

    def _after_update(self, db: Session, record: ModelT,
                      previous: Dict[str, Any], changes: Dict[str, Any]) -> None:
        pass

    def _delete(self, db: Session, record: ModelT) -> bool:
        db.delete(record)
        return True

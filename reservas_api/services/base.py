from typing import Any, Dict, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

from reservas_api.database import Base


class EntityServiceError(Exception):
    """Base exception for entity service errors"""


class RecordNotFoundError(EntityServiceError):
    """Raised when an update or delete targets a missing key"""

    def __init__(self, model: Type[Base], key: Any):
        self.model = model
        self.key = key
        super().__init__(f"{model.__tablename__}: no record with key {key!r}")


class EntityService:
    """
    Single-call CRUD operations over one table.

    Subclasses set `model` and `key_field` and may override `prepare` to
    convert incoming payloads before they reach the store.
    """

    model: Type[Base] = None
    key_field: str = None
    order_by: Optional[str] = None

    def __init__(self, db: Session):
        self.db = db

    @property
    def key_column(self):
        return getattr(self.model, self.key_field)

    def prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(data)

    def list_all(self) -> List[Base]:
        query = select(self.model)
        if self.order_by:
            query = query.order_by(getattr(self.model, self.order_by).asc())
        return list(self.db.scalars(query).all())

    def get(self, key: Any) -> Optional[Base]:
        return self.db.get(self.model, key)

    def find_by(self, **filters: Any) -> List[Base]:
        query = select(self.model).filter_by(**filters)
        return list(self.db.scalars(query).all())

    def create(self, data: Dict[str, Any]) -> Base:
        record = self.model(**self.prepare(data))
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def update(self, key: Any, data: Dict[str, Any]) -> Base:
        record = self._get_or_raise(key)
        for field, value in self.prepare(data).items():
            setattr(record, field, value)
        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, key: Any) -> Base:
        record = self._get_or_raise(key)
        self.db.delete(record)
        self._commit()
        return record

    def _get_or_raise(self, key: Any) -> Base:
        record = self.get(key)
        if record is None:
            raise RecordNotFoundError(self.model, key)
        return record

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

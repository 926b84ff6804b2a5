import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StoreFailure

logger = logging.getLogger(__name__)

# Largest value an INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


class EntityStore:
    """
    Generic create/read/update/delete over one mapped collection.

    Filters are SQLAlchemy column expressions, so callers build predicates with
    the model's own columns. Any SQLAlchemy error rolls the session back and is
    re-raised as StoreFailure.

    Writes commit immediately unless ``commit=False`` is passed; callers that
    group several writes (the cascade delete) call :meth:`commit` themselves.
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    @contextmanager
    def _guard(self, operation: str):
        try:
            yield
        except SQLAlchemyError as exc:
            logger.exception("%s %s failed", self.model.__name__, operation)
            self.db.rollback()
            raise StoreFailure(operation) from exc

    def find(self, criteria=(), order_by=()):
        with self._guard("query"):
            return self.db.query(self.model).filter(*criteria).order_by(*order_by).all()

    def find_by_id(self, entity_id):
        if not 0 < entity_id <= MAX_ID:
            return None
        with self._guard("query"):
            return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def insert(self, values: dict):
        with self._guard("insert"):
            entity = self.model(**values)
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity

    def update_by_id(self, entity_id, values: dict):
        if not 0 < entity_id <= MAX_ID:
            return None
        with self._guard("update"):
            entity = self.db.query(self.model).filter(self.model.id == entity_id).first()
            if entity is None:
                return None
            for key, value in values.items():
                setattr(entity, key, value)
            self.db.commit()
            self.db.refresh(entity)
            return entity

    def delete_by_id(self, entity_id, commit: bool = True) -> int:
        return self.delete_many([self.model.id == entity_id], commit=commit)

    def delete_many(self, criteria, commit: bool = True) -> int:
        with self._guard("delete"):
            deleted = (
                self.db.query(self.model)
                .filter(*criteria)
                .delete(synchronize_session=False)
            )
            if commit:
                self.db.commit()
            return deleted

    def commit(self):
        with self._guard("commit"):
            self.db.commit()

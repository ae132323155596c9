"""
Record store: list/filter/create/update/delete per entity type.

Screens load whole collections through ``EntityStore`` and derive their
views in memory. Loads that fail degrade to empty collections instead of
failing the request.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import Base
from .logging_config import db_logger

ModelT = TypeVar("ModelT", bound=Base)


class EntityStore(Generic[ModelT]):
    """CRUD access to one model class within a request's session."""

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def _column(self, name: str):
        column = self.model.__table__.columns.get(name)
        if column is None:
            raise ValueError(f"{self.model.__name__} has no field '{name}'")
        return column

    def _query(self, sort: Optional[str] = None, limit: Optional[int] = None, criteria: Optional[Dict[str, Any]] = None):
        query = self.db.query(self.model)
        for name, value in (criteria or {}).items():
            query = query.filter(self._column(name) == value)
        if sort:
            descending = sort.startswith("-")
            column = self._column(sort.lstrip("-"))
            query = query.order_by(column.desc() if descending else column.asc(), self.model.id)
        else:
            query = query.order_by(self.model.id)
        if limit:
            query = query.limit(limit)
        return query

    def list(self, sort: Optional[str] = None, limit: Optional[int] = None) -> List[ModelT]:
        """All records; ``sort`` is a field name, prefixed with '-' for descending."""
        return self._query(sort, limit).all()

    def filter(self, criteria: Dict[str, Any], sort: Optional[str] = None, limit: Optional[int] = None) -> List[ModelT]:
        """Records whose fields equal every value in ``criteria``."""
        return self._query(sort, limit, criteria).all()

    def get(self, record_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, record_id)

    def create(self, data: Dict[str, Any]) -> ModelT:
        record = self.model(**data)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def update(self, record: ModelT, data: Dict[str, Any]) -> ModelT:
        for key, value in data.items():
            setattr(record, key, value)
        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, record: ModelT) -> None:
        self.db.delete(record)
        self._commit()

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            db_logger.error(
                f"Write to {self.model.__tablename__} failed",
                error=e,
                table=self.model.__tablename__,
            )
            raise


@dataclass
class Snapshot:
    """Collections fetched for one screen render."""
    collections: Dict[str, List[Any]] = field(default_factory=dict)
    degraded: bool = False

    def __getitem__(self, name: str) -> List[Any]:
        return self.collections.get(name, [])


def load_collections(db: Session, screen: str, **loaders) -> Snapshot:
    """
    Run each loader (a zero-argument callable returning a list) for a screen.

    A store error is logged and leaves the screen with empty collections
    flagged as degraded; nothing is retried.
    """
    snapshot = Snapshot()
    try:
        for name, loader in loaders.items():
            snapshot.collections[name] = loader()
    except SQLAlchemyError as e:
        db.rollback()
        db_logger.error(f"Error loading {screen} data", error=e, screen=screen)
        return Snapshot(collections={name: [] for name in loaders}, degraded=True)
    return snapshot

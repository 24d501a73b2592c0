"""Generic repository around a SQLAlchemy session."""
from __future__ import annotations

import uuid
from typing import Generic, Sequence, Type, TypeVar

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from course_management.db import Base

T = TypeVar("T", bound=Base)


def contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` anywhere in a column."""
    return f"%{term}%"


class BaseRepository(Generic[T]):
    """Common data access for one mapped entity.

    Repositories only read and write rows; they never raise domain errors.
    Writes are flushed so constraint violations surface inside the
    caller's transaction.
    """

    model: Type[T]

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, entity_id: uuid.UUID) -> T | None:
        return self.session.get(self.model, entity_id)

    def exists(self, entity_id: uuid.UUID) -> bool:
        return bool(self.session.scalar(select(exists().where(self.model.id == entity_id))))

    def list_all(self) -> Sequence[T]:
        return self.session.scalars(select(self.model).order_by(self.model.created_at)).all()

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model)) or 0

    def add(self, entity: T) -> T:
        self.session.add(entity)
        self.session.flush()
        return entity

    def save(self, entity: T) -> T:
        self.session.flush()
        return entity

    def delete(self, entity: T) -> None:
        self.session.delete(entity)
        self.session.flush()

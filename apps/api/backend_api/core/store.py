"""
Persistence port used by the services.

Services are constructed with an EntityStore instead of reaching for a
global session, so tests can hand them any session (or a fake store).
"""
from __future__ import annotations

import uuid
from typing import Any, Generic, List, Mapping, Optional, Protocol, Type, TypeVar

from sqlalchemy import text
from sqlmodel import Session, SQLModel, select

T = TypeVar("T", bound=SQLModel)


class EntityStore(Protocol[T]):
    """
    Minimal single-table store. Every write commits; there are no
    multi-entity transactions.
    """

    def list_all(self) -> List[T]:
        ...

    def get(self, entity_id: uuid.UUID) -> Optional[T]:
        ...

    def find_first(self, *where: Any) -> Optional[T]:
        ...

    def add(self, entity: T) -> T:
        ...

    def save(self, entity: T) -> T:
        ...

    def delete(self, entity: T) -> None:
        ...

    def rows(self, sql: str, **params: Any) -> List[Mapping[str, Any]]:
        ...


class SqlModelStore(Generic[T]):
    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def list_all(self) -> List[T]:
        return list(self.session.exec(select(self.model)).all())

    def get(self, entity_id: uuid.UUID) -> Optional[T]:
        return self.session.get(self.model, entity_id)

    def find_first(self, *where: Any) -> Optional[T]:
        stmt = select(self.model)
        for clause in where:
            stmt = stmt.where(clause)
        return self.session.exec(stmt).first()

    def add(self, entity: T) -> T:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def save(self, entity: T) -> T:
        # entity is already attached; flushing the dirty attributes is enough
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, entity: T) -> None:
        self.session.delete(entity)
        self.session.commit()

    def rows(self, sql: str, **params: Any) -> List[Mapping[str, Any]]:
        result = self.session.connection().execute(text(sql), params)
        return [r for r in result.mappings().all()]

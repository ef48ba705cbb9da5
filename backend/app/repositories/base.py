# app/repositories/base.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy import Select, select, func

T = TypeVar("T")  # SQLAlchemy model type

@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> T | None:
        return self.db.get(self.model, entity_id)

    def page_from_stmt(self, stmt: Select, *, limit: int = 50, offset: int = 0, options=()) -> Page[T]:
        # one query for the count of the unpaged statement, one for the items
        total = self.db.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        ).scalar_one()
        items = list(self.db.execute(stmt.options(*options).limit(limit).offset(offset)).scalars().all())
        return Page(items=items, total=total, limit=limit, offset=offset)

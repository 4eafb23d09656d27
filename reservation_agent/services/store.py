"""
Record store — key-addressed access to the five collections.

Operations mirror a managed key-value store:
  get(model, key)                 → row by primary identifier, or None
  put(row)                        → insert or full overwrite
  put_all(rows)                   → several puts in one transaction
  query(model, index, value, ...) → rows by secondary index, equality filters
  scan(model, ...)                → every row, equality filters

Identifiers are generated by the writer (new_id), never by the database.
Any SQLAlchemy failure is logged and re-raised as UpstreamError.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Iterable, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_agent.database import Base
from reservation_agent.errors import UpstreamError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def new_id() -> str:
    """Return a collision-resistant random identifier for a new row."""
    return str(uuid.uuid4())


class RecordStore:
    """Thin async repository over one AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _fail(self, op: str, model: type[Base], exc: SQLAlchemyError) -> UpstreamError:
        logger.error("Store %s on %s failed: %s", op, model.__tablename__, exc)
        await self.session.rollback()
        return UpstreamError(str(exc))

    async def get(self, model: type[ModelT], key: str) -> ModelT | None:
        try:
            return await self.session.get(model, key)
        except SQLAlchemyError as exc:
            raise await self._fail("get", model, exc) from exc

    async def put(self, row: ModelT) -> ModelT:
        try:
            merged = await self.session.merge(row)
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("put", type(row), exc) from exc
        return merged

    async def put_all(self, rows: Iterable[Base]) -> list[Base]:
        rows = list(rows)
        if not rows:
            return []
        try:
            merged = [await self.session.merge(row) for row in rows]
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("put_all", type(rows[0]), exc) from exc
        return merged

    async def query(
        self,
        model: type[ModelT],
        index: str,
        value: Any,
        **filters: Any,
    ) -> list[ModelT]:
        """Rows whose ``index`` column equals ``value`` and every filter column matches."""
        stmt = select(model).where(getattr(model, index) == value)
        for column, expected in filters.items():
            stmt = stmt.where(getattr(model, column) == expected)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("query", model, exc) from exc
        return list(result.scalars().all())

    async def scan(self, model: type[ModelT], **filters: Any) -> list[ModelT]:
        stmt = select(model)
        for column, expected in filters.items():
            stmt = stmt.where(getattr(model, column) == expected)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("scan", model, exc) from exc
        return list(result.scalars().all())

"""Generic async read repository backing the pagination engine.

`find_many` and `count` match the callables `paginate` expects. Each opens its
own session: an `AsyncSession` does not allow concurrent operations, and the
engine runs both at the same time.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Generic, Optional, TypeVar

from pydantic.alias_generators import to_snake
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import load_only
from sqlalchemy.sql.elements import ColumnElement

from storefront.core.pagination import CountArgs, FindManyArgs
from storefront.db.base import Base
from storefront.domain.mixins import SoftDeleteMixin

ModelT = TypeVar("ModelT", bound=Base)

Where = Sequence[ColumnElement[bool]]


class BaseRepository(Generic[ModelT]):
    """Read-side repository. Soft-deleted rows (`deleted_at IS NOT NULL`) are never returned."""

    model: type[ModelT]

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self, where: Optional[Where] = None) -> Select:
        q = select(self.model)
        if issubclass(self.model, SoftDeleteMixin):
            q = q.where(self.model.live())
        for condition in where or ():
            q = q.where(condition)
        return q

    def _order_clauses(self, order_by: Mapping[str, str]) -> list[Any]:
        """Map API field names (camelCase) onto columns; unknown names are skipped."""
        clauses = []
        for field_name, direction in order_by.items():
            col = getattr(self.model, to_snake(field_name), None)
            if col is None:
                continue
            clauses.append(col.desc() if direction == "desc" else col.asc())
        # Primary key tie-break keeps page boundaries stable
        clauses.append(self.model.id.asc())
        return clauses

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def find_many(self, args: FindManyArgs[Where]) -> list[ModelT]:
        q = self._base_query(args.where).order_by(*self._order_clauses(args.order_by))
        if args.include:
            q = q.options(*args.include)
        if args.select:
            q = q.options(load_only(*(getattr(self.model, name) for name in args.select)))
        q = q.offset(args.skip).limit(args.take)

        async with self._session_factory() as session:
            result = await session.execute(q)
            return list(result.unique().scalars().all())

    async def count(self, args: CountArgs[Where]) -> int:
        count_q = select(func.count()).select_from(self._base_query(args.where).subquery())
        async with self._session_factory() as session:
            return (await session.execute(count_q)).scalar_one()

"""Pagination engine shared by every list endpoint.

Turns a validated `PaginationQuery` into a whitelisted sort and a skip/take
window, runs the caller's count and fetch callables concurrently and wraps the
outcome in a `PaginatedResult` (items + meta + navigable links).

Example::

    result = await paginate(
        find_many=repo.find_many,
        count=repo.count,
        query=query,
        where=[User.is_active.is_(True)],
        allowed_sort_fields=["createdAt", "email"],
        default_sort=SortSpec("createdAt", "desc"),
        base_path="/api/v1/users",
        extra_query={"search": search},
    )
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Literal, Optional, TypeVar
from urllib.parse import urlencode

from fastapi import Query
from pydantic import BaseModel, Field

from storefront.core.config import settings
from storefront.schemas.common import CamelModel

ItemT = TypeVar("ItemT")
OutT = TypeVar("OutT")
WhereT = TypeVar("WhereT")

SortOrder = Literal["asc", "desc"]

SORT_PATTERN = r"^[a-zA-Z0-9_]+:(asc|desc)$"


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

class PaginationQuery(BaseModel):
    """Validated `?page=1&limit=20&sort=field:direction` triple."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=settings.default_page_limit, ge=1, le=settings.max_page_limit)
    sort: Optional[str] = Field(default=None, pattern=SORT_PATTERN)


def pagination_query(
    page: int = Query(default=1, ge=1, description="Page number (1-based)"),
    limit: int = Query(
        default=settings.default_page_limit,
        ge=1,
        le=settings.max_page_limit,
        description="Items per page",
    ),
    sort: Optional[str] = Query(
        default=None, pattern=SORT_PATTERN, description="Sort as field:asc|desc"
    ),
) -> PaginationQuery:
    """FastAPI dependency for `?page=1&limit=20&sort=createdAt:desc`."""
    return PaginationQuery(page=page, limit=limit, sort=sort)


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SortSpec:
    field: str
    order: SortOrder


DEFAULT_SORT = SortSpec("createdAt", "desc")


@dataclass(frozen=True)
class PageWindow:
    skip: int
    take: int


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total_items: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PaginationLinks(BaseModel):
    self: str
    next: Optional[str] = None
    prev: Optional[str] = None


@dataclass(frozen=True)
class FindManyArgs(Generic[WhereT]):
    """Arguments handed to the caller's `find_many` callable."""

    where: Optional[WhereT]
    order_by: dict[str, SortOrder]
    skip: int
    take: int
    include: Any = None
    select: Any = None


@dataclass(frozen=True)
class CountArgs(Generic[WhereT]):
    where: Optional[WhereT]


@dataclass
class PaginatedResult(Generic[ItemT]):
    items: list[ItemT]
    meta: PaginationMeta
    links: PaginationLinks

    def map(self, fn: Callable[[ItemT], OutT]) -> "PaginatedResult[OutT]":
        """Return a copy with every item converted by `fn` (meta/links shared)."""
        return PaginatedResult(items=[fn(item) for item in self.items], meta=self.meta, links=self.links)


FindMany = Callable[[FindManyArgs[WhereT]], Awaitable[list[ItemT]]]
Count = Callable[[CountArgs[WhereT]], Awaitable[int]]


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

def parse_sort(
    sort: Optional[str],
    allowed_fields: Sequence[str] = (),
    fallback: SortSpec = DEFAULT_SORT,
) -> SortSpec:
    """Resolve `field:direction` against the whitelist.

    Anything malformed or not whitelisted resolves to `fallback`. An empty
    whitelist accepts any well-formed field.

    Only the first `:` separates field from direction, and the remainder must
    be exactly `asc` or `desc`: `"email:asc:x"` is malformed and falls back
    rather than being read as `email:asc`.
    """
    if not sort:
        return fallback

    field_name, _, order = sort.partition(":")
    if not field_name or order not in ("asc", "desc"):
        return fallback
    if allowed_fields and field_name not in allowed_fields:
        return fallback

    return SortSpec(field_name, order)  # type: ignore[arg-type]


def build_pagination(page: int, limit: int) -> PageWindow:
    return PageWindow(skip=(page - 1) * limit, take=limit)


def build_pagination_meta(total_items: int, page: int, limit: int) -> PaginationMeta:
    total_pages = max(1, math.ceil(total_items / limit))
    return PaginationMeta(
        page=page,
        limit=limit,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_pagination_links(
    base_path: str,
    page: int,
    limit: int,
    total_pages: int,
    extra_query: Optional[Mapping[str, Any]] = None,
) -> PaginationLinks:
    """Build self/next/prev URLs carrying page, limit and the extra filters.

    `page` and `limit` always come first and always describe the link's own
    window. Keys of the same name in `extra_query` are dropped, not merged,
    and so are `None` values.
    """

    def build_url(target_page: int) -> str:
        params = {"page": str(target_page), "limit": str(limit)}
        for key, value in (extra_query or {}).items():
            # page/limit always describe the link's own window
            if value is None or key in params:
                continue
            params[key] = _query_value(value)
        return f"{base_path}?{urlencode(params)}"

    return PaginationLinks(
        self=build_url(page),
        next=build_url(page + 1) if page < total_pages else None,
        prev=build_url(page - 1) if page > 1 else None,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

async def paginate(
    *,
    find_many: FindMany[WhereT, ItemT],
    count: Count[WhereT],
    query: PaginationQuery,
    allowed_sort_fields: Sequence[str],
    base_path: str,
    default_sort: SortSpec = DEFAULT_SORT,
    where: Optional[WhereT] = None,
    include: Any = None,
    select: Any = None,
    extra_query: Optional[Mapping[str, Any]] = None,
) -> PaginatedResult[ItemT]:
    """Run one paginated listing.

    `count` and `find_many` are each awaited exactly once, concurrently.
    Whatever either of them raises propagates to the caller untouched, after
    the other one has been cancelled and has finished unwinding.
    """
    sort = parse_sort(query.sort, allowed_sort_fields, default_sort)
    window = build_pagination(query.page, query.limit)

    find_task = asyncio.ensure_future(
        find_many(
            FindManyArgs(
                where=where,
                order_by={sort.field: sort.order},
                skip=window.skip,
                take=window.take,
                include=include,
                select=select,
            )
        )
    )
    count_task = asyncio.ensure_future(count(CountArgs(where=where)))
    try:
        items, total_items = await asyncio.gather(find_task, count_task)
    except BaseException:
        for task in (find_task, count_task):
            task.cancel()
        await asyncio.gather(find_task, count_task, return_exceptions=True)
        raise

    meta = build_pagination_meta(total_items, query.page, query.limit)
    links = build_pagination_links(
        base_path, query.page, query.limit, meta.total_pages, extra_query
    )
    return PaginatedResult(items=list(items), meta=meta, links=links)

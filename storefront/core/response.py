"""Standardized JSON response envelopes.

Success: `{ success, statusCode, message, path, timestamp, data, meta, links }`
Error:   `{ success: false, statusCode, message, path, timestamp, errors, data: null, meta: null }`
"""


from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from fastapi import Request

from storefront.core.pagination import PaginatedResult, PaginationLinks, PaginationMeta
from storefront.schemas.common import CamelModel

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _request_path(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


class ListResponse(CamelModel, Generic[T]):
    """Paginated list envelope: `{ success, data: [...], meta: {...}, links: {...} }`"""

    success: bool = True
    status_code: int = 200
    message: str = "OK"
    path: str
    timestamp: datetime
    data: list[T]
    meta: PaginationMeta
    links: PaginationLinks


class ErrorResponse(CamelModel):
    success: bool = False
    status_code: int
    message: str
    path: str
    timestamp: datetime
    errors: Optional[list[Any]] = None
    data: None = None
    meta: None = None


def paginated(result: PaginatedResult, request: Request, status_code: int = 200) -> dict:
    """Build a list envelope dict for use with ListResponse."""
    return {
        "success": True,
        "status_code": status_code,
        "message": "OK",
        "path": _request_path(request),
        "timestamp": _now(),
        "data": result.items,
        "meta": result.meta,
        "links": result.links,
    }


def error_body(
    request: Request,
    status_code: int,
    message: str,
    errors: Optional[list[Any]] = None,
) -> dict:
    """JSON-ready error envelope."""
    return ErrorResponse(
        status_code=status_code,
        message=message,
        path=_request_path(request),
        timestamp=_now(),
        errors=errors,
    ).model_dump(mode="json", by_alias=True)

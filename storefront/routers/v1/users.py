"""User list router: REFERENCE pattern for all v1 list routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the session factory + PaginationQuery via Depends
  3. Call the service with the route's own path as base_path
  4. Convert ORM rows to schemas and wrap the result in the list envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.core.pagination import PaginationQuery, pagination_query
from storefront.core.response import ListResponse, paginated
from storefront.db.base import get_session_factory
from storefront.schemas.user import UserOut
from storefront.services.user import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=ListResponse[UserOut])
async def list_users(
    request: Request,
    search: Optional[str] = Query(default=None, description="Match email or full name"),
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    pagination: PaginationQuery = Depends(pagination_query),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """List users (paginated). Sortable by createdAt, email, fullName, updatedAt."""
    result = await UserService(session_factory).list_users(
        pagination,
        base_path=request.url.path,
        search=search,
        is_active=is_active,
    )
    return paginated(result.map(UserOut.model_validate), request)

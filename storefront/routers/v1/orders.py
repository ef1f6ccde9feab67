"""Order list router."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.core.pagination import PaginationQuery, pagination_query
from storefront.core.response import ListResponse, paginated
from storefront.db.base import get_session_factory
from storefront.schemas.order import OrderOut
from storefront.services.order import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("", response_model=ListResponse[OrderOut])
async def list_orders(
    request: Request,
    search: Optional[str] = Query(default=None, description="Match order number or customer email"),
    filter_status: Optional[str] = Query(
        default=None, alias="status", description="One status or a comma-separated list"
    ),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    created_from: Optional[datetime] = Query(default=None, alias="createdFrom"),
    created_to: Optional[datetime] = Query(default=None, alias="createdTo"),
    pagination: PaginationQuery = Depends(pagination_query),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """List orders (paginated). Filter by ?status=pending_payment,confirmed."""
    result = await OrderService(session_factory).list_orders(
        pagination,
        base_path=request.url.path,
        search=search,
        status=filter_status,
        user_id=user_id,
        created_from=created_from,
        created_to=created_to,
    )
    return paginated(result.map(OrderOut.model_validate), request)

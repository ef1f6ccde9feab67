"""Product list router."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.core.pagination import PaginationQuery, pagination_query
from storefront.core.response import ListResponse, paginated
from storefront.db.base import get_session_factory
from storefront.schemas.product import ProductOut
from storefront.services.product import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ListResponse[ProductOut])
async def list_products(
    request: Request,
    search: Optional[str] = Query(default=None, description="Match name or slug"),
    filter_status: Optional[str] = Query(default=None, alias="status", description="draft|active|archived"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    min_price: Optional[Decimal] = Query(default=None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(default=None, alias="maxPrice", ge=0),
    pagination: PaginationQuery = Depends(pagination_query),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """List products (paginated) with their category."""
    result = await ProductService(session_factory).list_products(
        pagination,
        base_path=request.url.path,
        search=search,
        status=filter_status,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
    )
    return paginated(result.map(ProductOut.model_validate), request)

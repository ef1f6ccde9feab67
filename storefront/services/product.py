"""Product listing service."""


import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.core.exceptions import BadRequestError
from storefront.core.pagination import PaginatedResult, PaginationQuery, SortSpec, paginate
from storefront.core.query_builder import FilterField, FilterOperator, SearchConfig, build_where
from storefront.domain import Product
from storefront.repositories import ProductRepository

logger = logging.getLogger(__name__)

PRODUCT_SORT_FIELDS = ("createdAt", "updatedAt", "name", "displayPriceMin", "displayPriceMax")
PRODUCT_DEFAULT_SORT = SortSpec("createdAt", "desc")

_PRODUCT_SEARCH = SearchConfig(
    searchable_fields=("name", "slug"),
    filters={
        "status": FilterField(),
        "categoryId": FilterField(column="category_id"),
        "minPrice": FilterField(column="display_price_min", operator=FilterOperator.GTE),
        "maxPrice": FilterField(column="display_price_max", operator=FilterOperator.LTE),
    },
)

class ProductService:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._repo = ProductRepository(session_factory)

    async def list_products(
        self,
        query: PaginationQuery,
        *,
        base_path: str,
        search: Optional[str] = None,
        status: Optional[str] = None,
        category_id: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
    ) -> PaginatedResult[Product]:
        if min_price is not None and max_price is not None and min_price > max_price:
            raise BadRequestError("minPrice must not be greater than maxPrice")

        logger.debug("list_products page=%s limit=%s sort=%s", query.page, query.limit, query.sort)
        filters = {
            "status": status,
            "categoryId": category_id,
            "minPrice": min_price,
            "maxPrice": max_price,
        }
        return await paginate(
            find_many=self._repo.find_many,
            count=self._repo.count,
            query=query,
            where=build_where(Product, _PRODUCT_SEARCH, search=search, filters=filters),
            include=self._repo.with_category(),
            allowed_sort_fields=PRODUCT_SORT_FIELDS,
            default_sort=PRODUCT_DEFAULT_SORT,
            base_path=base_path,
            extra_query={"search": search or None, **filters},
        )

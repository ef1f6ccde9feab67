"""Order listing service."""


import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.core.exceptions import BadRequestError
from storefront.core.pagination import PaginatedResult, PaginationQuery, SortSpec, paginate
from storefront.core.query_builder import FilterField, FilterOperator, SearchConfig, build_where
from storefront.domain import ORDER_STATUSES, Order
from storefront.repositories import OrderRepository

logger = logging.getLogger(__name__)

ORDER_SORT_FIELDS = ("createdAt", "updatedAt", "totalAmount")
ORDER_DEFAULT_SORT = SortSpec("createdAt", "desc")


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored timestamps are UTC with the offset dropped; naive bounds are taken as UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


_ORDER_SEARCH = SearchConfig(
    searchable_fields=("order_number", "customer_email"),
    filters={
        # ?status=pending_payment,confirmed
        "status": FilterField(operator=FilterOperator.IN),
        "userId": FilterField(column="user_id"),
        "createdFrom": FilterField(column="created_at", operator=FilterOperator.GTE),
        "createdTo": FilterField(column="created_at", operator=FilterOperator.LTE),
    },
)

class OrderService:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._repo = OrderRepository(session_factory)

    async def list_orders(
        self,
        query: PaginationQuery,
        *,
        base_path: str,
        search: Optional[str] = None,
        status: Optional[str] = None,
        user_id: Optional[str] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> PaginatedResult[Order]:
        if status:
            unknown = [s for s in status.split(",") if s.strip() and s.strip() not in ORDER_STATUSES]
            if unknown:
                raise BadRequestError(f"Unknown order status: {', '.join(unknown)}")

        logger.debug("list_orders page=%s limit=%s sort=%s status=%s", query.page, query.limit, query.sort, status)
        filters = {
            "status": status,
            "userId": user_id,
            "createdFrom": _as_utc(created_from),
            "createdTo": _as_utc(created_to),
        }
        return await paginate(
            find_many=self._repo.find_many,
            count=self._repo.count,
            query=query,
            where=build_where(Order, _ORDER_SEARCH, search=search, filters=filters),
            allowed_sort_fields=ORDER_SORT_FIELDS,
            default_sort=ORDER_DEFAULT_SORT,
            base_path=base_path,
            extra_query={
                "search": search or None,
                "status": status,
                "userId": user_id,
                "createdFrom": created_from.isoformat() if created_from else None,
                "createdTo": created_to.isoformat() if created_to else None,
            },
        )

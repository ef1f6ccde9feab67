"""User listing service."""


import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.core.pagination import PaginatedResult, PaginationQuery, SortSpec, paginate
from storefront.core.query_builder import FilterField, SearchConfig, build_where
from storefront.domain import User
from storefront.repositories import UserRepository

logger = logging.getLogger(__name__)

USER_SORT_FIELDS = ("createdAt", "email", "fullName", "updatedAt")
USER_DEFAULT_SORT = SortSpec("createdAt", "desc")

_USER_SEARCH = SearchConfig(
    searchable_fields=("email", "full_name"),
    filters={"isActive": FilterField(column="is_active")},
)

class UserService:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._repo = UserRepository(session_factory)

    async def list_users(
        self,
        query: PaginationQuery,
        *,
        base_path: str,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> PaginatedResult[User]:
        logger.debug("list_users page=%s limit=%s sort=%s search=%r", query.page, query.limit, query.sort, search)
        filters = {"isActive": is_active}
        return await paginate(
            find_many=self._repo.find_many,
            count=self._repo.count,
            query=query,
            where=build_where(User, _USER_SEARCH, search=search, filters=filters),
            allowed_sort_fields=USER_SORT_FIELDS,
            default_sort=USER_DEFAULT_SORT,
            base_path=base_path,
            extra_query={"search": search or None, **filters},
        )

"""
Integration tests for the read repositories against the seeded SQLite database.
"""

import pytest
from sqlalchemy import inspect

from storefront.core.pagination import CountArgs, FindManyArgs
from storefront.db.base import async_session_factory
from storefront.domain import Product, User
from storefront.repositories import ProductRepository, UserRepository


@pytest.mark.integration
class TestUserRepository:
    async def test_select_loads_only_requested_columns(self, seeded):
        repo = UserRepository(async_session_factory)

        users = await repo.find_many(
            FindManyArgs(where=None, order_by={"email": "asc"}, skip=0, take=3, select=["id", "email"])
        )

        assert [u.email for u in users] == [
            "user00@example.com",
            "user01@example.com",
            "user02@example.com",
        ]
        state = inspect(users[0])
        assert "full_name" in state.unloaded
        assert "is_active" in state.unloaded
        assert "email" not in state.unloaded

    async def test_without_select_every_column_is_loaded(self, seeded):
        repo = UserRepository(async_session_factory)

        (user,) = await repo.find_many(FindManyArgs(where=None, order_by={"email": "asc"}, skip=0, take=1))

        assert inspect(user).unloaded <= {"orders"}
        assert user.full_name == "User 00"

    async def test_count_applies_where_and_skips_soft_deleted(self, seeded):
        repo = UserRepository(async_session_factory)

        assert await repo.count(CountArgs(where=None)) == 25
        assert await repo.count(CountArgs(where=[User.is_active.is_(False)])) == 5

    async def test_unknown_sort_field_keeps_id_order(self, seeded):
        repo = UserRepository(async_session_factory)

        users = await repo.find_many(FindManyArgs(where=None, order_by={"nope": "desc"}, skip=0, take=2))

        assert [u.id for u in users] == ["user-00", "user-01"]


@pytest.mark.integration
class TestProductRepository:
    async def test_include_eager_loads_category(self, seeded):
        repo = ProductRepository(async_session_factory)

        products = await repo.find_many(
            FindManyArgs(
                where=[Product.status == "active"],
                order_by={"name": "asc"},
                skip=0,
                take=10,
                include=repo.with_category(),
            )
        )

        assert [(p.slug, p.category.slug) for p in products] == [
            ("linen-shirt", "shirts"),
            ("stoneware-mug", "mugs"),
        ]

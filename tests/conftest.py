"""
Pytest fixtures for the Storefront API.

This module provides:
1. Test environment (SQLite file database, testing app env)
2. Schema setup/teardown per test
3. Seed data for users, products and orders
4. An httpx AsyncClient bound to the ASGI app
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set environment variables BEFORE any imports that might load settings
_TEST_DB = Path(tempfile.gettempdir()) / f"storefront_test_{os.getpid()}.db"
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB}")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

from storefront.db.base import Base, async_session_factory, engine, init_models  # noqa: E402
from storefront.domain import Category, Order, Product, User  # noqa: E402
from storefront.main import app  # noqa: E402

BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)

USER_COUNT = 25
ORDER_STATUS_PLAN = ["pending_payment"] * 5 + ["confirmed"] * 4 + ["cancelled"] * 3


# ==================== DATABASE FIXTURES ====================


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[None, None]:
    """Create every table before the test and drop them afterwards."""
    await init_models()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def seeded(db) -> dict:
    """
    Seed a known data set.

    - 25 live users (user00..user24, created one hour apart; every 5th inactive)
      plus one soft-deleted user
    - 12 orders: 5 pending_payment, 4 confirmed, 3 cancelled
    - 3 products across 2 categories
    """
    async with async_session_factory() as session:
        users = [
            User(
                id=f"user-{i:02d}",
                email=f"user{i:02d}@example.com",
                full_name=f"User {i:02d}",
                is_active=i % 5 != 0,
                created_at=BASE_TIME + timedelta(hours=i),
                updated_at=BASE_TIME + timedelta(hours=i),
            )
            for i in range(USER_COUNT)
        ]
        users.append(
            User(
                id="user-deleted",
                email="gone@example.com",
                full_name="Deleted User",
                created_at=BASE_TIME + timedelta(days=30),
                updated_at=BASE_TIME + timedelta(days=30),
                deleted_at=BASE_TIME + timedelta(days=31),
            )
        )
        session.add_all(users)

        orders = [
            Order(
                id=f"order-{i:02d}",
                order_number=f"SO-{1000 + i}",
                user_id=f"user-{i:02d}",
                customer_email=f"user{i:02d}@example.com",
                status=status,
                total_amount=Decimal(100 - i * 5),
                created_at=BASE_TIME + timedelta(days=i),
                updated_at=BASE_TIME + timedelta(days=i),
            )
            for i, status in enumerate(ORDER_STATUS_PLAN)
        ]
        session.add_all(orders)

        shirts = Category(id="cat-shirts", name="Shirts", slug="shirts")
        mugs = Category(id="cat-mugs", name="Mugs", slug="mugs")
        session.add_all([shirts, mugs])
        session.add_all(
            [
                Product(
                    id="prod-1",
                    name="Linen Shirt",
                    slug="linen-shirt",
                    status="active",
                    display_price_min=Decimal("25.00"),
                    display_price_max=Decimal("35.00"),
                    category_id="cat-shirts",
                    created_at=BASE_TIME,
                    updated_at=BASE_TIME,
                ),
                Product(
                    id="prod-2",
                    name="Oxford Shirt",
                    slug="oxford-shirt",
                    status="draft",
                    display_price_min=Decimal("40.00"),
                    display_price_max=Decimal("55.00"),
                    category_id="cat-shirts",
                    created_at=BASE_TIME + timedelta(hours=1),
                    updated_at=BASE_TIME + timedelta(hours=1),
                ),
                Product(
                    id="prod-3",
                    name="Stoneware Mug",
                    slug="stoneware-mug",
                    status="active",
                    display_price_min=Decimal("12.00"),
                    display_price_max=Decimal("12.00"),
                    category_id="cat-mugs",
                    created_at=BASE_TIME + timedelta(hours=2),
                    updated_at=BASE_TIME + timedelta(hours=2),
                ),
            ]
        )
        await session.commit()

    return {"users": USER_COUNT, "orders": len(ORDER_STATUS_PLAN), "products": 3}


# ==================== HTTP FIXTURES ====================


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient against the ASGI app; server errors come back as 500 responses."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def pytest_sessionfinish(session, exitstatus):
    if _TEST_DB.exists():
        _TEST_DB.unlink()

"""SQLAlchemy ORM models for the catalog: categories and products."""

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base
from storefront.domain.mixins import SoftDeleteMixin, TimestampMixin


class Category(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    products: Mapped[List["Product"]] = relationship(back_populates="category", lazy="noload")


class Product(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # "draft" | "active" | "archived"
    status: Mapped[str] = mapped_column(String(20), default="draft", nullable=False, index=True)

    # Cheapest / most expensive active variant, denormalized for sorting
    display_price_min: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    display_price_max: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)

    category_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    category: Mapped[Optional["Category"]] = relationship(back_populates="products", lazy="noload")

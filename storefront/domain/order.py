"""SQLAlchemy ORM model for customer orders."""

from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base
from storefront.domain.mixins import SoftDeleteMixin, TimestampMixin

ORDER_STATUSES = (
    "pending_payment",
    "confirmed",
    "processing",
    "shipping",
    "delivered",
    "completed",
    "cancelled",
    "returned",
    "refunded",
)


class Order(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    order_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)

    user_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # One of ORDER_STATUSES
    status: Mapped[str] = mapped_column(
        String(30), default="pending_payment", nullable=False, index=True
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="USD", nullable=False)

    user: Mapped[Optional["User"]] = relationship(back_populates="orders", lazy="noload")

"""Domain package: all ORM models are imported here so `init_models` sees every table.

Folder intent:
  user.py    : storefront accounts
  product.py : Category + Product (catalog)
  order.py   : customer orders and ORDER_STATUSES
  mixins.py  : TimestampMixin (created/updated_at), SoftDeleteMixin (deleted_at)
"""

from storefront.domain.order import ORDER_STATUSES, Order
from storefront.domain.product import Category, Product
from storefront.domain.user import User

__all__ = [
    "ORDER_STATUSES",
    "Category",
    "Order",
    "Product",
    "User",
]

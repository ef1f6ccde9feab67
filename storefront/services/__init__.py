"""Services package: list use-cases that drive the pagination engine.

Files:
  user.py    : UserService.list_users
  product.py : ProductService.list_products
  order.py   : OrderService.list_orders

Rule: routers call services, services call paginate() with repository callables.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""

from storefront.services.order import OrderService
from storefront.services.product import ProductService
from storefront.services.user import UserService

__all__ = ["OrderService", "ProductService", "UserService"]

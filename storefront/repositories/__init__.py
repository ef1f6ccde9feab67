"""Repositories package: the only place that builds SQLAlchemy queries.

Files:
  base.py    : BaseRepository with find_many/count in the shape `paginate` consumes
  catalog.py : User, Product and Order repositories
"""

from storefront.repositories.catalog import (
    OrderRepository,
    ProductRepository,
    UserRepository,
)

__all__ = ["OrderRepository", "ProductRepository", "UserRepository"]

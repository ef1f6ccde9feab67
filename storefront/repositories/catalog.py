"""Concrete repositories: one subclass per model, add query methods as needed."""


from sqlalchemy.orm import selectinload

from storefront.domain import Order, Product, User
from storefront.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User


class ProductRepository(BaseRepository[Product]):
    model = Product

    @staticmethod
    def with_category() -> list:
        """Loader options that eager-load each product's category."""
        return [selectinload(Product.category)]


class OrderRepository(BaseRepository[Order]):
    model = Order

"""Catalog response schemas."""


from decimal import Decimal

from storefront.schemas.common import CamelModel, TimestampedOut

class CategoryOut(CamelModel):
    id: str
    name: str
    slug: str

class ProductOut(TimestampedOut):
    name: str
    slug: str
    description: str | None = None
    status: str
    display_price_min: Decimal | None = None
    display_price_max: Decimal | None = None
    category_id: str | None = None
    category: CategoryOut | None = None

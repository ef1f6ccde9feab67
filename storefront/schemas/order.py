"""Order response schema."""


from decimal import Decimal

from storefront.schemas.common import TimestampedOut

class OrderOut(TimestampedOut):
    order_number: str
    user_id: str | None = None
    customer_email: str
    status: str
    total_amount: Decimal
    currency: str

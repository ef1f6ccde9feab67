"""User response schema."""


from storefront.schemas.common import TimestampedOut

class UserOut(TimestampedOut):
    email: str
    full_name: str | None = None
    phone: str | None = None
    is_active: bool

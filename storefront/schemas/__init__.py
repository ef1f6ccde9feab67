"""Pydantic schemas package.

Folder intent:
  common.py  : CamelModel, TimestampedOut (list item base), HealthResponse
  user.py    : UserOut
  product.py : ProductOut, CategoryOut
  order.py   : OrderOut
"""

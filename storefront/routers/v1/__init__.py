"""v1 router package: all /api/v1/* endpoints live here.

Files:
  users.py    : REFERENCE list router pattern
  products.py : /api/v1/products
  orders.py   : /api/v1/orders

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to storefront/services/.
"""

"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per table; all models imported here so Base.metadata is complete
"""

from product_api.models.product import Product  # noqa: F401

"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Item, Fair and SaleRecord are each owned by exactly one store

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from artisan.models.item import Item  # noqa: F401
from artisan.models.fair import Fair  # noqa: F401
from artisan.models.sale import SaleRecord  # noqa: F401

"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Person rows are never physically deleted (hidden flag instead)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (standard SQLAlchemy pattern)
"""

from app.models.person import Person  # noqa: F401
from app.models.invoice import Invoice  # noqa: F401

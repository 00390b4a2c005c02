"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId and InvoiceId wrap integers; never pass a bare int where an id is meant
    - Money is an integer amount in minor currency units (no floats, no rounding)
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", int)
InvoiceId = NewType("InvoiceId", int)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", int)                   # minor units, >= 0 per invoice
VatRate = NewType("VatRate", int)               # 0-100 percent


# ─── Enums ───────────────────────────────────────────────────────

class Country(str, Enum):
    """Countries a person's postal address may be in."""
    CZECHIA = "CZECHIA"
    SLOVAKIA = "SLOVAKIA"


class FilterOperator(str, Enum):
    """Comparison applied by a single filter clause."""
    EQ = "eq"
    CONTAINS = "contains"
    ICONTAINS = "icontains"
    GE = "ge"
    LE = "le"


class StatisticsSortField(str, Enum):
    """Fields the person statistics listing can be ordered by."""
    ID = "id"
    NAME = "name"
    REVENUE = "revenue"

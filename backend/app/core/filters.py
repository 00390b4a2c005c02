"""Filter Predicates: raw query bag -> list of ANDed {field, operator, value} clauses.

Invariants:
    - Result is a pure AND of independent clauses; clause order never changes the result
    - Absent or empty parameter -> clause omitted (never a match-nothing clause)
    - Non-integer or out-of-range (64-bit) buyerID/sellerID/minPrice/maxPrice
      -> clause silently omitted
    - Default person listings always carry hidden == False
    - Clause.field names the persistence attribute (snake_case), not the wire name

Design Decisions:
    - Tagged clauses over closures: services/query_builder.py translates each one
      into a WHERE expression, the core stays free of SQL
"""

from dataclasses import dataclass
from typing import Any, Mapping

from app.core.domain_types import FilterOperator
from app.core.pagination import parse_int


@dataclass(frozen=True)
class Clause:
    """One filter condition over a single record attribute."""
    field: str
    operator: FilterOperator
    value: Any


def _text(params: Mapping[str, str], name: str) -> str | None:
    value = params.get(name)
    return value if value else None


def build_person_filters(
    params: Mapping[str, str], include_hidden: bool = False,
) -> list[Clause]:
    """Clauses for person listings: name, identificationNumber, hidden."""
    clauses = []
    name = _text(params, "name")
    if name is not None:
        clauses.append(Clause("name", FilterOperator.ICONTAINS, name))
    identification = _text(params, "identificationNumber")
    if identification is not None:
        clauses.append(Clause(
            "identification_number", FilterOperator.CONTAINS, identification,
        ))
    if not include_hidden:
        clauses.append(Clause("hidden", FilterOperator.EQ, False))
    return clauses


def build_invoice_filters(params: Mapping[str, str]) -> list[Clause]:
    """Clauses for invoice listings: buyer/seller id, product, price range."""
    clauses = []
    for param, attr, operator in (
        ("buyerID", "buyer_id", FilterOperator.EQ),
        ("sellerID", "seller_id", FilterOperator.EQ),
    ):
        value = parse_int(_text(params, param))
        if value is not None:
            clauses.append(Clause(attr, operator, value))

    product = _text(params, "product")
    if product is not None:
        clauses.append(Clause("product", FilterOperator.ICONTAINS, product))

    for param, operator in (
        ("minPrice", FilterOperator.GE),
        ("maxPrice", FilterOperator.LE),
    ):
        value = parse_int(_text(params, param))
        if value is not None:
            clauses.append(Clause("price", operator, value))
    return clauses

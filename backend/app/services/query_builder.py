"""Query Builder: translates core filter clauses and page requests into SQLAlchemy.

Invariants:
    - Every Clause becomes exactly one WHERE expression; expressions are ANDed
    - Substring matches escape LIKE wildcards in user input (autoescape)
    - Ordering always ends with the primary key so pages never overlap

Design Decisions:
    - Operator -> expression mapping as an explicit dict: no getattr on operator names
    - Sort fields resolved through a per-entity dict of wire name -> column, so the
      calculator's allowed set and the SQL columns come from the same source
"""

from typing import Any, Callable, Mapping, Sequence

from sqlalchemy import ColumnElement, Select, func, select

from app.core.domain_types import FilterOperator
from app.core.filters import Clause
from app.core.pagination import PageRequest

_OPERATORS: dict[FilterOperator, Callable[[Any, Any], ColumnElement[bool]]] = {
    FilterOperator.EQ: lambda col, v: col == v,
    FilterOperator.CONTAINS: lambda col, v: col.contains(v, autoescape=True),
    FilterOperator.ICONTAINS: lambda col, v: func.lower(col).contains(
        str(v).lower(), autoescape=True,
    ),
    FilterOperator.GE: lambda col, v: col >= v,
    FilterOperator.LE: lambda col, v: col <= v,
}


def where_clauses(model: type, clauses: Sequence[Clause]) -> list[ColumnElement[bool]]:
    """One SQL expression per clause, against the model's mapped attributes."""
    return [
        _OPERATORS[c.operator](getattr(model, c.field), c.value)
        for c in clauses
    ]


def order_by(
    model: type, request: PageRequest, sort_columns: Mapping[str, Any],
) -> list:
    column = sort_columns[request.sort_field]
    ordering = [column.asc() if request.sort_ascending else column.desc()]
    if column is not model.id:
        ordering.append(model.id.asc())
    return ordering


def count_query(base: Select) -> Select:
    """SELECT count(*) over the filtered, unordered base query."""
    return select(func.count()).select_from(base.order_by(None).subquery())


def page_query(
    model: type, base: Select, request: PageRequest,
    sort_columns: Mapping[str, Any],
) -> Select:
    return (
        base.order_by(*order_by(model, request, sort_columns))
        .offset(request.offset)
        .limit(request.limit)
    )

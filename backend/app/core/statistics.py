"""Statistics: per-person revenue aggregation, top-N ranking, invoice summary.

Invariants:
    - revenue = integer sum of price over invoices where the person is seller
    - Persons whose summed revenue is exactly 0 never appear in any output
    - Aggregated rows keep the input's first-seen person order
    - All sorts are stable: ties keep input order, in both directions
    - top_by_revenue(stats, n) == sort_statistics(stats, "revenue", desc)[:n]
    - Unknown sort field raises InvalidSortFieldError before any result is built

Design Decisions:
    - Pure functions over rows (person_id, person_name, price | None): the shell
      runs one outer-join query, the core never touches the DB
    - sorted(..., reverse=True) for descending: Python keeps stability under reverse,
      so ties stay in input order for both outputs
    - Name sort uses casefold() for case-insensitive ordering
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from app.core.domain_types import Money, PersonId, StatisticsSortField
from app.core.errors import InvalidSortFieldError
from app.core.pagination import Page, PageRequest, paginate

STATISTICS_SORT_FIELDS = tuple(f.value for f in StatisticsSortField)
DEFAULT_TOP_N = 5


@dataclass(frozen=True)
class PersonRevenue:
    """Aggregated sales revenue for one person."""
    person_id: PersonId
    person_name: str
    revenue: Money


@dataclass
class StatisticsReport:
    """Both outputs of one aggregation pass."""
    page: Page[PersonRevenue]
    top_by_revenue: list[PersonRevenue]


@dataclass(frozen=True)
class InvoiceSummary:
    """Totals across all invoices."""
    current_year_sum: Money
    all_time_sum: Money
    invoices_count: int


def aggregate_revenue(
    rows: Iterable[tuple[int, str, int | None]],
) -> list[PersonRevenue]:
    """Sum sale prices per person, dropping zero-revenue persons.

    Rows come from a person LEFT JOIN sales query, so a person without sales
    arrives once with price None.
    """
    totals: dict[int, int] = {}
    names: dict[int, str] = {}
    for person_id, person_name, price in rows:
        if person_id not in totals:
            totals[person_id] = 0
            names[person_id] = person_name
        if price is not None:
            totals[person_id] += price

    return [
        PersonRevenue(
            person_id=PersonId(pid), person_name=names[pid], revenue=Money(total),
        )
        for pid, total in totals.items()
        if total != 0
    ]


def _sort_key(sort_field: str):
    if sort_field == StatisticsSortField.ID.value:
        return lambda s: s.person_id
    if sort_field == StatisticsSortField.NAME.value:
        return lambda s: (s.person_name or "").casefold()
    if sort_field == StatisticsSortField.REVENUE.value:
        return lambda s: s.revenue
    raise InvalidSortFieldError(sort_field, STATISTICS_SORT_FIELDS)


def sort_statistics(
    stats: Iterable[PersonRevenue], sort_field: str, ascending: bool = True,
) -> list[PersonRevenue]:
    return sorted(stats, key=_sort_key(sort_field), reverse=not ascending)


def top_by_revenue(
    stats: Iterable[PersonRevenue], n: int = DEFAULT_TOP_N,
) -> list[PersonRevenue]:
    """The n highest-revenue persons, ties in input order."""
    return sort_statistics(stats, StatisticsSortField.REVENUE.value, False)[:n]


def build_statistics_report(
    rows: Iterable[tuple[int, str, int | None]],
    request: PageRequest,
    top_n: int = DEFAULT_TOP_N,
) -> StatisticsReport:
    """One aggregation pass -> top-N list + sorted, paginated full list."""
    key = _sort_key(request.sort_field)
    stats = aggregate_revenue(rows)
    ordered = sorted(stats, key=key, reverse=not request.sort_ascending)
    return StatisticsReport(
        page=paginate(ordered, request),
        top_by_revenue=top_by_revenue(stats, top_n),
    )


def summarize_invoices(
    rows: Iterable[tuple[date, int]], current_year: int,
) -> InvoiceSummary:
    """Current-year sum, all-time sum and count over (issued, price) rows."""
    current_year_sum = 0
    all_time_sum = 0
    count = 0
    for issued, price in rows:
        all_time_sum += price
        count += 1
        if issued.year == current_year:
            current_year_sum += price
    return InvoiceSummary(
        current_year_sum=Money(current_year_sum),
        all_time_sum=Money(all_time_sum),
        invoices_count=count,
    )

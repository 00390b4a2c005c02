"""Listing Schemas: paginated envelope and statistics report shapes.

Invariants:
    - Every list endpoint returns {items, currentPage, totalPages, totalItems}
    - Person statistics return {paginatedData, top5ByRevenue}

Design Decisions:
    - Generic PaginatedResponse[T]: one envelope type, OpenAPI shows the item schema
    - from_page() converts the core Page dataclass so services stay free of wire details
"""

from typing import Callable, Generic, TypeVar

from pydantic import Field

from app.core.pagination import Page
from app.core.statistics import InvoiceSummary, PersonRevenue, StatisticsReport
from app.schemas.base import WireModel

T = TypeVar("T")


class PaginatedResponse(WireModel, Generic[T]):
    """Paginated envelope shared by all list endpoints."""
    items: list[T]
    current_page: int
    total_pages: int
    total_items: int

    @classmethod
    def from_page(cls, page: Page, convert: Callable | None = None):
        items = page.items if convert is None else [convert(i) for i in page.items]
        return cls(
            items=items,
            current_page=page.current_page,
            total_pages=page.total_pages,
            total_items=page.total_items,
        )


class PersonStatistics(WireModel):
    """Revenue of one person."""
    person_id: int
    person_name: str
    revenue: int

    @classmethod
    def from_revenue(cls, stat: PersonRevenue) -> "PersonStatistics":
        return cls(
            person_id=stat.person_id,
            person_name=stat.person_name,
            revenue=stat.revenue,
        )


class PersonStatisticsReport(WireModel):
    """Paginated revenue listing plus the top earners."""
    paginated_data: PaginatedResponse[PersonStatistics] = Field(
        alias="paginatedData",
    )
    top5_by_revenue: list[PersonStatistics] = Field(alias="top5ByRevenue")

    @classmethod
    def from_report(cls, report: StatisticsReport) -> "PersonStatisticsReport":
        return cls(
            paginated_data=PaginatedResponse[PersonStatistics].from_page(
                report.page, PersonStatistics.from_revenue,
            ),
            top5_by_revenue=[
                PersonStatistics.from_revenue(s) for s in report.top_by_revenue
            ],
        )


class InvoiceStatistics(WireModel):
    """Invoice totals."""
    current_year_sum: int
    all_time_sum: int
    invoices_count: int

    @classmethod
    def from_summary(cls, summary: InvoiceSummary) -> "InvoiceStatistics":
        return cls(
            current_year_sum=summary.current_year_sum,
            all_time_sum=summary.all_time_sum,
            invoices_count=summary.invoices_count,
        )

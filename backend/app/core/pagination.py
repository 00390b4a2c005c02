"""Pagination: turns a raw query bag into a page request and assembles page envelopes.

Invariants:
    - page is 1-based; offset == (page - 1) * limit
    - Absent page/limit/sort fall back to defaults; present-but-malformed values raise
      InvalidParameterError (empty string counts as malformed)
    - limit < 1 is always an error, never an infinite or negative page count
    - total_pages == ceil(total_items / limit); 0 items -> 0 pages
    - An offset at or beyond total_items yields an empty page, not an error
    - Only "desc" (any case) sorts descending; everything else is ascending
    - Unknown or empty sort field raises InvalidSortFieldError

Design Decisions:
    - One calculator for persons, invoices and statistics: callers pass the set of
      sortable field names, the calculator owns parsing
    - Page is a plain generic dataclass: services fill it from the DB (count + slice)
      or from memory via paginate()
    - Integer parsing by regex, not int(): int() accepts whitespace and "1_000"
    - Values outside the signed 64-bit range count as malformed: SQL integer
      columns and OFFSET/LIMIT cannot hold them
"""

import math
import re
from dataclasses import dataclass
from typing import Collection, Generic, Mapping, Sequence, TypeVar

from app.core.errors import InvalidParameterError, InvalidSortFieldError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT = "id,asc"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def parse_int(raw: str | None) -> int | None:
    """Parse a base-10 integer query value. Returns None when malformed."""
    if raw is None or not _INTEGER.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


@dataclass(frozen=True)
class PageRequest:
    """Normalized page descriptor produced from query parameters."""
    page: int
    limit: int
    sort_field: str
    sort_ascending: bool = True

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """Paginated envelope: items of one page plus totals."""
    items: list[T]
    current_page: int
    total_pages: int
    total_items: int


def parse_sort(raw: str, sortable: Collection[str]) -> tuple[str, bool]:
    """Split "<field>,<asc|desc>" into (field, ascending)."""
    parts = raw.split(",")
    sort_field = parts[0].strip()
    if not sort_field or sort_field not in sortable:
        raise InvalidSortFieldError(sort_field, sortable)
    ascending = not (len(parts) > 1 and parts[1].strip().lower() == "desc")
    return sort_field, ascending


def _positive_int_param(
    params: Mapping[str, str], name: str, default: int,
) -> int:
    raw = params.get(name)
    if raw is None:
        return default
    value = parse_int(raw)
    if value is None:
        raise InvalidParameterError(name, raw, "must be an integer")
    if value < 1:
        raise InvalidParameterError(name, raw, "must be at least 1")
    return value


def parse_page_request(
    params: Mapping[str, str],
    sortable: Collection[str],
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int | None = None,
    default_sort: str = DEFAULT_SORT,
) -> PageRequest:
    """Build a PageRequest from the raw query bag (page, limit, sort)."""
    page = _positive_int_param(params, "page", DEFAULT_PAGE)
    limit = _positive_int_param(params, "limit", default_limit)
    if max_limit is not None and limit > max_limit:
        raise InvalidParameterError(
            "limit", params.get("limit"), f"must not exceed {max_limit}",
        )
    sort_field, ascending = parse_sort(
        params.get("sort", default_sort), sortable,
    )
    return PageRequest(
        page=page, limit=limit,
        sort_field=sort_field, sort_ascending=ascending,
    )


def total_pages(total_items: int, limit: int) -> int:
    """ceil(total_items / limit), rejecting non-positive limits."""
    if limit <= 0:
        raise InvalidParameterError("limit", limit, "must be at least 1")
    return math.ceil(total_items / limit)


def build_page(
    items: list[T], request: PageRequest, total_items: int,
) -> Page[T]:
    """Wrap an already-sliced result set in the page envelope."""
    return Page(
        items=items,
        current_page=request.page,
        total_pages=total_pages(total_items, request.limit),
        total_items=total_items,
    )


def paginate(records: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice an in-memory, already-sorted sequence into one page."""
    start = request.offset
    items = list(records[start:start + request.limit]) if start < len(records) else []
    return build_page(items, request, len(records))

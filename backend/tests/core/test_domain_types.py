"""Domain Types: verifies identity wrappers and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Enums serialize to their string values
"""

from app.core.domain_types import (
    Country, FilterOperator, InvoiceId, Money, PersonId, StatisticsSortField,
)
from app.core.statistics import STATISTICS_SORT_FIELDS


def test_identity_types_wrap_int():
    assert PersonId(3) == 3
    assert InvoiceId(7) == 7
    assert Money(1500) == 1500


def test_country_has_two_members():
    assert {c.value for c in Country} == {"CZECHIA", "SLOVAKIA"}
    assert Country("SLOVAKIA") is Country.SLOVAKIA


def test_filter_operators():
    assert len(FilterOperator) == 5


def test_statistics_sort_fields_match_enum():
    assert STATISTICS_SORT_FIELDS == ("id", "name", "revenue")
    assert StatisticsSortField.REVENUE.value == "revenue"

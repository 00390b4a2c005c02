"""Filter Predicates: clause building from query bags.

Invariants:
    - Empty or absent parameters never add clauses
    - Non-integer or out-of-range numeric filters are ignored, not rejected
    - Person listings exclude hidden rows unless include_hidden is set
    - Clause fields name persistence attributes, not wire names
"""

from app.core.domain_types import FilterOperator
from app.core.filters import Clause, build_invoice_filters, build_person_filters

HUGE = str(2 ** 70)


def test_person_filters_default_only_hides():
    assert build_person_filters({}) == [
        Clause("hidden", FilterOperator.EQ, False),
    ]


def test_person_filters_include_hidden_drops_clause():
    assert build_person_filters({}, include_hidden=True) == []


def test_person_name_and_identification_clauses():
    clauses = build_person_filters(
        {"name": "ALFA", "identificationNumber": "1111"}, include_hidden=True,
    )
    assert clauses == [
        Clause("name", FilterOperator.ICONTAINS, "ALFA"),
        Clause("identification_number", FilterOperator.CONTAINS, "1111"),
    ]


def test_empty_values_are_omitted():
    assert build_person_filters({"name": "", "identificationNumber": ""}) == [
        Clause("hidden", FilterOperator.EQ, False),
    ]
    assert build_invoice_filters({"product": "", "minPrice": ""}) == []


def test_invoice_filters_map_wire_names_to_attributes():
    clauses = build_invoice_filters({
        "buyerID": "1", "sellerID": "2", "product": "lap",
        "minPrice": "100", "maxPrice": "500",
    })
    assert clauses == [
        Clause("buyer_id", FilterOperator.EQ, 1),
        Clause("seller_id", FilterOperator.EQ, 2),
        Clause("product", FilterOperator.ICONTAINS, "lap"),
        Clause("price", FilterOperator.GE, 100),
        Clause("price", FilterOperator.LE, 500),
    ]


def test_invalid_numeric_filters_ignored():
    assert build_invoice_filters({
        "buyerID": "x", "sellerID": "1.5", "minPrice": "cheap", "maxPrice": "10e3",
    }) == []


def test_out_of_range_numeric_filters_ignored():
    assert build_invoice_filters({
        "buyerID": HUGE, "sellerID": "-" + HUGE, "minPrice": HUGE, "maxPrice": HUGE,
    }) == []


def test_parameter_order_does_not_change_clauses():
    params = {"maxPrice": "500", "product": "lap", "buyerID": "1"}
    reordered = dict(reversed(list(params.items())))
    assert set(build_invoice_filters(params)) == set(build_invoice_filters(reordered))

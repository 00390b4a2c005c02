"""Services Layer: person/invoice use cases, SQL repositories, mappers.

Invariants:
    - Services own the transaction boundary (commit); repositories only add/flush/query
    - Services call pure core functions for every filter, page and aggregate decision

Design Decisions:
    - One service class per aggregate (PersonService, InvoiceService)
"""

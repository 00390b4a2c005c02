"""Boundary Protocols: contracts between the pure core and the persistence shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - find_all returns (one page of records, total matching count)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the core functions that shape
      their inputs (clauses, PageRequest) and outputs (Page) stay sync and pure
"""

from typing import Any, Protocol, Sequence

from app.core.domain_types import InvoiceId, PersonId
from app.core.filters import Clause
from app.core.pagination import PageRequest


class PersonRepository(Protocol):
    """Contract for person persistence, implemented by the shell."""
    async def find_by_id(self, person_id: PersonId) -> Any | None: ...
    async def find_all(
        self, clauses: Sequence[Clause], request: PageRequest,
    ) -> tuple[list[Any], int]: ...
    async def save(self, person: Any) -> Any: ...
    async def revenue_rows(
        self, include_hidden: bool,
    ) -> list[tuple[int, str, int | None]]: ...


class InvoiceRepository(Protocol):
    """Contract for invoice persistence, implemented by the shell."""
    async def find_by_id(self, invoice_id: InvoiceId) -> Any | None: ...
    async def find_all(
        self, clauses: Sequence[Clause], request: PageRequest,
    ) -> tuple[list[Any], int]: ...
    async def find_by_party_identification(
        self, role: str, identification_number: str, request: PageRequest,
    ) -> tuple[list[Any], int]: ...
    async def save(self, invoice: Any) -> Any: ...
    async def delete_by_id(self, invoice_id: InvoiceId) -> bool: ...
    async def issued_price_rows(self) -> list[tuple[Any, int]]: ...

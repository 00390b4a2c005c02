"""SQL Repositories: SQLAlchemy implementations of the core record-store protocols.

Invariants:
    - Repositories never commit; the owning service decides the transaction boundary
    - find_all returns (page rows, total count) for the same filter set
    - Sort keys are wire names (camelCase), mapped to columns here

Design Decisions:
    - An offset at or beyond the total skips the page query: the empty page needs
      no SQL, and huge offsets never reach the driver
    - flush() after add: ids are assigned before the service commits, so a
      hide-then-insert pair can be committed as one unit
    - Party lookups by identification number join persons by role, so every
      version of a person (hidden included) matches and history survives updates
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.core.domain_types import InvoiceId, PersonId
from app.core.filters import Clause
from app.core.pagination import PageRequest
from app.models.invoice import Invoice
from app.models.person import Person
from app.services.query_builder import count_query, page_query, where_clauses

logger = logging.getLogger(__name__)

PERSON_SORT_COLUMNS = {
    "id": Person.id,
    "name": Person.name,
    "identificationNumber": Person.identification_number,
    "taxNumber": Person.tax_number,
    "city": Person.city,
    "country": Person.country,
    "mail": Person.mail,
}

INVOICE_SORT_COLUMNS = {
    "id": Invoice.id,
    "invoiceNumber": Invoice.invoice_number,
    "issued": Invoice.issued,
    "dueDate": Invoice.due_date,
    "product": Invoice.product,
    "price": Invoice.price,
    "vat": Invoice.vat,
}

PARTY_ROLES = {
    "seller": Invoice.seller_id,
    "buyer": Invoice.buyer_id,
}


async def _fetch_page(
    db: AsyncSession, model: type, base, request: PageRequest,
    sort_columns: dict,
) -> tuple[list, int]:
    """(rows of the requested page, total count) for a filtered base query."""
    total = (await db.execute(count_query(base))).scalar_one()
    if request.offset >= total:
        return [], total
    result = await db.execute(page_query(model, base, request, sort_columns))
    return list(result.scalars().all()), total


class SqlPersonRepository:
    """Person persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, person_id: PersonId) -> Person | None:
        return await self.db.get(Person, person_id)

    async def find_all(
        self, clauses: Sequence[Clause], request: PageRequest,
    ) -> tuple[list[Person], int]:
        base = select(Person).where(*where_clauses(Person, clauses))
        return await _fetch_page(
            self.db, Person, base, request, PERSON_SORT_COLUMNS,
        )

    async def save(self, person: Person) -> Person:
        self.db.add(person)
        await self.db.flush()
        return person

    async def revenue_rows(
        self, include_hidden: bool = True,
    ) -> list[tuple[int, str, int | None]]:
        """(person id, name, sale price | None) rows, person id ascending."""
        query = (
            select(Person.id, Person.name, Invoice.price)
            .outerjoin(Invoice, Invoice.seller_id == Person.id)
            .order_by(Person.id.asc(), Invoice.id.asc())
        )
        if not include_hidden:
            query = query.where(Person.hidden.is_(False))
        result = await self.db.execute(query)
        return [tuple(row) for row in result.all()]


class SqlInvoiceRepository:
    """Invoice persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, invoice_id: InvoiceId) -> Invoice | None:
        return await self.db.get(Invoice, invoice_id)

    async def find_all(
        self, clauses: Sequence[Clause], request: PageRequest,
    ) -> tuple[list[Invoice], int]:
        base = select(Invoice).where(*where_clauses(Invoice, clauses))
        return await _fetch_page(
            self.db, Invoice, base, request, INVOICE_SORT_COLUMNS,
        )

    async def find_by_party_identification(
        self, role: str, identification_number: str, request: PageRequest,
    ) -> tuple[list[Invoice], int]:
        """Invoices where the seller/buyer has the given identification number."""
        party = aliased(Person)
        base = (
            select(Invoice)
            .join(party, PARTY_ROLES[role] == party.id)
            .where(party.identification_number == identification_number)
        )
        return await _fetch_page(
            self.db, Invoice, base, request, INVOICE_SORT_COLUMNS,
        )

    async def save(self, invoice: Invoice) -> Invoice:
        self.db.add(invoice)
        await self.db.flush()
        return invoice

    async def delete_by_id(self, invoice_id: InvoiceId) -> bool:
        result = await self.db.execute(
            delete(Invoice).where(Invoice.id == invoice_id),
        )
        return result.rowcount > 0

    async def issued_price_rows(self) -> list[tuple]:
        result = await self.db.execute(select(Invoice.issued, Invoice.price))
        return [tuple(row) for row in result.all()]

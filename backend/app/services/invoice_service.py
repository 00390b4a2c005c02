"""Invoice Service: create, read, update, delete, list and summarize invoices.

Invariants:
    - Buyer is resolved before seller; either missing -> ResourceNotFoundError, nothing persisted
    - Update mutates in place; parties re-resolved only when present in the payload
    - Delete is a hard delete; deleting a missing id -> ResourceNotFoundError
    - Sales/purchases listings match every version of a person by identification number

Design Decisions:
    - Party resolution before any add(): a failed lookup leaves the session clean
    - Summary loads only (issued, price) columns and lets the pure core sum them
"""

import logging
from datetime import date
from typing import Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.domain_types import InvoiceId, PersonId
from app.core.errors import ResourceNotFoundError
from app.core.filters import build_invoice_filters
from app.core.pagination import build_page, parse_page_request
from app.core.repository_protocols import InvoiceRepository, PersonRepository
from app.core.statistics import summarize_invoices
from app.models.invoice import Invoice
from app.models.person import Person
from app.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from app.schemas.listing import InvoiceStatistics, PaginatedResponse
from app.services.mappers import (
    apply_invoice_update, invoice_to_model, invoice_to_response,
)
from app.services.repositories import (
    INVOICE_SORT_COLUMNS, PARTY_ROLES, SqlInvoiceRepository, SqlPersonRepository,
)

logger = logging.getLogger(__name__)


class InvoiceService:
    """Invoice use cases over one request-scoped DB session."""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings
        self.invoices: InvoiceRepository = SqlInvoiceRepository(db)
        self.persons: PersonRepository = SqlPersonRepository(db)

    async def _get_or_404(self, invoice_id: InvoiceId) -> Invoice:
        invoice = await self.invoices.find_by_id(invoice_id)
        if invoice is None:
            raise ResourceNotFoundError("Invoice", invoice_id)
        return invoice

    async def _resolve_party(self, role: str, person_id: PersonId) -> Person:
        person = await self.persons.find_by_id(person_id)
        if person is None:
            raise ResourceNotFoundError(role.capitalize(), person_id)
        return person

    def _page_request(self, params: Mapping[str, str]):
        return parse_page_request(
            params, INVOICE_SORT_COLUMNS,
            default_limit=self.settings.default_page_limit,
            max_limit=self.settings.max_page_limit,
        )

    async def create_invoice(self, payload: InvoiceCreate) -> InvoiceResponse:
        buyer = await self._resolve_party("buyer", payload.buyer.id)
        seller = await self._resolve_party("seller", payload.seller.id)
        invoice = invoice_to_model(payload)
        invoice.buyer = buyer
        invoice.seller = seller
        await self.invoices.save(invoice)
        await self.db.commit()
        logger.info("Invoice created", extra={"invoice_id": invoice.id})
        return invoice_to_response(invoice)

    async def get_invoice(self, invoice_id: InvoiceId) -> InvoiceResponse:
        return invoice_to_response(await self._get_or_404(invoice_id))

    async def update_invoice(
        self, invoice_id: InvoiceId, payload: InvoiceUpdate,
    ) -> InvoiceResponse:
        invoice = await self._get_or_404(invoice_id)
        buyer = (
            await self._resolve_party("buyer", payload.buyer.id)
            if payload.buyer is not None else None
        )
        seller = (
            await self._resolve_party("seller", payload.seller.id)
            if payload.seller is not None else None
        )
        apply_invoice_update(invoice, payload)
        if buyer is not None:
            invoice.buyer = buyer
        if seller is not None:
            invoice.seller = seller
        await self.db.commit()
        logger.info("Invoice updated", extra={"invoice_id": invoice_id})
        return invoice_to_response(invoice)

    async def delete_invoice(self, invoice_id: InvoiceId) -> None:
        if not await self.invoices.delete_by_id(invoice_id):
            raise ResourceNotFoundError("Invoice", invoice_id)
        await self.db.commit()
        logger.info("Invoice deleted", extra={"invoice_id": invoice_id})

    async def list_invoices(
        self, params: Mapping[str, str],
    ) -> PaginatedResponse[InvoiceResponse]:
        request = self._page_request(params)
        clauses = build_invoice_filters(params)
        invoices, total = await self.invoices.find_all(clauses, request)
        page = build_page(invoices, request, total)
        return PaginatedResponse[InvoiceResponse].from_page(page, invoice_to_response)

    async def get_person_invoices(
        self, role: str, identification_number: str, params: Mapping[str, str],
    ) -> PaginatedResponse[InvoiceResponse]:
        """Sales (role="seller") or purchases (role="buyer") of a person."""
        if role not in PARTY_ROLES:
            raise ValueError(f"Unknown party role: {role}")
        request = self._page_request(params)
        invoices, total = await self.invoices.find_by_party_identification(
            role, identification_number, request,
        )
        page = build_page(invoices, request, total)
        return PaginatedResponse[InvoiceResponse].from_page(page, invoice_to_response)

    async def get_person_sales(
        self, identification_number: str, params: Mapping[str, str],
    ) -> PaginatedResponse[InvoiceResponse]:
        return await self.get_person_invoices("seller", identification_number, params)

    async def get_person_purchases(
        self, identification_number: str, params: Mapping[str, str],
    ) -> PaginatedResponse[InvoiceResponse]:
        return await self.get_person_invoices("buyer", identification_number, params)

    async def get_invoice_statistics(
        self, today: date | None = None,
    ) -> InvoiceStatistics:
        rows = await self.invoices.issued_price_rows()
        year = (today or date.today()).year
        return InvoiceStatistics.from_summary(summarize_invoices(rows, year))

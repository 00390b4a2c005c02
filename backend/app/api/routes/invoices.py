"""Invoices Routes: CRUD, filtered listing, statistics and per-person listings.

Invariants:
    - Routes only parse path/body and collect the raw query bag; InvoiceService does the rest
    - /statistics and /identification/... registered before /{invoice_id}
    - DELETE is a hard delete (204)
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.dependencies import get_invoice_service
from app.core.domain_types import InvoiceId
from app.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from app.schemas.listing import InvoiceStatistics, PaginatedResponse
from app.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.post(
    "", response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    body: InvoiceCreate, service: InvoiceService = Depends(get_invoice_service),
):
    """Create an invoice between two existing persons."""
    return await service.create_invoice(body)


@router.get("", response_model=PaginatedResponse[InvoiceResponse])
async def list_invoices(
    request: Request, service: InvoiceService = Depends(get_invoice_service),
):
    """List invoices (page, limit, sort, buyerID, sellerID, product, minPrice, maxPrice)."""
    return await service.list_invoices(dict(request.query_params))


@router.get("/statistics", response_model=InvoiceStatistics)
async def get_invoice_statistics(
    service: InvoiceService = Depends(get_invoice_service),
):
    """Current-year sum, all-time sum and invoice count."""
    return await service.get_invoice_statistics()


@router.get(
    "/identification/{identification_number}/sales",
    response_model=PaginatedResponse[InvoiceResponse],
)
async def get_person_sales(
    identification_number: str, request: Request,
    service: InvoiceService = Depends(get_invoice_service),
):
    return await service.get_person_sales(
        identification_number, dict(request.query_params),
    )


@router.get(
    "/identification/{identification_number}/purchases",
    response_model=PaginatedResponse[InvoiceResponse],
)
async def get_person_purchases(
    identification_number: str, request: Request,
    service: InvoiceService = Depends(get_invoice_service),
):
    return await service.get_person_purchases(
        identification_number, dict(request.query_params),
    )


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: int, service: InvoiceService = Depends(get_invoice_service),
):
    return await service.get_invoice(InvoiceId(invoice_id))


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: int, body: InvoiceUpdate,
    service: InvoiceService = Depends(get_invoice_service),
):
    """Update invoice fields in place; buyer/seller re-resolved when given."""
    return await service.update_invoice(InvoiceId(invoice_id), body)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: int, service: InvoiceService = Depends(get_invoice_service),
):
    await service.delete_invoice(InvoiceId(invoice_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Persons Routes: CRUD, listing, statistics and per-person invoice listings.

Invariants:
    - Routes only parse path/body and collect the raw query bag; PersonService does the rest
    - /statistics and /identification/... registered before /{person_id}
    - DELETE hides the person (204), it never removes the row

Design Decisions:
    - Raw query bag (dict(request.query_params)) over typed Query(...) params: the
      pagination calculator owns parse/default/reject policy for page, limit and sort
    - Sales/purchases here delegate to InvoiceService (same endpoints exist under /api/invoices)
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from app.api.dependencies import get_invoice_service, get_person_service
from app.core.domain_types import PersonId
from app.schemas.invoice import InvoiceResponse
from app.schemas.listing import PaginatedResponse, PersonStatisticsReport
from app.schemas.person import PersonCreate, PersonResponse
from app.services.invoice_service import InvoiceService
from app.services.person_service import PersonService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/persons", tags=["persons"])


@router.post(
    "", response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_person(
    body: PersonCreate, service: PersonService = Depends(get_person_service),
):
    """Create a new person."""
    return await service.add_person(body)


@router.get("", response_model=PaginatedResponse[PersonResponse])
async def list_persons(
    request: Request, service: PersonService = Depends(get_person_service),
):
    """List visible persons (page, limit, sort, name, identificationNumber)."""
    return await service.list_persons(dict(request.query_params))


@router.get("/statistics", response_model=PersonStatisticsReport)
async def get_person_statistics(
    request: Request, service: PersonService = Depends(get_person_service),
):
    """Revenue per person: top 5 plus sorted, paginated list."""
    return await service.get_person_statistics(dict(request.query_params))


@router.get(
    "/identification/{identification_number}/sales",
    response_model=PaginatedResponse[InvoiceResponse],
)
async def get_person_sales(
    identification_number: str, request: Request,
    service: InvoiceService = Depends(get_invoice_service),
):
    """Invoices where the person is the seller."""
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
    """Invoices where the person is the buyer."""
    return await service.get_person_purchases(
        identification_number, dict(request.query_params),
    )


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: int, service: PersonService = Depends(get_person_service),
):
    """Get one person by id (hidden versions included)."""
    return await service.get_person(PersonId(person_id))


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: int, body: PersonCreate,
    service: PersonService = Depends(get_person_service),
):
    """Replace a person with a new version; the old one is hidden."""
    return await service.update_person(PersonId(person_id), body)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_person(
    person_id: int, service: PersonService = Depends(get_person_service),
):
    """Hide a person."""
    await service.remove_person(PersonId(person_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

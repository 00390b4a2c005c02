"""Service Providers: FastAPI dependencies that build request-scoped services.

Invariants:
    - One AsyncSession per request, shared by every service built for that request
    - Settings come from the cached get_settings()
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.infrastructure.database import get_db
from app.services.invoice_service import InvoiceService
from app.services.person_service import PersonService


def get_person_service(db: AsyncSession = Depends(get_db)) -> PersonService:
    return PersonService(db, get_settings())


def get_invoice_service(db: AsyncSession = Depends(get_db)) -> InvoiceService:
    return InvoiceService(db, get_settings())

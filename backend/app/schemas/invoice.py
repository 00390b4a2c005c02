"""Invoice Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - invoiceNumber > 0, price >= 0 (minor units), vat in 0..100
    - issued is today or earlier
    - dueDate strictly after issued (checked on the dueDate field so the error names it)
    - Create requires buyer and seller references; update treats them as optional

Design Decisions:
    - InvoiceFields holds the shape, InvoicePayload adds input-only checks: responses
      built from stored rows never re-run "not in the future" against today's date
    - field_validator with ValidationInfo.data for the cross-field due-date rule:
      fields validate in declaration order, so issued is already parsed
"""

from datetime import date

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.base import WireModel, strip_required
from app.schemas.person import PersonReference, PersonResponse


class InvoiceFields(WireModel):
    """Scalar invoice fields shared by input and output."""
    invoice_number: int
    issued: date
    due_date: date
    product: str
    price: int
    vat: int
    note: str | None = None


class InvoicePayload(InvoiceFields):
    """Invoice input constraints."""
    invoice_number: int = Field(gt=0)
    product: str = Field(min_length=1, max_length=255)
    price: int = Field(ge=0)
    vat: int = Field(ge=0, le=100)
    note: str | None = Field(None, max_length=1000)

    @field_validator("issued")
    @classmethod
    def issued_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("Issue date cannot be in the future")
        return v

    @field_validator("due_date")
    @classmethod
    def due_after_issued(cls, v: date, info: ValidationInfo) -> date:
        issued = info.data.get("issued")
        if issued is not None and v <= issued:
            raise ValueError("Due date must be after the issue date")
        return v

    @field_validator("product")
    @classmethod
    def strip_product(cls, v: str) -> str:
        return strip_required(v, "product")


class InvoiceCreate(InvoicePayload):
    """Invoice creation: both parties required."""
    buyer: PersonReference
    seller: PersonReference


class InvoiceUpdate(InvoicePayload):
    """Invoice update: parties re-resolved only when given."""
    buyer: PersonReference | None = None
    seller: PersonReference | None = None


class InvoiceResponse(InvoiceFields):
    """Invoice output with both parties embedded."""
    id: int = Field(alias="_id")
    buyer: PersonResponse
    seller: PersonResponse

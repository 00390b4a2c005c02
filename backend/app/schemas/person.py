"""Person Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - identificationNumber: exactly 8 digits
    - taxNumber: 2 uppercase letters + 8-10 digits
    - accountNumber: 1-17 digits, bankCode: 4 digits, zip: 5 digits
    - _id and hidden are read-only: ignored on input, always present on output

Design Decisions:
    - Regex constraints via Field(pattern=...): Pydantic reports them per field
    - field_validator for side-effect-free transforms (strip): keeps models pure
    - PersonReference accepts a full person object but only reads _id, so clients
      can post back what they received
"""

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from app.core.domain_types import Country
from app.schemas.base import WireModel, strip_required


class PersonCreate(WireModel):
    """Person input: used for create and for update (new version)."""
    name: str = Field(min_length=1, max_length=255)
    identification_number: str = Field(pattern=r"^[0-9]{8}$")
    tax_number: str = Field(pattern=r"^[A-Z]{2}[0-9]{8,10}$")
    account_number: str = Field(pattern=r"^[0-9]{1,17}$")
    bank_code: str = Field(pattern=r"^[0-9]{4}$")
    iban: str = Field(pattern=r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{1,30}$")
    telephone: str = Field(pattern=r"^\+?[0-9]{9,15}$")
    mail: EmailStr
    street: str = Field(min_length=1, max_length=255)
    zip: str = Field(pattern=r"^[0-9]{5}$")
    city: str = Field(min_length=1, max_length=255)
    country: Country
    note: str | None = Field(None, max_length=1000)

    @field_validator("name", "street", "city")
    @classmethod
    def strip_text(cls, v: str, info: ValidationInfo) -> str:
        return strip_required(v, info.field_name)


class PersonResponse(PersonCreate):
    """Person output: public-facing person data including identity and hidden flag."""
    id: int = Field(alias="_id")
    hidden: bool = False


class PersonReference(WireModel):
    """Reference to an existing person by id (other person fields ignored)."""
    id: int = Field(alias="_id")

"""Person ORM: persists a buyer/seller with banking, contact and address data.

Invariants:
    - id is an auto-increment integer primary key
    - hidden=True means soft-deleted: excluded from default listings, still referenced by invoices
    - A visible person is never mutated in place; updates hide the row and insert a new one

Design Decisions:
    - Format checks (identification number, tax number, IBAN...) live in the pydantic
      schemas at the boundary, not in column constraints
    - No back-populated sales/purchases collections: read-side aggregation runs as
      explicit join queries, so no lazy collection loads happen in async context
"""

from sqlalchemy import Boolean, Integer, String, Text, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import Country
from app.db.base import Base


class Person(Base):
    """Person entity: a party that buys or sells on invoices."""
    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    identification_number: Mapped[str] = mapped_column(
        String(8), nullable=False, index=True,
    )
    tax_number: Mapped[str] = mapped_column(String(12), nullable=False)
    account_number: Mapped[str] = mapped_column(String(17), nullable=False)
    bank_code: Mapped[str] = mapped_column(String(4), nullable=False)
    iban: Mapped[str] = mapped_column(String(34), nullable=False)
    telephone: Mapped[str] = mapped_column(String(16), nullable=False)
    mail: Mapped[str] = mapped_column(String(255), nullable=False)

    # Address
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    zip: Mapped[str] = mapped_column(String(5), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[Country] = mapped_column(
        SAEnum(Country, native_enum=False, length=20), nullable=False,
    )

    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    hidden: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

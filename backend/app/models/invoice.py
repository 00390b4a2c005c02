"""Invoice ORM: persists a billable transaction between one buyer and one seller.

Invariants:
    - buyer_id and seller_id are required FKs to persons.id
    - price is an integer amount in minor currency units, >= 0
    - Invoices are hard-deleted (unlike persons)

Design Decisions:
    - buyer/seller eager-loaded with selectin: every response embeds both parties,
      and async sessions cannot lazy-load on attribute access
    - BigInteger price: revenue sums stay exact integers
"""

from datetime import date

from sqlalchemy import BigInteger, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Invoice(Base):
    """Invoice entity: a sale from seller to buyer."""
    __tablename__ = "invoices"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    invoice_number: Mapped[int] = mapped_column(Integer, nullable=False)
    issued: Mapped[date] = mapped_column(Date, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    product: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    vat: Mapped[int] = mapped_column(Integer, nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)

    buyer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("persons.id"), nullable=False, index=True,
    )
    seller_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("persons.id"), nullable=False, index=True,
    )

    # Relationships
    buyer: Mapped["Person"] = relationship(
        "Person", foreign_keys=[buyer_id], lazy="selectin",
    )
    seller: Mapped["Person"] = relationship(
        "Person", foreign_keys=[seller_id], lazy="selectin",
    )

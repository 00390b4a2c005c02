"""Mappers: structural conversion between ORM entities and wire schemas.

Invariants:
    - Plain field copying, no business rules
    - person_to_model(person_to_response(p)) reproduces every column of p
    - Input payloads never carry id/hidden; services decide those

Design Decisions:
    - Explicit per-field functions over model_validate(from_attributes=True): the
      snake_case <-> camelCase split and the "_id" alias stay visible in one place
"""

from app.models.invoice import Invoice
from app.models.person import Person
from app.schemas.invoice import InvoicePayload, InvoiceResponse
from app.schemas.person import PersonCreate, PersonResponse

PERSON_FIELDS = (
    "name", "identification_number", "tax_number", "account_number",
    "bank_code", "iban", "telephone", "mail", "street", "zip", "city",
    "country", "note",
)

INVOICE_FIELDS = (
    "invoice_number", "issued", "due_date", "product", "price", "vat", "note",
)


def person_to_response(person: Person) -> PersonResponse:
    """Convert Person ORM entity to its wire form."""
    return PersonResponse(
        id=person.id,
        hidden=bool(person.hidden),
        **{name: getattr(person, name) for name in PERSON_FIELDS},
    )


def person_to_model(payload: PersonCreate) -> Person:
    """Build a Person entity from a payload (id/hidden copied when present)."""
    person = Person(
        **{name: getattr(payload, name) for name in PERSON_FIELDS},
    )
    person.hidden = bool(getattr(payload, "hidden", False))
    person_id = getattr(payload, "id", None)
    if person_id is not None:
        person.id = person_id
    return person


def invoice_to_response(invoice: Invoice) -> InvoiceResponse:
    """Convert Invoice ORM entity (with loaded parties) to its wire form."""
    return InvoiceResponse(
        id=invoice.id,
        buyer=person_to_response(invoice.buyer),
        seller=person_to_response(invoice.seller),
        **{name: getattr(invoice, name) for name in INVOICE_FIELDS},
    )


def invoice_to_model(payload: InvoicePayload) -> Invoice:
    """Build an Invoice entity from scalar payload fields (parties set by the service)."""
    return Invoice(**{name: getattr(payload, name) for name in INVOICE_FIELDS})


def apply_invoice_update(invoice: Invoice, payload: InvoicePayload) -> Invoice:
    """Copy scalar payload fields onto an existing invoice in place."""
    for name in INVOICE_FIELDS:
        setattr(invoice, name, getattr(payload, name))
    return invoice

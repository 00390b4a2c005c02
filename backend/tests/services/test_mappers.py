"""Mappers: structural conversion between ORM entities and wire schemas.

Invariants:
    - person_to_model(person_to_response(p)) reproduces every column of p
    - invoice_to_response embeds both parties
    - apply_invoice_update copies scalars only, parties untouched
"""

from datetime import date

from app.core.domain_types import Country
from app.models.invoice import Invoice
from app.models.person import Person
from app.schemas.invoice import InvoiceUpdate
from app.schemas.person import PersonCreate
from app.services.mappers import (
    PERSON_FIELDS, apply_invoice_update, invoice_to_model,
    invoice_to_response, person_to_model, person_to_response,
)


def _person(person_id: int = 1, **overrides) -> Person:
    values = dict(
        id=person_id, name="Novak", identification_number="12345678",
        tax_number="CZ12345678", account_number="123", bank_code="0800",
        iban="CZ6508000000001234567890", telephone="777123456",
        mail="info@novak.cz", street="Dlouha 12", zip="11000", city="Praha",
        country=Country.CZECHIA, note="vip", hidden=True,
    )
    values.update(overrides)
    return Person(**values)


def test_person_round_trip_keeps_every_column():
    person = _person()
    restored = person_to_model(person_to_response(person))
    for name in PERSON_FIELDS + ("id", "hidden"):
        assert getattr(restored, name) == getattr(person, name)


def test_person_from_create_payload_has_no_id():
    payload = PersonCreate.model_validate(
        person_to_response(_person()).model_dump(by_alias=True),
    )
    person = person_to_model(payload)
    assert person.id is None
    assert person.hidden is False


def test_invoice_to_response_embeds_parties():
    invoice = Invoice(
        id=3, invoice_number=10, issued=date(2024, 1, 5),
        due_date=date(2024, 1, 20), product="Desk", price=500, vat=21,
        note=None, buyer=_person(1), seller=_person(2, name="Seller"),
    )
    response = invoice_to_response(invoice)
    assert response.id == 3
    assert response.buyer.id == 1
    assert response.seller.name == "Seller"


def test_apply_update_copies_scalars_only():
    buyer, seller = _person(1), _person(2)
    invoice = Invoice(
        id=3, invoice_number=10, issued=date(2024, 1, 5),
        due_date=date(2024, 1, 20), product="Desk", price=500, vat=21,
        buyer=buyer, seller=seller,
    )
    update = InvoiceUpdate.model_validate({
        "invoiceNumber": 11, "issued": "2024-02-01", "dueDate": "2024-02-15",
        "product": "Chair", "price": 700, "vat": 15,
    })
    apply_invoice_update(invoice, update)
    assert (invoice.invoice_number, invoice.product, invoice.price) == (11, "Chair", 700)
    assert invoice.buyer is buyer
    assert invoice.seller is seller


def test_invoice_to_model_leaves_parties_unset():
    update = InvoiceUpdate.model_validate({
        "invoiceNumber": 1, "issued": "2024-02-01", "dueDate": "2024-02-15",
        "product": "Chair", "price": 0, "vat": 0,
    })
    invoice = invoice_to_model(update)
    assert invoice.buyer is None
    assert invoice.price == 0

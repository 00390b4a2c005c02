"""Person Schemas: field formats, whitespace handling and wire aliases.

Invariants:
    - Every regex-constrained field rejects malformed input
    - name/street/city are stripped and must not be blank
    - Responses serialize id as "_id" and fields as camelCase
"""

import pytest
from pydantic import ValidationError

from app.core.domain_types import Country
from app.schemas.person import PersonCreate, PersonReference, PersonResponse

VALID = {
    "name": "Novak s.r.o.",
    "identificationNumber": "12345678",
    "taxNumber": "CZ12345678",
    "accountNumber": "1234567890",
    "bankCode": "0800",
    "iban": "CZ6508000000001234567890",
    "telephone": "+420777123456",
    "mail": "info@novak.cz",
    "street": "Dlouha 12",
    "zip": "11000",
    "city": "Praha",
    "country": "CZECHIA",
}


def _with(**overrides):
    return {**VALID, **overrides}


def test_valid_person_parses_camel_case():
    person = PersonCreate.model_validate(VALID)
    assert person.identification_number == "12345678"
    assert person.country is Country.CZECHIA
    assert person.note is None


@pytest.mark.parametrize("field, value", [
    ("identificationNumber", "1234567"),
    ("identificationNumber", "1234567a"),
    ("taxNumber", "cz12345678"),
    ("taxNumber", "CZ1234567"),
    ("accountNumber", "123456789012345678"),
    ("bankCode", "080"),
    ("zip", "110 00"),
    ("telephone", "777-123-456"),
    ("iban", "6508000000001234567890"),
    ("mail", "not-an-email"),
    ("country", "GERMANY"),
])
def test_malformed_fields_rejected(field, value):
    with pytest.raises(ValidationError) as exc_info:
        PersonCreate.model_validate(_with(**{field: value}))
    assert exc_info.value.errors()[0]["loc"] == (field,)


def test_text_fields_stripped():
    person = PersonCreate.model_validate(_with(name="  Novak  ", city=" Brno "))
    assert person.name == "Novak"
    assert person.city == "Brno"


def test_blank_name_rejected():
    with pytest.raises(ValidationError):
        PersonCreate.model_validate(_with(name="   "))


def test_input_ignores_id_and_hidden():
    person = PersonCreate.model_validate(_with(_id=99, hidden=True))
    assert not hasattr(person, "id")
    assert not hasattr(person, "hidden")


def test_response_serializes_wire_names():
    response = PersonResponse.model_validate(_with(_id=5))
    dumped = response.model_dump(by_alias=True, mode="json")
    assert dumped["_id"] == 5
    assert dumped["hidden"] is False
    assert dumped["identificationNumber"] == "12345678"
    assert "identification_number" not in dumped


def test_reference_reads_only_id():
    ref = PersonReference.model_validate(_with(_id=7))
    assert ref.id == 7

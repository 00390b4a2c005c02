"""Service test fixtures: async DB + FastAPI test client + payload factories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Payload factories return valid camelCase bodies; tests override single fields

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Seeding goes through the HTTP API: the same path a client takes
"""

from datetime import date, timedelta

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
import app.models  # noqa: F401
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


def person_payload(**overrides) -> dict:
    """Valid person body; keyword overrides use wire (camelCase) names."""
    body = {
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
        "note": None,
    }
    body.update(overrides)
    return body


def invoice_payload(buyer_id: int, seller_id: int, **overrides) -> dict:
    """Valid invoice body issued yesterday, due in two weeks."""
    issued = date.today() - timedelta(days=1)
    body = {
        "invoiceNumber": 2024001,
        "issued": issued.isoformat(),
        "dueDate": (issued + timedelta(days=14)).isoformat(),
        "product": "Consulting",
        "price": 1000,
        "vat": 21,
        "note": None,
        "buyer": {"_id": buyer_id},
        "seller": {"_id": seller_id},
    }
    body.update(overrides)
    return body


@pytest.fixture
def make_person(client):
    """Create a person through the API and return the response body."""
    async def _make(**overrides) -> dict:
        res = await client.post("/api/persons", json=person_payload(**overrides))
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_invoice(client):
    """Create an invoice through the API and return the response body."""
    async def _make(buyer_id: int, seller_id: int, **overrides) -> dict:
        res = await client.post(
            "/api/invoices", json=invoice_payload(buyer_id, seller_id, **overrides),
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def person_body():
    """Factory for valid person bodies (see person_payload)."""
    return person_payload


@pytest.fixture
def invoice_body():
    """Factory for valid invoice bodies (see invoice_payload)."""
    return invoice_payload

"""Pytest fixtures for API and client testing."""
import os

# Must be set before vendor_registry.core.config is imported
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import vendor_registry.domain  # noqa: F401
from vendor_registry.client.service import VendorClient
from vendor_registry.db.base import Base, get_db
from vendor_registry.main import create_app

ACME = {
    "name": "Acme",
    "contact_person": "Jo",
    "email": "jo@acme.com",
    "partner_type": "Supplier",
}


@pytest.fixture
def db_engine(tmp_path):
    """Fresh SQLite file per test; tables created with a sync engine."""
    path = tmp_path / "vendors.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(bind=sync_engine)
    sync_engine.dispose()
    # NullPool: each session opens its own connection on the running loop
    return create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
def app(session_factory):
    """Application with get_db pointed at the per-test database."""
    application = create_app()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_vendor(client):
    response = client.post("/api/vendors", json=ACME)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def vendor_client(app):
    """VendorClient talking to the app in-process over an ASGI transport."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield VendorClient("http://testserver/api/vendors", http=http)

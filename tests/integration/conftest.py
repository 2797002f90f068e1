import datetime as dt

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.depends import get_session
from src.domain import Admin, Invoice, InvoiceStatus

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


class IntegrationConfig(ApplicationConfig):
    API_PREFIX = "/api"
    DB_AUTO_CREATE = False
    ENABLE_SENTRY = 0
    ENABLE_LOGGING_MIDDLEWARE = False
    JWT_SECRET = "integration-secret"
    JWT_ALGORITHM = "HS256"
    TOKEN_EXPIRE_HOURS = 24
    EXPORT_MAX_ROWS = 5000
    CURRENCY_SYMBOL = "$"


@pytest.fixture
def config():
    return IntegrationConfig


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a throwaway SQLite database per test"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'nota_test.db'}", echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Session for arranging data and checking results directly"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(config, session_factory):
    """Application with one database session per request, like production"""
    from src.api.app import create_app

    app = create_app(config)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin(db_session):
    admin = Admin(
        username=ADMIN_USERNAME,
        password_hash=BcryptPasswordHasher(rounds=4).hash(ADMIN_PASSWORD),
    )
    db_session.add(admin)
    await db_session.commit()
    return admin


@pytest_asyncio.fixture
async def auth_headers(client, admin):
    response = await client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def seed_invoices(db_session):
    """Insert invoices directly; returns the stored entities"""

    async def _seed(rows):
        invoices = []
        for row in rows:
            data = {
                "date": dt.date(2026, 1, 15),
                "customer_name": "Acme Store",
                "total_cents": 1000,
                "status": InvoiceStatus.UNPAID,
            }
            data.update(row)
            if data["status"] == InvoiceStatus.PAID and "paid_at" not in data:
                data["paid_at"] = dt.datetime(2026, 1, 20, 9, 0, tzinfo=dt.timezone.utc)
            invoices.append(Invoice(**data))

        db_session.add_all(invoices)
        await db_session.commit()
        return invoices

    return _seed

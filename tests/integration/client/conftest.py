import pytest_asyncio
from httpx import ASGITransport

from src.client import NotaApiClient

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest_asyncio.fixture
async def api(app):
    """NotaApiClient talking to the in-process app"""
    async with NotaApiClient(
        "http://test",
        api_prefix="/api",
        check_base_url="http://nota.local",
        transport=ASGITransport(app=app),
    ) as api:
        yield api


@pytest_asyncio.fixture
async def session(api, admin):
    return await api.login(ADMIN_USERNAME, ADMIN_PASSWORD)

"""Integration tests for NotaApiClient"""

import pytest

from config import ApplicationConfig
from src.client import ApiError, ClientSession, NotaApiClient, SessionExpired


class TestNotaApiClient:

    @pytest.mark.asyncio
    async def test_login(self, api, admin):
        session = await api.login("admin", "s3cret-pass")

        assert session.is_authenticated
        assert session.username == "admin"

    @pytest.mark.asyncio
    async def test_login_failure_is_not_session_expiry(self, api, admin):
        with pytest.raises(ApiError) as exc_info:
            await api.login("admin", "wrong")

        assert not isinstance(exc_info.value, SessionExpired)
        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "INVALID_CREDENTIALS"
        assert exc_info.value.message == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_crud_round(self, api, session):
        created = await api.create_invoice(
            session,
            {"invoiceNo": "INV-1", "date": "2026-01-15", "customerName": "Acme", "total": "12.3"},
        )
        assert created["totalCents"] == 1230

        paid = await api.set_status(session, created["id"], "PAID")
        assert paid["status"] == "PAID"

        edited = await api.update_invoice(session, created["id"], {"note": "hello"})
        assert edited["note"] == "hello"

        page = await api.list_invoices(session, search="Acme", status="PAID", page=1, limit=5)
        assert page["meta"]["total"] == 1

        stats = await api.get_stats(session)
        assert stats["totalPaidCents"] == 1230

        assert await api.delete_invoice(session, created["id"]) == {"ok": True}

    @pytest.mark.asyncio
    async def test_server_message_is_surfaced(self, api, session):
        payload = {"invoiceNo": "INV-1", "date": "2026-01-15", "customerName": "Acme", "total": "1"}
        await api.create_invoice(session, payload)

        with pytest.raises(ApiError) as exc_info:
            await api.create_invoice(session, payload)

        assert exc_info.value.status_code == 409
        assert "INV-1" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_401_clears_session(self, api):
        session = ClientSession(token="stale-token", username="admin")

        with pytest.raises(SessionExpired):
            await api.list_invoices(session)

        assert not session.is_authenticated

    @pytest.mark.asyncio
    async def test_exports(self, api, session):
        await api.create_invoice(
            session, {"invoiceNo": "INV-1", "date": "2026-01-15", "customerName": "Acme", "total": "1"}
        )

        excel = await api.export_invoices(session, "excel", status="ALL")
        pdf = await api.export_invoices(session, "pdf")

        assert excel.filename == "invoices.xlsx"
        assert excel.content[:2] == b"PK"
        assert pdf.filename == "invoices.pdf"
        assert pdf.media_type == "application/pdf"
        assert pdf.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_unknown_export_kind(self, api, session):
        with pytest.raises(ValueError):
            await api.export_invoices(session, "csv")

    @pytest.mark.asyncio
    async def test_public_check(self, api, session):
        await api.create_invoice(
            session, {"invoiceNo": "INV 7/A", "date": "2026-01-15", "customerName": "Acme", "total": "1"}
        )

        found = await api.check_invoice("INV 7/A")
        assert found["invoiceNo"] == "INV 7/A"

        with pytest.raises(ApiError) as exc_info:
            await api.check_invoice("INV-404")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_check_link_is_encoded(self, api):
        assert api.check_link("INV 7/A") == "http://nota.local/check?invoiceNo=INV%207%2FA"

    @pytest.mark.asyncio
    async def test_check_link_defaults_to_client_origin(self):
        async with NotaApiClient("http://api.nota.local:4000") as api:
            link = api.check_link("INV-001")

        assert link == f"{ApplicationConfig.CLIENT_BASE_URL.rstrip('/')}/check?invoiceNo=INV-001"

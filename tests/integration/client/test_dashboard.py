"""Integration tests for the client Dashboard, InvoiceChecker and ClientApp"""

import pytest

from src.client import ClientApp, Dashboard, InvoiceChecker, View


@pytest.fixture
def dashboard(api, session):
    return Dashboard(api, session, debounce_seconds=0.01)


class TestDashboard:

    @pytest.mark.asyncio
    async def test_reload_loads_list_and_totals(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": f"INV-{i:03d}", "total_cents": 100} for i in range(1, 13)])

        await dashboard.reload()

        assert len(dashboard.items) == 10
        assert dashboard.meta["total"] == 12
        assert dashboard.meta["totalPages"] == 2
        assert dashboard.stats["totalUnpaidCents"] == 1200

    @pytest.mark.asyncio
    async def test_debounced_search_resets_page(self, dashboard, seed_invoices):
        await seed_invoices(
            [{"invoice_no": f"INV-{i:03d}"} for i in range(1, 13)]
            + [{"invoice_no": "X-1", "customer_name": "Zeta Traders"}]
        )
        await dashboard.reload()
        await dashboard.go_to_page(2)
        assert dashboard.page == 2

        dashboard.set_search_draft("Z")
        dashboard.set_search_draft("Ze")
        dashboard.set_search_draft(" Zeta ")
        await dashboard.flush_search()

        assert dashboard.search == "Zeta"
        assert dashboard.page == 1
        assert [i["invoiceNo"] for i in dashboard.items] == ["X-1"]

    @pytest.mark.asyncio
    async def test_filters_reset_page(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": f"INV-{i:03d}"} for i in range(1, 13)])
        await dashboard.reload()
        await dashboard.go_to_page(2)

        await dashboard.set_sort("invoiceNo_desc")

        assert dashboard.page == 1
        assert dashboard.items[0]["invoiceNo"] == "INV-012"

    @pytest.mark.asyncio
    async def test_go_to_page_is_clamped(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": f"INV-{i:03d}"} for i in range(1, 13)])
        await dashboard.reload()

        await dashboard.go_to_page(99)
        assert dashboard.page == 2
        assert dashboard.row_start_no == 10

        await dashboard.go_to_page(0)
        assert dashboard.page == 1

    @pytest.mark.asyncio
    async def test_create_toggle_delete(self, dashboard):
        assert await dashboard.create_invoice("INV-1", "2026-01-15", "Acme", "10.05") is True
        assert dashboard.stats["totalUnpaidCents"] == 1005
        assert dashboard.notifications[-1].variant == "success"

        invoice_id = dashboard.items[0]["id"]
        assert await dashboard.toggle_status(invoice_id, "PAID") is True
        assert dashboard.items[0]["status"] == "PAID"
        assert dashboard.stats["totalPaidCents"] == 1005

        assert await dashboard.delete_invoice(invoice_id) is True
        assert dashboard.items == []
        assert dashboard.stats["totalAllCents"] == 0

    @pytest.mark.asyncio
    async def test_failed_create_notifies(self, dashboard):
        ok = await dashboard.create_invoice("INV-1", "2026-01-15", "Acme", "10.005")

        assert ok is False
        assert dashboard.notifications[-1].variant == "danger"
        assert "2 fraction digits" in dashboard.notifications[-1].message

    @pytest.mark.asyncio
    async def test_inline_edit(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": "INV-001", "total_cents": 1230, "note": "old"}])
        await dashboard.reload()
        row = dashboard.items[0]

        dashboard.start_edit(row)
        assert dashboard.edit_buffer == {
            "customerName": "Acme Store",
            "date": "2026-01-15",
            "total": "12.3",
            "note": "old",
        }

        dashboard.update_edit("total", "15")
        dashboard.update_edit("note", "")
        assert await dashboard.save_edit() is True

        assert dashboard.editing_id is None
        assert dashboard.items[0]["totalCents"] == 1500
        assert dashboard.items[0]["note"] is None

    @pytest.mark.asyncio
    async def test_cancel_edit_discards_changes(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": "INV-001"}])
        await dashboard.reload()

        dashboard.start_edit(dashboard.items[0])
        dashboard.update_edit("customerName", "Changed")
        dashboard.cancel_edit()
        await dashboard.reload()

        assert dashboard.editing_id is None
        assert dashboard.items[0]["customerName"] == "Acme Store"

    @pytest.mark.asyncio
    async def test_update_edit_rejects_unknown_field(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": "INV-001"}])
        await dashboard.reload()
        dashboard.start_edit(dashboard.items[0])

        with pytest.raises(ValueError):
            dashboard.update_edit("invoiceNo", "INV-999")

    @pytest.mark.asyncio
    async def test_export_uses_current_filters(self, dashboard, seed_invoices):
        await seed_invoices([{"invoice_no": f"INV-{i:03d}"} for i in range(1, 13)])
        await dashboard.set_status_filter("PAID")

        exported = await dashboard.export("excel")

        assert exported.filename == "invoices.xlsx"


class TestInvoiceChecker:

    @pytest.mark.asyncio
    async def test_check_found(self, api, seed_invoices):
        await seed_invoices([{"invoice_no": "INV-042", "total_cents": 123456}])
        checker = InvoiceChecker(api)

        result = await checker.check(" INV-042 ")

        assert result["invoiceNo"] == "INV-042"
        assert checker.error == ""
        lines = checker.summary_lines()
        assert "Result: VALID UNPAID" in lines
        assert "Total: $1,234.56" in lines
        assert "Paid At: -" in lines

    @pytest.mark.asyncio
    async def test_check_not_found(self, api):
        checker = InvoiceChecker(api)

        assert await checker.check("INV-404") is None
        assert checker.error == "NOT FOUND"
        assert checker.summary_lines() == []

    @pytest.mark.asyncio
    async def test_check_requires_input(self, api):
        checker = InvoiceChecker(api)

        assert await checker.check("   ") is None
        assert checker.error == "invoiceNo is required"


class TestClientApp:

    @pytest.mark.asyncio
    async def test_login_opens_dashboard(self, api, admin, seed_invoices):
        await seed_invoices([{"invoice_no": "INV-001"}])
        app = ClientApp(api, debounce_seconds=0.01)

        assert await app.login("admin", "s3cret-pass") is True

        assert app.view == View.DASHBOARD
        assert app.dashboard.meta["total"] == 1

    @pytest.mark.asyncio
    async def test_failed_login_stays_on_login(self, api, admin):
        app = ClientApp(api)

        assert await app.login("admin", "nope") is False

        assert app.view == View.LOGIN
        assert app.login_error == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_session_expiry_returns_to_login(self, api, admin):
        app = ClientApp(api)
        await app.login("admin", "s3cret-pass")

        app.session.token = "revoked"
        result = await app.run(app.dashboard.reload())

        assert result is False
        assert app.view == View.LOGIN
        assert app.dashboard is None
        assert not app.session.is_authenticated

    @pytest.mark.asyncio
    async def test_session_expiry_during_debounced_search(self, api, admin):
        app = ClientApp(api, debounce_seconds=0.01)
        await app.login("admin", "s3cret-pass")
        dashboard = app.dashboard

        app.session.token = "revoked"
        dashboard.set_search_draft("INV")
        await dashboard.flush_search()

        assert app.view == View.LOGIN
        assert app.dashboard is None
        assert not app.session.is_authenticated

    @pytest.mark.asyncio
    async def test_open_dashboard_without_session(self, api):
        app = ClientApp(api)

        assert await app.open_dashboard() is False
        assert app.view == View.LOGIN

    @pytest.mark.asyncio
    async def test_logout(self, api, admin):
        app = ClientApp(api)
        await app.login("admin", "s3cret-pass")

        app.logout()

        assert app.view == View.LOGIN
        assert not app.session.is_authenticated

    @pytest.mark.asyncio
    async def test_public_check_without_login(self, api, seed_invoices):
        await seed_invoices([{"invoice_no": "INV-001"}])
        app = ClientApp(api)

        result = await app.open_check("INV-001")

        assert app.view == View.CHECK
        assert result["invoiceNo"] == "INV-001"

"""Unit tests for Invoice domain entity"""

import datetime as dt

from src.domain.invoice import Invoice, InvoiceStatus, InvoiceTotals


class TestInvoiceCreation:

    def test_new_invoice_defaults(self):
        invoice = Invoice(
            invoice_no="INV-001",
            date=dt.date(2026, 1, 15),
            customer_name="Acme Store",
            total_cents=1230,
        )

        assert invoice.status == InvoiceStatus.UNPAID
        assert invoice.paid_at is None
        assert invoice.note is None
        assert invoice.id
        assert isinstance(invoice.created_at, dt.datetime)

    def test_ids_are_unique(self):
        first = Invoice(invoice_no="A", date=dt.date(2026, 1, 1), customer_name="x", total_cents=1)
        second = Invoice(invoice_no="B", date=dt.date(2026, 1, 1), customer_name="x", total_cents=1)

        assert first.id != second.id


class TestApplyStatus:
    """paid_at follows status"""

    def test_paid_sets_paid_at(self, make_invoice):
        invoice = make_invoice()
        now = dt.datetime(2026, 2, 1, 9, 30)

        invoice.apply_status(InvoiceStatus.PAID, now=now)

        assert invoice.status == InvoiceStatus.PAID
        assert invoice.paid_at == now

    def test_paid_without_now_uses_current_time(self, make_invoice):
        invoice = make_invoice()

        invoice.apply_status(InvoiceStatus.PAID)

        assert invoice.paid_at is not None

    def test_unpaid_clears_paid_at(self, make_invoice):
        invoice = make_invoice(status=InvoiceStatus.PAID, paid_at=dt.datetime(2026, 2, 1))

        invoice.apply_status(InvoiceStatus.UNPAID)

        assert invoice.status == InvoiceStatus.UNPAID
        assert invoice.paid_at is None

    def test_repaying_restamps_paid_at(self, make_invoice):
        invoice = make_invoice(status=InvoiceStatus.PAID, paid_at=dt.datetime(2026, 2, 1))
        later = dt.datetime(2026, 3, 1)

        invoice.apply_status(InvoiceStatus.PAID, now=later)

        assert invoice.paid_at == later


class TestInvoiceTotals:

    def test_from_invoices(self, make_invoice):
        invoices = [
            make_invoice(id="1", total_cents=1000, status=InvoiceStatus.PAID),
            make_invoice(id="2", total_cents=250, status=InvoiceStatus.PAID),
            make_invoice(id="3", total_cents=99, status=InvoiceStatus.UNPAID),
        ]

        totals = InvoiceTotals.from_invoices(invoices)

        assert totals.paid_cents == 1250
        assert totals.unpaid_cents == 99
        assert totals.all_cents == 1349

    def test_empty(self):
        totals = InvoiceTotals.from_invoices([])

        assert totals == InvoiceTotals(paid_cents=0, unpaid_cents=0)
        assert totals.all_cents == 0

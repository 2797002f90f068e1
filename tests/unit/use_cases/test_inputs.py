"""Unit tests for list/export input normalization"""

import datetime as dt
import pytest

from src.app.use_cases.invoices.inputs import (
    clean_text,
    parse_status,
    parse_page,
    parse_limit,
    build_filter,
    MAX_OFFSET,
    page_window,
    total_pages,
    parse_date,
)
from src.domain.invoice import InvoiceStatus


class TestQueryNormalization:

    def test_clean_text(self):
        assert clean_text(None) == ""
        assert clean_text("  INV-1 ") == "INV-1"
        assert clean_text(12.5) == "12.5"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("PAID", InvoiceStatus.PAID),
            ("UNPAID", InvoiceStatus.UNPAID),
            ("ALL", None),
            ("", None),
            (None, None),
            ("paid", None),
            ("DONE", None),
        ],
    )
    def test_parse_status(self, value, expected):
        assert parse_status(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(None, 1), ("", 1), ("3", 3), ("0", 1), ("-4", 1), ("abc", 1), ("2.5", 1)],
    )
    def test_parse_page(self, value, expected):
        assert parse_page(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(None, 10), ("25", 25), ("0", 1), ("-1", 1), ("500", 100), ("100", 100), ("x", 10)],
    )
    def test_parse_limit(self, value, expected):
        assert parse_limit(value) == expected

    def test_build_filter(self):
        invoice_filter = build_filter("  acme ", "PAID", "invoiceNo_desc")

        assert invoice_filter.search == "acme"
        assert invoice_filter.status == InvoiceStatus.PAID
        assert invoice_filter.descending is True

    def test_build_filter_defaults(self):
        invoice_filter = build_filter("   ", "ALL", "bogus")

        assert invoice_filter.search is None
        assert invoice_filter.status is None
        assert invoice_filter.descending is False

    def test_page_window(self):
        assert page_window(1, 10) == (0, 10)
        assert page_window(3, 10) == (20, 10)
        assert page_window(10 ** 30, 10) == (MAX_OFFSET, 10)

    @pytest.mark.parametrize("total,limit,expected", [(0, 10, 1), (10, 10, 1), (25, 10, 3), (101, 100, 2)])
    def test_total_pages(self, total, limit, expected):
        assert total_pages(total, limit) == expected


class TestParseDate:

    def test_plain_date(self):
        assert parse_date("2026-01-15") == dt.date(2026, 1, 15)

    def test_timestamp_is_truncated(self):
        assert parse_date("2026-01-15T10:00:00Z") == dt.date(2026, 1, 15)
        assert parse_date("2026-01-15T23:59:59") == dt.date(2026, 1, 15)

    def test_date_objects_pass_through(self):
        assert parse_date(dt.date(2026, 1, 15)) == dt.date(2026, 1, 15)
        assert parse_date(dt.datetime(2026, 1, 15, 8)) == dt.date(2026, 1, 15)

    @pytest.mark.parametrize("value", ["", None, "2026-02-30", "15/01/2026", "yesterday"])
    def test_invalid_dates(self, value):
        with pytest.raises(ValueError):
            parse_date(value)

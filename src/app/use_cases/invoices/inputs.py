"""Normalization and validation of invoice inputs"""

import datetime as dt
import math
from typing import Any, Optional, Tuple

from src.app.repositories.invoice_repository import InvoiceFilter
from src.domain.invoice import CUSTOMER_NAME_MAX_LENGTH, INVOICE_NO_MAX_LENGTH, InvoiceStatus

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
SORT_DESCENDING = "invoiceNo_desc"
# largest OFFSET a signed 64-bit SQL integer can carry
MAX_OFFSET = 2 ** 63 - 1


def clean_text(value: Any) -> str:
    """String form of an input, trimmed; None becomes ''."""
    if value is None:
        return ""
    return str(value).strip()


def length_error(invoice_no: str = "", customer_name: str = "") -> Optional[str]:
    """Message for the first text field longer than its column, if any"""
    if len(invoice_no) > INVOICE_NO_MAX_LENGTH:
        return f"invoiceNo must be at most {INVOICE_NO_MAX_LENGTH} characters"
    if len(customer_name) > CUSTOMER_NAME_MAX_LENGTH:
        return f"customerName must be at most {CUSTOMER_NAME_MAX_LENGTH} characters"
    return None


def parse_status(value: Optional[str]) -> Optional[InvoiceStatus]:
    """PAID/UNPAID filter; ALL, empty and unknown values mean no filter."""
    if value in (InvoiceStatus.PAID.value, InvoiceStatus.UNPAID.value):
        return InvoiceStatus(value)
    return None


def _parse_int(value: Optional[str], default: int) -> int:
    try:
        return int(clean_text(value))
    except ValueError:
        return default


def parse_page(value: Optional[str]) -> int:
    return max(DEFAULT_PAGE, _parse_int(value, DEFAULT_PAGE))


def parse_limit(value: Optional[str]) -> int:
    return min(MAX_LIMIT, max(1, _parse_int(value, DEFAULT_LIMIT)))


def build_filter(search: Optional[str], status: Optional[str], sort: Optional[str]) -> InvoiceFilter:
    return InvoiceFilter(
        search=clean_text(search) or None,
        status=parse_status(status),
        descending=sort == SORT_DESCENDING,
    )


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """(offset, limit) for a 1-based page; pages past MAX_OFFSET read as empty"""
    return min((page - 1) * limit, MAX_OFFSET), limit


def total_pages(total: int, limit: int) -> int:
    return max(1, math.ceil(total / limit))


def parse_date(value: Any) -> dt.date:
    """
    Parse an invoice date

    Accepts YYYY-MM-DD or a full ISO timestamp (truncated to its date).

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value

    text = clean_text(value)
    if not text:
        raise ValueError("Date is required")

    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return dt.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(f"Invalid date: {text}")

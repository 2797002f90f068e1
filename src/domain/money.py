"""Money helpers

Amounts are stored as integer cents. Conversion from the decimal strings
typed by users is done with integer arithmetic only, never floats.
"""

import re
from decimal import Decimal

AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
AMOUNT_FORMAT_MESSAGE = "Total must be a decimal with at most 2 fraction digits (e.g. 10.05)"


class InvalidAmountError(ValueError):
    """Raised when an amount string cannot be converted to cents"""
    pass


def to_cents(value) -> int:
    """
    Convert a decimal amount string to integer cents

    "10.05" -> 1005, "10.5" -> 1050, "100" -> 10000

    Args:
        value: Amount as typed by the user (str, or anything with a str form)

    Returns:
        Amount in cents

    Raises:
        InvalidAmountError: If the value is not digits with at most 2 fraction digits
    """
    text = "" if value is None or isinstance(value, bool) else str(value).strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        raise InvalidAmountError(AMOUNT_FORMAT_MESSAGE)

    units, _, fraction = text.partition(".")
    fraction = (fraction + "00")[:2]
    return int(units) * 100 + int(fraction)


def cents_to_decimal(cents: int) -> Decimal:
    """Exact Decimal amount, used where a numeric cell is required."""
    return Decimal(cents or 0) / 100


def cents_to_amount(cents: int) -> str:
    """
    Shortest decimal string for an amount, suitable for form inputs

    1230 -> "12.3", 1200 -> "12", 1205 -> "12.05"
    """
    units, remainder = divmod(cents or 0, 100)
    if not remainder:
        return str(units)
    return f"{units}.{remainder:02d}".rstrip("0")


def format_cents(cents: int, symbol: str = "$") -> str:
    """
    Currency string with grouping and 0-2 fraction digits

    123456 -> "$1,234.56", 1230 -> "$12.3", 1200 -> "$12"
    """
    cents = cents or 0
    sign = "-" if cents < 0 else ""
    units, remainder = divmod(abs(cents), 100)
    text = f"{sign}{symbol}{units:,}"
    if remainder:
        text += "." + f"{remainder:02d}".rstrip("0")
    return text

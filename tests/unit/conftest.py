import datetime as dt

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.invoice import Invoice, InvoiceStatus


@pytest.fixture
def mock_uow():
    """Mock Unit of Work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    return MagicMock()


@pytest.fixture
def make_invoice():
    """Factory for Invoice entities with sensible defaults"""

    def _make(**overrides):
        data = {
            "id": "inv-1",
            "invoice_no": "INV-001",
            "date": dt.date(2026, 1, 15),
            "customer_name": "Acme Store",
            "total_cents": 1230,
            "status": InvoiceStatus.UNPAID,
            "paid_at": None,
            "note": None,
            "created_at": dt.datetime(2026, 1, 15, 8, 0, 0),
            "updated_at": dt.datetime(2026, 1, 15, 8, 0, 0),
        }
        data.update(overrides)
        return Invoice(**data)

    return _make

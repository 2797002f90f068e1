"""Client for the Nota API

Holds presentation state only; every piece of data is re-fetched from
the API after a mutation.
"""
from .session import ClientSession
from .api import NotaApiClient, ApiError, SessionExpired, ExportedFile
from .dashboard import Dashboard, Notification
from .checker import InvoiceChecker
from .app import ClientApp, View

__all__ = [
    "ClientSession",
    "NotaApiClient",
    "ApiError",
    "SessionExpired",
    "ExportedFile",
    "Dashboard",
    "Notification",
    "InvoiceChecker",
    "ClientApp",
    "View",
]

from .unit_of_work import UnitOfWork
from .password_hasher import PasswordHasher
from .token_service import TokenService, TokenClaims, IssuedToken, InvalidTokenError
from .pdf_service import PdfService
from .spreadsheet_service import SpreadsheetService

__all__ = [
    "UnitOfWork",
    "PasswordHasher",
    "TokenService",
    "TokenClaims",
    "IssuedToken",
    "InvalidTokenError",
    "PdfService",
    "SpreadsheetService",
]

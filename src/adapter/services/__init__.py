from .unit_of_work import SqlAlchemyUnitOfWork
from .password_hasher import BcryptPasswordHasher
from .token_service import JwtTokenService
from .pdf_service import ReportLabPdfService
from .spreadsheet_service import OpenpyxlSpreadsheetService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "BcryptPasswordHasher",
    "JwtTokenService",
    "ReportLabPdfService",
    "OpenpyxlSpreadsheetService",
]

"""Error codes shared by use cases and the API layer"""

from libs.result import Error


class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
    INVOICE_ALREADY_EXISTS = "INVOICE_ALREADY_EXISTS"


def validation_error(message: str) -> Error:
    return Error(code=ErrorCode.VALIDATION_ERROR, message=message, reason="Invalid input")


def invoice_not_found(reference: str) -> Error:
    return Error(
        code=ErrorCode.INVOICE_NOT_FOUND,
        message="Invoice not found",
        reason=f"No invoice matches {reference}",
    )

"""Invoice API Routes

FastAPI routes for invoice listing, totals, public check and mutations.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import CreateInvoiceRequestSchema, UpdateInvoiceRequestSchema
from src.app.services.token_service import TokenClaims
from src.app.use_cases.invoices import (
    ListInvoices,
    GetInvoiceStats,
    CheckInvoice,
    CreateInvoice,
    UpdateInvoice,
    DeleteInvoice,
    InvoiceDTO,
    InvoicePageDTO,
    InvoiceStatsDTO,
    InvoiceQueryDTO,
    DeleteInvoiceResponseDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
)
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_current_admin
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice not found"
                }
            }
        }
    }
}


@router.get(
    "",
    response_model=InvoicePageDTO,
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    sort: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_session),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    List invoices with search, status filter, sort and pagination.

    **Query parameters:**
    - `search`: substring of invoiceNo or customerName
    - `status`: PAID, UNPAID or ALL (unknown values are ignored)
    - `sort`: invoiceNo_asc (default) or invoiceNo_desc
    - `page`: 1-based page (default 1)
    - `limit`: page size, 1-100 (default 10)
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        InvoiceQueryDTO(search=search, status=status_filter, sort=sort, page=page, limit=limit)
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/stats",
    response_model=InvoiceStatsDTO,
    status_code=status.HTTP_200_OK,
)
async def get_invoice_stats(
    session: AsyncSession = Depends(get_session),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    Paid, unpaid and grand totals in cents over all invoices.
    """
    use_case = GetInvoiceStats(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/check",
    response_model=InvoiceDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def check_invoice(
    invoice_no: Optional[str] = Query(None, alias="invoiceNo"),
    session: AsyncSession = Depends(get_session),
):
    """
    Public invoice verification by invoice number (no token required).

    **Returns:**
    - 200: Invoice found
    - 400: invoiceNo missing
    - 404: No invoice with this number
    """
    use_case = CheckInvoice(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(invoice_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceDTO,
    status_code=status.HTTP_200_OK,
    responses={
        409: {
            "description": "Invoice number already used",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_ALREADY_EXISTS",
                            "message": "Invoice number INV-2026-0001 is already in use"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    Create an invoice. It starts as UNPAID.

    **Returns:**
    - 200: Invoice created
    - 400: Missing field, invalid date or invalid total
    - 409: invoiceNo already exists
    """
    command = CreateInvoiceCommandDTO(
        invoice_no=request.invoice_no,
        date=request.date,
        customer_name=request.customer_name,
        total=request.total,
        note=request.note,
    )

    use_case = CreateInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch(
    "/{invoice_id}",
    response_model=InvoiceDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    Partially update an invoice.

    Setting `status` to PAID stamps paidAt with the current time; UNPAID
    clears it.

    **Returns:**
    - 200: Invoice updated
    - 400: Invalid field or nothing to update
    - 404: Invoice not found
    """
    command = UpdateInvoiceCommandDTO(
        status=request.status,
        note=request.note,
        customer_name=request.customer_name,
        date=request.date,
        total=request.total,
    )

    use_case = UpdateInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(invoice_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=DeleteInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def delete_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    Permanently delete an invoice.
    """
    use_case = DeleteInvoice(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value

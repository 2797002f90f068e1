"""Export API Routes

Download the filtered invoice set as XLSX or PDF.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.token_service import TokenClaims
from src.app.use_cases.invoices import ExportInvoices, ExportFormat, InvoiceQueryDTO
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.spreadsheet_service import OpenpyxlSpreadsheetService
from src.depends import get_session, get_current_admin, get_config
from src.api.error import ClientError

router = APIRouter(prefix="/exports", tags=["Exports"])


async def _export(
    export_format: ExportFormat,
    query: InvoiceQueryDTO,
    session: AsyncSession,
    config,
) -> Response:
    use_case = ExportInvoices(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        spreadsheet_service=OpenpyxlSpreadsheetService(currency_symbol=config.CURRENCY_SYMBOL),
        pdf_service=ReportLabPdfService(currency_symbol=config.CURRENCY_SYMBOL),
        max_rows=config.EXPORT_MAX_ROWS,
    )
    result = await use_case.execute(query, export_format)

    if result.is_err():
        raise ClientError(result.error)

    document = result.value
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={
            "Content-Disposition": f"attachment; filename={document.filename}"
        }
    )


@router.get(
    "/excel",
    responses={
        200: {
            "content": {"application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": {}},
            "description": "XLSX workbook"
        }
    }
)
async def export_excel(
    search: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    Download every invoice matching search/status as invoices.xlsx, in sort order.
    """
    query = InvoiceQueryDTO(search=search, status=status, sort=sort)
    return await _export(ExportFormat.EXCEL, query, session, config)


@router.get(
    "/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        }
    }
)
async def export_pdf(
    search: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
    admin: TokenClaims = Depends(get_current_admin),
):
    """
    Download every invoice matching search/status as invoices.pdf, with a
    paid / unpaid / grand total summary.
    """
    query = InvoiceQueryDTO(search=search, status=status, sort=sort)
    return await _export(ExportFormat.PDF, query, session, config)

"""CreateInvoice Use Case

Creates an UNPAID invoice from form input.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import ErrorCode, validation_error
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.money import to_cents, InvalidAmountError
from .dtos import CreateInvoiceCommandDTO, InvoiceDTO
from .inputs import clean_text, length_error, parse_date

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice

    Business Rules:
    1. invoiceNo, date, customerName and total are required
    2. total is a decimal string with at most 2 fraction digits, stored as cents
    3. Invoice starts as UNPAID with no paid_at
    4. invoiceNo must be unique; the store's unique constraint decides

    Flow:
    1. Validate required fields, date and total
    2. Insert invoice
    3. Commit transaction (duplicate -> INVOICE_ALREADY_EXISTS)
    4. Return created invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with the raw form values

        Returns:
            Result[InvoiceDTO]: Created invoice or error
        """
        # Step 1: Validate input
        invoice_no = clean_text(command.invoice_no)
        customer_name = clean_text(command.customer_name)
        total = clean_text(command.total)

        if not invoice_no or not clean_text(command.date) or not customer_name or not total:
            return Return.err(
                validation_error("invoiceNo, date, customerName and total are required")
            )

        too_long = length_error(invoice_no, customer_name)
        if too_long:
            return Return.err(validation_error(too_long))

        try:
            invoice_date = parse_date(command.date)
        except ValueError as e:
            return Return.err(validation_error(str(e)))

        try:
            total_cents = to_cents(total)
        except InvalidAmountError as e:
            return Return.err(validation_error(str(e)))

        note = command.note if command.note and command.note.strip() else None

        # Step 2: Insert and commit
        try:
            invoice = Invoice(
                invoice_no=invoice_no,
                date=invoice_date,
                customer_name=customer_name,
                total_cents=total_cents,
                status=InvoiceStatus.UNPAID,
                paid_at=None,
                note=note,
            )

            created_invoice = await self.invoice_repo.create(invoice)
            await self.uow.commit()

            logger.info(f"Created invoice {created_invoice.invoice_no} ({created_invoice.id})")

            return Return.ok(InvoiceDTO.model_validate(created_invoice))

        except IntegrityError as e:
            await self.uow.rollback()
            logger.warning(f"Duplicate invoice number rejected: {invoice_no}")
            return Return.err(
                Error(
                    code=ErrorCode.INVOICE_ALREADY_EXISTS,
                    message=f"Invoice number {invoice_no} is already in use",
                    reason=str(e.orig) if e.orig else str(e),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

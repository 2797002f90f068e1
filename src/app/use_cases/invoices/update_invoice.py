"""UpdateInvoice Use Case

Partial update of an invoice: status, note, customer name, date, total.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import validation_error, invoice_not_found
from src.domain.base import utcnow
from src.domain.invoice import InvoiceStatus
from src.domain.money import to_cents, InvalidAmountError
from .dtos import UpdateInvoiceCommandDTO, InvoiceDTO
from .inputs import clean_text, length_error, parse_date

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Patch an invoice

    Business Rules:
    1. Only status, note, customerName, date and total can change
    2. status must be PAID or UNPAID; PAID stamps paid_at with the current
       time, UNPAID clears it. paid_at is never taken from the caller
    3. A blank note clears the note
    4. customerName cannot be blank and is stored trimmed
    5. total goes through the same decimal-to-cents conversion as create
    6. A patch with no recognized field is rejected
    7. Unknown invoice -> INVOICE_NOT_FOUND

    All fields are validated before anything is written, so a rejected
    patch leaves the invoice untouched.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo

    def _collect_changes(self, command: UpdateInvoiceCommandDTO) -> Result[dict]:
        changes = {}

        if command.status is not None:
            if command.status not in (InvoiceStatus.PAID.value, InvoiceStatus.UNPAID.value):
                return Return.err(validation_error("status must be PAID or UNPAID"))
            changes["status"] = InvoiceStatus(command.status)

        if command.note is not None:
            changes["note"] = command.note if command.note.strip() else None

        if command.customer_name is not None:
            customer_name = clean_text(command.customer_name)
            if not customer_name:
                return Return.err(validation_error("customerName cannot be empty"))
            too_long = length_error(customer_name=customer_name)
            if too_long:
                return Return.err(validation_error(too_long))
            changes["customer_name"] = customer_name

        if command.date is not None:
            try:
                changes["date"] = parse_date(command.date)
            except ValueError:
                return Return.err(validation_error("date is not valid"))

        if command.total is not None:
            try:
                changes["total_cents"] = to_cents(command.total)
            except InvalidAmountError as e:
                return Return.err(validation_error(str(e)))

        if not changes:
            return Return.err(validation_error("Nothing to update"))

        return Return.ok(changes)

    async def execute(self, invoice_id: str, command: UpdateInvoiceCommandDTO) -> Result[InvoiceDTO]:
        """
        Execute partial update

        Args:
            invoice_id: Invoice ID
            command: Fields to change (None = untouched)

        Returns:
            Result[InvoiceDTO]: Updated invoice or error
        """
        collected = self._collect_changes(command)
        if collected.is_err():
            return collected
        changes = collected.value

        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(f"id {invoice_id}"))

            status = changes.pop("status", None)
            if status is not None:
                invoice.apply_status(status, now=utcnow())

            for field, value in changes.items():
                setattr(invoice, field, value)

            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()

            logger.info(f"Updated invoice {updated_invoice.invoice_no} ({updated_invoice.id})")

            return Return.ok(InvoiceDTO.model_validate(updated_invoice))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )

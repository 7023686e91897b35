"""
Invoices and payments.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from detailpro.models import Invoice, Job, JobService, Payment
from detailpro.schemas import InvoiceCreate, InvoiceUpdate, PaymentCreate
from detailpro.store import effects
from detailpro.store.errors import MissingReferenceError
from detailpro.store.repository import Repository
from detailpro.store.result import Lookup

logger = logging.getLogger(__name__)


class InvoiceRepository(Repository[Invoice]):
    """Invoices; a job has at most one (``invoices.job_id`` is unique)."""

    model = Invoice
    create_schema = InvoiceCreate
    update_schema = InvoiceUpdate
    entity_name = "Invoice"

    def _after_create(self, db, record, payload):
        effects.apply_invoice_created(db, record)

    def _after_update(self, db, record, previous, changes):
        if changes.get("paid") and not previous["paid"]:
            effects.apply_invoice_paid(db, record)

    def get_by_number(self, invoice_number: str) -> Lookup[Invoice]:
        with self.session() as db:
            invoice = db.scalars(
                select(Invoice).where(Invoice.invoice_number == invoice_number)
            ).first()
        return self._lookup(invoice, invoice_number)

    def get_for_job(self, job_id: int) -> Lookup[Invoice]:
        with self.session() as db:
            invoice = db.scalars(select(Invoice).where(Invoice.job_id == job_id)).first()
        return self._lookup(invoice, job_id)

    def list(self, customer_id: Optional[int] = None,
             paid: Optional[bool] = None) -> List[Invoice]:
        query = select(Invoice).order_by(Invoice.id)
        if customer_id is not None:
            query = query.join(Job, Job.id == Invoice.job_id).where(Job.customer_id == customer_id)
        if paid is not None:
            query = query.where(Invoice.paid == paid)
        with self.session() as db:
            return list(db.scalars(query).all())

    def _next_invoice_number(self, db: Session) -> str:
        prefix = self.settings.invoice_number_prefix
        taken = set(db.scalars(
            select(Invoice.invoice_number).where(Invoice.invoice_number.startswith(prefix))
        ).all())
        sequence = self.settings.invoice_number_start + len(taken)
        while f"{prefix}{sequence}" in taken:
            sequence += 1
        return f"{prefix}{sequence}"

    def generate_for_job(self, job_id: int,
                         tax_rate: Optional[float] = None,
                         discount_amount: float = 0.0,
                         invoice_number: Optional[str] = None,
                         notes: Optional[str] = None) -> Invoice:
        """
        Build an invoice from the job's line items.

        subtotal = sum(price * quantity); tax = subtotal * tax_rate
        (configured default when omitted); total = subtotal + tax - discount.
        Amounts are rounded to cents.
        """
        rate = self.settings.default_tax_rate if tax_rate is None else tax_rate

        with self.transaction() as db:
            job = db.get(Job, job_id)
            if job is None:
                raise MissingReferenceError("Job", job_id)

            lines = db.scalars(select(JobService).where(JobService.job_id == job_id)).all()
            subtotal = round(sum(line.price * line.quantity for line in lines), 2)
            tax_amount = round(subtotal * rate, 2)
            total = round(subtotal + tax_amount - discount_amount, 2)
            issued = datetime.now()

            payload = InvoiceCreate(
                job_id=job_id,
                invoice_number=invoice_number or self._next_invoice_number(db),
                issue_date=issued,
                due_date=issued + timedelta(days=self.settings.invoice_due_days),
                subtotal=subtotal,
                tax_rate=rate,
                tax_amount=tax_amount,
                discount_amount=discount_amount,
                total=total,
                notes=notes,
            )
            invoice = self._insert(db, payload)
            effects.apply_invoice_created(db, invoice)

        logger.info("Generated invoice %s for job %s: total %.2f",
                    invoice.invoice_number, job_id, invoice.total)
        return invoice


class PaymentRepository(Repository[Payment]):
    """Payments are immutable; recording one may settle its invoice."""

    model = Payment
    create_schema = PaymentCreate
    entity_name = "Payment"

    def _after_create(self, db, record, payload):
        effects.apply_payment(db, record)

    def list(self, invoice_id: Optional[int] = None) -> List[Payment]:
        query = select(Payment).order_by(Payment.date, Payment.id)
        if invoice_id is not None:
            query = query.where(Payment.invoice_id == invoice_id)
        with self.session() as db:
            return list(db.scalars(query).all())

    def delete(self, record_id: int) -> bool:
        raise TypeError("Payments cannot be deleted")

"""
Invoice and payment routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.schemas.customer import Customer as CustomerSchema
from detailpro.schemas.invoice import (
    Invoice as InvoiceSchema, InvoiceCreate, InvoiceDetail, InvoiceUpdate,
    Payment as PaymentSchema, PaymentCreate,
)
from detailpro.schemas.job import Job as JobSchema
from detailpro.store import Found, Store

router = APIRouter(prefix="/invoices", tags=["invoices"])
payments_router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("/", response_model=List[InvoiceSchema])
async def get_invoices(
    customer_id: Optional[int] = None,
    paid: Optional[bool] = None,
    store: Store = Depends(get_store)
):
    """
    Get invoices, optionally for one customer or by paid state.
    """
    return store.invoices.list(customer_id=customer_id, paid=paid)


@router.get("/number/{invoice_number}", response_model=InvoiceSchema)
async def get_invoice_by_number(invoice_number: str, store: Store = Depends(get_store)):
    """
    Look an invoice up by its invoice number.
    """
    return found_or_404(store.invoices.get_by_number(invoice_number))


@router.get("/{invoice_id}", response_model=InvoiceDetail)
async def get_invoice(invoice_id: int, store: Store = Depends(get_store)):
    """
    Get an invoice with its job, customer and payments.
    """
    invoice = found_or_404(store.invoices.get(invoice_id))
    job = store.jobs.get(invoice.job_id)
    customer = store.customers.get(job.value.customer_id) if isinstance(job, Found) else None

    return InvoiceDetail(
        **InvoiceSchema.model_validate(invoice).model_dump(),
        job=JobSchema.model_validate(job.value) if job else None,
        customer=CustomerSchema.model_validate(customer.value) if customer else None,
        payments=[PaymentSchema.model_validate(p) for p in store.payments.list(invoice_id=invoice.id)],
    )


@router.post("/", response_model=InvoiceSchema, status_code=status.HTTP_201_CREATED)
async def create_invoice(invoice: InvoiceCreate, store: Store = Depends(get_store)):
    """
    Create an invoice with explicit amounts.
    """
    found_or_404(store.jobs.get(invoice.job_id))
    return store.invoices.create(invoice)


@router.put("/{invoice_id}", response_model=InvoiceSchema)
async def update_invoice(
    invoice_id: int,
    invoice_update: InvoiceUpdate,
    store: Store = Depends(get_store)
):
    """
    Update an invoice.
    """
    return found_or_404(store.invoices.update(invoice_id, invoice_update))


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(invoice_id: int, store: Store = Depends(get_store)):
    """
    Delete an invoice.
    """
    if not store.invoices.delete(invoice_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found"
        )


@router.get("/{invoice_id}/payments", response_model=List[PaymentSchema])
async def get_invoice_payments(invoice_id: int, store: Store = Depends(get_store)):
    """
    Get the payments recorded against an invoice.
    """
    found_or_404(store.invoices.get(invoice_id))
    return store.payments.list(invoice_id=invoice_id)


@payments_router.get("/", response_model=List[PaymentSchema])
async def get_payments(
    invoice_id: Optional[int] = None,
    store: Store = Depends(get_store)
):
    """
    Get all payments, optionally for one invoice.
    """
    return store.payments.list(invoice_id=invoice_id)


@payments_router.get("/{payment_id}", response_model=PaymentSchema)
async def get_payment(payment_id: int, store: Store = Depends(get_store)):
    """
    Get a specific payment by ID.
    """
    return found_or_404(store.payments.get(payment_id))


@payments_router.post("/", response_model=PaymentSchema, status_code=status.HTTP_201_CREATED)
async def create_payment(payment: PaymentCreate, store: Store = Depends(get_store)):
    """
    Record a payment. The invoice is marked paid once its payments cover the total.
    """
    return store.payments.create(payment)

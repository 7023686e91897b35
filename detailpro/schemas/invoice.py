"""
Pydantic schemas for Invoice and Payment.
"""
from pydantic import BaseModel, ConfigDict, Field
from detailpro.schemas.base import UpdateSchema
from datetime import datetime
from typing import List, Optional
from detailpro.schemas.customer import Customer
from detailpro.schemas.job import Job


class InvoiceBase(BaseModel):
    """Base invoice schema with common fields."""
    job_id: int
    invoice_number: str
    issue_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    subtotal: float
    tax_rate: float = 0.0
    tax_amount: float
    discount_amount: float = 0.0
    total: float
    paid: bool = False
    paid_date: Optional[datetime] = None
    paid_amount: Optional[float] = None
    notes: Optional[str] = None


class InvoiceCreate(InvoiceBase):
    """Schema for creating an invoice."""
    pass


class InvoiceUpdate(UpdateSchema):
    """Schema for updating an invoice. Job and number are fixed."""
    required_fields = ("subtotal", "tax_rate", "tax_amount", "discount_amount", "total", "paid")

    due_date: Optional[datetime] = None
    subtotal: Optional[float] = None
    tax_rate: Optional[float] = None
    tax_amount: Optional[float] = None
    discount_amount: Optional[float] = None
    total: Optional[float] = None
    paid: Optional[bool] = None
    paid_date: Optional[datetime] = None
    paid_amount: Optional[float] = None
    notes: Optional[str] = None


class Invoice(InvoiceBase):
    """Schema for invoice responses."""
    id: int
    issue_date: datetime

    model_config = ConfigDict(from_attributes=True)


class InvoiceGenerate(BaseModel):
    """Options for building an invoice from a job's line items."""
    tax_rate: Optional[float] = Field(None, ge=0)
    discount_amount: float = Field(0.0, ge=0)
    invoice_number: Optional[str] = None
    notes: Optional[str] = None


class PaymentBase(BaseModel):
    """Base payment schema with common fields."""
    invoice_id: int
    amount: float = Field(..., gt=0)
    method: str
    transaction_id: Optional[str] = None
    date: Optional[datetime] = None
    notes: Optional[str] = None


class PaymentCreate(PaymentBase):
    """Schema for recording a payment."""
    pass


class Payment(PaymentBase):
    """Schema for payment responses."""
    id: int
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class InvoiceDetail(Invoice):
    """Invoice enriched with its job, customer and payments."""
    job: Optional[Job] = None
    customer: Optional[Customer] = None
    payments: List[Payment] = []

"""
Invoice and payment models for database.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey
from detailpro.database import Base


class Invoice(Base):
    """Invoice database model."""

    __tablename__ = "invoices"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    invoice_number = Column(String, unique=True, nullable=False, index=True)
    issue_date = Column(DateTime, default=datetime.now, nullable=False)
    due_date = Column(DateTime, nullable=True)
    subtotal = Column(Float, nullable=False)
    tax_rate = Column(Float, default=0.0, nullable=False)
    tax_amount = Column(Float, nullable=False)
    discount_amount = Column(Float, default=0.0, nullable=False)
    total = Column(Float, nullable=False)
    paid = Column(Boolean, default=False, nullable=False)
    paid_date = Column(DateTime, nullable=True)
    paid_amount = Column(Float, nullable=True)
    notes = Column(String, nullable=True)


class Payment(Base):
    """Payment database model. Rows are never updated."""

    __tablename__ = "payments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    method = Column(String, nullable=False)  # credit_card, cash, check
    transaction_id = Column(String, nullable=True)
    date = Column(DateTime, default=datetime.now, nullable=False)
    notes = Column(String, nullable=True)

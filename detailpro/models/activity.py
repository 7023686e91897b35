"""
Activity feed and review models for database.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON
from detailpro.database import Base


class Activity(Base):
    """Append-only audit entry driving the recent activity feed."""

    __tablename__ = "activities"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=True)
    description = Column(String, nullable=False)
    timestamp = Column(DateTime, default=datetime.now, nullable=False, index=True)
    # "metadata" is reserved on declarative classes
    details = Column("metadata", JSON, nullable=True)


class Review(Base):
    """Customer review database model."""

    __tablename__ = "reviews"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=True)
    rating = Column(Integer, nullable=False)  # 1-5 stars
    comment = Column(String, nullable=True)
    date = Column(DateTime, default=datetime.now, nullable=False)
    source = Column(String, nullable=True)  # google, yelp, internal
    responded = Column(Boolean, default=False, nullable=False)
    response_text = Column(String, nullable=True)
    response_date = Column(DateTime, nullable=True)

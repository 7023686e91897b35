"""
Membership plan and customer subscription models for database.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, JSON
from detailpro.database import Base
import enum


class SubscriptionStatus(str, enum.Enum):
    """Subscription status enumeration."""
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"


class BillingCycle(str, enum.Enum):
    """Billing cycle enumeration."""
    MONTHLY = "monthly"
    ANNUAL = "annual"


class MembershipPlan(Base):
    """Membership plan catalog entry."""

    __tablename__ = "membership_plans"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    monthly_price = Column(Float, nullable=False)
    annual_price = Column(Float, nullable=True)
    features = Column(JSON, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)


class CustomerSubscription(Base):
    """A customer's subscription to a membership plan."""

    __tablename__ = "customer_subscriptions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey("membership_plans.id"), nullable=False, index=True)
    status = Column(String, default=SubscriptionStatus.ACTIVE.value, nullable=False, index=True)
    billing_cycle = Column(String, default=BillingCycle.MONTHLY.value, nullable=False)
    start_date = Column(DateTime, default=datetime.now, nullable=False)
    canceled_at = Column(DateTime, nullable=True)
    stripe_customer_id = Column(String, nullable=True)
    stripe_subscription_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

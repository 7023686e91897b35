"""
Pydantic schemas for membership plans and customer subscriptions.
"""
from pydantic import BaseModel, ConfigDict, Field
from detailpro.schemas.base import UpdateSchema
from datetime import datetime
from typing import List, Optional
from detailpro.models.membership import BillingCycle, SubscriptionStatus


class MembershipPlanBase(BaseModel):
    """Base plan schema with common fields."""
    name: str
    description: Optional[str] = None
    monthly_price: float = Field(..., ge=0)
    annual_price: Optional[float] = Field(None, ge=0)
    features: List[str] = []
    active: bool = True


class MembershipPlanCreate(MembershipPlanBase):
    """Schema for creating a plan."""
    pass


class MembershipPlanUpdate(UpdateSchema):
    """Schema for updating a plan."""
    required_fields = ("name", "monthly_price", "active")

    name: Optional[str] = None
    description: Optional[str] = None
    monthly_price: Optional[float] = Field(None, ge=0)
    annual_price: Optional[float] = Field(None, ge=0)
    features: Optional[List[str]] = None
    active: Optional[bool] = None


class MembershipPlan(MembershipPlanBase):
    """Schema for plan responses."""
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubscriptionCreate(BaseModel):
    """Schema for subscribing a customer to a plan."""
    customer_id: int
    plan_id: int
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    start_date: Optional[datetime] = None
    stripe_customer_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None


class Subscription(SubscriptionCreate):
    """Schema for subscription responses."""
    id: int
    status: SubscriptionStatus
    start_date: datetime
    canceled_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

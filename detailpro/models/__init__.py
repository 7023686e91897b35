"""
SQLAlchemy database models.
"""
from detailpro.models.user import User, UserRole
from detailpro.models.customer import Customer, Vehicle
from detailpro.models.service import Service
from detailpro.models.job import Job, JobService, JobStatus
from detailpro.models.invoice import Invoice, Payment
from detailpro.models.activity import Activity, Review
from detailpro.models.membership import (
    MembershipPlan, CustomerSubscription, SubscriptionStatus, BillingCycle,
)
from detailpro.models.inventory import InventoryItem, InventoryTransaction, TransactionType

__all__ = [
    "User", "UserRole",
    "Customer", "Vehicle",
    "Service",
    "Job", "JobService", "JobStatus",
    "Invoice", "Payment",
    "Activity", "Review",
    "MembershipPlan", "CustomerSubscription", "SubscriptionStatus", "BillingCycle",
    "InventoryItem", "InventoryTransaction", "TransactionType",
]

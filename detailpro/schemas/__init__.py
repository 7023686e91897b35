"""
Pydantic schemas for request/response validation.
"""
from detailpro.schemas.base import UpdateSchema
from detailpro.schemas.user import UserBase, UserCreate, UserUpdate, User, UserSummary
from detailpro.schemas.customer import (
    CustomerBase, CustomerCreate, CustomerUpdate, Customer, CustomerPage,
    VehicleBase, VehicleCreate, VehicleUpdate, Vehicle,
)
from detailpro.schemas.service import ServiceBase, ServiceCreate, ServiceUpdate, Service
from detailpro.schemas.job import (
    JobBase, JobCreate, JobUpdate, Job, JobDetail, JobCreateRequest, JobUpdateRequest,
    JobServiceLine, JobServiceCreate, JobServiceUpdate, JobService, JobServiceDetail,
)
from detailpro.schemas.invoice import (
    InvoiceBase, InvoiceCreate, InvoiceUpdate, Invoice, InvoiceDetail, InvoiceGenerate,
    PaymentBase, PaymentCreate, Payment,
)
from detailpro.schemas.activity import (
    ActivityCreate, Activity, ReviewBase, ReviewCreate, ReviewUpdate, Review,
)
from detailpro.schemas.membership import (
    MembershipPlanBase, MembershipPlanCreate, MembershipPlanUpdate, MembershipPlan,
    SubscriptionCreate, Subscription,
)
from detailpro.schemas.inventory import (
    InventoryItemBase, InventoryItemCreate, InventoryItemUpdate, InventoryItem,
    InventoryTransactionCreate, InventoryTransaction,
)
from detailpro.schemas.report import RevenueStats, TopService, TechnicianHolding

__all__ = [
    "UserBase", "UserCreate", "UserUpdate", "User", "UserSummary",
    "CustomerBase", "CustomerCreate", "CustomerUpdate", "Customer", "CustomerPage",
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "Vehicle",
    "ServiceBase", "ServiceCreate", "ServiceUpdate", "Service",
    "JobBase", "JobCreate", "JobUpdate", "Job", "JobDetail", "JobCreateRequest", "JobUpdateRequest",
    "JobServiceLine", "JobServiceCreate", "JobServiceUpdate", "JobService", "JobServiceDetail",
    "InvoiceBase", "InvoiceCreate", "InvoiceUpdate", "Invoice", "InvoiceDetail", "InvoiceGenerate",
    "PaymentBase", "PaymentCreate", "Payment",
    "ActivityCreate", "Activity", "ReviewBase", "ReviewCreate", "ReviewUpdate", "Review",
    "MembershipPlanBase", "MembershipPlanCreate", "MembershipPlanUpdate", "MembershipPlan",
    "SubscriptionCreate", "Subscription",
    "InventoryItemBase", "InventoryItemCreate", "InventoryItemUpdate", "InventoryItem",
    "InventoryTransactionCreate", "InventoryTransaction",
    "RevenueStats", "TopService", "TechnicianHolding",
]

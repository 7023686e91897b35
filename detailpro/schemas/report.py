"""
Pydantic schemas for reporting aggregates.
"""
from pydantic import BaseModel


class RevenueStats(BaseModel):
    """Revenue summary over a date window."""
    total_revenue: float
    jobs_completed: int
    new_customers: int
    avg_job_value: float


class TopService(BaseModel):
    """Revenue generated by one service over a date window."""
    service_id: int
    service_name: str
    revenue: float
    count: int


class TechnicianHolding(BaseModel):
    """Units of an item a technician has checked out and not returned."""
    inventory_item_id: int
    item_name: str
    sku: str
    quantity: int

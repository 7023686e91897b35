"""
Pydantic schemas for Job and JobService.
"""
from pydantic import BaseModel, ConfigDict, Field
from detailpro.schemas.base import UpdateSchema
from datetime import datetime
from typing import List, Optional
from detailpro.models.job import JobStatus
from detailpro.schemas.customer import Customer, Vehicle
from detailpro.schemas.user import UserSummary


class JobBase(BaseModel):
    """Base job schema with common fields."""
    customer_id: int
    vehicle_id: int
    technician_id: Optional[int] = None
    scheduled_start_time: datetime
    scheduled_end_time: datetime
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    status: JobStatus = JobStatus.SCHEDULED
    notes: Optional[str] = None


class JobCreate(JobBase):
    """Schema for creating a job."""
    pass


class JobUpdate(UpdateSchema):
    """Schema for updating a job. The customer of a job is fixed."""
    required_fields = ("vehicle_id", "scheduled_start_time", "scheduled_end_time", "status")

    vehicle_id: Optional[int] = None
    technician_id: Optional[int] = None
    scheduled_start_time: Optional[datetime] = None
    scheduled_end_time: Optional[datetime] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    status: Optional[JobStatus] = None
    notes: Optional[str] = None
    actual_start_time: Optional[datetime] = None
    actual_end_time: Optional[datetime] = None


class Job(JobBase):
    """Schema for job responses."""
    id: int
    actual_start_time: Optional[datetime] = None
    actual_end_time: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobServiceLine(BaseModel):
    """A requested service on a job; the price is taken from the catalog."""
    service_id: int
    quantity: int = Field(1, gt=0)


class JobServiceCreate(BaseModel):
    """Schema for creating a job line item directly."""
    job_id: int
    service_id: int
    quantity: int = Field(1, gt=0)
    price: float = Field(..., ge=0)


class JobServiceUpdate(UpdateSchema):
    """Schema for updating a job line item."""
    required_fields = ("quantity", "price")

    quantity: Optional[int] = Field(None, gt=0)
    price: Optional[float] = Field(None, ge=0)


class JobService(JobServiceCreate):
    """Schema for job line item responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class JobServiceDetail(JobService):
    """Line item with the catalog name resolved."""
    service_name: str


class JobCreateRequest(JobCreate):
    """Job creation body accepted by the API, optionally with services."""
    services: Optional[List[JobServiceLine]] = None


class JobUpdateRequest(JobUpdate):
    """Job update body accepted by the API; services replace the line items."""
    services: Optional[List[JobServiceLine]] = None


class JobDetail(Job):
    """Job enriched with its related records."""
    customer: Optional[Customer] = None
    vehicle: Optional[Vehicle] = None
    technician: Optional[UserSummary] = None
    services: List[JobServiceDetail] = []

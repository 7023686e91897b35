"""
Pydantic schemas for the service catalog.
"""
from pydantic import BaseModel, ConfigDict, Field
from detailpro.schemas.base import UpdateSchema
from typing import Optional


class ServiceBase(BaseModel):
    """Base service schema with common fields."""
    name: str
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    duration: int = Field(..., gt=0, description="Duration in minutes")
    active: bool = True
    color: Optional[str] = None


class ServiceCreate(ServiceBase):
    """Schema for creating a service."""
    pass


class ServiceUpdate(UpdateSchema):
    """Schema for updating a service."""
    required_fields = ("name", "price", "duration", "active")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    duration: Optional[int] = Field(None, gt=0)
    active: Optional[bool] = None
    color: Optional[str] = None


class Service(ServiceBase):
    """Schema for service responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)

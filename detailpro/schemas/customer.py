"""
Pydantic schemas for Customer and Vehicle.
"""
from pydantic import BaseModel, EmailStr, ConfigDict
from detailpro.schemas.base import UpdateSchema
from datetime import datetime
from typing import List, Optional


class CustomerBase(BaseModel):
    """Base customer schema with common fields."""
    full_name: str
    email: Optional[EmailStr] = None
    phone_number: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None


class CustomerCreate(CustomerBase):
    """Schema for creating a customer."""
    pass


class CustomerUpdate(UpdateSchema):
    """Schema for updating a customer."""
    required_fields = ("full_name", "phone_number")

    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None


class Customer(CustomerBase):
    """Schema for customer responses."""
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CustomerPage(BaseModel):
    """One page of customers plus the size of the filtered set."""
    customers: List[Customer]
    total: int

    model_config = ConfigDict(from_attributes=True)


class VehicleBase(BaseModel):
    """Base vehicle schema with common fields."""
    customer_id: int
    type: str
    make: str
    model: str
    year: Optional[int] = None
    color: Optional[str] = None
    license_plate: Optional[str] = None
    vin: Optional[str] = None
    notes: Optional[str] = None


class VehicleCreate(VehicleBase):
    """Schema for creating a vehicle."""
    pass


class VehicleUpdate(UpdateSchema):
    """Schema for updating a vehicle. Ownership cannot be reassigned."""
    required_fields = ("type", "make", "model")

    type: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    color: Optional[str] = None
    license_plate: Optional[str] = None
    vin: Optional[str] = None
    notes: Optional[str] = None


class Vehicle(VehicleBase):
    """Schema for vehicle responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)

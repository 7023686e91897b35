"""
Pydantic schemas for Activity and Review.
"""
from pydantic import BaseModel, ConfigDict, Field
from detailpro.schemas.base import UpdateSchema
from datetime import datetime
from typing import Any, Dict, Optional


class ActivityCreate(BaseModel):
    """Schema for appending an activity entry."""
    type: str
    customer_id: Optional[int] = None
    job_id: Optional[int] = None
    invoice_id: Optional[int] = None
    description: str
    timestamp: Optional[datetime] = None
    details: Optional[Dict[str, Any]] = None


class Activity(ActivityCreate):
    """Schema for activity responses."""
    id: int
    timestamp: datetime
    details: Optional[Dict[str, Any]] = Field(None, serialization_alias="metadata")

    model_config = ConfigDict(from_attributes=True)


class ReviewBase(BaseModel):
    """Base review schema with common fields."""
    customer_id: int
    job_id: Optional[int] = None
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    date: Optional[datetime] = None
    source: Optional[str] = None
    responded: bool = False
    response_text: Optional[str] = None
    response_date: Optional[datetime] = None


class ReviewCreate(ReviewBase):
    """Schema for creating a review."""
    pass


class ReviewUpdate(UpdateSchema):
    """Schema for updating a review, typically to record a response."""
    required_fields = ("rating", "responded")

    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None
    source: Optional[str] = None
    responded: Optional[bool] = None
    response_text: Optional[str] = None
    response_date: Optional[datetime] = None


class Review(ReviewBase):
    """Schema for review responses."""
    id: int
    date: datetime

    model_config = ConfigDict(from_attributes=True)

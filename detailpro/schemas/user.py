"""
Pydantic schemas for User.
"""
from pydantic import BaseModel, EmailStr, ConfigDict
from detailpro.schemas.base import UpdateSchema
from typing import Optional
from detailpro.models.user import UserRole


class UserBase(BaseModel):
    """Base user schema with common fields."""
    username: str
    email: EmailStr
    full_name: str
    role: UserRole = UserRole.TECHNICIAN
    phone_number: Optional[str] = None
    avatar_url: Optional[str] = None


class UserCreate(UserBase):
    """Schema for creating a user."""
    password: str


class UserUpdate(UpdateSchema):
    """Schema for updating a user."""
    required_fields = ("email", "full_name", "role", "password")

    email: Optional[EmailStr] = None
    full_name: Optional[str] = None
    role: Optional[UserRole] = None
    password: Optional[str] = None
    phone_number: Optional[str] = None
    avatar_url: Optional[str] = None


class User(UserBase):
    """Schema for user responses. The password never leaves the API."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """Technician reference embedded in job responses."""
    id: int
    full_name: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)

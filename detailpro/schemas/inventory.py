"""
Pydantic schemas for inventory items and transactions.
"""
from pydantic import BaseModel, ConfigDict, Field
from detailpro.schemas.base import UpdateSchema
from datetime import datetime
from typing import Optional
from detailpro.models.inventory import TransactionType


class InventoryItemBase(BaseModel):
    """Base inventory item schema with common fields."""
    name: str
    sku: str
    category: str
    description: Optional[str] = None
    unit_price: float = Field(..., ge=0)
    cost_price: float = Field(..., ge=0)
    min_stock_level: int = Field(0, ge=0)
    supplier: Optional[str] = None
    location: Optional[str] = None
    is_active: bool = True


class InventoryItemCreate(InventoryItemBase):
    """Schema for creating an item with its opening stock."""
    quantity_in_stock: int = Field(0, ge=0)


class InventoryItemUpdate(UpdateSchema):
    """Schema for updating an item. Stock only moves through transactions."""
    required_fields = (
        "name", "sku", "category", "unit_price", "cost_price", "min_stock_level", "is_active",
    )

    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    unit_price: Optional[float] = Field(None, ge=0)
    cost_price: Optional[float] = Field(None, ge=0)
    min_stock_level: Optional[int] = Field(None, ge=0)
    supplier: Optional[str] = None
    location: Optional[str] = None
    is_active: Optional[bool] = None


class InventoryItem(InventoryItemBase):
    """Schema for inventory item responses."""
    id: int
    quantity_in_stock: int
    last_restocked: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InventoryTransactionCreate(BaseModel):
    """Schema for recording a stock movement."""
    inventory_item_id: int
    quantity: int = Field(..., ge=0)
    type: TransactionType
    reason: Optional[str] = None
    notes: Optional[str] = None
    user_id: Optional[int] = None
    job_id: Optional[int] = None
    date: Optional[datetime] = None


class InventoryTransaction(InventoryTransactionCreate):
    """Schema for inventory transaction responses."""
    id: int
    date: datetime

    model_config = ConfigDict(from_attributes=True)

"""
Inventory item and stock ledger models for database.
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey
from detailpro.database import Base
import enum


class TransactionType(str, enum.Enum):
    """Inventory transaction types. ADJUSTMENT sets the stock level outright."""
    IN = "in"
    OUT = "out"
    RETURN = "return"
    ADJUSTMENT = "adjustment"


class InventoryItem(Base):
    """Stocked product or consumable."""

    __tablename__ = "inventory_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    sku = Column(String, unique=True, nullable=False, index=True)
    category = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    unit_price = Column(Float, nullable=False)
    cost_price = Column(Float, nullable=False)
    quantity_in_stock = Column(Integer, default=0, nullable=False)
    min_stock_level = Column(Integer, default=0, nullable=False)
    supplier = Column(String, nullable=True)
    location = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    last_restocked = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)


class InventoryTransaction(Base):
    """Ledger entry; each row moves an item's stock level once."""

    __tablename__ = "inventory_transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    inventory_item_id = Column(Integer, ForeignKey("inventory_items.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    type = Column(String, nullable=False)
    reason = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=True)
    date = Column(DateTime, default=datetime.now, nullable=False)

"""
Inventory catalogue and stock ledger.

Stock levels move only through transactions; each transaction is applied
by ``effects.apply_inventory_transaction`` in the same database
transaction that records it, so a rejected movement leaves no trace.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import exists, select

from detailpro.models import InventoryItem, InventoryTransaction
from detailpro.schemas import (
    InventoryItemCreate, InventoryItemUpdate, InventoryTransactionCreate,
)
from detailpro.store import effects
from detailpro.store.repository import Payload, Repository
from detailpro.store.result import Lookup

logger = logging.getLogger(__name__)


class InventoryItemRepository(Repository[InventoryItem]):
    model = InventoryItem
    create_schema = InventoryItemCreate
    update_schema = InventoryItemUpdate
    entity_name = "Inventory item"

    def _delete(self, db, record):
        """Items with ledger history are deactivated instead of removed."""
        has_history = db.scalar(
            select(exists().where(InventoryTransaction.inventory_item_id == record.id))
        )
        if has_history:
            logger.info("Inventory item %s has transactions; deactivating", record.sku)
            record.is_active = False
            return True
        db.delete(record)
        return True


class InventoryTransactionRepository(Repository[InventoryTransaction]):
    """Immutable ledger entries."""

    model = InventoryTransaction
    create_schema = InventoryTransactionCreate
    entity_name = "Inventory transaction"

    def _create_values(self, payload):
        values = super()._create_values(payload)
        values.setdefault("date", datetime.now())
        return values

    def _after_create(self, db, record, payload):
        effects.apply_inventory_transaction(db, record)

    def delete(self, record_id: int) -> bool:
        raise TypeError("Inventory transactions cannot be deleted")


class InventoryRepository:
    """Items and their transaction ledger behind one facade."""

    def __init__(self, session_factory, settings):
        self.items = InventoryItemRepository(session_factory, settings)
        self.transactions = InventoryTransactionRepository(session_factory, settings)

    # -------------------- items --------------------

    def create_item(self, data: Payload) -> InventoryItem:
        return self.items.create(data)

    def get_item(self, item_id: int) -> Lookup[InventoryItem]:
        return self.items.get(item_id)

    def update_item(self, item_id: int, data: Payload) -> Lookup[InventoryItem]:
        return self.items.update(item_id, data)

    def delete_item(self, item_id: int) -> bool:
        return self.items.delete(item_id)

    def list_items(self, category: Optional[str] = None,
                   active: Optional[bool] = None,
                   low_stock: bool = False) -> List[InventoryItem]:
        query = select(InventoryItem).order_by(InventoryItem.name, InventoryItem.id)
        if category:
            query = query.where(InventoryItem.category == category)
        if active is not None:
            query = query.where(InventoryItem.is_active == active)
        if low_stock:
            query = query.where(InventoryItem.quantity_in_stock <= InventoryItem.min_stock_level)
        with self.items.session() as db:
            return list(db.scalars(query).all())

    # -------------------- transactions --------------------

    def create_transaction(self, data: Payload) -> InventoryTransaction:
        """
        Record a stock movement and apply it to the item.

        Raises ``MissingReferenceError`` for an unknown item and
        ``InsufficientStockError`` when an ``out`` exceeds the stock.
        """
        return self.transactions.create(data)

    def get_transaction(self, transaction_id: int) -> Lookup[InventoryTransaction]:
        return self.transactions.get(transaction_id)

    def list_transactions(self, item_id: Optional[int] = None,
                          user_id: Optional[int] = None,
                          job_id: Optional[int] = None,
                          type: Optional[str] = None) -> List[InventoryTransaction]:
        """Ledger entries, newest first."""
        query = select(InventoryTransaction).order_by(
            InventoryTransaction.date.desc(), InventoryTransaction.id.desc()
        )
        if item_id is not None:
            query = query.where(InventoryTransaction.inventory_item_id == item_id)
        if user_id is not None:
            query = query.where(InventoryTransaction.user_id == user_id)
        if job_id is not None:
            query = query.where(InventoryTransaction.job_id == job_id)
        if type:
            query = query.where(InventoryTransaction.type == type)
        with self.transactions.session() as db:
            return list(db.scalars(query).all())

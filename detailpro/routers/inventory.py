"""
Inventory routes: catalogue, stock ledger and technician holdings.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.models.inventory import TransactionType
from detailpro.schemas.inventory import (
    InventoryItem as ItemSchema, InventoryItemCreate, InventoryItemUpdate,
    InventoryTransaction as TransactionSchema, InventoryTransactionCreate,
)
from detailpro.schemas.report import TechnicianHolding
from detailpro.store import Store

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/", response_model=List[ItemSchema])
async def get_items(
    category: Optional[str] = None,
    active: Optional[bool] = None,
    low_stock: bool = False,
    store: Store = Depends(get_store)
):
    """
    Get inventory items with optional category, active and low-stock filters.
    """
    return store.inventory.list_items(category=category, active=active, low_stock=low_stock)


@router.get("/low-stock", response_model=List[ItemSchema])
async def get_low_stock_items(store: Store = Depends(get_store)):
    """
    Get active items at or below their minimum stock level.
    """
    return store.reports.low_stock_items()


@router.get("/holdings/{technician_id}", response_model=List[TechnicianHolding])
async def get_technician_holdings(technician_id: int, store: Store = Depends(get_store)):
    """
    Get the items a technician has checked out and not yet returned.
    """
    found_or_404(store.users.get(technician_id))
    return store.reports.technician_holdings(technician_id)


@router.get("/transactions", response_model=List[TransactionSchema])
async def get_transactions(
    item_id: Optional[int] = None,
    user_id: Optional[int] = None,
    job_id: Optional[int] = None,
    transaction_type: Optional[TransactionType] = None,
    store: Store = Depends(get_store)
):
    """
    Get stock ledger entries, newest first.
    """
    return store.inventory.list_transactions(
        item_id=item_id,
        user_id=user_id,
        job_id=job_id,
        type=transaction_type.value if transaction_type else None,
    )


@router.get("/transactions/{transaction_id}", response_model=TransactionSchema)
async def get_transaction(transaction_id: int, store: Store = Depends(get_store)):
    """
    Get a specific ledger entry by ID.
    """
    return found_or_404(store.inventory.get_transaction(transaction_id))


@router.post("/transactions", response_model=TransactionSchema, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction: InventoryTransactionCreate,
    store: Store = Depends(get_store)
):
    """
    Record a stock movement. Checking out more than is in stock is rejected.
    """
    return store.inventory.create_transaction(transaction)


@router.get("/{item_id}", response_model=ItemSchema)
async def get_item(item_id: int, store: Store = Depends(get_store)):
    """
    Get a specific inventory item by ID.
    """
    return found_or_404(store.inventory.get_item(item_id))


@router.post("/", response_model=ItemSchema, status_code=status.HTTP_201_CREATED)
async def create_item(item: InventoryItemCreate, store: Store = Depends(get_store)):
    """
    Add an item to the inventory with its opening stock.
    """
    return store.inventory.create_item(item)


@router.put("/{item_id}", response_model=ItemSchema)
async def update_item(
    item_id: int,
    item_update: InventoryItemUpdate,
    store: Store = Depends(get_store)
):
    """
    Update an item's details. Stock changes go through transactions.
    """
    return found_or_404(store.inventory.update_item(item_id, item_update))


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: int, store: Store = Depends(get_store)):
    """
    Delete an item, or deactivate it when it has ledger history.
    """
    if not store.inventory.delete_item(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Inventory item not found"
        )

"""
Customer routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.schemas.activity import Activity as ActivitySchema
from detailpro.schemas.customer import (
    Customer as CustomerSchema, CustomerCreate, CustomerPage, CustomerUpdate,
    Vehicle as VehicleSchema,
)
from detailpro.schemas.membership import Subscription as SubscriptionSchema
from detailpro.store import Store

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=CustomerPage)
async def get_customers(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
    search: Optional[str] = None,
    store: Store = Depends(get_store)
):
    """
    Get one page of customers, optionally filtered by name, email or phone.
    """
    result = store.customers.list(page=page, page_size=page_size, search=search)
    return CustomerPage(
        customers=[CustomerSchema.model_validate(c) for c in result.customers],
        total=result.total,
    )


@router.get("/{customer_id}", response_model=CustomerSchema)
async def get_customer(customer_id: int, store: Store = Depends(get_store)):
    """
    Get a specific customer by ID.
    """
    return found_or_404(store.customers.get(customer_id))


@router.post("/", response_model=CustomerSchema, status_code=status.HTTP_201_CREATED)
async def create_customer(customer: CustomerCreate, store: Store = Depends(get_store)):
    """
    Create a new customer.
    """
    return store.customers.create(customer)


@router.put("/{customer_id}", response_model=CustomerSchema)
async def update_customer(
    customer_id: int,
    customer_update: CustomerUpdate,
    store: Store = Depends(get_store)
):
    """
    Update a customer.
    """
    return found_or_404(store.customers.update(customer_id, customer_update))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, store: Store = Depends(get_store)):
    """
    Delete a customer. Vehicles, jobs and invoices are left in place.
    """
    if not store.customers.delete(customer_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found"
        )


@router.get("/{customer_id}/vehicles", response_model=List[VehicleSchema])
async def get_customer_vehicles(customer_id: int, store: Store = Depends(get_store)):
    """
    Get all vehicles owned by a customer.
    """
    found_or_404(store.customers.get(customer_id))
    return store.vehicles.list(customer_id=customer_id)


@router.get("/{customer_id}/activities", response_model=List[ActivitySchema])
async def get_customer_activities(
    customer_id: int,
    limit: Optional[int] = Query(None, ge=1),
    store: Store = Depends(get_store)
):
    """
    Get the activity history of a customer, newest first.
    """
    found_or_404(store.customers.get(customer_id))
    return store.activities.list_by_customer(customer_id, limit=limit)


@router.get("/{customer_id}/subscriptions", response_model=List[SubscriptionSchema])
async def get_customer_subscriptions(customer_id: int, store: Store = Depends(get_store)):
    """
    Get every subscription a customer has held.
    """
    found_or_404(store.customers.get(customer_id))
    return store.subscriptions.list(customer_id=customer_id)

"""
Vehicle routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.schemas.customer import Vehicle as VehicleSchema, VehicleCreate, VehicleUpdate
from detailpro.store import Store

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("/", response_model=List[VehicleSchema])
async def get_vehicles(
    customer_id: Optional[int] = None,
    store: Store = Depends(get_store)
):
    """
    Get all vehicles, optionally only one customer's.
    """
    return store.vehicles.list(customer_id=customer_id)


@router.get("/{vehicle_id}", response_model=VehicleSchema)
async def get_vehicle(vehicle_id: int, store: Store = Depends(get_store)):
    """
    Get a specific vehicle by ID.
    """
    return found_or_404(store.vehicles.get(vehicle_id))


@router.post("/", response_model=VehicleSchema, status_code=status.HTTP_201_CREATED)
async def create_vehicle(vehicle: VehicleCreate, store: Store = Depends(get_store)):
    """
    Register a vehicle for an existing customer.
    """
    found_or_404(store.customers.get(vehicle.customer_id))
    return store.vehicles.create(vehicle)


@router.put("/{vehicle_id}", response_model=VehicleSchema)
async def update_vehicle(
    vehicle_id: int,
    vehicle_update: VehicleUpdate,
    store: Store = Depends(get_store)
):
    """
    Update a vehicle.
    """
    return found_or_404(store.vehicles.update(vehicle_id, vehicle_update))


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(vehicle_id: int, store: Store = Depends(get_store)):
    """
    Delete a vehicle.
    """
    if not store.vehicles.delete(vehicle_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vehicle not found"
        )

"""
Service catalog routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.schemas.service import Service as ServiceSchema, ServiceCreate, ServiceUpdate
from detailpro.store import Store

router = APIRouter(prefix="/services", tags=["services"])


@router.get("/", response_model=List[ServiceSchema])
async def get_services(
    active: Optional[bool] = None,
    store: Store = Depends(get_store)
):
    """
    Get the service catalog with an optional active filter.
    """
    return store.services.list(active=active)


@router.get("/{service_id}", response_model=ServiceSchema)
async def get_service(service_id: int, store: Store = Depends(get_store)):
    """
    Get a specific service by ID.
    """
    return found_or_404(store.services.get(service_id))


@router.post("/", response_model=ServiceSchema, status_code=status.HTTP_201_CREATED)
async def create_service(service: ServiceCreate, store: Store = Depends(get_store)):
    """
    Add a service to the catalog.
    """
    return store.services.create(service)


@router.put("/{service_id}", response_model=ServiceSchema)
async def update_service(
    service_id: int,
    service_update: ServiceUpdate,
    store: Store = Depends(get_store)
):
    """
    Update a service. Prices already booked on jobs are not affected.
    """
    return found_or_404(store.services.update(service_id, service_update))


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: int, store: Store = Depends(get_store)):
    """
    Delete a service.
    """
    if not store.services.delete(service_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )

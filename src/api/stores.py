"""Store API endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import StoreServiceDep
from src.models.store import Store
from src.schemas.store import StoreCreate, StoreResponse, StoreUpdate
from src.services.store_service import StoreService

router = APIRouter(prefix="/api/v1/stores", tags=["stores"])


def get_existing_store(service: StoreService, store_id: int) -> Store:
    """Get a store or raise 404."""
    store = service.get(store_id)
    if store is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Store not found")
    return store


@router.get("", response_model=list[StoreResponse])
def list_stores(service: StoreServiceDep):
    """List all stores by name."""
    return service.list_all()


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(store_data: StoreCreate, service: StoreServiceDep):
    """Create a new store."""
    store_id = service.create(store_data)
    return get_existing_store(service, store_id)


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(store_id: int, service: StoreServiceDep):
    """Get a specific store."""
    return get_existing_store(service, store_id)


@router.put("/{store_id}", response_model=StoreResponse)
def update_store(store_id: int, store_data: StoreUpdate, service: StoreServiceDep):
    """Update a store."""
    get_existing_store(service, store_id)
    service.update(store_id, store_data)
    return get_existing_store(service, store_id)


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_store(store_id: int, service: StoreServiceDep):
    """Delete a store. Products lose it from their store sets."""
    service.delete(store_id)

"""Shopping list API endpoints.

Mutations that name a missing item succeed without doing anything.
"""

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import ProductServiceDep, ShoppingServiceDep
from src.schemas.shopping import (
    HasPurchasedResponse,
    ShoppingItemCreate,
    ShoppingItemCreated,
    ShoppingItemQuantity,
    ShoppingItemView,
    StoreAvailability,
)

router = APIRouter(prefix="/api/v1/shopping", tags=["shopping"])


@router.get("/items", response_model=list[ShoppingItemView])
def list_active_items(service: ShoppingServiceDep):
    """Get active items, oldest first."""
    return service.list_active()


@router.post("/items", response_model=ShoppingItemCreated, status_code=status.HTTP_201_CREATED)
def add_item(
    item_data: ShoppingItemCreate,
    service: ShoppingServiceDep,
    products: ProductServiceDep,
):
    """Add a product to the list, merging with its active item if there is one."""
    if products.get(item_data.product_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    item_id = service.add_item(item_data.product_id, item_data.quantity)
    return ShoppingItemCreated(id=item_id)


@router.put("/items/{item_id}/quantity", status_code=status.HTTP_204_NO_CONTENT)
def set_quantity(item_id: int, quantity_data: ShoppingItemQuantity, service: ShoppingServiceDep):
    """Set an item's quantity. Zero or below removes it."""
    service.set_quantity(item_id, quantity_data.quantity)


@router.post("/items/{item_id}/increment", status_code=status.HTTP_204_NO_CONTENT)
def increment_quantity(item_id: int, service: ShoppingServiceDep):
    service.increment_quantity(item_id)


@router.post("/items/{item_id}/decrement", status_code=status.HTTP_204_NO_CONTENT)
def decrement_quantity(item_id: int, service: ShoppingServiceDep):
    """Reduce quantity by one; an item at 1 is removed."""
    service.decrement_quantity(item_id)


@router.post("/items/{item_id}/purchase", status_code=status.HTTP_204_NO_CONTENT)
def mark_purchased(item_id: int, service: ShoppingServiceDep):
    """Mark an item as purchased."""
    service.mark_purchased(item_id)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_item(item_id: int, service: ShoppingServiceDep):
    service.remove_item(item_id)


@router.delete("/purchased", status_code=status.HTTP_204_NO_CONTENT)
def clear_purchased(service: ShoppingServiceDep):
    """Remove every purchased item."""
    service.clear_purchased()


@router.get("/purchased/exists", response_model=HasPurchasedResponse)
def has_purchased(service: ShoppingServiceDep):
    """Whether there are purchased items to clear."""
    return HasPurchasedResponse(has_purchased=service.has_purchased())


@router.get("/availability", response_model=list[StoreAvailability])
def store_availability(service: ShoppingServiceDep):
    """Per-store coverage of the active list, best first."""
    return service.compute_store_availability()

"""Product API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import ProductServiceDep
from src.models.product import Product
from src.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from src.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_existing_product(service: ProductService, product_id: int) -> Product:
    """Get a product or raise 404."""
    product = service.get(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.get("", response_model=list[ProductResponse])
def list_products(
    service: ProductServiceDep,
    search: str | None = Query(default=None, description="Match against name or notes"),
):
    """List products by name, optionally filtered by a search term."""
    return service.search(search)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(product_data: ProductCreate, service: ProductServiceDep):
    """Create a product with the stores that sell it."""
    product_id = service.create(product_data)
    return get_existing_product(service, product_id)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, service: ProductServiceDep):
    """Get a specific product."""
    return get_existing_product(service, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(product_id: int, product_data: ProductUpdate, service: ProductServiceDep):
    """Update a product. ``store_ids`` replaces the whole store set."""
    get_existing_product(service, product_id)
    service.update(product_id, product_data)
    return get_existing_product(service, product_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, service: ProductServiceDep):
    """Delete a product with its store links, recipe links and shopping items."""
    service.delete(product_id)

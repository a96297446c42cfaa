"""Dashboard API endpoint."""

from fastapi import APIRouter

from src.api.dependencies import ProductServiceDep, ShoppingServiceDep
from src.schemas.product import ProductResponse
from src.schemas.shopping import DashboardResponse

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(shopping: ShoppingServiceDep, products: ProductServiceDep):
    """Get the product picker, active list, store coverage and clear-purchased flag."""
    return DashboardResponse(
        available_products=[
            ProductResponse.model_validate(product) for product in products.list_all()
        ],
        shopping_items=shopping.list_active(),
        store_availability=shopping.compute_store_availability(),
        has_purchased_items=shopping.has_purchased(),
    )

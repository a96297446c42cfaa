"""FastAPI dependencies for services and database."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.product_service import ProductService
from src.services.recipe_service import RecipeService
from src.services.shopping_service import ShoppingService
from src.services.store_service import StoreService


def get_store_service(
    db: Annotated[Session, Depends(get_db)],
) -> StoreService:
    """Get store service with dependencies."""
    return StoreService(db)


def get_product_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProductService:
    """Get product service with dependencies."""
    return ProductService(db)


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_shopping_service(
    db: Annotated[Session, Depends(get_db)],
) -> ShoppingService:
    """Get shopping list service with dependencies."""
    return ShoppingService(db)


StoreServiceDep = Annotated[StoreService, Depends(get_store_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
RecipeServiceDep = Annotated[RecipeService, Depends(get_recipe_service)]
ShoppingServiceDep = Annotated[ShoppingService, Depends(get_shopping_service)]

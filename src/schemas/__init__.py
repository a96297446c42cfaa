"""Pydantic schemas for API requests and responses."""

from src.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from src.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from src.schemas.shopping import (
    DashboardResponse,
    HasPurchasedResponse,
    ShoppingItemCreate,
    ShoppingItemCreated,
    ShoppingItemQuantity,
    ShoppingItemView,
    StoreAvailability,
)
from src.schemas.store import StoreCreate, StoreResponse, StoreUpdate

__all__ = [
    "StoreCreate",
    "StoreUpdate",
    "StoreResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "ShoppingItemCreate",
    "ShoppingItemCreated",
    "ShoppingItemQuantity",
    "ShoppingItemView",
    "StoreAvailability",
    "HasPurchasedResponse",
    "DashboardResponse",
]

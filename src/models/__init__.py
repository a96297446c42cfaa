"""SQLAlchemy models."""

from src.models.product import Product, ProductStore
from src.models.recipe import Recipe, RecipeProduct
from src.models.shopping_item import ShoppingItem
from src.models.store import Store

__all__ = [
    "Store",
    "Product",
    "ProductStore",
    "Recipe",
    "RecipeProduct",
    "ShoppingItem",
]

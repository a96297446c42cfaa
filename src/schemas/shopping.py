"""Shopping list schemas."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from src.schemas.product import ProductResponse


class ShoppingItemCreate(BaseModel):
    """Add a product to the shopping list."""

    product_id: int
    quantity: int = Field(1, ge=1)


class ShoppingItemQuantity(BaseModel):
    """Overwrite an item's quantity. Zero or below removes the item."""

    quantity: int


class ShoppingItemCreated(BaseModel):
    """ID of the new or merged shopping item."""

    id: int


class ShoppingItemView(BaseModel):
    """Active shopping item enriched with its product details."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    product_name: str
    product_notes: str = ""
    quantity: int
    is_purchased: bool
    created_at: datetime
    purchased_at: datetime | None = None
    available_store_ids: set[int] = Field(default_factory=set)


class StoreAvailability(BaseModel):
    """How much of the active list a single store can cover."""

    store_id: int
    store_name: str
    available_items_count: int
    total_items_count: int

    @computed_field
    @property
    def coverage_percentage(self) -> float:
        """Share of active items sold at this store, rounded half-up to one decimal."""
        if self.total_items_count <= 0:
            return 0.0
        ratio = Decimal(self.available_items_count) * 100 / Decimal(self.total_items_count)
        return float(ratio.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class HasPurchasedResponse(BaseModel):
    """Whether any purchased items are waiting to be cleared."""

    has_purchased: bool


class DashboardResponse(BaseModel):
    """Everything the shopping dashboard shows in one response."""

    available_products: list[ProductResponse]
    shopping_items: list[ShoppingItemView]
    store_availability: list[StoreAvailability]
    has_purchased_items: bool

"""Product schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common import RequiredName


class ProductCreate(BaseModel):
    """Create a new product and the stores that sell it."""

    name: RequiredName
    notes: str | None = Field(None, max_length=2000)
    store_ids: set[int] = Field(default_factory=set)


class ProductUpdate(ProductCreate):
    """Replace a product's fields and its entire store set."""


class ProductResponse(BaseModel):
    """Product response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    notes: str | None
    store_ids: list[int]
    created_at: datetime
    updated_at: datetime

"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common import RequiredName


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    name: RequiredName
    servings: int = Field(1, ge=1)
    product_ids: set[int] = Field(default_factory=set)


class RecipeUpdate(RecipeCreate):
    """Replace a recipe's fields and its entire product set."""


class RecipeResponse(BaseModel):
    """Recipe response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    servings: int
    product_ids: list[int]
    created_at: datetime
    updated_at: datetime

"""Store schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common import RequiredName


class StoreCreate(BaseModel):
    """Create a new store."""

    name: RequiredName
    notes: str | None = Field(None, max_length=2000)


class StoreUpdate(StoreCreate):
    """Replace a store's editable fields."""


class StoreResponse(BaseModel):
    """Store response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    notes: str | None
    created_at: datetime
    updated_at: datetime

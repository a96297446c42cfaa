"""Store catalog operations."""

import logging

from sqlalchemy.orm import Session

from src.models.store import Store
from src.schemas.store import StoreCreate, StoreUpdate

logger = logging.getLogger(__name__)


class StoreService:
    """Service for store CRUD.

    Missing ids are not errors: reads return None and writes do nothing.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Store]:
        return self.db.query(Store).order_by(Store.name, Store.id).all()

    def get(self, store_id: int) -> Store | None:
        return self.db.get(Store, store_id)

    def create(self, data: StoreCreate) -> int:
        store = Store(name=data.name, notes=data.notes)
        self.db.add(store)
        self.db.commit()
        logger.info(f"Created store {store.id} '{store.name}'")
        return store.id

    def update(self, store_id: int, data: StoreUpdate) -> None:
        store = self.get(store_id)
        if store is None:
            return

        store.name = data.name
        store.notes = data.notes
        self.db.commit()

    def delete(self, store_id: int) -> None:
        """Delete a store along with every product-store link that points at it."""
        store = self.get(store_id)
        if store is None:
            return

        self.db.delete(store)
        self.db.commit()
        logger.info(f"Deleted store {store_id}")

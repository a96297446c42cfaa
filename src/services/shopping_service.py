"""Shopping list service: item lifecycle and per-store coverage."""

import logging

from sqlalchemy.orm import Session, selectinload

from src.models.product import Product
from src.models.shopping_item import ShoppingItem
from src.models.store import Store
from src.schemas.shopping import ShoppingItemView, StoreAvailability

logger = logging.getLogger(__name__)


class ShoppingService:
    """Service for the household shopping list.

    Items are Active until marked purchased and never return to Active. Any
    call naming a missing item is a no-op.

    Known limitation: "at most one active item per product" is kept by
    read-then-write in ``add_item``, not by a database constraint, so two
    concurrent adds of the same product can both insert.
    """

    def __init__(self, db: Session):
        self.db = db

    def _active_items(self) -> list[ShoppingItem]:
        return (
            self.db.query(ShoppingItem)
            .options(selectinload(ShoppingItem.product).selectinload(Product.store_links))
            .filter(ShoppingItem.is_purchased.is_(False))
            .order_by(ShoppingItem.created_at, ShoppingItem.id)
            .all()
        )

    def list_active(self) -> list[ShoppingItemView]:
        """Active items, oldest first, with product details and store availability."""
        return [
            ShoppingItemView(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product.name,
                product_notes=item.product.notes or "",
                quantity=item.quantity,
                is_purchased=item.is_purchased,
                created_at=item.created_at,
                purchased_at=item.purchased_at,
                available_store_ids=set(item.product.store_ids),
            )
            for item in self._active_items()
        ]

    def has_purchased(self) -> bool:
        query = self.db.query(ShoppingItem).filter(ShoppingItem.is_purchased.is_(True))
        return bool(self.db.query(query.exists()).scalar())

    def add_item(self, product_id: int, quantity: int) -> int:
        """Add a product to the list, merging into its active item if one exists.

        Returns the id of the merged or newly created item.
        """
        existing = (
            self.db.query(ShoppingItem)
            .filter(
                ShoppingItem.product_id == product_id,
                ShoppingItem.is_purchased.is_(False),
            )
            .order_by(ShoppingItem.id)
            .first()
        )

        if existing:
            existing.quantity += quantity
            self.db.commit()
            logger.info(
                f"Merged product {product_id} into item {existing.id} "
                f"(quantity now {existing.quantity})"
            )
            return existing.id

        item = ShoppingItem(product_id=product_id, quantity=quantity, is_purchased=False)
        self.db.add(item)
        self.db.commit()
        logger.info(f"Added product {product_id} as item {item.id} (quantity {quantity})")
        return item.id

    def set_quantity(self, item_id: int, quantity: int) -> None:
        """Overwrite an item's quantity; zero or below removes the item."""
        item = self.db.get(ShoppingItem, item_id)
        if item is None:
            return

        if quantity <= 0:
            self.db.delete(item)
            logger.info(f"Removed item {item_id} (quantity set to {quantity})")
        else:
            item.quantity = quantity
        self.db.commit()

    def increment_quantity(self, item_id: int) -> None:
        item = self.db.get(ShoppingItem, item_id)
        if item is not None:
            self.set_quantity(item_id, item.quantity + 1)

    def decrement_quantity(self, item_id: int) -> None:
        item = self.db.get(ShoppingItem, item_id)
        if item is not None:
            self.set_quantity(item_id, item.quantity - 1)

    def mark_purchased(self, item_id: int) -> None:
        item = self.db.get(ShoppingItem, item_id)
        if item is None:
            return

        item.mark_purchased()
        self.db.commit()
        logger.info(f"Marked item {item_id} purchased")

    def remove_item(self, item_id: int) -> None:
        item = self.db.get(ShoppingItem, item_id)
        if item is None:
            return

        self.db.delete(item)
        self.db.commit()

    def clear_purchased(self) -> int:
        """Delete every purchased item. Active items are untouched."""
        removed = (
            self.db.query(ShoppingItem)
            .filter(ShoppingItem.is_purchased.is_(True))
            .delete(synchronize_session="fetch")
        )
        self.db.commit()
        logger.info(f"Cleared {removed} purchased items")
        return removed

    def compute_store_availability(self) -> list[StoreAvailability]:
        """Per-store coverage of the active list, best-covering store first.

        Empty when nothing is active. Recomputed from current rows on every call.
        """
        active_items = self._active_items()
        if not active_items:
            return []

        item_store_ids = [set(item.product.store_ids) for item in active_items]
        total = len(active_items)
        stores = self.db.query(Store).order_by(Store.id).all()

        availability = [
            StoreAvailability(
                store_id=store.id,
                store_name=store.name,
                available_items_count=sum(1 for ids in item_store_ids if store.id in ids),
                total_items_count=total,
            )
            for store in stores
        ]
        # sorted() is stable, so equal coverage keeps store id order
        return sorted(availability, key=lambda s: s.coverage_percentage, reverse=True)

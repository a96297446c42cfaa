"""Shopping item model."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from src.database import Base


def utcnow() -> datetime:
    return datetime.now(UTC)


class ShoppingItem(Base):
    """A line on the household shopping list.

    An item starts active and may be marked purchased once; there is no way
    back to active. ``purchased_at`` is set exactly when ``is_purchased`` is.
    """

    __tablename__ = "shopping_items"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity = Column(Integer, nullable=False, default=1)
    is_purchased = Column(Boolean, nullable=False, default=False, index=True)
    # Set in Python rather than by the server so FIFO ordering keeps sub-second precision
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    purchased_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    product = relationship("Product", back_populates="shopping_items")

    def mark_purchased(self) -> None:
        """Move the item to the purchased state, refreshing the purchase time."""
        self.is_purchased = True
        self.purchased_at = utcnow()

    def __repr__(self) -> str:
        state = "purchased" if self.is_purchased else "active"
        return (
            f"<ShoppingItem(id={self.id}, product_id={self.product_id}, "
            f"quantity={self.quantity}, {state})>"
        )

"""Product and ProductStore models."""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import NamedMixin, TimestampMixin


class Product(Base, NamedMixin, TimestampMixin):
    """Something that can go on the shopping list."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    notes = Column(Text, nullable=True)

    # Relationships
    store_links = relationship(
        "ProductStore", back_populates="product", cascade="all, delete-orphan"
    )
    recipe_links = relationship(
        "RecipeProduct", back_populates="product", cascade="all, delete-orphan"
    )
    shopping_items = relationship(
        "ShoppingItem", back_populates="product", cascade="all, delete-orphan"
    )

    @property
    def store_ids(self) -> list[int]:
        """IDs of the stores that sell this product."""
        return sorted(link.store_id for link in self.store_links)


class ProductStore(Base):
    """Product is purchasable at Store."""

    __tablename__ = "product_stores"

    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True
    )
    store_id = Column(
        Integer, ForeignKey("stores.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    # Relationships
    product = relationship("Product", back_populates="store_links")
    store = relationship("Store", back_populates="product_links")

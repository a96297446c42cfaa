"""Recipe and RecipeProduct models."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import NamedMixin, TimestampMixin


class Recipe(Base, NamedMixin, TimestampMixin):
    """Recipe model for storing recipe definitions."""

    __tablename__ = "recipes"
    __table_args__ = (CheckConstraint("servings >= 1", name="ck_recipes_servings_positive"),)

    id = Column(Integer, primary_key=True, index=True)
    servings = Column(Integer, nullable=False, default=1)

    # Relationships
    product_links = relationship(
        "RecipeProduct", back_populates="recipe", cascade="all, delete-orphan"
    )

    @property
    def product_ids(self) -> list[int]:
        """IDs of the products this recipe uses."""
        return sorted(link.product_id for link in self.product_links)


class RecipeProduct(Base):
    """Recipe uses Product."""

    __tablename__ = "recipe_products"

    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True, index=True
    )

    # Relationships
    recipe = relationship("Recipe", back_populates="product_links")
    product = relationship("Product", back_populates="recipe_links")

"""Recipe catalog operations."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.models.recipe import Recipe, RecipeProduct
from src.schemas.recipe import RecipeCreate, RecipeUpdate
from src.services.associations import RecipeProducts

logger = logging.getLogger(__name__)


class RecipeService:
    """Service for recipe-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Recipe).options(selectinload(Recipe.product_links))

    def list_all(self) -> list[Recipe]:
        return self._query().order_by(Recipe.name, Recipe.id).all()

    def list_by_product(self, product_id: int) -> list[Recipe]:
        """Recipes that use the given product, ordered by name."""
        return (
            self._query()
            .filter(Recipe.product_links.any(RecipeProduct.product_id == product_id))
            .order_by(Recipe.name, Recipe.id)
            .all()
        )

    def get(self, recipe_id: int) -> Recipe | None:
        return self._query().filter(Recipe.id == recipe_id).first()

    def create(self, data: RecipeCreate) -> int:
        recipe = Recipe(name=data.name, servings=data.servings)
        try:
            self.db.add(recipe)
            self.db.flush()  # Get recipe.id
            RecipeProducts.of(recipe.id, data.product_ids).reconcile(self.db)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

        logger.info(f"Created recipe {recipe.id} '{recipe.name}'")
        return recipe.id

    def update(self, recipe_id: int, data: RecipeUpdate) -> None:
        recipe = self.db.get(Recipe, recipe_id)
        if recipe is None:
            return

        try:
            recipe.name = data.name
            recipe.servings = data.servings
            RecipeProducts.of(recipe.id, data.product_ids).reconcile(self.db)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

    def delete(self, recipe_id: int) -> None:
        recipe = self.db.get(Recipe, recipe_id)
        if recipe is None:
            return

        self.db.delete(recipe)
        self.db.commit()
        logger.info(f"Deleted recipe {recipe_id}")

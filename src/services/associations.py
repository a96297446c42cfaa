"""Replace-all handling for many-to-many link tables."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from sqlalchemy.orm import Session

from src.models.product import ProductStore
from src.models.recipe import RecipeProduct

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssociationSet:
    """The complete set of ids linked to one owner row.

    Editing an owner's links never diffs: ``reconcile`` removes every existing
    link row for the owner and inserts one row per id in the set. Both steps
    happen in the caller's transaction, so nothing is visible until commit.
    """

    link_model: ClassVar[type]
    owner_key: ClassVar[str]
    target_key: ClassVar[str]

    owner_id: int
    ids: frozenset[int]

    @classmethod
    def of(cls, owner_id: int, ids: Iterable[int]) -> "AssociationSet":
        return cls(owner_id=owner_id, ids=frozenset(ids))

    def reconcile(self, db: Session) -> None:
        """Make the link table hold exactly this set for the owner."""
        owner_column = getattr(self.link_model, self.owner_key)
        existing = db.query(self.link_model).filter(owner_column == self.owner_id).all()
        for link in existing:
            db.delete(link)
        # Deletes must reach the database before rows with the same key are re-added
        db.flush()

        db.add_all(
            self.link_model(**{self.owner_key: self.owner_id, self.target_key: target_id})
            for target_id in sorted(self.ids)
        )
        db.flush()
        logger.debug(
            f"Replaced {self.link_model.__tablename__} for {self.owner_key}={self.owner_id}: "
            f"{len(existing)} -> {len(self.ids)} rows"
        )


@dataclass(frozen=True)
class ProductStores(AssociationSet):
    """Stores a product can be bought at."""

    link_model: ClassVar[type] = ProductStore
    owner_key: ClassVar[str] = "product_id"
    target_key: ClassVar[str] = "store_id"


@dataclass(frozen=True)
class RecipeProducts(AssociationSet):
    """Products a recipe uses."""

    link_model: ClassVar[type] = RecipeProduct
    owner_key: ClassVar[str] = "recipe_id"
    target_key: ClassVar[str] = "product_id"

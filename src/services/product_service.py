"""Product catalog operations."""

import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.models.product import Product
from src.schemas.product import ProductCreate, ProductUpdate
from src.services.associations import ProductStores

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product CRUD, search and store assignment."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Product).options(selectinload(Product.store_links))

    def list_all(self) -> list[Product]:
        return self._query().order_by(Product.name, Product.id).all()

    def search(self, term: str | None) -> list[Product]:
        """Products whose name or notes contain ``term``, ignoring case.

        A blank term matches every product.
        """
        if term is None or not term.strip():
            return self.list_all()

        fragment = term.lower()
        return (
            self._query()
            .filter(
                or_(
                    func.lower(Product.name).contains(fragment, autoescape=True),
                    func.lower(Product.notes).contains(fragment, autoescape=True),
                )
            )
            .order_by(Product.name, Product.id)
            .all()
        )

    def get(self, product_id: int) -> Product | None:
        return self._query().filter(Product.id == product_id).first()

    def create(self, data: ProductCreate) -> int:
        product = Product(name=data.name, notes=data.notes)
        try:
            self.db.add(product)
            self.db.flush()  # Get product.id
            ProductStores.of(product.id, data.store_ids).reconcile(self.db)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

        logger.info(
            f"Created product {product.id} '{product.name}' at {len(data.store_ids)} stores"
        )
        return product.id

    def update(self, product_id: int, data: ProductUpdate) -> None:
        """Overwrite a product's fields and replace its whole store set."""
        product = self.db.get(Product, product_id)
        if product is None:
            return

        try:
            product.name = data.name
            product.notes = data.notes
            ProductStores.of(product.id, data.store_ids).reconcile(self.db)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

    def delete(self, product_id: int) -> None:
        """Delete a product with its store links, recipe links and shopping items."""
        product = self.db.get(Product, product_id)
        if product is None:
            return

        self.db.delete(product)
        self.db.commit()
        logger.info(f"Deleted product {product_id}")

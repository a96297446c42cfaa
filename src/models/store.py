"""Store model."""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import NamedMixin, TimestampMixin


class Store(Base, NamedMixin, TimestampMixin):
    """A shop the household buys from."""

    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, index=True)
    notes = Column(Text, nullable=True)

    # Relationships
    product_links = relationship(
        "ProductStore", back_populates="store", cascade="all, delete-orphan"
    )

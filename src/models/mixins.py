"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, String, func


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class NamedMixin:
    """Mixin for catalog entities that are listed and picked by name."""

    name = Column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, name={self.name!r})>"

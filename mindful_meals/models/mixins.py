"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, func


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Mixin to add an is_active flag used for soft deletes."""

    is_active = Column(Boolean, nullable=False, default=True, index=True)

    def soft_delete(self) -> None:
        """Soft delete the record."""
        self.is_active = False


def as_utc(value: datetime | None) -> datetime | None:
    """Return an aware UTC datetime.

    SQLite drops tzinfo on the way back out, so naive values are read as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)

"""
Base model definitions.

Declarative base and shared mixins for all Voyage models.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_uuid() -> str:
    """Generate a string UUID for primary keys."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base class for all models."""


class TimestampMixin:
    """
    Mixin adding creation and update timestamps.

    Attributes:
        created_at: Row creation time.
        updated_at: Last modification time.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class TranslationMixin(TimestampMixin):
    """
    Columns shared by every per-language translation table.

    Translated text columns are unbounded ``Text``: translations run
    longer than the Indonesian source.

    Attributes:
        id: Unique translation identifier (UUID).
        language: Target language code (en, de, nl, zh).
        is_auto_translated: Whether the row was filled by a translation provider.
    """

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    language: Mapped[str] = mapped_column(String(10), nullable=False)
    is_auto_translated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

"""
System setting model.

Key/value rows holding runtime overrides such as the translation provider
and its API key.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class SystemSetting(Base, TimestampMixin):
    """
    System setting model.

    Attributes:
        key: Setting name (e.g. ``translation_provider``).
        value: Setting value as text.
        description: Optional human description.
    """

    __tablename__ = "system_settings"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

"""
Gallery model definitions.
"""

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, TranslationMixin, generate_uuid


class GalleryItem(Base, TimestampMixin):
    """Gallery photo with caption text in the source language."""

    __tablename__ = "gallery_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    tags: Mapped[str | None] = mapped_column(String(1000))
    image_url: Mapped[str | None] = mapped_column(String(1000))

    translations = relationship(
        "GalleryTranslation", back_populates="gallery_item", cascade="all, delete-orphan"
    )


class GalleryTranslation(Base, TranslationMixin):
    """Translated gallery caption for one target language."""

    __tablename__ = "gallery_translations"

    gallery_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("gallery_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    tags: Mapped[str | None] = mapped_column(Text)

    gallery_item = relationship("GalleryItem", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("gallery_id", "language", name="uq_gallery_translation_lang"),
    )

"""
Tour package model definitions.

This module defines the Package model and its per-language translations.
"""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, TranslationMixin, generate_uuid


class PackageStatus(str, Enum):
    """Package publication status."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Package(Base, TimestampMixin):
    """
    Tour package in the source language.

    Attributes:
        id: Unique package identifier (UUID).
        slug: URL slug.
        title: Package name.
        description: Short description.
        long_description: Full description.
        destinations: JSON-encoded list of destinations.
        includes: JSON-encoded list of included services.
        excludes: JSON-encoded list of excluded services.
        highlights: JSON-encoded list of highlights.
        itinerary: JSON-encoded list of day-by-day steps.
        faqs: JSON-encoded list of question/answer objects.
        group_size: Group size label.
        difficulty: Difficulty label.
        best_for: Audience label.
        departure: Departure point.
        return_point: Return point (column ``return``).
        location: Location label.
        status: Publication status.
    """

    __tablename__ = "packages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    slug: Mapped[str | None] = mapped_column(String(255), unique=True)

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    long_description: Mapped[str | None] = mapped_column(Text)
    destinations: Mapped[str | None] = mapped_column(Text)
    includes: Mapped[str | None] = mapped_column(Text)
    excludes: Mapped[str | None] = mapped_column(Text)
    highlights: Mapped[str | None] = mapped_column(Text)
    itinerary: Mapped[str | None] = mapped_column(Text)
    faqs: Mapped[str | None] = mapped_column(Text)
    group_size: Mapped[str | None] = mapped_column(String(100))
    difficulty: Mapped[str | None] = mapped_column(String(100))
    best_for: Mapped[str | None] = mapped_column(String(255))
    departure: Mapped[str | None] = mapped_column(String(255))
    return_point: Mapped[str | None] = mapped_column("return", String(255))
    location: Mapped[str | None] = mapped_column(String(255))

    price: Mapped[int | None] = mapped_column(Integer)
    image: Mapped[str | None] = mapped_column(String(1000))
    status: Mapped[str] = mapped_column(
        String(20), default=PackageStatus.DRAFT.value, nullable=False, index=True
    )

    translations = relationship(
        "PackageTranslation", back_populates="package", cascade="all, delete-orphan"
    )


class PackageTranslation(Base, TranslationMixin):
    """Translated package content for one target language."""

    __tablename__ = "package_translations"

    package_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("packages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    long_description: Mapped[str | None] = mapped_column(Text)
    destinations: Mapped[str | None] = mapped_column(Text)
    includes: Mapped[str | None] = mapped_column(Text)
    excludes: Mapped[str | None] = mapped_column(Text)
    highlights: Mapped[str | None] = mapped_column(Text)
    itinerary: Mapped[str | None] = mapped_column(Text)
    faqs: Mapped[str | None] = mapped_column(Text)
    group_size: Mapped[str | None] = mapped_column(Text)
    difficulty: Mapped[str | None] = mapped_column(Text)
    best_for: Mapped[str | None] = mapped_column(Text)
    departure: Mapped[str | None] = mapped_column(Text)
    return_point: Mapped[str | None] = mapped_column("return", Text)
    location: Mapped[str | None] = mapped_column(Text)

    package = relationship("Package", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("package_id", "language", name="uq_package_translation_lang"),
    )

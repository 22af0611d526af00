"""
Testimonial model definitions.
"""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, TranslationMixin, generate_uuid


class TestimonialStatus(str, Enum):
    """Testimonial moderation status."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Testimonial(Base, TimestampMixin):
    """Customer testimonial in the source language."""

    __tablename__ = "testimonials"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str | None] = mapped_column(String(255))
    content: Mapped[str | None] = mapped_column(Text)
    package_name: Mapped[str | None] = mapped_column(String(500))
    location: Mapped[str | None] = mapped_column(String(255))
    rating: Mapped[int | None] = mapped_column(Integer)
    avatar: Mapped[str | None] = mapped_column(String(1000))
    status: Mapped[str] = mapped_column(
        String(20), default=TestimonialStatus.PENDING.value, nullable=False, index=True
    )

    translations = relationship(
        "TestimonialTranslation", back_populates="testimonial", cascade="all, delete-orphan"
    )


class TestimonialTranslation(Base, TranslationMixin):
    """Translated testimonial for one target language."""

    __tablename__ = "testimonial_translations"

    testimonial_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("testimonials.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(Text)
    role: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    package_name: Mapped[str | None] = mapped_column(Text)
    location: Mapped[str | None] = mapped_column(Text)

    testimonial = relationship("Testimonial", back_populates="translations")

    __table_args__ = (
        UniqueConstraint(
            "testimonial_id", "language", name="uq_testimonial_translation_lang"
        ),
    )

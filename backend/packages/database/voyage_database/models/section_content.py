"""
Section content model definitions.

Homepage sections (hero, about, why-choose-us, ...) and their translations.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, TranslationMixin


class SectionContent(Base, TimestampMixin):
    """
    Source-language content of a page section.

    Sections are addressed by a human-readable ``section_id`` such as
    ``hero`` or ``whyChooseUs``. List-like blocks (features, stats, ...)
    are stored as JSON-encoded strings.
    """

    __tablename__ = "section_contents"

    section_id: Mapped[str] = mapped_column(String(100), primary_key=True)

    # Translatable text
    title: Mapped[str | None] = mapped_column(String(500))
    subtitle: Mapped[str | None] = mapped_column(String(500))
    description: Mapped[str | None] = mapped_column(Text)
    cta_text: Mapped[str | None] = mapped_column(String(255))
    button_text: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(100))
    email: Mapped[str | None] = mapped_column(String(255))

    # JSON-encoded lists
    destinations: Mapped[str | None] = mapped_column(Text)
    features: Mapped[str | None] = mapped_column(Text)
    stats: Mapped[str | None] = mapped_column(Text)
    packages: Mapped[str | None] = mapped_column(Text)
    testimonials: Mapped[str | None] = mapped_column(Text)
    posts: Mapped[str | None] = mapped_column(Text)
    items: Mapped[str | None] = mapped_column(Text)
    categories: Mapped[str | None] = mapped_column(Text)

    # Operational settings, never translated
    image: Mapped[str | None] = mapped_column(String(1000))
    logo: Mapped[str | None] = mapped_column(String(1000))
    background_video: Mapped[str | None] = mapped_column(String(1000))
    cta_link: Mapped[str | None] = mapped_column(String(1000))
    display_count: Mapped[int | None] = mapped_column(Integer)
    featured_only: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100))
    sort_by: Mapped[str | None] = mapped_column(String(50))
    layout_style: Mapped[str | None] = mapped_column(String(50))

    translations = relationship(
        "SectionContentTranslation",
        back_populates="section",
        cascade="all, delete-orphan",
    )


class SectionContentTranslation(Base, TranslationMixin):
    """Translated copy of a section for one target language."""

    __tablename__ = "section_content_translations"

    section_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("section_contents.section_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(Text)
    subtitle: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    cta_text: Mapped[str | None] = mapped_column(Text)
    button_text: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(Text)
    email: Mapped[str | None] = mapped_column(Text)
    destinations: Mapped[str | None] = mapped_column(Text)
    features: Mapped[str | None] = mapped_column(Text)
    stats: Mapped[str | None] = mapped_column(Text)
    packages: Mapped[str | None] = mapped_column(Text)
    testimonials: Mapped[str | None] = mapped_column(Text)
    posts: Mapped[str | None] = mapped_column(Text)
    items: Mapped[str | None] = mapped_column(Text)
    categories: Mapped[str | None] = mapped_column(Text)

    section = relationship("SectionContent", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("section_id", "language", name="uq_section_translation_lang"),
    )

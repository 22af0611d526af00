"""
Blog model definitions.
"""

from enum import Enum

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, TranslationMixin, generate_uuid


class BlogStatus(str, Enum):
    """Blog publication status."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Blog(Base, TimestampMixin):
    """
    Blog post in the source language.

    ``tags`` is a comma-separated string.
    """

    __tablename__ = "blogs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    slug: Mapped[str | None] = mapped_column(String(255), unique=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(String(100))
    tags: Mapped[str | None] = mapped_column(String(1000))
    author: Mapped[str | None] = mapped_column(String(255))
    image: Mapped[str | None] = mapped_column(String(1000))
    status: Mapped[str] = mapped_column(
        String(20), default=BlogStatus.DRAFT.value, nullable=False, index=True
    )

    translations = relationship(
        "BlogTranslation", back_populates="blog", cascade="all, delete-orphan"
    )


class BlogTranslation(Base, TranslationMixin):
    """Translated blog post for one target language."""

    __tablename__ = "blog_translations"

    blog_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(Text)
    excerpt: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(Text)
    tags: Mapped[str | None] = mapped_column(Text)

    blog = relationship("Blog", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("blog_id", "language", name="uq_blog_translation_lang"),
    )

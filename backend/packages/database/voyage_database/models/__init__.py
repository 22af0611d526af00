"""
Database models package.

This module exports all SQLAlchemy models for the Voyage application.
"""

from .base import Base, TimestampMixin, TranslationMixin
from .blog import Blog, BlogStatus, BlogTranslation
from .gallery import GalleryItem, GalleryTranslation
from .package import Package, PackageStatus, PackageTranslation
from .section_content import SectionContent, SectionContentTranslation
from .system_setting import SystemSetting
from .testimonial import Testimonial, TestimonialStatus, TestimonialTranslation

__all__ = [
    "Base",
    "TimestampMixin",
    "TranslationMixin",
    # Content families
    "SectionContent",
    "SectionContentTranslation",
    "Package",
    "PackageStatus",
    "PackageTranslation",
    "Blog",
    "BlogStatus",
    "BlogTranslation",
    "Testimonial",
    "TestimonialStatus",
    "TestimonialTranslation",
    "GalleryItem",
    "GalleryTranslation",
    # Settings
    "SystemSetting",
]

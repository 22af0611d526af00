"""
Content family registry.

Describes, once per translatable content family, which ORM models hold
the source and translated rows, which fields count towards translation
completeness, and which extra fields are sent to the translation provider.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from voyage_database.models import (
    Blog,
    BlogStatus,
    BlogTranslation,
    GalleryItem,
    GalleryTranslation,
    Package,
    PackageStatus,
    PackageTranslation,
    SectionContent,
    SectionContentTranslation,
    Testimonial,
    TestimonialStatus,
    TestimonialTranslation,
)

from .exceptions import UnknownContentTypeError


class ContentFamily(str, Enum):
    """Translatable content family, valued by its wire name."""

    SECTION = "section"
    PACKAGE = "package"
    BLOG = "blog"
    TESTIMONIAL = "testimonial"
    GALLERY = "gallery"


@dataclass(frozen=True)
class FamilySchema:
    """
    Typed descriptor of one content family.

    Attributes:
        family: Family tag.
        section_key: Key used in aggregated coverage reports.
        content_model: ORM model of the source-language item.
        translation_model: ORM model of the per-language translation row.
        id_attr: Primary identifier attribute on the content model.
        foreign_key_attr: Attribute on the translation model pointing at the item.
        label_attr: Attribute used as the human-readable item label.
        fields: Fields that count towards completeness, in display order.
        extra_fields: Additional text fields sent to the provider.
        json_fields: Fields holding JSON-encoded values.
        published_filter: Column/value pair restricting coverage checks,
            or None when every row counts.
    """

    family: ContentFamily
    section_key: str
    content_model: Any
    translation_model: Any
    id_attr: str
    foreign_key_attr: str
    label_attr: str
    fields: tuple[str, ...]
    extra_fields: tuple[str, ...] = ()
    json_fields: frozenset[str] = field(default_factory=frozenset)
    published_filter: tuple[str, str] | None = None

    def list_fields(self) -> tuple[str, ...]:
        """Fields that make up completeness."""
        return self.fields

    def payload_fields(self) -> tuple[str, ...]:
        """Fields extracted from the item and sent to the provider."""
        return self.fields + tuple(f for f in self.extra_fields if f not in self.fields)

    def content_id_column(self) -> Any:
        return getattr(self.content_model, self.id_attr)

    def translation_fk_column(self) -> Any:
        return getattr(self.translation_model, self.foreign_key_attr)

    def published_clause(self) -> Any | None:
        """SQL clause selecting the items considered live, if any."""
        if self.published_filter is None:
            return None
        column, value = self.published_filter
        return getattr(self.content_model, column) == value


_SECTION_JSON_FIELDS = (
    "destinations",
    "features",
    "stats",
    "packages",
    "testimonials",
    "posts",
    "items",
    "categories",
)

_REGISTRY: dict[ContentFamily, FamilySchema] = {
    ContentFamily.SECTION: FamilySchema(
        family=ContentFamily.SECTION,
        section_key="sections",
        content_model=SectionContent,
        translation_model=SectionContentTranslation,
        id_attr="section_id",
        foreign_key_attr="section_id",
        label_attr="title",
        fields=("title", "subtitle", "description", "cta_text"),
        extra_fields=("button_text", "phone", "email", *_SECTION_JSON_FIELDS),
        json_fields=frozenset(_SECTION_JSON_FIELDS),
    ),
    ContentFamily.PACKAGE: FamilySchema(
        family=ContentFamily.PACKAGE,
        section_key="packages",
        content_model=Package,
        translation_model=PackageTranslation,
        id_attr="id",
        foreign_key_attr="package_id",
        label_attr="title",
        fields=(
            "title",
            "description",
            "long_description",
            "destinations",
            "includes",
            "excludes",
            "highlights",
            "itinerary",
            "faqs",
            "group_size",
            "difficulty",
            "best_for",
            "departure",
            "return_point",
            "location",
        ),
        json_fields=frozenset(
            {"destinations", "includes", "excludes", "highlights", "itinerary", "faqs"}
        ),
        published_filter=("status", PackageStatus.PUBLISHED.value),
    ),
    ContentFamily.BLOG: FamilySchema(
        family=ContentFamily.BLOG,
        section_key="blogs",
        content_model=Blog,
        translation_model=BlogTranslation,
        id_attr="id",
        foreign_key_attr="blog_id",
        label_attr="title",
        fields=("title", "excerpt", "content", "category", "tags"),
        published_filter=("status", BlogStatus.PUBLISHED.value),
    ),
    ContentFamily.TESTIMONIAL: FamilySchema(
        family=ContentFamily.TESTIMONIAL,
        section_key="testimonials",
        content_model=Testimonial,
        translation_model=TestimonialTranslation,
        id_attr="id",
        foreign_key_attr="testimonial_id",
        label_attr="name",
        fields=("name", "role", "content", "package_name", "location"),
        published_filter=("status", TestimonialStatus.APPROVED.value),
    ),
    ContentFamily.GALLERY: FamilySchema(
        family=ContentFamily.GALLERY,
        section_key="gallery",
        content_model=GalleryItem,
        translation_model=GalleryTranslation,
        id_attr="id",
        foreign_key_attr="gallery_id",
        label_attr="title",
        fields=("title", "description", "tags"),
    ),
}

# Aggregated report keys, in report order
SECTION_KEYS: tuple[str, ...] = tuple(schema.section_key for schema in _REGISTRY.values())


def get_schema(family: ContentFamily | str) -> FamilySchema:
    """
    Get the descriptor for a family.

    Args:
        family: Family enum member or its wire name (``"package"``).

    Raises:
        UnknownContentTypeError: If a string does not name a family.
    """
    return _REGISTRY[parse_family(family)]


def fields_for(family: ContentFamily | str) -> tuple[str, ...]:
    """Ordered list of translatable field names for a family."""
    return get_schema(family).list_fields()


def parse_family(value: ContentFamily | str) -> ContentFamily:
    """
    Resolve a family from its wire name or its report key.

    Args:
        value: ``"package"``, ``"packages"`` or a ``ContentFamily``.

    Raises:
        UnknownContentTypeError: If the value names no family.
    """
    if isinstance(value, ContentFamily):
        return value
    try:
        return ContentFamily(value)
    except ValueError:
        pass
    for schema in _REGISTRY.values():
        if schema.section_key == value:
            return schema.family
    raise UnknownContentTypeError(f"Unknown content type: {value}")


def all_schemas() -> list[FamilySchema]:
    """All family descriptors in report order."""
    return list(_REGISTRY.values())

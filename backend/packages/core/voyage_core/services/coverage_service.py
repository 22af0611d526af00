"""
Translation coverage service.

Read-only checks of how completely each published content item has been
translated into the target languages, per family and across all families.
"""

import asyncio
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from voyage_core import get_logger
from voyage_core.config import SOURCE_LANGUAGE, TARGET_LANGUAGES
from voyage_core.content_families import (
    SECTION_KEYS,
    ContentFamily,
    FamilySchema,
    all_schemas,
    get_schema,
    parse_family,
)
from voyage_core.schemas.translation import (
    CoverageReport,
    CoverageStatus,
    CoverageSummary,
    LanguageStatus,
    SectionCoverage,
    TranslationStatus,
)

logger = get_logger(__name__)


def is_filled(value: Any) -> bool:
    """A translated field counts as filled unless it is None or an empty string."""
    return value is not None and value != ""


def percentage(part: int | float, whole: int | float) -> float:
    """``part / whole * 100``, or 0 when ``whole`` is 0."""
    return (part / whole) * 100 if whole > 0 else 0.0


def source_language_status() -> LanguageStatus:
    """The source language is the ground truth and always complete."""
    return LanguageStatus(
        exists=True, is_auto_translated=False, completeness=100, missing_fields=[]
    )


def language_status(row: Any | None, fields: Sequence[str]) -> LanguageStatus:
    """
    Compute the translation state of one language.

    Args:
        row: Translation row, or None when the language has no row.
        fields: Field names counted towards completeness.

    Returns:
        LanguageStatus for the language.
    """
    if row is None:
        return LanguageStatus(
            exists=False, is_auto_translated=False, completeness=0, missing_fields=["all"]
        )

    missing = [name for name in fields if not is_filled(getattr(row, name, None))]
    filled = len(fields) - len(missing)
    return LanguageStatus(
        exists=True,
        is_auto_translated=bool(row.is_auto_translated),
        completeness=percentage(filled, len(fields)),
        missing_fields=missing,
    )


def classify(overall_coverage: float) -> CoverageStatus:
    """Three-way status from an item's overall coverage."""
    if overall_coverage == 100:
        return "complete"
    if overall_coverage > 0:
        return "partial"
    return "missing"


def build_item_status(
    schema: FamilySchema,
    content_id: str,
    content_title: str,
    rows: Sequence[Any],
) -> TranslationStatus:
    """
    Build the coverage of one content item.

    Overall coverage is the mean of the target languages only. A language
    is listed in ``missing_languages`` only when its row does not exist;
    partially filled rows lower the coverage but are not "missing".

    Args:
        schema: Family descriptor.
        content_id: Item identifier.
        content_title: Display label.
        rows: All translation rows of the item.

    Returns:
        TranslationStatus for the item.
    """
    by_language = {row.language: row for row in rows}
    fields = schema.list_fields()

    languages: dict[str, LanguageStatus] = {SOURCE_LANGUAGE: source_language_status()}
    for lang in TARGET_LANGUAGES:
        languages[lang] = language_status(by_language.get(lang), fields)

    overall = sum(languages[lang].completeness for lang in TARGET_LANGUAGES) / len(
        TARGET_LANGUAGES
    )
    missing_languages = [lang for lang in TARGET_LANGUAGES if not languages[lang].exists]

    return TranslationStatus(
        section=schema.section_key,
        content_id=content_id,
        content_title=content_title,
        languages=languages,
        overall_coverage=overall,
        missing_languages=missing_languages,
        status=classify(overall),
    )


def summarize_family(schema: FamilySchema, items: list[TranslationStatus]) -> SectionCoverage:
    """Roll item statuses up into a family coverage."""
    translated = sum(1 for item in items if item.status == "complete")
    return SectionCoverage(
        section=schema.section_key,
        total_items=len(items),
        translated_items=translated,
        coverage_percentage=percentage(translated, len(items)),
        items=items,
    )


def summarize_report(sections: dict[str, SectionCoverage]) -> CoverageReport:
    """Combine family coverages into a global report."""
    total = sum(section.total_items for section in sections.values())
    translated = sum(section.translated_items for section in sections.values())
    return CoverageReport(
        summary=CoverageSummary(
            total_items=total,
            translated_items=translated,
            overall_coverage=percentage(translated, total),
        ),
        sections=sections,
    )


class CoverageService:
    """
    Translation coverage checker.

    Each family check runs on its own session so that all five families
    can be checked concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def check_family(self, family: ContentFamily | str) -> SectionCoverage:
        """
        Check translation coverage of one content family.

        Only live items are counted (published packages and blogs,
        approved testimonials, every section and gallery item).

        Args:
            family: Family to check.

        Returns:
            SectionCoverage for the family.
        """
        schema = get_schema(family)
        async with self.session_factory() as session:
            items = await self._load_items(session, schema)
            rows_by_item = await self._load_translations(
                session, schema, [getattr(item, schema.id_attr) for item in items]
            )

        statuses = []
        for item in items:
            content_id = getattr(item, schema.id_attr)
            title = getattr(item, schema.label_attr, None) or content_id
            statuses.append(
                build_item_status(schema, content_id, title, rows_by_item.get(content_id, []))
            )

        coverage = summarize_family(schema, statuses)
        logger.info(
            "Checked translation coverage",
            extra={
                "section": schema.section_key,
                "total_items": coverage.total_items,
                "translated_items": coverage.translated_items,
            },
        )
        return coverage

    async def check_all(self) -> CoverageReport:
        """
        Check every family concurrently and summarize.

        Returns:
            CoverageReport keyed by ``sections``, ``packages``, ``blogs``,
            ``testimonials`` and ``gallery``.
        """
        schemas = all_schemas()
        results = await asyncio.gather(*(self.check_family(s.family) for s in schemas))
        return summarize_report({s.section_key: r for s, r in zip(schemas, results)})

    async def check_section(self, section: str) -> CoverageReport:
        """
        Check ``all`` families or a single one.

        Args:
            section: ``"all"`` or a family name or report key.

        Raises:
            UnknownContentTypeError: If ``section`` names no family.
        """
        if section == "all":
            return await self.check_all()
        schema = get_schema(parse_family(section))
        coverage = await self.check_family(schema.family)
        return summarize_report({schema.section_key: coverage})

    async def items_needing_translation(self) -> dict[str, list[TranslationStatus]]:
        """
        List items that are not fully translated, per family.

        Runs a full check; there is no cached shortcut.
        """
        report = await self.check_all()
        return {
            key: [item for item in report.sections[key].items if item.status != "complete"]
            for key in SECTION_KEYS
        }

    @staticmethod
    async def _load_items(session: AsyncSession, schema: FamilySchema) -> list[Any]:
        stmt = select(schema.content_model)
        clause = schema.published_clause()
        if clause is not None:
            stmt = stmt.where(clause)
        stmt = stmt.order_by(schema.content_id_column())
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def _load_translations(
        session: AsyncSession, schema: FamilySchema, content_ids: list[str]
    ) -> dict[str, list[Any]]:
        if not content_ids:
            return {}
        fk = schema.translation_fk_column()
        result = await session.execute(
            select(schema.translation_model).where(fk.in_(content_ids))
        )
        rows_by_item: dict[str, list[Any]] = {}
        for row in result.scalars().all():
            rows_by_item.setdefault(getattr(row, schema.foreign_key_attr), []).append(row)
        return rows_by_item

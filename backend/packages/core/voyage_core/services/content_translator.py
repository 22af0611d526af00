"""
Content translator.

Translates one content item into every target language and upserts the
per-language translation rows. Runs inside the worker; each language is
translated and committed on its own, so a provider failure for one
language leaves the others untouched.
"""

import json
from collections.abc import Iterator
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voyage_core import get_logger
from voyage_core.config import SOURCE_LANGUAGE, TARGET_LANGUAGES
from voyage_core.content_families import ContentFamily, FamilySchema, get_schema
from voyage_core.exceptions import ContentNotFoundError
from voyage_core.services.coverage_service import language_status
from voyage_core.services.translation_providers import TranslationProvider
from voyage_core.services.translation_quality import is_valid_translation

logger = get_logger(__name__)

# Nested objects deeper than this are stored untranslated
MAX_DEPTH = 5

# Keys inside JSON objects whose values are identifiers, not prose
_UNTRANSLATABLE_KEYS = frozenset({
    "id", "icon", "image", "img", "src", "url", "href", "link", "slug", "avatar", "color",
})


def _parse_json(value: Any) -> Any | None:
    if not value or not isinstance(value, str):
        return None
    try:
        return json.loads(value)
    except ValueError:
        return None


def extract_payload(schema: FamilySchema, item: Any) -> dict[str, Any]:
    """
    Extract the translatable values of an item.

    JSON-encoded fields are parsed into lists/objects; empty values and
    unparseable JSON are left out. Operational fields (URLs, flags,
    layout settings) are never part of the payload.

    Args:
        schema: Family descriptor.
        item: Source content row.

    Returns:
        Mapping of field name to value.
    """
    payload: dict[str, Any] = {}
    for name in schema.payload_fields():
        value = getattr(item, name, None)
        if name in schema.json_fields:
            parsed = _parse_json(value)
            if parsed is None:
                if value:
                    logger.warning(
                        "Skipping field with invalid JSON",
                        extra={"family": schema.family.value, "field": name},
                    )
                continue
            payload[name] = parsed
        elif value is not None and value != "":
            payload[name] = value
    return payload


def _should_translate(key: str | None, text: str) -> bool:
    if not text.strip():
        return False
    if key is not None and key.lower() in _UNTRANSLATABLE_KEYS:
        return False
    return not text.startswith(("http://", "https://", "/"))


def collect_strings(value: Any, sink: list[str], key: str | None = None, depth: int = 0) -> None:
    """Append every translatable string leaf of ``value`` to ``sink``, depth-first."""
    if isinstance(value, str):
        if _should_translate(key, value):
            sink.append(value)
    elif depth >= MAX_DEPTH:
        return
    elif isinstance(value, list):
        for element in value:
            collect_strings(element, sink, key, depth + 1)
    elif isinstance(value, dict):
        for child_key, child in value.items():
            collect_strings(child, sink, child_key, depth + 1)


def replace_strings(
    value: Any, translated: Iterator[str], key: str | None = None, depth: int = 0
) -> Any:
    """Rebuild ``value`` taking string leaves from ``translated`` in collection order."""
    if isinstance(value, str):
        return next(translated) if _should_translate(key, value) else value
    if depth >= MAX_DEPTH:
        return value
    if isinstance(value, list):
        return [replace_strings(element, translated, key, depth + 1) for element in value]
    if isinstance(value, dict):
        return {
            child_key: replace_strings(child, translated, child_key, depth + 1)
            for child_key, child in value.items()
        }
    return value


def translate_payload(
    payload: dict[str, Any], source: str, target: str, provider: TranslationProvider
) -> dict[str, Any]:
    """
    Translate every string leaf of a payload with one batch call.

    Args:
        payload: Field values as returned by ``extract_payload``.
        source: Source language code.
        target: Target language code.
        provider: Translation provider.

    Returns:
        Payload of the same shape with translated strings.

    Raises:
        ValueError: If the provider returns the wrong number of results.
    """
    texts: list[str] = []
    for name, value in payload.items():
        collect_strings(value, texts, name)

    if not texts:
        return dict(payload)

    results = provider.translate_batch(texts, source, target)
    if len(results) != len(texts):
        raise ValueError(
            f"Provider returned {len(results)} translations for {len(texts)} texts"
        )

    invalid = sum(
        1 for original, result in zip(texts, results) if not is_valid_translation(original, result)
    )
    if invalid:
        logger.warning(
            "Some translations look untranslated",
            extra={"target_language": target, "invalid": invalid, "total": len(texts)},
        )

    iterator = iter(results)
    return {name: replace_strings(value, iterator, name) for name, value in payload.items()}


def prepare_for_storage(data: dict[str, Any]) -> dict[str, str | None]:
    """
    Serialize translated values for text columns.

    Strings are kept, numbers and booleans become their JSON text, and
    lists/objects are JSON-encoded without escaping non-ASCII characters.
    """
    prepared: dict[str, str | None] = {}
    for key, value in data.items():
        if value is None:
            prepared[key] = None
        elif isinstance(value, str):
            prepared[key] = value
        else:
            prepared[key] = json.dumps(value, ensure_ascii=False)
    return prepared


class ContentTranslator:
    """Fills translation rows of content items through a provider."""

    def __init__(self, session: AsyncSession, provider: TranslationProvider):
        self.session = session
        self.provider = provider

    async def translate_content(
        self,
        family: ContentFamily | str,
        content_id: str,
        force_retranslate: bool = False,
    ) -> dict[str, dict[str, Any]]:
        """
        Translate an item into every target language.

        Without ``force_retranslate``, languages whose row is already 100%
        complete are skipped, so repeated calls make no provider calls and
        never overwrite finished (possibly hand-edited) rows.

        Args:
            family: Content family of the item.
            content_id: Item identifier.
            force_retranslate: Re-translate complete rows too.

        Returns:
            Outcome per language: ``{"status": "translated"|"skipped"|"failed", ...}``.

        Raises:
            ContentNotFoundError: If the item does not exist.
        """
        schema = get_schema(family)
        item = await self._get_item(schema, content_id)
        payload = extract_payload(schema, item)

        logger.info(
            "Starting content translation",
            extra={
                "family": schema.family.value,
                "content_id": content_id,
                "fields": sorted(payload),
                "force_retranslate": force_retranslate,
            },
        )

        outcomes: dict[str, dict[str, Any]] = {}
        for lang in TARGET_LANGUAGES:
            existing = await self._get_existing(schema, content_id, lang)
            if (
                existing is not None
                and not force_retranslate
                and language_status(existing, schema.list_fields()).completeness == 100
            ):
                logger.info(
                    "Translation already complete, skipping",
                    extra={"content_id": content_id, "target_language": lang},
                )
                outcomes[lang] = {"status": "skipped"}
                continue

            try:
                translated = translate_payload(payload, SOURCE_LANGUAGE, lang, self.provider)
                prepared = prepare_for_storage(translated)
                self._upsert(schema, content_id, lang, prepared, existing)
                await self.session.commit()
            except Exception as e:
                await self.session.rollback()
                logger.exception(
                    "Translation failed",
                    extra={"content_id": content_id, "target_language": lang},
                )
                outcomes[lang] = {"status": "failed", "error": str(e)}
                continue

            logger.info(
                "Saved translation",
                extra={
                    "content_id": content_id,
                    "target_language": lang,
                    "fields": len(prepared),
                },
            )
            outcomes[lang] = {"status": "translated", "fields": sorted(prepared)}

        return outcomes

    async def _get_item(self, schema: FamilySchema, content_id: str) -> Any:
        result = await self.session.execute(
            select(schema.content_model).where(schema.content_id_column() == content_id)
        )
        item = result.scalar_one_or_none()
        if item is None:
            raise ContentNotFoundError(
                f"{schema.family.value.capitalize()} {content_id} not found"
            )
        return item

    async def _get_existing(self, schema: FamilySchema, content_id: str, language: str) -> Any | None:
        result = await self.session.execute(
            select(schema.translation_model).where(
                schema.translation_fk_column() == content_id,
                schema.translation_model.language == language,
            )
        )
        return result.scalar_one_or_none()

    def _upsert(
        self,
        schema: FamilySchema,
        content_id: str,
        language: str,
        values: dict[str, str | None],
        existing: Any | None,
    ) -> None:
        if existing is not None:
            for name, value in values.items():
                setattr(existing, name, value)
            existing.is_auto_translated = True
            return

        row = schema.translation_model(
            **{schema.foreign_key_attr: content_id},
            language=language,
            is_auto_translated=True,
            **values,
        )
        self.session.add(row)

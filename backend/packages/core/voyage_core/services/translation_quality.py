"""
Translation quality checks.

Heuristics that flag provider output still written in the Indonesian
source language, and a read-only scan of stored translations.
"""

import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voyage_core import get_logger
from voyage_core.content_families import all_schemas
from voyage_core.schemas.translation import SuspectTranslation

logger = get_logger(__name__)

_WORD_RE = re.compile(r"[a-z]+")

# Common Indonesian function words that are rare in the target languages
_INDONESIAN_KEYWORDS = frozenset({
    "yang", "dan", "dengan", "untuk", "dari", "ini", "itu", "di", "ke", "pada",
    "adalah", "akan", "dapat", "kami", "kita", "saya", "mereka", "anda",
    "tahun", "hari", "bulan", "minggu", "waktu", "tempat", "orang", "baik",
    "besar", "kecil", "banyak", "sedikit", "lebih", "kurang", "sudah", "belum",
    "perusahaan", "pemandu", "wisata", "berpengalaman", "pengalaman",
})

# Two distinct keywords are enough to call a text Indonesian
_KEYWORD_THRESHOLD = 2


def looks_indonesian(text: str | None) -> bool:
    """
    Guess whether text is written in Indonesian.

    Args:
        text: Text to inspect.

    Returns:
        True if at least two distinct Indonesian keywords occur as words.
    """
    if not text or not text.strip():
        return False
    words = set(_WORD_RE.findall(text.lower()))
    return len(words & _INDONESIAN_KEYWORDS) >= _KEYWORD_THRESHOLD


def is_valid_translation(original: str, translated: str) -> bool:
    """
    Check that provider output is not simply the source text.

    A result identical to the original, or one that still looks
    Indonesian, is considered invalid.
    """
    if original.strip().lower() == translated.strip().lower():
        return False
    return not looks_indonesian(translated)


class TranslationQualityService:
    """Scans stored translations for text left in the source language."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def scan_suspect_translations(self) -> list[SuspectTranslation]:
        """
        List translation rows with fields that still look Indonesian.

        Returns:
            One entry per suspect row, naming the offending fields.
        """
        suspects: list[SuspectTranslation] = []
        for schema in all_schemas():
            result = await self.session.execute(
                select(schema.translation_model).order_by(
                    schema.translation_fk_column(), schema.translation_model.language
                )
            )
            for row in result.scalars().all():
                bad_fields = [
                    name
                    for name in schema.payload_fields()
                    if looks_indonesian(getattr(row, name, None))
                ]
                if bad_fields:
                    suspects.append(
                        SuspectTranslation(
                            content_type=schema.family.value,
                            content_id=getattr(row, schema.foreign_key_attr),
                            language=row.language,
                            suspect_fields=bad_fields,
                        )
                    )

        logger.info("Scanned translations for source-language text", extra={"suspects": len(suspects)})
        return suspects

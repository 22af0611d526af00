"""Translation worker task.

Translates a content item into every target language using the
configured translation provider (Google Translate, DeepL, or OpenAI)
and stores one translation row per language.
"""

from typing import Any

from voyage_core import get_logger
from voyage_core.exceptions import ContentNotFoundError
from voyage_core.services.content_translator import ContentTranslator
from voyage_core.services.system_service import SystemService
from voyage_core.services.translation_providers import create_translation_provider
from voyage_database.session import get_session_context

logger = get_logger(__name__)


def _summarize(outcomes: dict[str, dict[str, Any]]) -> str:
    """Overall job status from per-language outcomes."""
    statuses = {outcome["status"] for outcome in outcomes.values()}
    if statuses == {"failed"}:
        return "error"
    if "failed" in statuses:
        return "partial"
    return "success"


async def translate_content_task(
    _ctx: dict[str, Any],
    content_type: str,
    content_id: str,
    force_retranslate: bool = False,
) -> dict[str, Any]:
    """
    Translate one content item into all target languages.

    Args:
        _ctx: Worker context.
        content_type: Content family name ("section", "package", ...).
        content_id: Item identifier.
        force_retranslate: Re-translate complete languages too.

    Returns:
        Result dictionary with overall status and per-language outcomes.
    """
    logger.info(
        "Starting translation task",
        extra={
            "content_type": content_type,
            "content_id": content_id,
            "force_retranslate": force_retranslate,
        },
    )

    async with get_session_context() as session:
        provider_settings = await SystemService(session).get_translation_settings()
        provider = create_translation_provider(provider_settings)
        translator = ContentTranslator(session, provider)

        try:
            outcomes = await translator.translate_content(
                content_type, content_id, force_retranslate
            )
        except ContentNotFoundError as e:
            logger.error("Content not found", extra={"content_id": content_id})
            return {"status": "error", "content_id": content_id, "message": str(e)}

    status = _summarize(outcomes)
    logger.info(
        "Translation task finished",
        extra={"content_type": content_type, "content_id": content_id, "status": status},
    )
    return {
        "status": status,
        "content_type": content_type,
        "content_id": content_id,
        "languages": outcomes,
    }

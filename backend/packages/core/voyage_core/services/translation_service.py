"""
Translation service.

Handles manual translation triggers from the CMS: validates the target
content, queues a worker job per item, reports job progress, and reads
stored translations back.
"""

from typing import Any

from arq.connections import ArqRedis
from arq.jobs import Job
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from voyage_core import get_logger
from voyage_core.config import TARGET_LANGUAGES
from voyage_core.content_families import ContentFamily, get_schema, parse_family
from voyage_core.exceptions import ContentNotFoundError
from voyage_core.schemas.translation import (
    ContentTranslationResponse,
    TranslationJobStatus,
    TranslationStatus,
    TriggerData,
)
from voyage_database.models import SectionContentTranslation

logger = get_logger(__name__)

TRANSLATE_CONTENT_TASK = "translate_content_task"


class TranslationService:
    """Translation trigger and lookup service."""

    def __init__(self, session: AsyncSession, redis_pool: ArqRedis | None = None):
        self.session = session
        self.redis_pool = redis_pool

    async def trigger(
        self,
        content_type: ContentFamily | str,
        content_id: str,
        force_retranslate: bool = False,
    ) -> TriggerData:
        """
        Queue translation of one content item.

        The work happens in the worker; the returned job id can be polled
        with ``get_job_status``.

        Args:
            content_type: Content family name (``"package"`` ...).
            content_id: Item identifier.
            force_retranslate: Overwrite complete translations too.

        Returns:
            TriggerData with the queued job id.

        Raises:
            UnknownContentTypeError: If the content type is unknown.
            ContentNotFoundError: If the item does not exist.
            RuntimeError: If no task queue is configured.
        """
        family = parse_family(content_type)
        await self._ensure_exists(family, content_id)
        return await self._enqueue(family, content_id, force_retranslate)

    async def trigger_items(
        self,
        items: dict[str, list[TranslationStatus]],
        force_retranslate: bool = False,
    ) -> list[TriggerData]:
        """
        Queue translation of many items, e.g. everything not yet complete.

        Args:
            items: Coverage items per family report key.
            force_retranslate: Overwrite complete translations too.

        Returns:
            One TriggerData per queued job.
        """
        queued: list[TriggerData] = []
        for section_key, statuses in items.items():
            family = parse_family(section_key)
            for status in statuses:
                queued.append(await self._enqueue(family, status.content_id, force_retranslate))
        logger.info("Queued bulk translation", extra={"jobs": len(queued)})
        return queued

    async def get_job_status(self, job_id: str) -> TranslationJobStatus:
        """
        Report the state of a queued translation job.

        Args:
            job_id: Job id returned by ``trigger``.

        Returns:
            Job status and, once finished, its per-language result.
        """
        if self.redis_pool is None:
            raise RuntimeError("Task queue not available")

        job = Job(job_id, self.redis_pool)
        status_value = (await job.status()).value
        result: dict[str, Any] | None = None

        if status_value == "complete":
            info = await job.result_info()
            if info is not None:
                if info.success and isinstance(info.result, dict):
                    result = info.result
                elif not info.success:
                    result = {"status": "error", "error": str(info.result)}

        return TranslationJobStatus(job_id=job_id, status=status_value, result=result)

    async def get_translation(
        self, content_type: ContentFamily | str, content_id: str, language: str
    ) -> ContentTranslationResponse | None:
        """
        Get the stored translation of an item.

        Args:
            content_type: Content family name.
            content_id: Item identifier.
            language: Target language code.

        Returns:
            Stored fields, or None for the source language or a missing row.
        """
        schema = get_schema(content_type)
        if language not in TARGET_LANGUAGES:
            return None

        result = await self.session.execute(
            select(schema.translation_model).where(
                schema.translation_fk_column() == content_id,
                schema.translation_model.language == language,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None

        return ContentTranslationResponse(
            content_type=schema.family.value,
            content_id=content_id,
            language=language,
            is_auto_translated=row.is_auto_translated,
            translated_fields={name: getattr(row, name) for name in schema.payload_fields()},
            updated_at=row.updated_at,
        )

    async def count_section_translations(self, section_id: str) -> int:
        """Number of translation rows stored for one page section."""
        result = await self.session.execute(
            select(func.count())
            .select_from(SectionContentTranslation)
            .where(SectionContentTranslation.section_id == section_id)
        )
        return int(result.scalar_one())

    async def _ensure_exists(self, family: ContentFamily, content_id: str) -> None:
        schema = get_schema(family)
        result = await self.session.execute(
            select(schema.content_id_column()).where(schema.content_id_column() == content_id)
        )
        if result.scalar_one_or_none() is None:
            raise ContentNotFoundError(f"{family.value.capitalize()} not found")

    async def _enqueue(
        self, family: ContentFamily, content_id: str, force_retranslate: bool
    ) -> TriggerData:
        if self.redis_pool is None:
            raise RuntimeError("Task queue not available")

        job = await self.redis_pool.enqueue_job(
            TRANSLATE_CONTENT_TASK,
            content_type=family.value,
            content_id=content_id,
            force_retranslate=force_retranslate,
        )
        job_id = job.job_id if job else "unknown"
        logger.info(
            "Queued translation task",
            extra={"content_type": family.value, "content_id": content_id, "job_id": job_id},
        )
        return TriggerData(content_type=family.value, content_id=content_id, job_id=job_id)



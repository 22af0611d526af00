"""Tests for translation service."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from voyage_core.content_families import get_schema
from voyage_core.exceptions import ContentNotFoundError, UnknownContentTypeError
from voyage_core.services.coverage_service import build_item_status
from voyage_core.services.translation_service import TRANSLATE_CONTENT_TASK, TranslationService
from voyage_database import models


def _session_returning(value) -> AsyncMock:
    mock_session = AsyncMock()
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = value
    mock_session.execute.return_value = mock_result
    return mock_session


def _redis_pool(job_id: str = "job-123") -> MagicMock:
    pool = MagicMock()
    pool.enqueue_job = AsyncMock(return_value=SimpleNamespace(job_id=job_id))
    return pool


class TestTranslationServiceTrigger:
    """Test TranslationService.trigger method."""

    @pytest.mark.asyncio
    async def test_unknown_content_type_raises(self):
        service = TranslationService(_session_returning("x"), _redis_pool())

        with pytest.raises(UnknownContentTypeError, match="Unknown content type: video"):
            await service.trigger("video", "v1")

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self):
        pool = _redis_pool()
        service = TranslationService(_session_returning(None), pool)

        with pytest.raises(ContentNotFoundError, match="Package not found"):
            await service.trigger("package", "missing")

        pool.enqueue_job.assert_not_called()

    @pytest.mark.asyncio
    async def test_enqueues_job(self):
        pool = _redis_pool("job-abc")
        service = TranslationService(_session_returning("p1"), pool)

        result = await service.trigger("package", "p1", force_retranslate=True)

        assert result.job_id == "job-abc"
        assert result.content_type == "package"
        assert result.content_id == "p1"
        pool.enqueue_job.assert_awaited_once_with(
            TRANSLATE_CONTENT_TASK,
            content_type="package",
            content_id="p1",
            force_retranslate=True,
        )

    @pytest.mark.asyncio
    async def test_duplicate_job_reports_unknown_id(self):
        pool = MagicMock()
        pool.enqueue_job = AsyncMock(return_value=None)
        service = TranslationService(_session_returning("b1"), pool)

        result = await service.trigger("blog", "b1")

        assert result.job_id == "unknown"

    @pytest.mark.asyncio
    async def test_without_queue_raises(self):
        service = TranslationService(_session_returning("b1"))

        with pytest.raises(RuntimeError, match="Task queue not available"):
            await service.trigger("blog", "b1")

    @pytest.mark.asyncio
    async def test_trigger_items(self):
        pool = _redis_pool()
        service = TranslationService(AsyncMock(), pool)
        items = {
            "packages": [build_item_status(get_schema("package"), "p1", "Bromo", [])],
            "gallery": [build_item_status(get_schema("gallery"), "g1", "Sunset", [])],
            "blogs": [],
        }

        queued = await service.trigger_items(items)

        assert [(q.content_type, q.content_id) for q in queued] == [
            ("package", "p1"),
            ("gallery", "g1"),
        ]
        assert pool.enqueue_job.await_count == 2


class TestTranslationServiceJobStatus:
    """Test TranslationService.get_job_status method."""

    @pytest.mark.asyncio
    async def test_complete_job_returns_result(self):
        job = MagicMock()
        job.status = AsyncMock(return_value=SimpleNamespace(value="complete"))
        job.result_info = AsyncMock(
            return_value=SimpleNamespace(success=True, result={"status": "success"})
        )

        with patch("voyage_core.services.translation_service.Job", return_value=job):
            status = await TranslationService(AsyncMock(), MagicMock()).get_job_status("job-1")

        assert status.status == "complete"
        assert status.result == {"status": "success"}

    @pytest.mark.asyncio
    async def test_failed_job_reports_error(self):
        job = MagicMock()
        job.status = AsyncMock(return_value=SimpleNamespace(value="complete"))
        job.result_info = AsyncMock(
            return_value=SimpleNamespace(success=False, result=RuntimeError("boom"))
        )

        with patch("voyage_core.services.translation_service.Job", return_value=job):
            status = await TranslationService(AsyncMock(), MagicMock()).get_job_status("job-1")

        assert status.result == {"status": "error", "error": "boom"}

    @pytest.mark.asyncio
    async def test_queued_job_has_no_result(self):
        job = MagicMock()
        job.status = AsyncMock(return_value=SimpleNamespace(value="queued"))
        job.result_info = AsyncMock()

        with patch("voyage_core.services.translation_service.Job", return_value=job):
            status = await TranslationService(AsyncMock(), MagicMock()).get_job_status("job-1")

        assert status.status == "queued"
        assert status.result is None
        job.result_info.assert_not_called()


class TestTranslationServiceLookup:
    """Test reading stored translations."""

    @pytest.mark.asyncio
    async def test_get_translation(self, db_session, session_factory):
        db_session.add(models.GalleryItem(id="g1", title="Matahari terbenam"))
        db_session.add(
            models.GalleryTranslation(
                gallery_id="g1", language="en", title="Sunset", is_auto_translated=True
            )
        )
        await db_session.commit()

        async with session_factory() as session:
            translation = await TranslationService(session).get_translation("gallery", "g1", "en")

        assert translation is not None
        assert translation.translated_fields == {"title": "Sunset", "description": None, "tags": None}
        assert translation.is_auto_translated is True

    @pytest.mark.asyncio
    async def test_get_translation_for_source_language(self, db_session):
        assert await TranslationService(db_session).get_translation("gallery", "g1", "id") is None

    @pytest.mark.asyncio
    async def test_get_translation_missing_row(self, db_session):
        assert await TranslationService(db_session).get_translation("blog", "b1", "de") is None

    @pytest.mark.asyncio
    async def test_count_section_translations(self, db_session):
        db_session.add(models.SectionContent(section_id="hero", title="Jelajahi"))
        db_session.add_all(
            models.SectionContentTranslation(section_id="hero", language=lang, title="t")
            for lang in ("en", "de")
        )
        await db_session.commit()
        service = TranslationService(db_session)

        assert await service.count_section_translations("hero") == 2
        assert await service.count_section_translations("footer") == 0

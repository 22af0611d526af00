"""Tests for the translation worker task."""

from contextlib import asynccontextmanager
from unittest.mock import patch

import pytest
from sqlalchemy import select

from voyage_core.services.translation_providers import TranslationProvider
from voyage_database import models
from voyage_worker.main import WorkerSettings
from voyage_worker.tasks.translation import _summarize, translate_content_task


class _PrefixProvider(TranslationProvider):
    name = "prefix"

    def __init__(self, fail_on: set[str] | None = None):
        self.fail_on = fail_on or set()

    def translate(self, text: str, source: str, target: str) -> str:
        if target in self.fail_on:
            raise RuntimeError(f"{target} unavailable")
        return f"{target}:{text}"


@pytest.fixture
def worker_session(session_factory):
    """Point the task at the test database."""

    @asynccontextmanager
    async def _context():
        async with session_factory() as session:
            yield session

    with patch("voyage_worker.tasks.translation.get_session_context", _context):
        yield


class TestSummarize:
    """Test overall job status."""

    def test_all_translated_or_skipped(self):
        assert _summarize({"en": {"status": "translated"}, "de": {"status": "skipped"}}) == "success"

    def test_some_failed(self):
        assert _summarize({"en": {"status": "translated"}, "de": {"status": "failed"}}) == "partial"

    def test_all_failed(self):
        assert _summarize({"en": {"status": "failed"}, "de": {"status": "failed"}}) == "error"


class TestTranslateContentTask:
    """Test translate_content_task."""

    @pytest.mark.asyncio
    async def test_translates_gallery_item(self, db_session, session_factory, worker_session):
        db_session.add(
            models.GalleryItem(
                id="g1", title="Matahari terbenam", description="Di Uluwatu", tags="pantai"
            )
        )
        await db_session.commit()

        with patch(
            "voyage_worker.tasks.translation.create_translation_provider",
            return_value=_PrefixProvider(),
        ):
            result = await translate_content_task({}, "gallery", "g1")

        assert result["status"] == "success"
        assert result["content_type"] == "gallery"
        assert set(result["languages"]) == {"en", "de", "nl", "zh"}

        async with session_factory() as session:
            rows = (
                await session.execute(
                    select(models.GalleryTranslation).where(models.GalleryTranslation.gallery_id == "g1")
                )
            ).scalars().all()
        assert {row.language: row.title for row in rows}["nl"] == "nl:Matahari terbenam"

    @pytest.mark.asyncio
    async def test_partial_failure(self, db_session, worker_session):
        db_session.add(models.GalleryItem(id="g1", title="Sawah"))
        await db_session.commit()

        with patch(
            "voyage_worker.tasks.translation.create_translation_provider",
            return_value=_PrefixProvider(fail_on={"zh"}),
        ):
            result = await translate_content_task({}, "gallery", "g1")

        assert result["status"] == "partial"
        assert result["languages"]["zh"]["status"] == "failed"
        assert result["languages"]["en"]["status"] == "translated"

    @pytest.mark.asyncio
    async def test_missing_content(self, worker_session):
        with patch(
            "voyage_worker.tasks.translation.create_translation_provider",
            return_value=_PrefixProvider(),
        ):
            result = await translate_content_task({}, "blog", "missing")

        assert result == {
            "status": "error",
            "content_id": "missing",
            "message": "Blog missing not found",
        }

    @pytest.mark.asyncio
    async def test_uses_stored_provider_settings(self, db_session, worker_session):
        db_session.add(models.SystemSetting(key="translation_provider", value="deepl"))
        db_session.add(models.SystemSetting(key="translation_api_key", value="dl-key"))
        db_session.add(models.GalleryItem(id="g1", title="Sawah"))
        await db_session.commit()

        with patch(
            "voyage_worker.tasks.translation.create_translation_provider",
            return_value=_PrefixProvider(),
        ) as factory:
            await translate_content_task({}, "gallery", "g1")

        settings = factory.call_args.args[0]
        assert settings["translation_provider"] == "deepl"
        assert settings["translation_api_key"] == "dl-key"


def test_worker_registers_translation_task():
    assert translate_content_task in WorkerSettings.functions

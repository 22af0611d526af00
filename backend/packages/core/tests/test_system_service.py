"""Tests for system service."""

import pytest

from voyage_core.config import TranslationConfig
from voyage_core.services.system_service import SystemService


def _config(**overrides) -> TranslationConfig:
    values = {"provider": "google", "api_key": "", "model": "gpt-4o-mini", "fallback": True}
    values.update(overrides)
    return TranslationConfig(**values)


@pytest.mark.asyncio
async def test_settings_default_to_environment(db_session) -> None:
    service = SystemService(db_session, _config(provider="deepl", api_key="env-key"))

    settings = await service.get_translation_settings()

    assert settings == {
        "translation_provider": "deepl",
        "translation_api_key": "env-key",
        "translation_model": "gpt-4o-mini",
        "translation_fallback": True,
    }


@pytest.mark.asyncio
async def test_stored_settings_win(db_session) -> None:
    service = SystemService(db_session, _config(provider="deepl", api_key="env-key"))
    await service.set_setting("translation_provider", "openai")
    await service.set_setting("translation_api_key", "sk-db")
    await service.set_setting("translation_fallback", "false")

    settings = await service.get_translation_settings()

    assert settings["translation_provider"] == "openai"
    assert settings["translation_api_key"] == "sk-db"
    assert settings["translation_fallback"] is False


@pytest.mark.asyncio
async def test_set_setting_updates_existing(db_session) -> None:
    service = SystemService(db_session, _config())

    await service.set_setting("translation_model", "gpt-4o", "Model for OpenAI")
    updated = await service.set_setting("translation_model", "gpt-4.1-mini")

    assert updated.value == "gpt-4.1-mini"
    assert updated.description == "Model for OpenAI"
    assert await service.get_setting("translation_model") == "gpt-4.1-mini"
    assert await service.get_setting("missing", "default") == "default"

"""
Translation configuration.

This module provides configuration settings for translation providers
loaded from environment variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"

SOURCE_LANGUAGE = "id"
TARGET_LANGUAGES: tuple[str, ...] = ("en", "de", "nl", "zh")


class TranslationConfig(BaseSettings):
    """
    Translation provider configuration from environment variables.

    All settings are prefixed with TRANSLATION_ in environment. Values
    stored in the ``system_settings`` table take precedence at runtime.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: str = "google"  # "google" | "deepl" | "openai"
    api_key: str = ""
    model: str = "gpt-4o-mini"
    # Fall back to free Google Translate when the primary provider fails
    fallback: bool = True


# Global instance
translation_config = TranslationConfig()

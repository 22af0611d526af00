"""
System service.

Provides logic for system settings, including the translation provider
settings the CMS can override at runtime.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voyage_core.config import TranslationConfig, translation_config
from voyage_database.models.system_setting import SystemSetting

# Setting keys read by create_translation_provider()
TRANSLATION_SETTING_KEYS = (
    "translation_provider",
    "translation_api_key",
    "translation_model",
    "translation_fallback",
)


class SystemService:
    """Service for system settings."""

    def __init__(self, session: AsyncSession, config: TranslationConfig | None = None) -> None:
        """
        Initialize system service.

        Args:
            session: Database session.
            config: Environment defaults for translation settings.
        """
        self.session = session
        self.config = config or translation_config

    async def get_setting(self, key: str, default: str | None = None) -> str | None:
        """
        Get a system setting by key.

        Args:
            key: Setting key.
            default: Default value if not found.

        Returns:
            Setting value or default.
        """
        result = await self.session.execute(select(SystemSetting).where(SystemSetting.key == key))
        setting = result.scalar_one_or_none()
        return setting.value if setting else default

    async def set_setting(self, key: str, value: str, description: str | None = None) -> SystemSetting:
        """
        Set a system setting.

        Args:
            key: Setting key.
            value: Setting value.
            description: Optional description.

        Returns:
            Updated setting.
        """
        result = await self.session.execute(select(SystemSetting).where(SystemSetting.key == key))
        setting = result.scalar_one_or_none()

        if setting:
            setting.value = value
            if description:
                setting.description = description
        else:
            setting = SystemSetting(key=key, value=value, description=description)
            self.session.add(setting)

        await self.session.commit()
        await self.session.refresh(setting)
        return setting

    async def get_translation_settings(self) -> dict[str, Any]:
        """
        Resolve translation provider settings.

        Values stored in ``system_settings`` win over environment config.

        Returns:
            Settings dict suitable for ``create_translation_provider``.
        """
        result = await self.session.execute(
            select(SystemSetting).where(SystemSetting.key.in_(TRANSLATION_SETTING_KEYS))
        )
        stored = {setting.key: setting.value for setting in result.scalars().all()}

        fallback_value = stored.get("translation_fallback")
        return {
            "translation_provider": stored.get("translation_provider") or self.config.provider,
            "translation_api_key": stored.get("translation_api_key") or self.config.api_key,
            "translation_model": stored.get("translation_model") or self.config.model,
            "translation_fallback": (
                fallback_value.lower() == "true"
                if fallback_value is not None
                else self.config.fallback
            ),
        }

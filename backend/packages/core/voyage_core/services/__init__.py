"""
Service layer.

Business logic services for the application.
"""

from .content_translator import ContentTranslator
from .coverage_service import CoverageService
from .system_service import SystemService
from .translation_quality import TranslationQualityService
from .translation_service import TranslationService

__all__ = [
    "CoverageService",
    "ContentTranslator",
    "SystemService",
    "TranslationQualityService",
    "TranslationService",
]

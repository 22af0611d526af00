"""
Pydantic schemas for API requests and responses.
"""

from .translation import (
    ApiResponse,
    ContentTranslationResponse,
    CoverageReport,
    CoverageStatus,
    CoverageSummary,
    LanguageStatus,
    QueuedTranslations,
    SectionCoverage,
    SectionTranslationCount,
    SuspectTranslation,
    TranslationJobStatus,
    TranslationStatus,
    TranslationTriggerRequest,
    TranslationTriggerResponse,
    TriggerData,
    TriggerIncompleteRequest,
    TriggerLog,
)

__all__ = [
    "ApiResponse",
    # Coverage
    "CoverageStatus",
    "LanguageStatus",
    "TranslationStatus",
    "SectionCoverage",
    "CoverageSummary",
    "CoverageReport",
    "SectionTranslationCount",
    # Trigger
    "TranslationTriggerRequest",
    "TranslationTriggerResponse",
    "TriggerData",
    "TriggerLog",
    "TriggerIncompleteRequest",
    "QueuedTranslations",
    "TranslationJobStatus",
    # Stored translations
    "ContentTranslationResponse",
    "SuspectTranslation",
]

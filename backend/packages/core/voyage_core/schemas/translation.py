"""
Translation schemas.

Request and response models for translation coverage and trigger
operations. The CMS frontend speaks camelCase JSON, so every model
serializes with camelCase aliases while Python code uses snake_case.
"""

from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CoverageStatus = Literal["complete", "partial", "missing"]
LogLevel = Literal["success", "info", "warning", "error"]

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model with camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope used by every translation endpoint."""

    success: bool = True
    data: T


class LanguageStatus(CamelModel):
    """Translation state of one item in one language."""

    exists: bool
    is_auto_translated: bool = False
    completeness: float = Field(ge=0, le=100)
    missing_fields: list[str] = Field(default_factory=list)


class TranslationStatus(CamelModel):
    """Coverage of one content item across all languages."""

    section: str
    content_id: str
    content_title: str
    languages: dict[str, LanguageStatus]
    overall_coverage: float = Field(ge=0, le=100)
    missing_languages: list[str]
    status: CoverageStatus


class SectionCoverage(CamelModel):
    """Coverage of one content family."""

    section: str
    total_items: int
    translated_items: int
    coverage_percentage: float
    items: list[TranslationStatus]


class CoverageSummary(CamelModel):
    """Totals across all families."""

    total_items: int
    translated_items: int
    overall_coverage: float


class CoverageReport(CamelModel):
    """Coverage of every family plus a global summary."""

    summary: CoverageSummary
    sections: dict[str, SectionCoverage]


class TranslationTriggerRequest(CamelModel):
    """Manual translation trigger request."""

    content_type: str = Field(min_length=1)
    content_id: str = Field(min_length=1)
    force_retranslate: bool = False


class TriggerLog(CamelModel):
    """Log line returned to the CMS after a trigger."""

    type: LogLevel
    message: str
    timestamp: datetime


class TriggerData(CamelModel):
    """Identifies a queued translation job."""

    content_type: str
    content_id: str
    job_id: str


class TranslationTriggerResponse(CamelModel):
    """Response of a successful trigger."""

    success: bool = True
    message: str
    data: TriggerData
    logs: list[TriggerLog] = Field(default_factory=list)


class TriggerIncompleteRequest(CamelModel):
    """Bulk trigger request for every incomplete item."""

    force_retranslate: bool = False


class QueuedTranslations(CamelModel):
    """Jobs queued by a bulk trigger."""

    queued: list[TriggerData]


class TranslationJobStatus(CamelModel):
    """State of a queued translation job."""

    job_id: str
    status: str
    result: dict[str, Any] | None = None


class ContentTranslationResponse(CamelModel):
    """Stored translation of one item in one language."""

    content_type: str
    content_id: str
    language: str
    is_auto_translated: bool
    translated_fields: dict[str, str | None]
    updated_at: datetime | None = None


class SuspectTranslation(CamelModel):
    """Translation row whose text still looks like the source language."""

    content_type: str
    content_id: str
    language: str
    suspect_fields: list[str]


class SectionTranslationCount(CamelModel):
    """Number of stored translation rows for one page section."""

    success: bool = True
    has_translation: bool
    translation_count: int
    section_id: str

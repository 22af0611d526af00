"""
Translations router.

Provides endpoints for translation coverage checks, manual translation
triggers, job polling, and reading stored translations.
"""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from voyage_core import get_logger
from voyage_core.config import TARGET_LANGUAGES
from voyage_core.exceptions import ContentNotFoundError, UnknownContentTypeError
from voyage_core.schemas import (
    ApiResponse,
    ContentTranslationResponse,
    CoverageReport,
    QueuedTranslations,
    SectionTranslationCount,
    SuspectTranslation,
    TranslationJobStatus,
    TranslationStatus,
    TranslationTriggerRequest,
    TranslationTriggerResponse,
    TriggerIncompleteRequest,
    TriggerLog,
)
from voyage_core.services import (
    CoverageService,
    TranslationQualityService,
    TranslationService,
)

from ..dependencies import (
    get_coverage_service,
    get_quality_service,
    get_queued_translation_service,
    get_translation_service,
)

logger = get_logger(__name__)

router = APIRouter()


def _log(level: str, message: str) -> TriggerLog:
    return TriggerLog(type=level, message=message, timestamp=datetime.now(UTC))  # type: ignore[arg-type]


@router.get("/check")
async def check_translations(
    coverage_service: Annotated[CoverageService, Depends(get_coverage_service)],
    section: str = "all",
) -> ApiResponse[CoverageReport]:
    """
    Check translation coverage.

    Args:
        coverage_service: Coverage service.
        section: ``all`` or one of sections, packages, blogs,
            testimonials, gallery.

    Returns:
        Coverage report with a global summary.

    Raises:
        HTTPException: If the section is unknown.
    """
    try:
        report = await coverage_service.check_section(section)
    except UnknownContentTypeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApiResponse[CoverageReport](data=report)


@router.get("/needing")
async def list_needing_translation(
    coverage_service: Annotated[CoverageService, Depends(get_coverage_service)],
) -> ApiResponse[dict[str, list[TranslationStatus]]]:
    """
    List items that are not fully translated, grouped by family.

    Args:
        coverage_service: Coverage service.

    Returns:
        Incomplete items per family.
    """
    items = await coverage_service.items_needing_translation()
    return ApiResponse[dict[str, list[TranslationStatus]]](data=items)


@router.get("/check-status")
async def check_section_status(
    translation_service: Annotated[TranslationService, Depends(get_translation_service)],
    section_id: Annotated[str | None, Query(alias="sectionId")] = None,
) -> SectionTranslationCount:
    """
    Report how many translation rows a page section has.

    Args:
        translation_service: Translation service.
        section_id: Section identifier.

    Returns:
        Translation row count for the section.

    Raises:
        HTTPException: If no section id is given.
    """
    if not section_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="sectionId parameter is required"
        )

    count = await translation_service.count_section_translations(section_id)
    return SectionTranslationCount(
        has_translation=count > 0, translation_count=count, section_id=section_id
    )


@router.get("/suspect")
async def list_suspect_translations(
    quality_service: Annotated[TranslationQualityService, Depends(get_quality_service)],
) -> ApiResponse[list[SuspectTranslation]]:
    """
    List stored translations that still look Indonesian.

    Args:
        quality_service: Translation quality service.

    Returns:
        Suspect translation rows with the offending fields.
    """
    suspects = await quality_service.scan_suspect_translations()
    return ApiResponse[list[SuspectTranslation]](data=suspects)


@router.post("/trigger", status_code=status.HTTP_202_ACCEPTED, response_model=None)
async def trigger_translation(
    data: TranslationTriggerRequest,
    translation_service: Annotated[TranslationService, Depends(get_queued_translation_service)],
) -> TranslationTriggerResponse | JSONResponse:
    """
    Queue translation of one content item into every target language.

    The work runs in the worker; poll ``/jobs/{job_id}`` for the outcome.

    Args:
        data: Content type, content id and force flag.
        translation_service: Translation service.

    Returns:
        Queued job id plus progress log lines.

    Raises:
        HTTPException: If the content type is unknown or the item does not exist.
    """
    logs = [_log("info", f"Translation initiated for {data.content_type}: {data.content_id}")]

    try:
        queued = await translation_service.trigger(
            data.content_type, data.content_id, data.force_retranslate
        )
    except UnknownContentTypeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ContentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception(
            "Failed to trigger translation",
            extra={"content_type": data.content_type, "content_id": data.content_id},
        )
        logs.append(_log("error", f"Translation failed: {e}"))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "Failed to trigger translation",
                "details": str(e),
                "logs": [log.model_dump(mode="json", by_alias=True) for log in logs],
            },
        )

    languages = ", ".join(lang.upper() for lang in TARGET_LANGUAGES)
    logs.append(_log("info", f"Translating to {len(TARGET_LANGUAGES)} languages: {languages}"))
    if data.force_retranslate:
        logs.append(_log("warning", "Force re-translate: complete translations will be overwritten"))
    logs.append(_log("success", f"Translation job queued: {queued.job_id}"))

    return TranslationTriggerResponse(
        message=f"Translation queued for {queued.content_type} {queued.content_id}",
        data=queued,
        logs=logs,
    )


@router.post("/trigger-missing", status_code=status.HTTP_202_ACCEPTED)
async def trigger_missing_translations(
    data: TriggerIncompleteRequest,
    coverage_service: Annotated[CoverageService, Depends(get_coverage_service)],
    translation_service: Annotated[TranslationService, Depends(get_queued_translation_service)],
) -> ApiResponse[QueuedTranslations]:
    """
    Queue translation of every item that is not fully translated.

    Args:
        data: Force flag applied to every queued job.
        coverage_service: Coverage service.
        translation_service: Translation service.

    Returns:
        The queued jobs.
    """
    items = await coverage_service.items_needing_translation()
    queued = await translation_service.trigger_items(items, data.force_retranslate)
    return ApiResponse[QueuedTranslations](data=QueuedTranslations(queued=queued))


@router.get("/jobs/{job_id}")
async def get_job_status(
    job_id: str,
    translation_service: Annotated[TranslationService, Depends(get_queued_translation_service)],
) -> ApiResponse[TranslationJobStatus]:
    """
    Get the state of a queued translation job.

    Args:
        job_id: Job id returned by the trigger endpoint.
        translation_service: Translation service.

    Returns:
        Job status and, once finished, the per-language result.
    """
    job_status = await translation_service.get_job_status(job_id)
    return ApiResponse[TranslationJobStatus](data=job_status)


@router.get("/{content_type}/{content_id}/{language}")
async def get_translation(
    content_type: str,
    content_id: str,
    language: str,
    translation_service: Annotated[TranslationService, Depends(get_translation_service)],
) -> ApiResponse[ContentTranslationResponse]:
    """
    Get the stored translation of an item in one language.

    Args:
        content_type: Content family name.
        content_id: Item identifier.
        language: Target language code.
        translation_service: Translation service.

    Returns:
        Stored translated fields.

    Raises:
        HTTPException: If the content type is unknown or no translation exists.
    """
    try:
        translation = await translation_service.get_translation(content_type, content_id, language)
    except UnknownContentTypeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if translation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Translation not found")
    return ApiResponse[ContentTranslationResponse](data=translation)



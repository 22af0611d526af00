"""
FastAPI dependencies.

Provides dependency injection for database sessions, the task queue,
and services.
"""

from typing import Annotated

from arq.connections import ArqRedis
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from voyage_core.services import (
    CoverageService,
    TranslationQualityService,
    TranslationService,
)
from voyage_database.session import get_session, get_session_factory


async def get_redis_pool(request: Request) -> ArqRedis:
    """
    Get the Redis connection pool for arq.

    Returns:
        ArqRedis connection pool.

    Raises:
        RuntimeError: If Redis pool not initialized.
    """
    redis_pool = getattr(request.app.state, "redis_pool", None)
    if redis_pool is None:
        raise RuntimeError("Redis pool not initialized")
    return redis_pool


# Service dependencies
def get_translation_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TranslationService:
    """Get translation service instance for lookups that never touch the queue."""
    return TranslationService(session)


def get_queued_translation_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    redis_pool: Annotated[ArqRedis, Depends(get_redis_pool)],
) -> TranslationService:
    """Get translation service instance that can enqueue and poll jobs."""
    return TranslationService(session, redis_pool)


def get_coverage_service(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> CoverageService:
    """Get coverage service instance."""
    return CoverageService(session_factory)


def get_quality_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TranslationQualityService:
    """Get translation quality service instance."""
    return TranslationQualityService(session)

"""
Voyage worker entry point.

Run with ``arq voyage_worker.main.WorkerSettings``.
"""

from typing import Any

from arq.connections import RedisSettings

from voyage_core import get_logger, init_logging
from voyage_database.session import close_database, init_database

from .config import settings
from .tasks.translation import translate_content_task

logger = get_logger(__name__)


async def startup(ctx: dict[str, Any]) -> None:
    """Initialize logging and the database engine."""
    init_logging(settings.log_level)
    init_database(settings.database_url)
    logger.info("Voyage worker started")


async def shutdown(ctx: dict[str, Any]) -> None:
    """Dispose the database engine."""
    await close_database()
    logger.info("Voyage worker stopped")


class WorkerSettings:
    """arq worker configuration."""

    functions = [translate_content_task]
    on_startup = startup
    on_shutdown = shutdown
    redis_settings = RedisSettings.from_dsn(settings.redis_url)
    max_jobs = settings.max_jobs
    job_timeout = settings.job_timeout_seconds

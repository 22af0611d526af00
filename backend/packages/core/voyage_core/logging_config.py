"""
Logging configuration.

Services log through standard ``logging`` loggers and attach structured
context with ``extra={...}``. The formatter appends those fields as
``key=value`` pairs so they survive plain-text log collection.
"""

import logging
import sys

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}

_initialized = False


class ContextFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields after the message."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if not context:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{base} | {rendered}"


def init_logging(level: str | int = "INFO") -> None:
    """
    Configure the root ``voyage`` logging handler.

    Safe to call more than once; only the first call installs the handler.

    Args:
        level: Log level name or number.
    """
    global _initialized

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger()
    root.setLevel(level)

    if _initialized:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ContextFormatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)

"""Logging setup for hosts that embed the scorer.

The scoring modules only emit structlog events (``invalid_dimension_weights``,
``unknown_issue_code_skipped`` and the like). Nothing is rendered until the
host calls ``setup_logging()`` once at startup.
"""

import logging
import sys
from typing import Any

import structlog

from readiness.config import get_settings

SERVICE_NAME = "readiness"


def add_service_name(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag every event so a host's aggregated logs can be filtered to the scorer."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Render scorer events to stderr.

    Args:
        level: Level name; defaults to ``READINESS_LOG_LEVEL``. Unknown
            names fall back to INFO.
        json_logs: Force JSON or console output; defaults to JSON in
            production only
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    log_level = logging.getLevelNamesMapping().get(level_name, logging.INFO)
    if json_logs is None:
        json_logs = settings.is_production

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_name,
    ]
    if json_logs:
        processors.append(structlog.processors.dict_tracebacks)
    processors.append(_renderer(json_logs))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level, force=True)

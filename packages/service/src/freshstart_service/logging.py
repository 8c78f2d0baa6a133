"""structlog setup for the document service."""

import logging

import structlog

from freshstart_core.exceptions import ConfigurationError


def configure_logging(level: str = "INFO", *, json: bool = False) -> None:
    """Configure structlog to drop events below ``level``.

    Args:
        level: Standard level name, e.g. ``"DEBUG"`` or ``"WARNING"``.
        json: Render events as JSON lines instead of console output.

    Raises:
        ConfigurationError: If ``level`` is not a standard level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(
            f"Invalid log level: {level}",
            config_key="FRESHSTART_LOG_LEVEL",
            expected="DEBUG, INFO, WARNING, ERROR or CRITICAL",
            actual=level,
        )

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )

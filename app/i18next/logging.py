"""Structured logging for the translation pipeline.

All events go through the stdlib logger named ``i18next``, so a host
application can tune the library with ``logging.getLogger("i18next")``.
Misses and nesting cycles are logged at debug level, render failures at
warning level; the default level (WARNING) therefore reports only failures.
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from i18next.config import I18nSettings, settings as default_settings

LOGGER_NAME = "i18next"


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(
    settings: Optional[I18nSettings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the ``i18next`` stdlib logger.

    Only the library logger's level is set; the root logger keeps whatever
    the host configured. Events below the level are dropped before any
    rendering happens.

    Args:
        settings: Settings to read LOG_LEVEL and PREFIX from. Defaults to
            the module-level settings.
        log_level: Optional override for log level. Defaults to settings.LOG_LEVEL.
        is_production: Optional override for production mode. Controls JSON
            vs console output. Defaults to settings.is_production.

    Returns:
        Logger bound to the ``i18next`` stdlib logger.
    """
    library_logger = logging.getLogger(LOGGER_NAME)

    # Suppress library output during tests
    if _is_test_environment():
        library_logger.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        return structlog.stdlib.get_logger(LOGGER_NAME)

    settings = settings or default_settings
    level = _resolve_level(log_level or settings.LOG_LEVEL)
    production = settings.is_production if is_production is None else is_production

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if not production:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    library_logger.setLevel(level)
    # No-op when the host already configured root handlers.
    logging.basicConfig(format="%(message)s")

    return structlog.stdlib.get_logger(LOGGER_NAME)


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context."""
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    module = inspect.getmodule(frame)

    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return logger.bind(component=parts[-1], module_path=module_name)

    return logger.bind(component="unknown")

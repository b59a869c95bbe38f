"""Structlog configuration and logger setup.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import logging
import sys
import inspect
import structlog
from structlog.stdlib import BoundLogger
from typing import Any, List, Optional
from infrastructure.configuration import settings
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
)

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Any]:
    """Processor chain shared by every logger.

    Context variables first so the correlation id bound by
    ``bind_request_context`` reaches masking and rendering.
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return processors


def _configure_silent_logging() -> BoundLogger:
    # Loggers stay usable (tests patch and assert on them) but nothing is
    # emitted.
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Console rendering in development, JSON in production. Sensitive keys are
    masked and long values truncated before rendering. Output is suppressed
    entirely under pytest.

    Args:
        log_level: Optional override for log level. Defaults to settings.LOG_LEVEL.
        is_production: Optional override for production mode. Defaults to
            settings.is_production.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _configure_silent_logging()

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    # Bolt and the Slack SDK log every socket-mode frame at DEBUG.
    for noisy in ("slack_bolt", "slack_sdk"):
        logging.getLogger(noisy).setLevel(max(logging.INFO, logging.root.level))

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    In ``modules/autotranslate/gate.py`` the context is
    ``{"component": "gate", "module_path": "modules.autotranslate.gate"}``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )

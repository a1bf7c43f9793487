"""Structlog logger setup for the library.

The library never calls ``structlog.configure``: the host's structlog
configuration stays as it is. Library loggers wrap the standard library
logger named ``simple_i18n`` with their own processor chain, so hosts
control output through their logging configuration, or by calling
``configure_logging()`` explicitly.

Usage:
    from simple_i18n.infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from simple_i18n.infrastructure.configuration import settings

LOGGER_NAME = "simple_i18n"
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


# Shared by every bound library logger; updated in place by configure_logging
_processors: List[Processor] = _build_processors(settings.is_production)

# Module-level logger, created without touching the global structlog config
logger: BoundLogger = structlog.wrap_logger(
    logging.getLogger(LOGGER_NAME),
    processors=_processors,
    wrapper_class=structlog.stdlib.BoundLogger,
)

if _is_test_environment():
    logging.getLogger(LOGGER_NAME).setLevel(SILENT)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure the library logger.

    Only the ``simple_i18n`` standard library logger and the library's own
    processor chain are changed. Under pytest the logger stays silent.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        The library logger.
    """
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    prod_mode = is_production if is_production is not None else settings.is_production
    _processors[:] = _build_processors(prod_mode)

    if _is_test_environment():
        stdlib_logger.setLevel(SILENT)
        return logger

    effective_log_level = log_level or settings.LOG_LEVEL
    stdlib_logger.setLevel(getattr(logging, effective_log_level.upper(), logging.INFO))
    if not stdlib_logger.handlers and not logging.root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        stdlib_logger.addHandler(handler)
    return logger


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds ``component`` (last part of the module name) and ``module_path``.

    Example:
        # In simple_i18n/infrastructure/i18n/loader.py
        logger = get_module_logger()
        # logger has context: {"component": "loader",
        #                      "module_path": "simple_i18n.infrastructure.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None

    if not module_name:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.split(".")[-1], module_path=module_name)

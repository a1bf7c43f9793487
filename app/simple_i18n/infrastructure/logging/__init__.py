"""Structured logging infrastructure.

Public API:
    - configure_logging(): Set the level and renderer of the library logger
    - get_module_logger(): Get a logger for the calling module
"""

from simple_i18n.infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
]

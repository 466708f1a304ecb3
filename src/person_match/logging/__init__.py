"""
Logging package for ``person_match``.

Modules call ``get_logger("<module>")`` and share the console + master log
handlers configured from ``config/person_match.yml``.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    log_debug,
    log_error,
    log_info,
    log_warning,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
]

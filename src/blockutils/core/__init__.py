"""Core blockutils utilities.

This module exports configuration, logging, errors and parameter
coercion helpers for use throughout the package.
"""

from blockutils.core.config import Settings, get_settings
from blockutils.core.exceptions import (
    BlockUtilsError,
    EntropySourceError,
    InvalidInputError,
)
from blockutils.core.logging import (
    LoggingContext,
    clear_context,
    configure_logging,
    get_logger,
)
from blockutils.core.params import coerce_file_reference, coerce_string_list

__all__ = [
    "BlockUtilsError",
    "EntropySourceError",
    "InvalidInputError",
    "LoggingContext",
    "Settings",
    "clear_context",
    "coerce_file_reference",
    "coerce_string_list",
    "configure_logging",
    "get_logger",
    "get_settings",
]

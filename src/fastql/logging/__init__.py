"""Logging infrastructure for fastql.

This module provides structured logging with JSON output, statement
context tracking and OpenTelemetry trace correlation.
"""

from fastql.logging.filters import (
    ContextFilter,
    set_logging_context,
    statement_context,
)
from fastql.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_logging_context",
    "statement_context",
]

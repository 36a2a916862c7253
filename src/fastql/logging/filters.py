"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
enabling correlation of log lines with the entity and statement being
generated.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional

from fastql.__version__ import __version__

entity_var: ContextVar[Optional[str]] = ContextVar("entity", default=None)
operation_var: ContextVar[Optional[str]] = ContextVar("operation", default=None)

_static_context: Dict[str, Any] = {}


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    Static context (environment plus free-form extras) is configured once
    with :func:`set_logging_context`; per-call context (entity, operation)
    comes from :func:`statement_context`.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        for key, value in _static_context.items():
            setattr(record, key, value)

        setattr(record, "entity", entity_var.get())
        setattr(record, "operation", operation_var.get())
        setattr(record, "sdk_name", "fastql")
        setattr(record, "core_version", __version__)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Replace the static context stamped on every record."""
    _static_context.clear()
    if environment is not None:
        _static_context["environment"] = environment
    if extra:
        _static_context.update(extra)


@contextmanager
def statement_context(
    entity: Optional[str] = None,
    operation: Optional[str] = None,
) -> Iterator[None]:
    """Scope entity/operation context to one generation call."""
    entity_token = entity_var.set(entity)
    operation_token = operation_var.set(operation)
    try:
        yield
    finally:
        entity_var.reset(entity_token)
        operation_var.reset(operation_token)

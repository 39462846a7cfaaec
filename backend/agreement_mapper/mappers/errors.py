"""
Exception hierarchy for agreement field mapping.

Entity mappers themselves never raise: missing data degrades to empty
strings.  These exceptions cover dispatch problems (e.g. an application
whose entity type has no registered mapper) and carry structured
context for logging.
"""

from __future__ import annotations


class MappingError(Exception):
    """Base exception for all mapping errors."""

    def __init__(
        self,
        message: str,
        *,
        entity_type: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.details = details or {}
        super().__init__(message)


class UnsupportedEntityTypeError(MappingError):
    """No mapper is registered for the requested entity type."""
    pass

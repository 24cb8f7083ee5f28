"""Validation exceptions for the study knowledge engine."""

from .base import StudyRagError


class ValidationError(StudyRagError):
    """Input validation failed."""

    error_code = "SR_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "SR_VAL_002"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "SR_VAL_003"


class InvalidSearchOptionsError(ValidationError):
    """Search options are out of range (e.g. max_results below 1)."""

    error_code = "SR_VAL_004"

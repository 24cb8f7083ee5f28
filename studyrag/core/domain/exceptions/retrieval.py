"""Retrieval exceptions for the study knowledge engine."""

from .base import StudyRagError


class RetrievalError(StudyRagError):
    """Error during passage retrieval."""

    error_code = "SR_RET_001"


class NotInitializedError(RetrievalError):
    """A query was issued before the passage index finished loading.

    An empty result here would be indistinguishable from "no matches",
    so callers always get this error instead.
    """

    error_code = "SR_RET_002"


class CategoryNotFoundError(RetrievalError):
    """Requested category has no indexed passages."""

    error_code = "SR_RET_003"

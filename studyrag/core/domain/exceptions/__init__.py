"""Custom exception hierarchy for the study knowledge engine.

Each exception includes:
- Error codes for quick identification
- Automatic capture of class, method, file, and line number
- Cause chaining for underlying exceptions
- JSON serialization for structured logging

Import from this package directly:

    from studyrag.core.domain.exceptions import StudyRagError, EmptyQueryError
"""

# Base classes
from .base import ExceptionContext, StudyRagError

# Configuration exceptions
from .configuration import (
    ConfigurationError,
    InvalidConfigurationError,
)

# Data ingestion exceptions
from .data_ingestion import (
    CorpusSourceError,
    DocumentValidationError,
    EmptyDocumentError,
    IngestionError,
)

# Retrieval exceptions
from .retrieval import (
    CategoryNotFoundError,
    NotInitializedError,
    RetrievalError,
)

# Validation exceptions
from .validation import (
    EmptyQueryError,
    InvalidSearchOptionsError,
    QueryTooLongError,
    ValidationError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "StudyRagError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    # Data Ingestion
    "IngestionError",
    "DocumentValidationError",
    "EmptyDocumentError",
    "CorpusSourceError",
    # Retrieval
    "RetrievalError",
    "NotInitializedError",
    "CategoryNotFoundError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
    "QueryTooLongError",
    "InvalidSearchOptionsError",
]

"""Unit tests for exception handling system.

Tests both the exception hierarchy and the exception handler utilities,
including the mapping from exception type to CLI exit status.
"""

import json
import logging

import pytest

from studyrag.adapters.common.exception_handler import (
    EXIT_CONFIG,
    EXIT_ERROR,
    EXIT_UNAVAILABLE,
    EXIT_USAGE,
    format_exception_json,
    get_error_code,
    get_exit_code,
    log_exception,
)
from studyrag.core.domain.exceptions import (
    CategoryNotFoundError,
    ConfigurationError,
    CorpusSourceError,
    DocumentValidationError,
    EmptyDocumentError,
    EmptyQueryError,
    IngestionError,
    InvalidConfigurationError,
    InvalidSearchOptionsError,
    NotInitializedError,
    QueryTooLongError,
    RetrievalError,
    StudyRagError,
    ValidationError,
)

# Apply @pytest.mark.unit to all tests in this module
pytestmark = pytest.mark.unit

ALL_ERRORS = [
    StudyRagError,
    ValidationError,
    EmptyQueryError,
    QueryTooLongError,
    InvalidSearchOptionsError,
    RetrievalError,
    NotInitializedError,
    CategoryNotFoundError,
    IngestionError,
    DocumentValidationError,
    EmptyDocumentError,
    CorpusSourceError,
    ConfigurationError,
    InvalidConfigurationError,
]


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    def test_study_rag_error_is_base(self):
        """StudyRagError should be the base for all custom exceptions."""
        for error_class in ALL_ERRORS:
            assert issubclass(error_class, StudyRagError)

    def test_validation_errors(self):
        assert issubclass(EmptyQueryError, ValidationError)
        assert issubclass(QueryTooLongError, ValidationError)
        assert issubclass(InvalidSearchOptionsError, ValidationError)

    def test_retrieval_errors(self):
        assert issubclass(NotInitializedError, RetrievalError)
        assert issubclass(CategoryNotFoundError, RetrievalError)

    def test_ingestion_errors(self):
        assert issubclass(DocumentValidationError, IngestionError)
        assert issubclass(EmptyDocumentError, IngestionError)
        assert issubclass(CorpusSourceError, IngestionError)

    def test_error_codes_are_unique(self):
        codes = [error_class.error_code for error_class in ALL_ERRORS]
        assert len(codes) == len(set(codes))


class TestExceptionCreation:
    """Tests for creating and using exceptions."""

    def test_basic_exception_creation(self):
        """Basic exception should have message and error code."""
        exc = StudyRagError("Test error message")
        assert str(exc) == "Test error message"
        assert exc.message == "Test error message"
        assert exc.error_code == "SR_ERR_001"

    def test_exception_with_context(self):
        exc = QueryTooLongError("Too long", context={"length": 1200, "max_length": 1000})
        assert exc.extra_context == {"length": 1200, "max_length": 1000}

    def test_exception_with_cause(self):
        """Exception should chain underlying cause."""
        original = json.JSONDecodeError("Expecting value", "", 0)
        exc = CorpusSourceError("Corpus file is not valid JSON", cause=original)

        assert exc.cause is original
        assert exc.to_dict()["cause"]["type"] == "JSONDecodeError"

    def test_location_is_captured(self):
        """Location should point at the raise site."""
        exc = EmptyQueryError("empty")
        assert exc.location.method_name == "test_location_is_captured"
        assert exc.location.class_name == "TestExceptionCreation"
        assert exc.location.file_name == "test_exceptions.py"

    def test_to_dict_structure(self):
        exc = CategoryNotFoundError("missing", context={"category": "kimya"})
        data = exc.to_dict()

        assert data["error"] == {
            "type": "CategoryNotFoundError",
            "code": "SR_RET_003",
            "message": "missing",
        }
        assert data["context"] == {"category": "kimya"}
        assert "stack_trace" not in data
        json.dumps(data)


class TestExceptionHandler:
    """Tests for the exception handler utilities."""

    def test_format_custom_exception(self):
        data = format_exception_json(EmptyQueryError("empty"), extra_context={"route": "search"})
        assert data["error"]["code"] == "SR_VAL_002"
        assert data["context"] == {"route": "search"}

    def test_format_standard_exception(self):
        try:
            raise KeyError("missing")
        except KeyError as e:
            data = format_exception_json(e, include_trace=True)

        assert data["error"]["type"] == "KeyError"
        assert data["error"]["code"] == "PYTHON_ERR"
        assert data["location"]["method"] == "test_format_standard_exception"
        assert data["stack_trace"]

    def test_log_exception_writes_structured_entry(self, caplog):
        logger = logging.getLogger("studyrag.tests.errors")
        with caplog.at_level(logging.DEBUG, logger="studyrag.tests.errors"):
            log_exception(
                NotInitializedError("not ready"),
                log=logger,
                level=logging.DEBUG,
                extra_context={"command": "search"},
            )

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        data = json.loads(record.getMessage())
        assert data["error"]["code"] == "SR_RET_002"
        assert data["context"] == {"command": "search"}

    def test_get_error_code(self):
        assert get_error_code(InvalidConfigurationError("bad")) == "SR_CFG_002"
        assert get_error_code(RuntimeError("boom")) == "PYTHON_ERR"

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (EmptyQueryError("empty"), EXIT_USAGE),
            (InvalidSearchOptionsError("k"), EXIT_USAGE),
            (NotInitializedError("not ready"), EXIT_UNAVAILABLE),
            (CorpusSourceError("unreadable"), EXIT_UNAVAILABLE),
            (InvalidConfigurationError("bad"), EXIT_CONFIG),
            (CategoryNotFoundError("missing"), EXIT_ERROR),
            (ValueError("bad value"), EXIT_USAGE),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_get_exit_code(self, exc, expected):
        assert get_exit_code(exc) == expected

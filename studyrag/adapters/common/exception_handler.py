"""Error reporting for the command line.

Turns engine and Python exceptions into structured dictionaries, logs
them, and maps them to process exit codes.
"""

import json
import logging
import traceback
from typing import Any

from ...core.domain.exceptions import (
    ConfigurationError,
    IngestionError,
    NotInitializedError,
    StudyRagError,
    ValidationError,
)

logger = logging.getLogger(__name__)

PYTHON_ERROR_CODE = "PYTHON_ERR"

EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_UNAVAILABLE = 3
EXIT_CONFIG = 4


def _short_file_name(path: str) -> str:
    return path.split("\\")[-1].split("/")[-1]


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Structured form of any exception.

    Engine errors use their own ``to_dict``; other exceptions are
    described from the innermost traceback frame.

    Args:
        exc: The exception to format.
        include_trace: Include the formatted stack trace.
        extra_context: Merged into the ``context`` entry.
    """
    if isinstance(exc, StudyRagError):
        data = exc.to_dict(include_trace=include_trace)
    else:
        frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
        innermost = frames[-1] if frames else None
        data = {
            "error": {
                "type": type(exc).__name__,
                "code": PYTHON_ERROR_CODE,
                "message": str(exc),
            },
            "location": {
                "class": "<unknown>",
                "method": innermost.name if innermost else "<unknown>",
                "file": _short_file_name(innermost.filename) if innermost else "<unknown>",
                "line": innermost.lineno if innermost else 0,
            },
        }
        if include_trace:
            data["stack_trace"] = [
                line.strip()
                for line in traceback.format_exception(type(exc), exc, exc.__traceback__)
                if line.strip()
            ]

    if extra_context:
        data.setdefault("context", {}).update(extra_context)
    return data


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log the full structured form of an exception, trace included."""
    data = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(data, indent=2, ensure_ascii=False))


def get_error_code(exc: Exception) -> str:
    """Error code such as ``SR_VAL_002``; ``PYTHON_ERR`` for foreign exceptions."""
    if isinstance(exc, StudyRagError):
        return exc.error_code
    return PYTHON_ERROR_CODE


def get_exit_code(exc: Exception) -> int:
    """Map exception type to a process exit status for the CLI.

    Returns:
        2 for bad input, 3 when the index is unavailable, 4 for
        configuration problems, 1 otherwise.
    """
    if isinstance(exc, ValidationError | ValueError):
        return EXIT_USAGE
    if isinstance(exc, NotInitializedError | IngestionError):
        return EXIT_UNAVAILABLE
    if isinstance(exc, ConfigurationError):
        return EXIT_CONFIG
    return EXIT_ERROR

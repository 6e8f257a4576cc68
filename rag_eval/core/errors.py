"""Base exception class and error taxonomy for all rag-eval-specific errors."""

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Closed set of failure categories carried on synthetic failure results."""

    MISSING_PARAMS = "missing_params"
    ADAPTER_ERROR = "adapter_error"
    SCHEMA_VIOLATION = "schema_violation"
    TIMEOUT = "timeout"
    UNHANDLED_EXCEPTION = "unhandled_exception"
    CONFIGURATION = "configuration"


class RagEvalError(Exception):
    """Base class for all rag-eval errors."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNHANDLED_EXCEPTION

    def __init__(self, message: str) -> None:
        super().__init__(message)

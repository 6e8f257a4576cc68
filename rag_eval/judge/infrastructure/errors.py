"""Error types raised by judge infrastructure."""

from typing import ClassVar

from rag_eval.core.errors import ErrorKind, RagEvalError


class JudgeInvocationError(RagEvalError):
    """Raised when the judge model cannot be invoked."""

    kind: ClassVar[ErrorKind] = ErrorKind.ADAPTER_ERROR

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to invoke judge: {reason}")


class SchemaViolationError(RagEvalError):
    """Raised when a judge response does not conform to the requested schema."""

    kind: ClassVar[ErrorKind] = ErrorKind.SCHEMA_VIOLATION

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to parse judge response: {reason}")


class JudgeTypeNotSupportedError(RagEvalError):
    """Raised when the judge provider specified in config is not known."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, provider: str) -> None:
        super().__init__(
            f"Failed to create judge adapter: unsupported provider '{provider}'"
        )

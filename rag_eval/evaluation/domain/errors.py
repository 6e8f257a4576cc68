"""Error types raised by the metric runner and the evaluator."""

from typing import ClassVar

from rag_eval.core.errors import ErrorKind, RagEvalError

TIMEOUT_REASON = "evaluation timed out"


class MissingParamsError(RagEvalError):
    """Raised when a case lacks fields a metric requires. Lists every missing field."""

    kind: ClassVar[ErrorKind] = ErrorKind.MISSING_PARAMS

    def __init__(self, metric: str, missing: list[str]) -> None:
        self.metric = metric
        self.missing = missing
        super().__init__(
            f"Failed to evaluate {metric}: missing required parameters:"
            f" {', '.join(missing)}"
        )


class EvaluationTimeoutError(RagEvalError):
    """Raised when a case exceeds its per-unit time budget.

    `reason` is the fixed text recorded on the failure results of the timed-out row.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.TIMEOUT

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        self.reason = TIMEOUT_REASON
        super().__init__(
            f"Failed to evaluate case: {TIMEOUT_REASON} after {timeout_seconds}s"
        )


class UnhandledMetricError(RagEvalError):
    """Wraps any non-rag-eval exception escaping a metric's scoring."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNHANDLED_EXCEPTION

    def __init__(self, metric: str, cause: BaseException) -> None:
        self.metric = metric
        self.cause = cause
        super().__init__(
            f"Failed to evaluate {metric}: {type(cause).__name__}: {cause}"
        )


class InvalidEvaluationError(RagEvalError):
    """Raised before evaluation starts when metrics or options are unusable."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to start evaluation: {reason}")

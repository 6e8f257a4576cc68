"""Error types raised when building or configuring metrics."""

from typing import ClassVar

from rag_eval.core.errors import ErrorKind, RagEvalError


class MetricTypeNotSupportedError(RagEvalError):
    """Raised when the metric type specified in config is not a known metric."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, metric_type: str) -> None:
        super().__init__(
            f"Failed to create metric: unsupported metric type '{metric_type}'"
        )


class MetricConfigurationError(RagEvalError):
    """Raised when a metric is constructed or invoked with an unusable configuration."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, metric: str, reason: str) -> None:
        super().__init__(f"Failed to configure metric '{metric}': {reason}")

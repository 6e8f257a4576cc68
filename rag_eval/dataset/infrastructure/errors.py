"""Error types raised by dataset infrastructure."""

from typing import ClassVar

from rag_eval.core.errors import ErrorKind, RagEvalError


class DatasetLoadError(RagEvalError):
    """Raised when a JSONL dataset cannot be loaded or is malformed."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load dataset: {reason}")

"""Error types raised by config infrastructure."""

from pathlib import Path
from typing import ClassVar

from rag_eval.core.errors import ErrorKind, RagEvalError


class MissingEnvVarsError(RagEvalError):
    """Raised when one or more required environment variables are not set."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(RagEvalError):
    """Raised when the loaded config fails schema or semantic validation."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(RagEvalError):
    """Raised when the config file cannot be opened or parsed."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        super().__init__(f"Failed to load config: {reason}: {path}")

"""EvalCase domain value object — one unit of evaluation input."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class CaseField(StrEnum):
    """Names of the EvalCase fields a metric may require."""

    INPUT = "input"
    ACTUAL_OUTPUT = "actual_output"
    EXPECTED_OUTPUT = "expected_output"
    RETRIEVAL_CONTEXT = "retrieval_context"
    CONTEXT = "context"


# context and retrieval_context satisfy each other's requirement.
_INTERCHANGEABLE: dict[CaseField, CaseField] = {
    CaseField.CONTEXT: CaseField.RETRIEVAL_CONTEXT,
    CaseField.RETRIEVAL_CONTEXT: CaseField.CONTEXT,
}


class EvalCase(BaseModel, frozen=True):
    """Immutable bundle of input, generated output, reference output and context.

    `context` is the legacy name for `retrieval_context`. When
    `retrieval_context` is absent or empty, a non-empty `context` is copied into
    it; a non-empty `retrieval_context` always wins.
    """

    input: str
    actual_output: str | None = None
    expected_output: str | None = None
    retrieval_context: list[str] | None = None
    context: list[str] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None
    tags: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _reconcile_context_alias(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if not data.get("retrieval_context") and data.get("context"):
            return {**data, "retrieval_context": data["context"]}
        return data

    @property
    def unit_id(self) -> str | None:
        """Correlation id carried on telemetry events."""
        return self.name

    def missing_fields(self, required: list[CaseField]) -> list[str]:
        """Return the names of every required field that is absent.

        None, the empty string and the empty list all count as absent. All
        missing fields are collected; the check never stops at the first one.
        """
        missing: list[str] = []
        for field in required:
            if _is_present(getattr(self, field.value)):
                continue
            alias = _INTERCHANGEABLE.get(field)
            if alias is not None and _is_present(getattr(self, alias.value)):
                continue
            missing.append(field.value)
        return missing


def _is_present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list)) and len(value) == 0:
        return False
    return True

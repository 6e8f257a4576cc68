"""Metric configuration model."""

from pydantic import BaseModel, Field

from rag_eval.dataset.domain.eval_case import CaseField


class RubricLevel(BaseModel, frozen=True):
    score: int
    description: str = Field(min_length=1)


class MetricConfig(BaseModel, frozen=True):
    """One metric entry in an evaluation config.

    Only `type` is required. The remaining fields apply to the metric types
    that understand them and are ignored by the others.
    """

    type: str = Field(min_length=1)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    include_reason: bool = True

    # faithfulness
    truths_extraction_limit: int | None = Field(default=None, ge=1)

    # exact_match
    case_sensitive: bool = True
    normalize_whitespace: bool = False

    # g_eval
    name: str | None = None
    criteria: str | None = None
    evaluation_steps: list[str] | None = None
    evaluation_params: list[CaseField] | None = None
    rubric: list[RubricLevel] | None = None
    score_range: tuple[int, int] = (0, 10)
    strict_mode: bool = False

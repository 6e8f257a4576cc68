"""EvaluationOptions — batch-level settings for Evaluator.evaluate."""

import os
from dataclasses import dataclass, field

from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.options import ScoreOptions


def default_max_concurrency() -> int:
    """Two in-flight cases per CPU."""
    return (os.cpu_count() or 1) * 2


@dataclass(frozen=True)
class EvaluationOptions:
    """Batch settings plus per-call metric overrides applied to every metric.

    `threshold`, `include_reason` and `judge` default to None, meaning each
    metric keeps its own setting.
    """

    max_concurrency: int = field(default_factory=default_max_concurrency)
    timeout_per_unit_seconds: float = 60.0
    threshold: float | None = None
    include_reason: bool | None = None
    judge: JudgeAdapter | None = None

    def score_options(self) -> ScoreOptions:
        return ScoreOptions(
            threshold=self.threshold,
            include_reason=self.include_reason,
            judge=self.judge,
        )

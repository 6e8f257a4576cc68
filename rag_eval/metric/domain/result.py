"""MetricResult — the outcome of one metric applied to one evaluation case."""

from typing import Any, Self

from pydantic import BaseModel, Field

from rag_eval.core.errors import ErrorKind
from rag_eval.metric.domain.polarity import Polarity


class MetricResult(BaseModel, frozen=True):
    """Immutable result of applying one metric to one case.

    Produced once per (case, metric). Only `latency_ms` is attached afterwards,
    by MetricRunner, via `model_copy`. Synthetic failure results carry the
    failure category in `error` and always have score 0.0, threshold 0.0 and
    success False.
    """

    metric: str = Field(min_length=1)
    score: float
    success: bool
    threshold: float
    polarity: Polarity = Polarity.HIGHER_IS_BETTER
    reason: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    evaluation_cost: float | None = None
    latency_ms: int | None = None
    error: ErrorKind | None = None

    @classmethod
    def from_score(
        cls,
        metric: str,
        score: float,
        threshold: float,
        polarity: Polarity = Polarity.HIGHER_IS_BETTER,
        reason: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Self:
        """Build a result whose success flag is derived from score, threshold and polarity."""
        return cls(
            metric=metric,
            score=score,
            success=polarity.passes(score=score, threshold=threshold),
            threshold=threshold,
            polarity=polarity,
            reason=reason,
            metadata=metadata or {},
        )

    @classmethod
    def failure(cls, metric: str, reason: str, error: ErrorKind) -> Self:
        """Build the synthetic result recorded when a metric could not be scored."""
        return cls(
            metric=metric,
            score=0.0,
            success=False,
            threshold=0.0,
            reason=reason,
            error=error,
        )

    def summary(self) -> str:
        """Render e.g. "Faithfulness: PASS (85.0%) - all claims supported"."""
        status = "PASS" if self.success else "FAIL"
        text = f"{self.metric}: {status} ({self.score * 100:.1f}%)"
        if self.reason:
            text += f" - {self.reason}"
        return text

    def __str__(self) -> str:
        return self.summary()

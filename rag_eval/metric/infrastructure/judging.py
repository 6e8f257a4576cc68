"""Helpers shared by the judge-backed metrics."""

from dataclasses import dataclass

from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.judge.infrastructure.errors import SchemaViolationError
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.infrastructure.errors import MetricConfigurationError


@dataclass(frozen=True)
class ResolvedOptions:
    threshold: float
    include_reason: bool
    judge: JudgeAdapter


def resolve_options(
    metric: str,
    options: ScoreOptions,
    threshold: float,
    include_reason: bool,
    judge: JudgeAdapter | None,
) -> ResolvedOptions:
    """Apply per-call overrides on top of the metric's own settings.

    Raises:
        MetricConfigurationError: if neither the metric nor the call supplies a judge.
    """
    resolved_judge = options.judge if options.judge is not None else judge
    if resolved_judge is None:
        raise MetricConfigurationError(metric=metric, reason="no judge adapter configured")
    return ResolvedOptions(
        threshold=options.threshold if options.threshold is not None else threshold,
        include_reason=(
            options.include_reason
            if options.include_reason is not None
            else include_reason
        ),
        judge=resolved_judge,
    )


def require_verdict_count(metric: str, actual: int, expected: int, unit: str) -> None:
    """Raise SchemaViolationError unless the judge returned one verdict per item.

    Raises:
        SchemaViolationError: if actual differs from expected.
    """
    if actual != expected:
        raise SchemaViolationError(
            reason=(
                f"{metric} expected {expected} verdict(s), one per {unit},"
                f" but the judge returned {actual}"
            )
        )

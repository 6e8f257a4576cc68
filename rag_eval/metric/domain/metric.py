"""Metric Protocol — structural interface for every scoring procedure."""

from typing import Protocol, runtime_checkable

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult


@runtime_checkable
class Metric(Protocol):
    """Structural interface satisfied by any metric.

    `score` computes a result for one case. It does not validate required
    fields or measure latency; MetricRunner wraps it with both.
    """

    name: str
    required_fields: list[CaseField]
    threshold: float
    polarity: Polarity

    async def score(self, case: EvalCase, options: ScoreOptions) -> MetricResult: ...

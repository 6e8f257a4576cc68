"""MetricRunner — wraps a single metric invocation with validation, timing and telemetry."""

import asyncio
import time

from rag_eval.core.errors import RagEvalError
from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.evaluation.domain.errors import MissingParamsError, UnhandledMetricError
from rag_eval.metric.domain.metric import Metric
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.result import MetricResult
from rag_eval.telemetry.domain.observer import TelemetryObserver
from rag_eval.telemetry.infrastructure.composite_observer import (
    CompositeTelemetryObserver,
)


class MetricRunner:
    """Runs one metric against one case.

    Lifecycle: validate required fields, emit metric_started, time the call to
    `metric.score`, then attach latency and emit metric_completed, or emit
    metric_failed and raise a typed error. Cancellation, such as the
    Evaluator's per-unit timeout, also emits metric_failed before it propagates.
    The runner never synthesizes a result; converting errors into failure
    results is the Evaluator's job.
    """

    def __init__(self, observers: list[TelemetryObserver] | None = None) -> None:
        self._observer = CompositeTelemetryObserver(observers=observers or [])

    async def run(
        self,
        metric: Metric,
        case: EvalCase,
        options: ScoreOptions | None = None,
    ) -> MetricResult:
        """Score case with metric and return the result with latency_ms set.

        Raises:
            MissingParamsError: if case lacks any required field (all are listed);
                raised before any telemetry is emitted.
            RagEvalError: any rag-eval error raised by the metric, unchanged.
            UnhandledMetricError: wrapping any other exception from the metric.
        """
        missing = case.missing_fields(metric.required_fields)
        if missing:
            raise MissingParamsError(metric=metric.name, missing=missing)

        self._observer.metric_started(metric=metric.name, unit_id=case.unit_id)
        started_at = time.monotonic()
        try:
            result = await metric.score(case, options or ScoreOptions())
        except asyncio.CancelledError:
            self._failed(
                metric=metric,
                case=case,
                started_at=started_at,
                error=f"Failed to evaluate {metric.name}: cancelled",
            )
            raise
        except RagEvalError as exc:
            self._failed(metric=metric, case=case, started_at=started_at, error=str(exc))
            raise
        except Exception as exc:
            error = UnhandledMetricError(metric=metric.name, cause=exc)
            self._failed(
                metric=metric, case=case, started_at=started_at, error=str(error)
            )
            raise error from exc

        duration_ms = _elapsed_ms(started_at)
        self._observer.metric_completed(
            metric=metric.name,
            unit_id=case.unit_id,
            duration_ms=duration_ms,
            score=result.score,
        )
        return result.model_copy(update={"latency_ms": duration_ms})

    def _failed(
        self, metric: Metric, case: EvalCase, started_at: float, error: str
    ) -> None:
        self._observer.metric_failed(
            metric=metric.name,
            unit_id=case.unit_id,
            duration_ms=_elapsed_ms(started_at),
            error=error,
        )


def _elapsed_ms(started_at: float) -> int:
    return int((time.monotonic() - started_at) * 1000)

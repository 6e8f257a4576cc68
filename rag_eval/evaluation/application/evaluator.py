"""Evaluator — fans cases out across bounded concurrency and collects an ordered grid."""

import asyncio
import time

from rag_eval.core.errors import RagEvalError
from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.evaluation.application.runner import MetricRunner
from rag_eval.evaluation.domain.errors import (
    EvaluationTimeoutError,
    InvalidEvaluationError,
    UnhandledMetricError,
)
from rag_eval.evaluation.domain.options import EvaluationOptions
from rag_eval.metric.domain.metric import Metric
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.result import MetricResult
from rag_eval.telemetry.domain.observer import TelemetryObserver
from rag_eval.telemetry.infrastructure.composite_observer import (
    CompositeTelemetryObserver,
)


class Evaluator:
    """Evaluates N cases against M metrics and returns an N x M grid of results.

    One task per case; a case's metrics run sequentially inside its task. At
    most `max_concurrency` case tasks hold the semaphore at once, and each one
    is cancelled once it exceeds `timeout_per_unit_seconds`. Failures are
    isolated per case: every error becomes a failure result in that case's
    row and the batch always returns a complete, order-matched grid.
    """

    def __init__(self, observers: list[TelemetryObserver] | None = None) -> None:
        self._observer = CompositeTelemetryObserver(observers=observers or [])
        self._runner = MetricRunner(observers=observers)

    async def evaluate(
        self,
        cases: list[EvalCase],
        metrics: list[Metric],
        options: EvaluationOptions | None = None,
    ) -> list[list[MetricResult]]:
        """Return results[i][j] for cases[i] and metrics[j].

        Raises:
            InvalidEvaluationError: before anything runs, if a metric does not
                satisfy the Metric interface or the options are unusable.
        """
        options = options or EvaluationOptions()
        _validate(metrics=metrics, options=options)

        self._observer.batch_started(unit_count=len(cases), metric_count=len(metrics))
        started_at = time.monotonic()

        sem = asyncio.Semaphore(options.max_concurrency)
        score_options = options.score_options()
        async with asyncio.TaskGroup() as tg:
            tasks = [
                tg.create_task(
                    self._evaluate_unit(
                        sem=sem,
                        case=case,
                        metrics=metrics,
                        score_options=score_options,
                        timeout_seconds=options.timeout_per_unit_seconds,
                    )
                )
                for case in cases
            ]

        self._observer.batch_completed(
            unit_count=len(cases),
            duration_ms=int((time.monotonic() - started_at) * 1000),
        )
        return [task.result() for task in tasks]

    async def evaluate_case(
        self,
        case: EvalCase,
        metrics: list[Metric],
        options: EvaluationOptions | None = None,
    ) -> list[MetricResult]:
        """Evaluate a single case; same guarantees as `evaluate`, one row."""
        rows = await self.evaluate(cases=[case], metrics=metrics, options=options)
        return rows[0]

    async def _evaluate_unit(
        self,
        sem: asyncio.Semaphore,
        case: EvalCase,
        metrics: list[Metric],
        score_options: ScoreOptions,
        timeout_seconds: float,
    ) -> list[MetricResult]:
        """Score one case under the semaphore. Never raises.

        On timeout the whole row is replaced by timeout failures. The metric in
        flight reports its own metric_failed; metrics never reached get one here,
        so every metric in the row ends with exactly one terminal event.
        """
        async with sem:
            scored: list[MetricResult] = []
            try:
                async with asyncio.timeout(timeout_seconds):
                    await self._score_unit(
                        case=case,
                        metrics=metrics,
                        score_options=score_options,
                        results=scored,
                    )
                    return scored
            except TimeoutError:
                timeout = EvaluationTimeoutError(timeout_seconds=timeout_seconds)
                for metric in metrics[len(scored) + 1 :]:
                    self._observer.metric_failed(
                        metric=metric.name,
                        unit_id=case.unit_id,
                        duration_ms=0,
                        error=str(timeout),
                    )
                return [
                    MetricResult.failure(
                        metric=m.name, reason=timeout.reason, error=timeout.kind
                    )
                    for m in metrics
                ]
            except Exception as exc:
                return [
                    _failure_result(
                        metric=m, error=UnhandledMetricError(metric=m.name, cause=exc)
                    )
                    for m in metrics
                ]

    async def _score_unit(
        self,
        case: EvalCase,
        metrics: list[Metric],
        score_options: ScoreOptions,
        results: list[MetricResult],
    ) -> None:
        """Append one result per metric to results as each metric finishes."""
        for metric in metrics:
            try:
                results.append(
                    await self._runner.run(metric=metric, case=case, options=score_options)
                )
            except RagEvalError as exc:
                results.append(_failure_result(metric=metric, error=exc))


def _failure_result(metric: Metric, error: RagEvalError) -> MetricResult:
    return MetricResult.failure(metric=metric.name, reason=str(error), error=error.kind)


def _validate(metrics: list[Metric], options: EvaluationOptions) -> None:
    invalid = [repr(m) for m in metrics if not isinstance(m, Metric)]
    if invalid:
        raise InvalidEvaluationError(
            reason=f"not a metric: {', '.join(invalid)}"
        )
    if options.max_concurrency < 1:
        raise InvalidEvaluationError(
            reason=f"max_concurrency must be >= 1, got {options.max_concurrency}"
        )
    if options.timeout_per_unit_seconds <= 0:
        raise InvalidEvaluationError(
            reason=(
                "timeout_per_unit_seconds must be > 0,"
                f" got {options.timeout_per_unit_seconds}"
            )
        )

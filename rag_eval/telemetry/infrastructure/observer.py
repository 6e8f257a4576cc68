"""Structlog implementation of the TelemetryObserver port."""

import structlog


class StructlogTelemetryObserver:
    """Delegates engine lifecycle events to structlog.

    Satisfies the TelemetryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def metric_started(self, metric: str, unit_id: str | None) -> None:
        self._log.debug("metric.started", metric=metric, unit_id=unit_id)

    def metric_completed(
        self, metric: str, unit_id: str | None, duration_ms: int, score: float
    ) -> None:
        self._log.info(
            "metric.completed",
            metric=metric,
            unit_id=unit_id,
            duration_ms=duration_ms,
            score=score,
        )

    def metric_failed(
        self, metric: str, unit_id: str | None, duration_ms: int, error: str
    ) -> None:
        self._log.error(
            "metric.failed",
            metric=metric,
            unit_id=unit_id,
            duration_ms=duration_ms,
            error=error,
        )

    def batch_started(self, unit_count: int, metric_count: int) -> None:
        self._log.info(
            "evaluation.batch_started",
            unit_count=unit_count,
            metric_count=metric_count,
        )

    def batch_completed(self, unit_count: int, duration_ms: int) -> None:
        self._log.info(
            "evaluation.batch_completed",
            unit_count=unit_count,
            duration_ms=duration_ms,
        )

"""CompositeTelemetryObserver — fans out all events to a list of observers."""

from collections.abc import Callable

import structlog

from rag_eval.telemetry.domain.observer import TelemetryObserver


class CompositeTelemetryObserver:
    """Delegates every event to each observer in order.

    An observer that raises is logged and skipped; the remaining observers
    still receive the event and the caller never sees the exception.

    Does NOT inherit from TelemetryObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[TelemetryObserver]) -> None:
        self._observers = observers
        self._log = structlog.get_logger()

    def metric_started(self, metric: str, unit_id: str | None) -> None:
        self._emit(
            "metric_started",
            lambda obs: obs.metric_started(metric=metric, unit_id=unit_id),
        )

    def metric_completed(
        self, metric: str, unit_id: str | None, duration_ms: int, score: float
    ) -> None:
        self._emit(
            "metric_completed",
            lambda obs: obs.metric_completed(
                metric=metric, unit_id=unit_id, duration_ms=duration_ms, score=score
            ),
        )

    def metric_failed(
        self, metric: str, unit_id: str | None, duration_ms: int, error: str
    ) -> None:
        self._emit(
            "metric_failed",
            lambda obs: obs.metric_failed(
                metric=metric, unit_id=unit_id, duration_ms=duration_ms, error=error
            ),
        )

    def batch_started(self, unit_count: int, metric_count: int) -> None:
        self._emit(
            "batch_started",
            lambda obs: obs.batch_started(
                unit_count=unit_count, metric_count=metric_count
            ),
        )

    def batch_completed(self, unit_count: int, duration_ms: int) -> None:
        self._emit(
            "batch_completed",
            lambda obs: obs.batch_completed(
                unit_count=unit_count, duration_ms=duration_ms
            ),
        )

    def _emit(self, event: str, deliver: Callable[[TelemetryObserver], None]) -> None:
        for obs in self._observers:
            try:
                deliver(obs)
            except Exception as exc:  # noqa: BLE001
                self._log.warning(
                    "telemetry.observer_failed",
                    telemetry_event=event,
                    observer=type(obs).__name__,
                    reason=str(exc),
                )

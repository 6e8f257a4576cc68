"""TelemetryObserver port — lifecycle events emitted by the evaluation engine."""

from typing import Protocol


class TelemetryObserver(Protocol):
    """Observer port for metric and batch lifecycle events.

    Consumers must not influence outcomes: CompositeTelemetryObserver isolates
    every consumer failure, so an observer may raise without affecting scores.
    """

    def metric_started(self, metric: str, unit_id: str | None) -> None: ...

    def metric_completed(
        self, metric: str, unit_id: str | None, duration_ms: int, score: float
    ) -> None: ...

    def metric_failed(
        self, metric: str, unit_id: str | None, duration_ms: int, error: str
    ) -> None: ...

    def batch_started(self, unit_count: int, metric_count: int) -> None: ...

    def batch_completed(self, unit_count: int, duration_ms: int) -> None: ...

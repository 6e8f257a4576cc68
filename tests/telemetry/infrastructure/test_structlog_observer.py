"""Tests for StructlogTelemetryObserver."""

from structlog.testing import capture_logs

from rag_eval.telemetry.infrastructure.observer import StructlogTelemetryObserver


class TestStructlogTelemetryObserver:
    """Each lifecycle event becomes one structured log record."""

    def test_metric_completed(self) -> None:
        observer = StructlogTelemetryObserver()

        with capture_logs() as logs:
            observer.metric_completed(
                metric="Faithfulness", unit_id="case-1", duration_ms=42, score=0.5
            )

        assert logs == [
            {
                "event": "metric.completed",
                "log_level": "info",
                "metric": "Faithfulness",
                "unit_id": "case-1",
                "duration_ms": 42,
                "score": 0.5,
            }
        ]

    def test_metric_failed_logged_as_error(self) -> None:
        observer = StructlogTelemetryObserver()

        with capture_logs() as logs:
            observer.metric_failed(
                metric="Hallucination", unit_id=None, duration_ms=7, error="timeout"
            )

        assert logs[0]["event"] == "metric.failed"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["error"] == "timeout"

    def test_batch_events(self) -> None:
        observer = StructlogTelemetryObserver()

        with capture_logs() as logs:
            observer.batch_started(unit_count=3, metric_count=2)
            observer.batch_completed(unit_count=3, duration_ms=1500)

        assert [entry["event"] for entry in logs] == [
            "evaluation.batch_started",
            "evaluation.batch_completed",
        ]
        assert logs[0]["metric_count"] == 2

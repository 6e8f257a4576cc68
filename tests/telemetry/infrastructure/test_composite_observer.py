"""Tests for CompositeTelemetryObserver."""

from structlog.testing import capture_logs

from rag_eval.telemetry.domain.observer import TelemetryObserver
from rag_eval.telemetry.infrastructure.composite_observer import (
    CompositeTelemetryObserver,
)
from tests.telemetry.fake_observer import (
    FakeTelemetryObserver,
    RaisingTelemetryObserver,
)


def _make_composite(*observers: TelemetryObserver) -> CompositeTelemetryObserver:
    return CompositeTelemetryObserver(observers=list(observers))


class TestCompositeTelemetryObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_metric_started_forwarded_to_all(self) -> None:
        obs_a = FakeTelemetryObserver()
        obs_b = FakeTelemetryObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.metric_started(metric="Faithfulness", unit_id="case-1")

        assert obs_a.started[0].metric == "Faithfulness"
        assert obs_b.started[0].unit_id == "case-1"

    def test_metric_completed_preserves_all_fields(self) -> None:
        obs = FakeTelemetryObserver()
        composite = _make_composite(obs)

        composite.metric_completed(
            metric="Hallucination", unit_id="case-2", duration_ms=120, score=0.25
        )

        event = obs.completed[0]
        assert event.metric == "Hallucination"
        assert event.unit_id == "case-2"
        assert event.duration_ms == 120
        assert event.score == 0.25

    def test_metric_failed_forwarded(self) -> None:
        obs = FakeTelemetryObserver()

        _make_composite(obs).metric_failed(
            metric="ExactMatch", unit_id=None, duration_ms=3, error="boom"
        )

        assert obs.failed[0].error == "boom"

    def test_batch_events_forwarded(self) -> None:
        obs = FakeTelemetryObserver()
        composite = _make_composite(obs)

        composite.batch_started(unit_count=4, metric_count=2)
        composite.batch_completed(unit_count=4, duration_ms=900)

        assert obs.batch_started_events[0].metric_count == 2
        assert obs.batch_completed_events[0].duration_ms == 900
        assert obs.order == ["batch_started", "batch_completed"]

    def test_empty_composite_is_a_no_op(self) -> None:
        _make_composite().batch_started(unit_count=1, metric_count=1)


class TestCompositeTelemetryObserverIsolation:
    """A failing observer never blocks the others or reaches the caller."""

    def test_raising_observer_does_not_block_later_observers(self) -> None:
        obs = FakeTelemetryObserver()
        composite = _make_composite(RaisingTelemetryObserver(), obs)

        composite.metric_completed(
            metric="Faithfulness", unit_id="case-1", duration_ms=10, score=1.0
        )

        assert len(obs.completed) == 1

    def test_observer_failure_is_logged(self) -> None:
        composite = _make_composite(RaisingTelemetryObserver())

        with capture_logs() as logs:
            composite.batch_started(unit_count=1, metric_count=1)

        assert logs == [
            {
                "event": "telemetry.observer_failed",
                "log_level": "warning",
                "observer": "RaisingTelemetryObserver",
                "reason": "observer exploded",
                "telemetry_event": "batch_started",
            }
        ]

"""JudgeObserver port — domain events emitted during judge-model calls."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_call_started(self, model: str, schema: str | None) -> None: ...

    def judge_call_completed(
        self, model: str, duration_ms: int, cost_usd: float | None
    ) -> None: ...

    def judge_call_failed(self, model: str, reason: str) -> None: ...

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None: ...

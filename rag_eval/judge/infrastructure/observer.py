"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_call_started(self, model: str, schema: str | None) -> None:
        self._log.debug("judge.call_started", model=model, schema=schema)

    def judge_call_completed(
        self, model: str, duration_ms: int, cost_usd: float | None
    ) -> None:
        self._log.info(
            "judge.call_completed",
            model=model,
            duration_ms=duration_ms,
            cost_usd=cost_usd,
        )

    def judge_call_failed(self, model: str, reason: str) -> None:
        self._log.error("judge.call_failed", model=model, reason=reason)

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None:
        self._log.warning(
            "judge.high_temperature_warned",
            model=model,
            temperature=temperature,
        )

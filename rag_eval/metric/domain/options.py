"""ScoreOptions — per-call overrides applied on top of a metric's configuration."""

from dataclasses import dataclass

from rag_eval.judge.domain.adapter import JudgeAdapter


@dataclass(frozen=True)
class ScoreOptions:
    """Per-call overrides; None means "use the metric's own setting"."""

    threshold: float | None = None
    include_reason: bool | None = None
    judge: JudgeAdapter | None = None

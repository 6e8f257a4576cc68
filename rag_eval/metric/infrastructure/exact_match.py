"""ExactMatch: deterministic string equality between actual and expected output."""

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult

_MATCH_REASON = "The actual and expected outputs are exact matches."
_MISMATCH_REASON = "The actual and expected outputs are different."


class ExactMatchMetric:
    """Scores 1.0 when the trimmed outputs are equal, else 0.0. Never calls a judge.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    name = "ExactMatch"
    required_fields = [
        CaseField.INPUT,
        CaseField.ACTUAL_OUTPUT,
        CaseField.EXPECTED_OUTPUT,
    ]
    polarity = Polarity.HIGHER_IS_BETTER

    def __init__(
        self,
        threshold: float = 1.0,
        include_reason: bool = True,
        case_sensitive: bool = True,
        normalize_whitespace: bool = False,
    ) -> None:
        self.threshold = threshold
        self._include_reason = include_reason
        self._case_sensitive = case_sensitive
        self._normalize_whitespace = normalize_whitespace

    async def score(self, case: EvalCase, options: ScoreOptions) -> MetricResult:
        expected = self._normalize(case.expected_output or "")
        actual = self._normalize(case.actual_output or "")
        matched = expected == actual

        include_reason = (
            options.include_reason
            if options.include_reason is not None
            else self._include_reason
        )
        reason = None
        if include_reason:
            reason = _MATCH_REASON if matched else _MISMATCH_REASON

        return MetricResult.from_score(
            metric=self.name,
            score=1.0 if matched else 0.0,
            threshold=(
                options.threshold if options.threshold is not None else self.threshold
            ),
            polarity=self.polarity,
            reason=reason,
            metadata={
                "expected": case.expected_output,
                "actual": case.actual_output,
                "case_sensitive": self._case_sensitive,
                "normalize_whitespace": self._normalize_whitespace,
            },
        )

    def _normalize(self, text: str) -> str:
        text = text.strip()
        if self._normalize_whitespace:
            text = " ".join(text.split())
        if not self._case_sensitive:
            text = text.lower()
        return text

"""Tests for HallucinationMetric."""

import pytest

from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.judge.infrastructure.errors import SchemaViolationError
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.infrastructure.hallucination import HallucinationMetric
from tests.judge.fake_adapter import FakeJudgeAdapter, ScriptedResponse

_VERDICTS = "For EACH context below"
_REASON = "The hallucination score"


def _make_case(context: list[str] | None = None) -> EvalCase:
    return EvalCase(
        input="Where is the Eiffel Tower?",
        actual_output="The Eiffel Tower is in Paris and was built in 1920.",
        context=context
        if context is not None
        else ["The Eiffel Tower is in Paris.", "It was completed in 1889."],
    )


def _make_judge(verdicts: list[dict[str, str]]) -> FakeJudgeAdapter:
    return FakeJudgeAdapter(
        responses=[
            ScriptedResponse(_VERDICTS, {"verdicts": verdicts}),
            ScriptedResponse(_REASON, {"reason": "The score is 0.50 because of the date."}),
        ]
    )


_MIXED = [
    {"verdict": "yes", "reason": "Paris matches."},
    {"verdict": "no", "reason": "It was completed in 1889, not 1920."},
]


class TestHallucination:
    """Hallucination is the share of contradicted contexts; lower is better."""

    async def test_one_contradiction_of_two_contexts(self) -> None:
        metric = HallucinationMetric(judge=_make_judge(_MIXED), threshold=0.5)

        result = await metric.score(_make_case(), ScoreOptions())

        assert result.metric == "Hallucination"
        assert result.score == pytest.approx(0.5)
        assert result.success is True
        assert result.polarity == Polarity.LOWER_IS_BETTER

    async def test_full_contradiction_fails(self) -> None:
        verdicts = [{"verdict": "no"}, {"verdict": "no"}]
        metric = HallucinationMetric(judge=_make_judge(verdicts), threshold=0.5)

        result = await metric.score(_make_case(), ScoreOptions())

        assert result.score == 1.0
        assert result.success is False

    async def test_reason_prompt_lists_alignments_and_contradictions(self) -> None:
        judge = _make_judge(_MIXED)

        await HallucinationMetric(judge=judge).score(_make_case(), ScoreOptions())

        prompt = judge.calls_matching(_REASON)[0].prompt
        assert "Paris matches." in prompt
        assert "It was completed in 1889, not 1920." in prompt

    async def test_every_context_is_in_verdict_prompt(self) -> None:
        judge = _make_judge(_MIXED)

        await HallucinationMetric(judge=judge).score(_make_case(), ScoreOptions())

        prompt = judge.calls_matching(_VERDICTS)[0].prompt
        assert "The Eiffel Tower is in Paris." in prompt
        assert "It was completed in 1889." in prompt

    async def test_metadata(self) -> None:
        result = await HallucinationMetric(judge=_make_judge(_MIXED)).score(
            _make_case(), ScoreOptions()
        )

        assert result.metadata["context_count"] == 2
        assert len(result.metadata["verdicts"]) == 2

    async def test_verdict_count_mismatch_raises(self) -> None:
        judge = _make_judge([{"verdict": "yes"}])

        with pytest.raises(SchemaViolationError, match="one per context"):
            await HallucinationMetric(judge=judge).score(_make_case(), ScoreOptions())

    async def test_idk_label_rejected(self) -> None:
        judge = _make_judge([{"verdict": "yes"}, {"verdict": "idk"}])

        with pytest.raises(SchemaViolationError):
            await HallucinationMetric(judge=judge).score(_make_case(), ScoreOptions())

    async def test_include_reason_false_skips_reason_call(self) -> None:
        judge = _make_judge(_MIXED)

        result = await HallucinationMetric(judge=judge, include_reason=False).score(
            _make_case(), ScoreOptions()
        )

        assert result.reason is None
        assert judge.calls_matching(_REASON) == []

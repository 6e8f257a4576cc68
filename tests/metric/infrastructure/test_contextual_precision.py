"""Tests for ContextualPrecisionMetric."""

import pytest

from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.judge.infrastructure.errors import SchemaViolationError
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.infrastructure.contextual_precision import (
    ContextualPrecisionMetric,
)
from tests.judge.fake_adapter import FakeJudgeAdapter, ScriptedResponse

_VERDICTS = "determine whether each node in the retrieval context was remotely useful"
_REASON = "contextual precision score"


def _make_case() -> EvalCase:
    return EvalCase(
        input="Who wrote Hamlet?",
        expected_output="William Shakespeare wrote Hamlet.",
        retrieval_context=[
            "Hamlet is a tragedy by William Shakespeare.",
            "Denmark is a Nordic country.",
            "Shakespeare wrote Hamlet around 1600.",
        ],
    )


def _make_judge(labels: list[str]) -> FakeJudgeAdapter:
    return FakeJudgeAdapter(
        responses=[
            ScriptedResponse(
                _VERDICTS,
                {
                    "verdicts": [
                        {"verdict": label, "reason": f"node judged {label}"}
                        for label in labels
                    ]
                },
            ),
            ScriptedResponse(_REASON, {"reason": "The score is 0.83 because node 2 is noise."}),
        ]
    )


class TestContextualPrecision:
    """Precision rewards relevant nodes ranked above irrelevant ones."""

    async def test_irrelevant_node_in_the_middle(self) -> None:
        metric = ContextualPrecisionMetric(judge=_make_judge(["yes", "no", "yes"]))

        result = await metric.score(_make_case(), ScoreOptions())

        assert result.metric == "Contextual Precision"
        assert result.score == pytest.approx(0.8333, abs=1e-3)
        assert result.success is True

    async def test_irrelevant_node_first(self) -> None:
        metric = ContextualPrecisionMetric(judge=_make_judge(["no", "yes", "yes"]))

        result = await metric.score(_make_case(), ScoreOptions())

        assert result.score == pytest.approx(0.5833, abs=1e-3)

    async def test_nodes_rendered_in_order(self) -> None:
        judge = _make_judge(["yes", "no", "yes"])

        await ContextualPrecisionMetric(judge=judge).score(_make_case(), ScoreOptions())

        prompt = judge.calls_matching(_VERDICTS)[0].prompt
        assert prompt.index("Node 1: Hamlet") < prompt.index("Node 2: Denmark")
        assert prompt.index("Node 2: Denmark") < prompt.index("Node 3: Shakespeare")

    async def test_reason_prompt_lists_node_verdicts(self) -> None:
        judge = _make_judge(["yes", "no", "yes"])

        await ContextualPrecisionMetric(judge=judge).score(_make_case(), ScoreOptions())

        prompt = judge.calls_matching(_REASON)[0].prompt
        assert "Node 2: no (node judged no)" in prompt

    async def test_verdict_count_mismatch_raises(self) -> None:
        judge = _make_judge(["yes", "no"])

        with pytest.raises(SchemaViolationError, match="one per context node"):
            await ContextualPrecisionMetric(judge=judge).score(
                _make_case(), ScoreOptions()
            )

"""Contextual Precision: are the useful context nodes ranked above the useless ones?"""

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.domain.scoring import contextual_precision_score
from rag_eval.metric.domain.verdict import BinaryVerdicts, Reason
from rag_eval.metric.infrastructure.judging import (
    require_verdict_count,
    resolve_options,
)
from rag_eval.metric.prompts import contextual_precision as prompts


class ContextualPrecisionMetric:
    """Judge-backed metric: weighted cumulative precision over ranked context nodes.

    One yes/no verdict per node, in retrieval order; the order of the nodes
    changes the score.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    name = "Contextual Precision"
    required_fields = [
        CaseField.INPUT,
        CaseField.RETRIEVAL_CONTEXT,
        CaseField.EXPECTED_OUTPUT,
    ]
    polarity = Polarity.HIGHER_IS_BETTER

    def __init__(
        self,
        judge: JudgeAdapter | None = None,
        threshold: float = 0.5,
        include_reason: bool = True,
    ) -> None:
        self.threshold = threshold
        self._judge = judge
        self._include_reason = include_reason

    async def score(self, case: EvalCase, options: ScoreOptions) -> MetricResult:
        resolved = resolve_options(
            metric=self.name,
            options=options,
            threshold=self.threshold,
            include_reason=self._include_reason,
            judge=self._judge,
        )
        context = case.retrieval_context or []

        response = await resolved.judge.generate_with_schema(
            prompts.verdicts_prompt(
                input=case.input,
                expected_output=case.expected_output or "",
                retrieval_context=context,
            ),
            BinaryVerdicts,
        )
        verdicts = response.verdicts
        require_verdict_count(
            metric=self.name,
            actual=len(verdicts),
            expected=len(context),
            unit="context node",
        )

        score = contextual_precision_score([v.verdict for v in verdicts])

        reason = None
        if resolved.include_reason:
            reply = await resolved.judge.generate_with_schema(
                prompts.reason_prompt(
                    score=score,
                    input=case.input,
                    verdicts=[(v.verdict, v.reason) for v in verdicts],
                ),
                Reason,
            )
            reason = reply.reason

        return MetricResult.from_score(
            metric=self.name,
            score=score,
            threshold=resolved.threshold,
            polarity=self.polarity,
            reason=reason,
            metadata={
                "verdicts": [v.model_dump() for v in verdicts],
                "context_count": len(context),
            },
        )

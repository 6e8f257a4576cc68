"""Contextual Recall: can the expected output be attributed to the retrieval context?"""

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.domain.scoring import contextual_recall_score
from rag_eval.metric.domain.verdict import BinaryVerdicts, Reason
from rag_eval.metric.infrastructure.judging import resolve_options
from rag_eval.metric.prompts import contextual_recall as prompts


class ContextualRecallMetric:
    """Judge-backed metric: share of expected-output sentences found in the context.

    The judge splits the expected output into sentences itself, so the number
    of verdicts is whatever the judge returns.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    name = "Contextual Recall"
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
        expected_output = case.expected_output or ""

        response = await resolved.judge.generate_with_schema(
            prompts.verdicts_prompt(
                expected_output=expected_output, retrieval_context=context
            ),
            BinaryVerdicts,
        )
        verdicts = response.verdicts
        score = contextual_recall_score([v.verdict for v in verdicts])

        reason = None
        if resolved.include_reason:
            reply = await resolved.judge.generate_with_schema(
                prompts.reason_prompt(
                    score=score,
                    expected_output=expected_output,
                    supportive_reasons=[
                        v.reason for v in verdicts if v.verdict == "yes" and v.reason
                    ],
                    unsupportive_reasons=[
                        v.reason for v in verdicts if v.verdict == "no" and v.reason
                    ],
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
                "sentence_count": len(verdicts),
                "context_count": len(context),
            },
        )

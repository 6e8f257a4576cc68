"""Hallucination: how many context passages does the output contradict?"""

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.domain.scoring import hallucination_score
from rag_eval.metric.domain.verdict import BinaryVerdicts, Reason
from rag_eval.metric.infrastructure.judging import (
    require_verdict_count,
    resolve_options,
)
from rag_eval.metric.prompts import hallucination as prompts


class HallucinationMetric:
    """Judge-backed metric: share of contexts the output contradicts. Lower is better.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    name = "Hallucination"
    required_fields = [CaseField.INPUT, CaseField.ACTUAL_OUTPUT, CaseField.CONTEXT]
    polarity = Polarity.LOWER_IS_BETTER

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
        contexts = case.context or case.retrieval_context or []

        response = await resolved.judge.generate_with_schema(
            prompts.verdicts_prompt(
                actual_output=case.actual_output or "", contexts=contexts
            ),
            BinaryVerdicts,
        )
        verdicts = response.verdicts
        require_verdict_count(
            metric=self.name,
            actual=len(verdicts),
            expected=len(contexts),
            unit="context",
        )

        score = hallucination_score([v.verdict for v in verdicts])

        reason = None
        if resolved.include_reason:
            reply = await resolved.judge.generate_with_schema(
                prompts.reason_prompt(
                    score=score,
                    factual_alignments=[
                        v.reason for v in verdicts if v.verdict == "yes" and v.reason
                    ],
                    contradictions=[
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
                "context_count": len(contexts),
            },
        )

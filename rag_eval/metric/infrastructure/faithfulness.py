"""Faithfulness: are the claims in the output supported by the retrieval context?"""

import asyncio

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.domain.scoring import faithfulness_score
from rag_eval.metric.domain.verdict import (
    Claims,
    Reason,
    TriVerdict,
    TriVerdicts,
    Truths,
)
from rag_eval.metric.infrastructure.judging import (
    require_verdict_count,
    resolve_options,
)
from rag_eval.metric.prompts import faithfulness as prompts


class FaithfulnessMetric:
    """Judge-backed metric: share of output claims the context does not contradict.

    Truths (from the context) and claims (from the output) are extracted
    concurrently, then the judge issues one yes/no/idk verdict per claim.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    name = "Faithfulness"
    required_fields = [
        CaseField.INPUT,
        CaseField.ACTUAL_OUTPUT,
        CaseField.RETRIEVAL_CONTEXT,
    ]
    polarity = Polarity.HIGHER_IS_BETTER

    def __init__(
        self,
        judge: JudgeAdapter | None = None,
        threshold: float = 0.5,
        include_reason: bool = True,
        truths_extraction_limit: int | None = None,
    ) -> None:
        self.threshold = threshold
        self._judge = judge
        self._include_reason = include_reason
        self._truths_extraction_limit = truths_extraction_limit

    async def score(self, case: EvalCase, options: ScoreOptions) -> MetricResult:
        resolved = resolve_options(
            metric=self.name,
            options=options,
            threshold=self.threshold,
            include_reason=self._include_reason,
            judge=self._judge,
        )
        judge = resolved.judge
        context = "\n\n".join(case.retrieval_context or [])

        truths, claims = await asyncio.gather(
            judge.generate_with_schema(
                prompts.truths_prompt(
                    retrieval_context=context,
                    extraction_limit=self._truths_extraction_limit,
                ),
                Truths,
            ),
            judge.generate_with_schema(
                prompts.claims_prompt(actual_output=case.actual_output or ""),
                Claims,
            ),
        )

        verdicts: list[TriVerdict] = []
        if claims.claims:
            response = await judge.generate_with_schema(
                prompts.verdicts_prompt(
                    claims=claims.claims,
                    retrieval_context="\n\n".join(truths.truths),
                ),
                TriVerdicts,
            )
            verdicts = response.verdicts
            require_verdict_count(
                metric=self.name,
                actual=len(verdicts),
                expected=len(claims.claims),
                unit="claim",
            )

        labels = [v.verdict for v in verdicts]
        score = faithfulness_score(labels)

        reason = None
        if resolved.include_reason:
            contradictions = [
                v.reason for v in verdicts if v.verdict == "no" and v.reason
            ]
            reply = await judge.generate_with_schema(
                prompts.reason_prompt(score=score, contradictions=contradictions),
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
                "truths": truths.truths,
                "claims": claims.claims,
                "verdicts": [v.model_dump() for v in verdicts],
                "truths_extraction_limit": self._truths_extraction_limit,
            },
        )

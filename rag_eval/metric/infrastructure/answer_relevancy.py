"""Answer Relevancy: do the statements in the output address the input?"""

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.domain.scoring import answer_relevancy_score
from rag_eval.metric.domain.verdict import Reason, Statements, TriVerdict, TriVerdicts
from rag_eval.metric.infrastructure.judging import (
    require_verdict_count,
    resolve_options,
)
from rag_eval.metric.prompts import answer_relevancy as prompts


class AnswerRelevancyMetric:
    """Judge-backed metric: share of output statements not judged irrelevant.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    name = "Answer Relevancy"
    required_fields = [CaseField.INPUT, CaseField.ACTUAL_OUTPUT]
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
        judge = resolved.judge

        extracted = await judge.generate_with_schema(
            prompts.statements_prompt(actual_output=case.actual_output or ""),
            Statements,
        )
        statements = extracted.statements

        verdicts: list[TriVerdict] = []
        if statements:
            response = await judge.generate_with_schema(
                prompts.verdicts_prompt(input=case.input, statements=statements),
                TriVerdicts,
            )
            verdicts = response.verdicts
            require_verdict_count(
                metric=self.name,
                actual=len(verdicts),
                expected=len(statements),
                unit="statement",
            )

        score = answer_relevancy_score([v.verdict for v in verdicts])

        reason = None
        if resolved.include_reason:
            reply = await judge.generate_with_schema(
                prompts.reason_prompt(
                    score=score,
                    input=case.input,
                    irrelevant_statements=[
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
                "statements": statements,
                "verdicts": [v.model_dump() for v in verdicts],
                "statement_count": len(statements),
            },
        )

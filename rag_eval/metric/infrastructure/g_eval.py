"""G-Eval: criteria-driven judge scoring with generated or supplied evaluation steps."""

from typing import TypeAlias

from rag_eval.dataset.domain.eval_case import CaseField, EvalCase
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.judge.infrastructure.errors import SchemaViolationError
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.domain.polarity import Polarity
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.domain.scoring import normalize_score
from rag_eval.metric.domain.verdict import EvaluationSteps, GEvalScore
from rag_eval.metric.infrastructure.errors import MetricConfigurationError
from rag_eval.metric.infrastructure.judging import resolve_options
from rag_eval.metric.prompts import g_eval as prompts

_FIELD_LABELS: dict[CaseField, str] = {
    CaseField.INPUT: "Input",
    CaseField.ACTUAL_OUTPUT: "Actual Output",
    CaseField.EXPECTED_OUTPUT: "Expected Output",
    CaseField.RETRIEVAL_CONTEXT: "Retrieval Context",
    CaseField.CONTEXT: "Context",
}

_NOT_PROVIDED = "(not provided)"
_STRICT_RANGE = (0, 1)

RubricEntry: TypeAlias = tuple[int, str]


class GEvalMetric:
    """Judge-backed metric that scores a case against free-text criteria.

    When no evaluation steps are supplied, they are generated from the
    criteria on every call. The judge returns an integer score inside
    `score_range`, which is normalized linearly onto [0, 1]. In strict mode the
    judge may only answer 0 or 1.

    Does NOT inherit from Metric (structural typing via Protocol).
    """

    polarity = Polarity.HIGHER_IS_BETTER

    def __init__(
        self,
        name: str,
        criteria: str | None = None,
        evaluation_steps: list[str] | None = None,
        evaluation_params: list[CaseField] | None = None,
        rubric: list[RubricEntry] | None = None,
        threshold: float = 0.5,
        score_range: tuple[int, int] = (0, 10),
        strict_mode: bool = False,
        include_reason: bool = True,
        judge: JudgeAdapter | None = None,
    ) -> None:
        """
        Raises:
            MetricConfigurationError: if neither criteria nor evaluation_steps is
                given, or score_range is empty.
        """
        if not criteria and not evaluation_steps:
            raise MetricConfigurationError(
                metric=name, reason="either criteria or evaluation_steps is required"
            )
        if strict_mode:
            score_range = _STRICT_RANGE
        low, high = score_range
        if high <= low:
            raise MetricConfigurationError(
                metric=name, reason=f"score_range {score_range} must have min < max"
            )

        self.name = f"{name} [GEval]"
        self.required_fields = evaluation_params or [
            CaseField.INPUT,
            CaseField.ACTUAL_OUTPUT,
        ]
        self.threshold = threshold
        self._criteria = criteria
        self._evaluation_steps = evaluation_steps
        self._rubric = rubric
        self._score_range = score_range
        self._strict_mode = strict_mode
        self._include_reason = include_reason
        self._judge = judge

    async def score(self, case: EvalCase, options: ScoreOptions) -> MetricResult:
        resolved = resolve_options(
            metric=self.name,
            options=options,
            threshold=self.threshold,
            include_reason=self._include_reason,
            judge=self._judge,
        )
        parameters = _parameter_names(self.required_fields)

        steps = self._evaluation_steps
        if not steps:
            generated = await resolved.judge.generate_with_schema(
                prompts.steps_prompt(criteria=self._criteria or "", parameters=parameters),
                EvaluationSteps,
            )
            steps = generated.steps

        test_case = _render_case(case, self.required_fields)
        if self._strict_mode:
            prompt = prompts.strict_evaluate_prompt(
                steps=steps, test_case=test_case, parameters=parameters
            )
        else:
            prompt = prompts.evaluate_prompt(
                steps=steps,
                test_case=test_case,
                parameters=parameters,
                score_range=self._score_range,
                rubric=_render_rubric(self._rubric) if self._rubric else None,
            )
        reply = await resolved.judge.generate_with_schema(prompt, GEvalScore)

        low, high = self._score_range
        if not low <= reply.score <= high:
            raise SchemaViolationError(
                reason=f"{self.name} score {reply.score} is outside [{low}, {high}]"
            )

        return MetricResult.from_score(
            metric=self.name,
            score=normalize_score(reply.score, low, high),
            threshold=resolved.threshold,
            polarity=self.polarity,
            reason=reply.reason if resolved.include_reason else None,
            metadata={
                "raw_score": reply.score,
                "score_range": [low, high],
                "evaluation_steps": steps,
                "criteria": self._criteria,
            },
        )


def _parameter_names(fields: list[CaseField]) -> str:
    """Join field labels as "A", "A and B" or "A, B, and C"."""
    labels = [_FIELD_LABELS[f] for f in fields]
    if len(labels) <= 2:
        return " and ".join(labels)
    return ", ".join(labels[:-1]) + ", and " + labels[-1]


def _render_case(case: EvalCase, fields: list[CaseField]) -> str:
    blocks = []
    for field in fields:
        value = getattr(case, field.value)
        if value is None:
            text = _NOT_PROVIDED
        elif isinstance(value, list):
            text = "\n---\n".join(value)
        else:
            text = str(value)
        blocks.append(f"{_FIELD_LABELS[field]}:\n{text}")
    return "\n\n".join(blocks)


def _render_rubric(rubric: list[RubricEntry]) -> str:
    ordered = sorted(rubric, key=lambda entry: entry[0], reverse=True)
    return "\n".join(f"- Score {score}: {description}" for score, description in ordered)

"""Response schemas requested from the judge by the judge-backed metrics.

Every schema is closed (`extra="forbid"`). Verdict labels are lower-cased and
stripped before validation; any label outside the vocabulary is a validation
error, which the judge adapter reports as a schema violation.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _normalize_label(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _round_number(value: object) -> object:
    if isinstance(value, float):
        return round(value)
    return value


TriLabel = Annotated[Literal["yes", "no", "idk"], BeforeValidator(_normalize_label)]
BinaryLabel = Annotated[Literal["yes", "no"], BeforeValidator(_normalize_label)]


class _JudgeSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class TriVerdict(_JudgeSchema):
    verdict: TriLabel
    reason: str | None = None


class BinaryVerdict(_JudgeSchema):
    verdict: BinaryLabel
    reason: str | None = None


class TriVerdicts(_JudgeSchema):
    verdicts: list[TriVerdict]


class BinaryVerdicts(_JudgeSchema):
    verdicts: list[BinaryVerdict]


class Claims(_JudgeSchema):
    claims: list[str]


class Truths(_JudgeSchema):
    truths: list[str]


class Statements(_JudgeSchema):
    statements: list[str]


class Reason(_JudgeSchema):
    reason: str


class EvaluationSteps(_JudgeSchema):
    steps: list[str]


class GEvalScore(_JudgeSchema):
    score: Annotated[int, BeforeValidator(_round_number)]
    reason: str

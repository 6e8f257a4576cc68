"""Judge prompts for G-Eval (criteria-driven scoring with generated steps)."""

from rag_eval.metric.prompts.formatting import numbered

_STEPS = """\
Given the evaluation criteria below, which describe how to judge the \
{parameters}, write 3-4 concise evaluation steps. The steps MUST make clear how \
the {parameters} are to be compared with one another.

Evaluation Criteria:
{criteria}

Return only JSON with a "steps" key holding a list of strings.
Example JSON: {{"steps": ["Step 1: ...", "Step 2: ...", "Step 3: ..."]}}

JSON:
"""

_EVALUATE = """\
You are an evaluator. Using the {dependencies} below, assess the test case and \
return a JSON object with two fields:

- "score": an integer between {score_min} and {score_max}, {score_explanation}.
- "reason": a brief explanation naming specific strengths or shortcomings, \
referencing details from the {parameters}. Do not quote the score.

{reasoning_expectation} Return only valid JSON with no extra commentary.

Evaluation Steps:
{steps}
{rubric_block}
Test Case:
{test_case}

Example JSON: {{"score": {score_min}, "reason": "your concise reason"}}

JSON:
"""

_STRICT_EVALUATE = """\
Using the evaluation steps below, return a JSON object with a "score" that is \
STRICTLY 1 (the test case follows the criteria completely) or 0 (it does not), \
and a "reason" for that score that does NOT quote the score. Mention specific \
information from the {parameters}, very concisely.

Evaluation Steps:
{steps}

Test Case:
{test_case}

Example JSON: {{"score": 0, "reason": "The output does not follow the evaluation steps."}}

JSON:
"""


def steps_prompt(criteria: str, parameters: str) -> str:
    return _STEPS.format(criteria=criteria, parameters=parameters)


def evaluate_prompt(
    steps: list[str],
    test_case: str,
    parameters: str,
    score_range: tuple[int, int],
    rubric: str | None,
) -> str:
    score_min, score_max = score_range
    if rubric is not None:
        dependencies = "evaluation steps and rubric"
        score_explanation = "based on the rubric provided"
        reasoning_expectation = "Be specific and grounded in the evaluation steps and rubric."
        rubric_block = f"\nRubric:\n{rubric}\n"
    else:
        dependencies = "evaluation steps"
        score_explanation = (
            f"with {score_max} indicating strong alignment with the evaluation "
            f"steps and {score_min} indicating no alignment"
        )
        reasoning_expectation = "Be specific and grounded in the evaluation steps."
        rubric_block = ""
    return _EVALUATE.format(
        dependencies=dependencies,
        score_min=score_min,
        score_max=score_max,
        score_explanation=score_explanation,
        parameters=parameters,
        reasoning_expectation=reasoning_expectation,
        steps=numbered(steps),
        rubric_block=rubric_block,
        test_case=test_case,
    )


def strict_evaluate_prompt(steps: list[str], test_case: str, parameters: str) -> str:
    return _STRICT_EVALUATE.format(
        parameters=parameters, steps=numbered(steps), test_case=test_case
    )

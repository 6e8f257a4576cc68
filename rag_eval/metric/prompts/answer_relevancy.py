"""Judge prompts for the Answer Relevancy metric."""

from rag_eval.metric.prompts.formatting import numbered, score_text

_STATEMENTS = """\
Break the text below into the individual statements it makes. Ambiguous \
statements and single words count as statements only when they stand outside a \
coherent sentence.

Example text:
"The new phone has a 6.1 inch screen. Its battery lasts two days. Shipping is free."

Example JSON:
{{"statements": ["The new phone has a 6.1 inch screen.", "Its battery lasts two \
days.", "Shipping is free."]}}

Return only valid JSON with a "statements" key holding a list of strings.

Text:
{actual_output}

JSON:
"""

_VERDICTS = """\
For EACH statement below decide whether it is relevant to addressing the input. \
Answer with one JSON object per statement holding a "verdict" and an optional \
"reason".

"verdict" is STRICTLY one of:
- "yes": the statement helps address the input
- "no": the statement is irrelevant to the input
- "idk": the statement is ambiguous, for example supporting information

Give a "reason" only for "no" and "idk". The number of verdicts MUST equal the \
number of statements ({statement_count}), in the same order.

Expected JSON:
{{"verdicts": [{{"verdict": "yes"}}, {{"verdict": "no", "reason": "<why irrelevant>"}}]}}

Input:
{input}

Statements:
{statements}

JSON:
"""

_REASON = """\
Given the answer relevancy score ({score}), the reasons why some statements in \
the actual output are irrelevant, and the input, give a CONCISE reason for the \
score: why it is not higher and why it is what it is. If nothing is irrelevant, \
say something briefly positive.

Return only JSON: {{"reason": "The score is <score> because <your reason>."}}

Irrelevant statements:
{irrelevant_statements}

Input:
{input}

JSON:
"""


def statements_prompt(actual_output: str) -> str:
    return _STATEMENTS.format(actual_output=actual_output)


def verdicts_prompt(input: str, statements: list[str]) -> str:
    return _VERDICTS.format(
        statement_count=len(statements),
        input=input,
        statements=numbered(statements),
    )


def reason_prompt(score: float, input: str, irrelevant_statements: list[str]) -> str:
    return _REASON.format(
        score=score_text(score),
        irrelevant_statements=numbered(irrelevant_statements),
        input=input,
    )

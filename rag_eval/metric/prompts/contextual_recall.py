"""Judge prompts for the Contextual Recall metric."""

from rag_eval.metric.prompts.formatting import nodes, numbered, score_text

_VERDICTS = """\
For EACH sentence in the expected output below, decide whether it can be \
attributed to any node of the retrieval context. Answer with one JSON object \
per sentence holding a "verdict" and a "reason".

"verdict" is STRICTLY "yes" (attributable to some node) or "no". In the reason, \
name the node(s) involved (e.g. "node 2") and quote the supporting text very \
briefly, cutting it short with an ellipsis. The number of verdicts MUST equal \
the number of sentences in the expected output, in sentence order.

Expected JSON:
{{"verdicts": [{{"verdict": "yes", "reason": "..."}}]}}

Expected Output:
{expected_output}

Retrieval Context:
{retrieval_context}

JSON:
"""

_REASON = """\
Given the expected output, the contextual recall score ({score}, closer to 1 is \
better), and the reasons why each expected sentence could or could not be \
attributed to the retrieval context, summarize a CONCISE reason for the score. \
Refer to sentence numbers in the expected output and node numbers "in \
retrieval context". Do not use the words "supportive" or "unsupportive". If the \
score is 1, keep it short and positive.

Return only JSON: {{"reason": "The score is <score> because <your reason>."}}

Expected Output:
{expected_output}

Attributable:
{supportive_reasons}

Not attributable:
{unsupportive_reasons}

JSON:
"""


def verdicts_prompt(expected_output: str, retrieval_context: list[str]) -> str:
    return _VERDICTS.format(
        expected_output=expected_output,
        retrieval_context=nodes(retrieval_context),
    )


def reason_prompt(
    score: float,
    expected_output: str,
    supportive_reasons: list[str],
    unsupportive_reasons: list[str],
) -> str:
    return _REASON.format(
        score=score_text(score),
        expected_output=expected_output,
        supportive_reasons=numbered(supportive_reasons),
        unsupportive_reasons=numbered(unsupportive_reasons),
    )

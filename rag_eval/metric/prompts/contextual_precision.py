"""Judge prompts for the Contextual Precision metric."""

from rag_eval.metric.prompts.formatting import nodes, score_text

_VERDICTS = """\
Given the input and the expected output, determine whether each node in the \
retrieval context was remotely useful in arriving at the expected output. \
Answer with one JSON object per node holding a "verdict" and a "reason".

"verdict" is STRICTLY "yes" (the node was useful) or "no". In the reason, quote \
the part of the node that made it useful, or say why it was not. The number of \
verdicts MUST equal the number of nodes ({node_count}), in node order.

Expected JSON:
{{"verdicts": [{{"verdict": "yes", "reason": "..."}}, {{"verdict": "no", "reason": "..."}}]}}

Input:
{input}

Expected Output:
{expected_output}

Retrieval Context:
{retrieval_context}

JSON:
"""

_REASON = """\
Given the input, the contextual precision score ({score}, closer to 1 is \
better) and the per-node verdicts below, provide a CONCISE summary for the \
score. Contextual precision rewards relevant nodes being ranked above \
irrelevant ones. Explain why the score is not higher by referring to node \
positions ("node 1", "node 2", ...). If the score is 1, keep it short and \
positive.

Return only JSON: {{"reason": "The score is <score> because <your reason>."}}

Input:
{input}

Verdicts:
{verdicts}

JSON:
"""


def verdicts_prompt(
    input: str, expected_output: str, retrieval_context: list[str]
) -> str:
    return _VERDICTS.format(
        node_count=len(retrieval_context),
        input=input,
        expected_output=expected_output,
        retrieval_context=nodes(retrieval_context),
    )


def reason_prompt(score: float, input: str, verdicts: list[tuple[str, str | None]]) -> str:
    rendered = "\n".join(
        f"Node {i}: {label}" + (f" ({reason})" if reason else "")
        for i, (label, reason) in enumerate(verdicts, start=1)
    )
    return _REASON.format(score=score_text(score), input=input, verdicts=rendered)

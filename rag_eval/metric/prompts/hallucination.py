"""Judge prompts for the Hallucination metric."""

from rag_eval.metric.prompts.formatting import numbered, score_text

_VERDICTS = """\
For EACH context below decide whether the actual output agrees with it. Answer \
with one JSON object per context holding a "verdict" and a "reason".

"verdict" is STRICTLY "yes" (the output agrees with the context) or "no" (the \
output contradicts the context). For "no", correct the output in the reason. \
Take each context at face value and ignore prior knowledge. An output that is \
merely missing detail still agrees; answer "no" ONLY for a contradiction. The \
number of verdicts MUST equal {context_count}, in context order.

Expected JSON:
{{"verdicts": [{{"verdict": "yes", "reason": "..."}}, {{"verdict": "no", "reason": "..."}}]}}

Contexts:
{contexts}

Actual Output:
{actual_output}

JSON:
"""

_REASON = """\
The hallucination score ({score}) ranges from 0 to 1; LOWER is better. Using \
the factual alignments and contradictions between the actual output and the \
contexts, CONCISELY explain the score.

Return only JSON: {{"reason": "The score is <score> because <your reason>."}}

Factual alignments:
{factual_alignments}

Contradictions:
{contradictions}

JSON:
"""


def verdicts_prompt(actual_output: str, contexts: list[str]) -> str:
    return _VERDICTS.format(
        context_count=len(contexts),
        contexts=numbered(contexts),
        actual_output=actual_output,
    )


def reason_prompt(
    score: float, factual_alignments: list[str], contradictions: list[str]
) -> str:
    return _REASON.format(
        score=score_text(score),
        factual_alignments=numbered(factual_alignments),
        contradictions=numbered(contradictions),
    )

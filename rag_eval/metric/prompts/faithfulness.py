"""Judge prompts for the Faithfulness metric."""

from rag_eval.metric.prompts.formatting import numbered, score_text

_CLAIMS = """\
Extract every FACTUAL claim made in the AI output below. Each claim must be \
coherent on its own and keep the context it was stated in; do not cherry-pick \
fragments. Take the text at face value: a claim counts even if it is wrong, and \
you must not add prior knowledge.

Example text:
"Marie Curie, who moved to Paris in 1891, was the first person to win two Nobel \
Prizes, one in physics and one in chemistry."

Example JSON:
{{"claims": ["Marie Curie moved to Paris in 1891.", "Marie Curie was the first \
person to win two Nobel Prizes.", "Marie Curie won Nobel Prizes in physics and \
chemistry."]}}

Return only JSON with a "claims" key holding a list of strings.

AI Output:
{actual_output}

JSON:
"""

_TRUTHS = """\
Extract {limit_text} that can be inferred from the text below. Each truth must \
be coherent and must not be taken out of context. Whether a truth is actually \
correct does not matter; only that the text states it.

Example JSON:
{{"truths": ["Marie Curie moved to Paris in 1891.", "Marie Curie won Nobel \
Prizes in physics and chemistry."]}}

Return only JSON with a "truths" key holding a list of strings.

Text:
{retrieval_context}

JSON:
"""

_VERDICTS = """\
For EACH claim below decide whether it contradicts the facts in the retrieval \
context. Answer with one JSON object per claim holding a "verdict" and an \
optional "reason".

"verdict" is STRICTLY one of:
- "yes": the context supports the claim
- "no": the context DIRECTLY contradicts the claim
- "idk": the context neither supports nor contradicts the claim

Give a "reason" only for "no" and "idk"; for "no", correct the claim using the \
context. Never use prior knowledge. Hedged language ("may", "possibly") is not \
a contradiction. The number of verdicts MUST equal the number of claims \
({claim_count}), in the same order.

Expected JSON:
{{"verdicts": [{{"verdict": "yes"}}, {{"verdict": "no", "reason": "<correction>"}}]}}

Retrieval context:
{retrieval_context}

Claims:
{claims}

JSON:
"""

_REASON = """\
The faithfulness score ({score}) is a 0-1 measure of how faithful the actual \
output is to the retrieval context; higher is better. Below are the \
contradictions found in the actual output. CONCISELY summarize them to justify \
the score. If there are none, say something briefly positive.

Return only JSON: {{"reason": "The score is <score> because <your reason>."}}

Contradictions:
{contradictions}

JSON:
"""


def claims_prompt(actual_output: str) -> str:
    return _CLAIMS.format(actual_output=actual_output)


def truths_prompt(retrieval_context: str, extraction_limit: int | None) -> str:
    if extraction_limit is None:
        limit_text = "a comprehensive list of FACTUAL truths"
    elif extraction_limit == 1:
        limit_text = "the single most important FACTUAL truth"
    else:
        limit_text = (
            f"the {extraction_limit} most important FACTUAL truths per document"
        )
    return _TRUTHS.format(limit_text=limit_text, retrieval_context=retrieval_context)


def verdicts_prompt(claims: list[str], retrieval_context: str) -> str:
    return _VERDICTS.format(
        claim_count=len(claims),
        retrieval_context=retrieval_context,
        claims=numbered(claims),
    )


def reason_prompt(score: float, contradictions: list[str]) -> str:
    return _REASON.format(score=score_text(score), contradictions=numbered(contradictions))

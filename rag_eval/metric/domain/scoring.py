"""Pure scoring formulas that reduce verdict labels to a score in [0, 1].

The judge never computes a final score: every judge-backed metric reduces its
verdict list through one of these functions. Empty verdict lists resolve to a
per-metric default and never produce NaN.
"""


def _fraction(matching: int, total: int, empty_default: float) -> float:
    if total == 0:
        return empty_default
    return matching / total


def faithfulness_score(labels: list[str]) -> float:
    """Share of claims not contradicted by the context; 1.0 when there are no claims."""
    return _fraction(sum(1 for label in labels if label != "no"), len(labels), 1.0)


def hallucination_score(labels: list[str]) -> float:
    """Share of contexts the output contradicts; 0.0 when there are no verdicts."""
    return _fraction(sum(1 for label in labels if label == "no"), len(labels), 0.0)


def answer_relevancy_score(labels: list[str]) -> float:
    """Share of statements not judged irrelevant; 1.0 when there are no statements."""
    return _fraction(sum(1 for label in labels if label != "no"), len(labels), 1.0)


def contextual_recall_score(labels: list[str]) -> float:
    """Share of expected-output sentences attributable to the context; 0.0 when empty."""
    return _fraction(sum(1 for label in labels if label == "yes"), len(labels), 0.0)


def contextual_precision_score(labels: list[str]) -> float:
    """Weighted cumulative precision over ranked context nodes.

    At every position k holding a relevant node, precision@k (relevant nodes
    seen so far divided by k) is accumulated; the sum is divided by the total
    number of relevant nodes. 0.0 when no node is relevant.

    >>> round(contextual_precision_score(["yes", "no", "yes"]), 3)
    0.833
    """
    relevant_seen = 0
    weighted_sum = 0.0
    for k, label in enumerate(labels, start=1):
        if label == "yes":
            relevant_seen += 1
            weighted_sum += relevant_seen / k
    if relevant_seen == 0:
        return 0.0
    return weighted_sum / relevant_seen


def normalize_score(raw: int, low: int, high: int) -> float:
    """Map raw from the inclusive range [low, high] linearly onto [0, 1]."""
    return (raw - low) / (high - low)

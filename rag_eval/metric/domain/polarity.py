"""Polarity — which side of a metric's threshold counts as a pass."""

from enum import StrEnum


class Polarity(StrEnum):
    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"

    def passes(self, score: float, threshold: float) -> bool:
        if self is Polarity.LOWER_IS_BETTER:
            return score <= threshold
        return score >= threshold

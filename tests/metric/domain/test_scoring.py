"""Tests for the pure verdict-to-score formulas."""

import pytest

from rag_eval.metric.domain.scoring import (
    answer_relevancy_score,
    contextual_precision_score,
    contextual_recall_score,
    faithfulness_score,
    hallucination_score,
    normalize_score,
)


class TestFaithfulnessScore:
    """Only "no" verdicts lower faithfulness; "idk" counts as faithful."""

    def test_mixed_verdicts(self) -> None:
        assert faithfulness_score(["yes", "no"]) == pytest.approx(0.5)

    def test_idk_counts_as_faithful(self) -> None:
        assert faithfulness_score(["idk", "idk", "no"]) == pytest.approx(2 / 3)

    def test_no_claims_is_fully_faithful(self) -> None:
        assert faithfulness_score([]) == 1.0


class TestHallucinationScore:
    """Hallucination is the share of contradicted contexts."""

    def test_mixed_verdicts(self) -> None:
        assert hallucination_score(["yes", "no"]) == pytest.approx(0.5)

    def test_all_contradicted(self) -> None:
        assert hallucination_score(["no", "no"]) == 1.0

    def test_empty_is_zero(self) -> None:
        assert hallucination_score([]) == 0.0


class TestAnswerRelevancyScore:
    """Relevancy counts every statement not judged "no"."""

    def test_idk_counts_as_relevant(self) -> None:
        assert answer_relevancy_score(["yes", "idk", "no", "no"]) == pytest.approx(0.5)

    def test_no_statements_is_fully_relevant(self) -> None:
        assert answer_relevancy_score([]) == 1.0


class TestContextualRecallScore:
    """Recall counts only "yes" sentences."""

    def test_thirds(self) -> None:
        assert contextual_recall_score(["yes", "no", "yes"]) == pytest.approx(2 / 3)

    def test_empty_is_zero(self) -> None:
        assert contextual_recall_score([]) == 0.0


class TestContextualPrecisionScore:
    """Weighted cumulative precision rewards relevant nodes ranked first."""

    def test_relevant_first_and_last(self) -> None:
        # (1/1 + 2/3) / 2
        assert contextual_precision_score(["yes", "no", "yes"]) == pytest.approx(
            0.8333, abs=1e-3
        )

    def test_relevant_after_irrelevant(self) -> None:
        # (1/2 + 2/3) / 2
        assert contextual_precision_score(["no", "yes", "yes"]) == pytest.approx(
            0.5833, abs=1e-3
        )

    def test_all_relevant(self) -> None:
        assert contextual_precision_score(["yes", "yes"]) == 1.0

    def test_no_relevant_nodes(self) -> None:
        assert contextual_precision_score(["no", "no"]) == 0.0

    def test_empty(self) -> None:
        assert contextual_precision_score([]) == 0.0

    def test_order_changes_score(self) -> None:
        assert contextual_precision_score(["yes", "no"]) > contextual_precision_score(
            ["no", "yes"]
        )


class TestNormalizeScore:
    """normalize_score maps an inclusive integer range onto [0, 1]."""

    def test_bounds(self) -> None:
        assert normalize_score(0, 0, 10) == 0.0
        assert normalize_score(10, 0, 10) == 1.0

    def test_midpoint_of_offset_range(self) -> None:
        assert normalize_score(3, 1, 5) == pytest.approx(0.5)

"""Tests for ExactMatchMetric."""

from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.metric.domain.options import ScoreOptions
from rag_eval.metric.infrastructure.exact_match import ExactMatchMetric


def _make_case(actual: str, expected: str) -> EvalCase:
    return EvalCase(input="q", actual_output=actual, expected_output=expected)


class TestExactMatch:
    """ExactMatch compares trimmed outputs without calling a judge."""

    async def test_surrounding_whitespace_is_ignored(self) -> None:
        result = await ExactMatchMetric().score(
            _make_case(actual="Paris ", expected="Paris"), ScoreOptions()
        )

        assert result.metric == "ExactMatch"
        assert result.score == 1.0
        assert result.success is True
        assert result.reason == "The actual and expected outputs are exact matches."

    async def test_case_difference_fails_by_default(self) -> None:
        result = await ExactMatchMetric().score(
            _make_case(actual="paris", expected="Paris"), ScoreOptions()
        )

        assert result.score == 0.0
        assert result.success is False
        assert result.reason == "The actual and expected outputs are different."

    async def test_case_insensitive_option(self) -> None:
        result = await ExactMatchMetric(case_sensitive=False).score(
            _make_case(actual="PARIS", expected="paris"), ScoreOptions()
        )

        assert result.score == 1.0

    async def test_inner_whitespace_matters_by_default(self) -> None:
        result = await ExactMatchMetric().score(
            _make_case(actual="New  York", expected="New York"), ScoreOptions()
        )

        assert result.score == 0.0

    async def test_normalize_whitespace_option(self) -> None:
        result = await ExactMatchMetric(normalize_whitespace=True).score(
            _make_case(actual="New \n York", expected="New York"), ScoreOptions()
        )

        assert result.score == 1.0

    async def test_include_reason_false(self) -> None:
        result = await ExactMatchMetric().score(
            _make_case(actual="a", expected="a"), ScoreOptions(include_reason=False)
        )

        assert result.reason is None

    async def test_threshold_override(self) -> None:
        result = await ExactMatchMetric().score(
            _make_case(actual="a", expected="b"), ScoreOptions(threshold=0.0)
        )

        assert result.threshold == 0.0
        assert result.success is True

    async def test_metadata_keeps_raw_values(self) -> None:
        result = await ExactMatchMetric().score(
            _make_case(actual=" a ", expected="a"), ScoreOptions()
        )

        assert result.metadata["actual"] == " a "
        assert result.metadata["expected"] == "a"

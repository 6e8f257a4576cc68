"""Metric registry — maps MetricConfig.type to a configured Metric."""

from rag_eval.config.domain.metric import MetricConfig
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.metric.domain.metric import Metric
from rag_eval.metric.infrastructure.answer_relevancy import AnswerRelevancyMetric
from rag_eval.metric.infrastructure.contextual_precision import (
    ContextualPrecisionMetric,
)
from rag_eval.metric.infrastructure.contextual_recall import ContextualRecallMetric
from rag_eval.metric.infrastructure.errors import (
    MetricConfigurationError,
    MetricTypeNotSupportedError,
)
from rag_eval.metric.infrastructure.exact_match import ExactMatchMetric
from rag_eval.metric.infrastructure.faithfulness import FaithfulnessMetric
from rag_eval.metric.infrastructure.g_eval import GEvalMetric
from rag_eval.metric.infrastructure.hallucination import HallucinationMetric

SUPPORTED_METRIC_TYPES: list[str] = [
    "answer_relevancy",
    "contextual_precision",
    "contextual_recall",
    "exact_match",
    "faithfulness",
    "g_eval",
    "hallucination",
]

_DEFAULT_THRESHOLD = 0.5


def create_metric(config: MetricConfig, judge: JudgeAdapter | None) -> Metric:
    """Return the Metric described by config, bound to judge where it needs one.

    Raises:
        MetricTypeNotSupportedError: if config.type is not a known metric type.
        MetricConfigurationError: if the metric's own options are unusable.
    """
    threshold = config.threshold if config.threshold is not None else _DEFAULT_THRESHOLD

    match config.type:
        case "faithfulness":
            return FaithfulnessMetric(
                judge=judge,
                threshold=threshold,
                include_reason=config.include_reason,
                truths_extraction_limit=config.truths_extraction_limit,
            )
        case "hallucination":
            return HallucinationMetric(
                judge=judge, threshold=threshold, include_reason=config.include_reason
            )
        case "answer_relevancy":
            return AnswerRelevancyMetric(
                judge=judge, threshold=threshold, include_reason=config.include_reason
            )
        case "contextual_recall":
            return ContextualRecallMetric(
                judge=judge, threshold=threshold, include_reason=config.include_reason
            )
        case "contextual_precision":
            return ContextualPrecisionMetric(
                judge=judge, threshold=threshold, include_reason=config.include_reason
            )
        case "exact_match":
            return ExactMatchMetric(
                threshold=config.threshold if config.threshold is not None else 1.0,
                include_reason=config.include_reason,
                case_sensitive=config.case_sensitive,
                normalize_whitespace=config.normalize_whitespace,
            )
        case "g_eval":
            if not config.name:
                raise MetricConfigurationError(
                    metric="g_eval", reason="a name is required"
                )
            return GEvalMetric(
                name=config.name,
                criteria=config.criteria,
                evaluation_steps=config.evaluation_steps,
                evaluation_params=config.evaluation_params,
                rubric=(
                    [(level.score, level.description) for level in config.rubric]
                    if config.rubric
                    else None
                ),
                threshold=threshold,
                score_range=config.score_range,
                strict_mode=config.strict_mode,
                include_reason=config.include_reason,
                judge=judge,
            )

    raise MetricTypeNotSupportedError(metric_type=config.type)

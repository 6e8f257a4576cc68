"""Result aggregation and JSON / JSONL serialization for a finished batch."""

import time
from importlib.metadata import PackageNotFoundError, version
from typing import Any, TypeAlias

from pydantic import BaseModel, Field

from rag_eval.config.domain.config import EvalConfig
from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.metric.domain.result import MetricResult

JsonDict: TypeAlias = dict[str, Any]


class MetricSummary(BaseModel, frozen=True):
    """Aggregate over every case for one metric.

    `mean_score` and `pass_rate` are computed over scored results only; error
    results are counted in `failures`. Both are None when nothing was scored.
    """

    metric: str
    total: int = Field(ge=0)
    scored: int = Field(ge=0)
    failures: int = Field(ge=0)
    mean_score: float | None
    pass_rate: float | None


def summarize(rows: list[list[MetricResult]]) -> list[MetricSummary]:
    """Group results by metric name, in first-seen order, and aggregate each group."""
    by_metric: dict[str, list[MetricResult]] = {}
    for row in rows:
        for result in row:
            by_metric.setdefault(result.metric, []).append(result)

    summaries: list[MetricSummary] = []
    for metric, results in by_metric.items():
        scored = [r for r in results if r.error is None]
        summaries.append(
            MetricSummary(
                metric=metric,
                total=len(results),
                scored=len(scored),
                failures=len(results) - len(scored),
                mean_score=(
                    sum(r.score for r in scored) / len(scored) if scored else None
                ),
                pass_rate=(
                    sum(1 for r in scored if r.success) / len(scored)
                    if scored
                    else None
                ),
            )
        )
    return summaries


def _rag_eval_version() -> str:
    try:
        return version("rag-eval")
    except PackageNotFoundError:
        return "dev"


def build_aggregate_json(
    run_id: str,
    config: EvalConfig,
    summaries: list[MetricSummary],
    detailed_file: str,
) -> JsonDict:
    """Build the aggregate results document for one run."""
    return {
        "run_id": run_id,
        "retrieved_timestamp": str(time.time()),
        "rag_eval_version": _rag_eval_version(),
        "config": {"name": config.name, "version": config.version},
        "judge": {"provider": config.judge.provider, "model": config.judge.model},
        "dataset": {"path": config.dataset.path},
        "metrics": [summary.model_dump() for summary in summaries],
        "detailed_results_file": detailed_file,
    }


def build_detailed_jsonl_lines(
    run_id: str,
    cases: list[EvalCase],
    rows: list[list[MetricResult]],
) -> list[JsonDict]:
    """Build one JSONL record per case holding every metric result for it."""
    return [
        {
            "run_id": run_id,
            "case": case.name,
            "input": case.input,
            "tags": case.tags,
            "results": [result.model_dump(mode="json") for result in row],
        }
        for case, row in zip(cases, rows, strict=True)
    ]

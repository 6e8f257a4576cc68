"""CLI entrypoint for rag-eval — typer app with `run` and `metrics` commands."""

import asyncio
import json
import sys
import uuid
from datetime import datetime
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from rag_eval.cli.output.report import (
    MetricSummary,
    build_aggregate_json,
    build_detailed_jsonl_lines,
    summarize,
)
from rag_eval.config.domain.config import EvalConfig
from rag_eval.config.infrastructure.observer import StructlogConfigObserver
from rag_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from rag_eval.core.errors import RagEvalError
from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.dataset.domain.loader import DatasetLoader
from rag_eval.dataset.infrastructure.jsonl_loader import JsonlDatasetLoader
from rag_eval.dataset.infrastructure.observer import StructlogDatasetObserver
from rag_eval.evaluation.application.evaluator import Evaluator
from rag_eval.evaluation.domain.options import (
    EvaluationOptions,
    default_max_concurrency,
)
from rag_eval.judge.infrastructure.observer import StructlogJudgeObserver
from rag_eval.judge.infrastructure.registry import create_judge_adapter
from rag_eval.metric.domain.result import MetricResult
from rag_eval.metric.infrastructure.registry import (
    SUPPORTED_METRIC_TYPES,
    create_metric,
)
from rag_eval.telemetry.domain.observer import TelemetryObserver
from rag_eval.telemetry.infrastructure.observer import StructlogTelemetryObserver
from rag_eval.telemetry.infrastructure.progress_observer import (
    ProgressTelemetryObserver,
)

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _output_stem(config_name: str, run_id: str) -> str:
    """Build the output file stem: {config_name}_{YYYYMMDD}_{short_run_id}."""
    date_str = datetime.now().strftime("%Y%m%d")
    return f"{config_name}_{date_str}_{run_id[:8]}"


def _write_outputs(
    output_dir: Path,
    stem: str,
    run_id: str,
    config: EvalConfig,
    cases: list[EvalCase],
    rows: list[list[MetricResult]],
    summaries: list[MetricSummary],
) -> tuple[Path, Path]:
    """Write aggregate JSON and detailed JSONL files. Returns (json_path, jsonl_path)."""
    json_path = output_dir / f"{stem}.json"
    jsonl_path = output_dir / f"{stem}.detailed.jsonl"

    aggregate = build_aggregate_json(
        run_id=run_id,
        config=config,
        summaries=summaries,
        detailed_file=jsonl_path.name,
    )
    json_path.write_text(json.dumps(aggregate, indent=2), encoding="utf-8")

    lines = build_detailed_jsonl_lines(run_id=run_id, cases=cases, rows=rows)
    jsonl_path.write_text(
        "\n".join(json.dumps(line) for line in lines) + "\n",
        encoding="utf-8",
    )
    return json_path, jsonl_path


def _format_ratio(value: float | None) -> str:
    return "--" if value is None else f"{value * 100:.1f}%"


def _print_summary(
    config: EvalConfig,
    case_count: int,
    summaries: list[MetricSummary],
    json_path: Path,
    jsonl_path: Path,
) -> None:
    console = Console()
    table = Table(title=f"rag-eval · {config.name} · {case_count} case(s)")
    table.add_column("Metric", style="bold")
    table.add_column("Mean score", justify="right")
    table.add_column("Pass rate", justify="right")
    table.add_column("Failures", justify="right")

    for summary in summaries:
        failures_style = "red" if summary.failures else "dim"
        table.add_row(
            summary.metric,
            _format_ratio(summary.mean_score),
            _format_ratio(summary.pass_rate),
            f"[{failures_style}]{summary.failures}[/{failures_style}]",
        )

    console.print(table)
    console.print(f"[dim]Aggregate JSON[/dim]  {json_path}")
    console.print(f"[dim]Detailed JSONL[/dim]  {jsonl_path}")


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to evaluation config YAML"),
    output_dir: Path = typer.Option(
        Path("./results"),
        "--output-dir",
        "-o",
        help="Directory for output files",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run a rag-eval evaluation from a YAML config file."""
    _configure_structlog(log_format=log_format)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        dataset_loader: DatasetLoader = JsonlDatasetLoader(
            observer=StructlogDatasetObserver()
        )
        cases = dataset_loader.load(config=config.dataset)
        judge = create_judge_adapter(
            config=config.judge, observer=StructlogJudgeObserver()
        )
        metrics = [create_metric(config=m, judge=judge) for m in config.metrics]

        observers: list[TelemetryObserver] = [StructlogTelemetryObserver()]
        if log_format != "json":
            observers.append(ProgressTelemetryObserver())
        evaluator = Evaluator(observers=observers)

        execution = config.execution
        options = EvaluationOptions(
            max_concurrency=execution.max_concurrency or default_max_concurrency(),
            timeout_per_unit_seconds=execution.timeout_per_unit_seconds,
            include_reason=execution.include_reason,
        )

        rows = asyncio.run(
            evaluator.evaluate(cases=cases, metrics=metrics, options=options)
        )

        run_id = str(uuid.uuid4())
        summaries = summarize(rows)
        output_dir.mkdir(parents=True, exist_ok=True)
        json_path, jsonl_path = _write_outputs(
            output_dir=output_dir,
            stem=_output_stem(config_name=config.name, run_id=run_id),
            run_id=run_id,
            config=config,
            cases=cases,
            rows=rows,
            summaries=summaries,
        )
        _print_summary(
            config=config,
            case_count=len(cases),
            summaries=summaries,
            json_path=json_path,
            jsonl_path=jsonl_path,
        )

    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.")
        raise typer.Exit(code=1)
    except RagEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


@app.command(name="metrics")
def list_metrics() -> None:
    """List the metric types accepted in a config's `metrics` section."""
    for metric_type in SUPPORTED_METRIC_TYPES:
        typer.echo(metric_type)


if __name__ == "__main__":
    app()

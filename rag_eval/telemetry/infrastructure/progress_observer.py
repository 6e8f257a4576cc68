"""ProgressTelemetryObserver — renders a Rich progress bar for a batch on stderr."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.text import Text


class _OutcomeColumn(ProgressColumn):
    """Renders scored+failed/total with colors matching the outcome."""

    def render(self, task: Task) -> Text:
        scored = int(task.fields.get("scored", 0))
        failed = int(task.fields.get("failed", 0))
        return Text.assemble(
            (str(scored), "bright_green"),
            ("+", "dim white"),
            (str(failed), "red"),
            ("/", "dim white"),
            (str(int(task.total or 0)), "default"),
        )


class ProgressTelemetryObserver:
    """Shows one bar over every (case, metric) pair of a batch.

    A pair counts once it completes or fails. Only batch and metric outcome
    events produce output; metric_started is a no-op.

    Pass ``disabled=True`` to track counts without rendering (useful in tests).

    Does NOT inherit from TelemetryObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self.scored = 0
        self.failed = 0
        self.total = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def metric_started(self, metric: str, unit_id: str | None) -> None:
        pass

    def metric_completed(
        self, metric: str, unit_id: str | None, duration_ms: int, score: float
    ) -> None:
        self.scored += 1
        self._refresh()

    def metric_failed(
        self, metric: str, unit_id: str | None, duration_ms: int, error: str
    ) -> None:
        self.failed += 1
        self._refresh()

    def batch_started(self, unit_count: int, metric_count: int) -> None:
        self.scored = 0
        self.failed = 0
        self.total = unit_count * metric_count
        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("[bold]Evaluating[/bold]"),
            BarColumn(bar_width=40),
            _OutcomeColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=Console(stderr=True),
            refresh_per_second=10,
        )
        self._task_id = self._progress.add_task(
            description="Evaluating", total=float(self.total), scored=0, failed=0
        )
        self._progress.start()

    def batch_completed(self, unit_count: int, duration_ms: int) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def _refresh(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=self.scored + self.failed,
            scored=self.scored,
            failed=self.failed,
        )

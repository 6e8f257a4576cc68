"""JSONL dataset loader — reads a dataset file and returns typed EvalCase objects."""

import json
from pathlib import Path

from pydantic import ValidationError

from rag_eval.config.domain.dataset import DatasetConfig
from rag_eval.dataset.domain.eval_case import EvalCase
from rag_eval.dataset.domain.observer import DatasetObserver
from rag_eval.dataset.infrastructure.errors import DatasetLoadError


class JsonlDatasetLoader:
    """Loads a JSONL dataset file and returns a list of EvalCase value objects."""

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, config: DatasetConfig) -> list[EvalCase]:
        """
        Load all cases from the JSONL file described by config.

        Lines without a `name` are named after their zero-based line index.
        Collects ALL per-line errors before raising a single DatasetLoadError.

        Raises:
            DatasetLoadError: if the file is not found, any line is invalid JSON,
                or any line does not describe a valid EvalCase.
        """
        path_str = config.path
        self._observer.dataset_loading_started(path=path_str)

        try:
            lines = self._read_lines(path=Path(config.path))
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        cases, errors = self._parse_lines(lines=lines)

        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        self._observer.dataset_loading_completed(path=path_str, total_cases=len(cases))
        return cases

    def _read_lines(self, path: Path) -> list[str]:
        """Open the file and return all non-empty lines."""
        with open(path, encoding="utf-8") as fh:
            return [line for line in fh if line.strip()]

    def _parse_lines(self, lines: list[str]) -> tuple[list[EvalCase], list[str]]:
        """Parse each line into an EvalCase, collecting errors without aborting early."""
        cases: list[EvalCase] = []
        errors: list[str] = []

        for index, line in enumerate(lines):
            result = self._parse_line(line=line, index=index)
            if isinstance(result, str):
                errors.append(result)
            else:
                cases.append(result)
                self._observer.dataset_case_loaded(case_name=result.name or str(index))

        return cases, errors

    def _parse_line(self, line: str, index: int) -> EvalCase | str:
        """
        Parse a single JSONL line into an EvalCase.

        Returns an EvalCase on success, or an error string describing the problem.
        """
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {index}: expected a JSON object"

        data.setdefault("name", str(index))
        try:
            return EvalCase.model_validate(data)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "<root>"
                for err in exc.errors()
            )
            return f"line {index}: invalid case ({fields})"

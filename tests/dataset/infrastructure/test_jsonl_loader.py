"""Tests for JsonlDatasetLoader."""

import json
from pathlib import Path

import pytest

from rag_eval.config.domain.dataset import DatasetConfig
from rag_eval.dataset.domain.loader import DatasetLoader
from rag_eval.dataset.infrastructure.errors import DatasetLoadError
from rag_eval.dataset.infrastructure.jsonl_loader import JsonlDatasetLoader
from tests.dataset.fake_observer import FakeDatasetObserver


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_jsonl(path: Path, records: list[object]) -> Path:
    path.write_text(
        "\n".join(r if isinstance(r, str) else json.dumps(r) for r in records) + "\n",
        encoding="utf-8",
    )
    return path


def _load(path: Path) -> tuple[list, FakeDatasetObserver]:
    observer = FakeDatasetObserver()
    loader: DatasetLoader = JsonlDatasetLoader(observer=observer)
    return loader.load(config=DatasetConfig(path=str(path))), observer


# ---------------------------------------------------------------------------
# Success path
# ---------------------------------------------------------------------------


class TestLoadSuccess:
    """Valid JSONL lines become EvalCase objects in file order."""

    def test_loads_all_cases(self, tmp_path: Path) -> None:
        path = _write_jsonl(
            tmp_path / "data.jsonl",
            [
                {"input": "q1", "actual_output": "a1"},
                {"input": "q2", "actual_output": "a2", "context": ["c"]},
            ],
        )

        cases, _ = _load(path)

        assert [c.input for c in cases] == ["q1", "q2"]
        assert cases[1].retrieval_context == ["c"]

    def test_unnamed_cases_named_by_line_index(self, tmp_path: Path) -> None:
        path = _write_jsonl(
            tmp_path / "data.jsonl",
            [{"input": "q1"}, {"input": "q2", "name": "custom"}],
        )

        cases, _ = _load(path)

        assert [c.name for c in cases] == ["0", "custom"]

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "data.jsonl"
        path.write_text('{"input": "q1"}\n\n   \n{"input": "q2"}\n', encoding="utf-8")

        cases, _ = _load(path)

        assert len(cases) == 2

    def test_emits_started_and_completed(self, tmp_path: Path) -> None:
        path = _write_jsonl(tmp_path / "data.jsonl", [{"input": "q1"}])

        _, observer = _load(path)

        assert observer.started == [str(path)]
        assert observer.completed[0].total_cases == 1
        assert observer.loaded_cases == ["0"]


# ---------------------------------------------------------------------------
# Failure path
# ---------------------------------------------------------------------------


class TestLoadFailure:
    """Every bad line is reported in one DatasetLoadError."""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DatasetLoadError, match="file not found"):
            _load(tmp_path / "absent.jsonl")

    def test_collects_all_line_errors(self, tmp_path: Path) -> None:
        path = _write_jsonl(
            tmp_path / "data.jsonl",
            ["{not json", {"actual_output": "no input"}, {"input": "fine"}],
        )

        with pytest.raises(DatasetLoadError) as exc_info:
            _load(path)

        message = str(exc_info.value)
        assert "line 0: invalid JSON" in message
        assert "line 1: invalid case (input)" in message

    def test_non_object_line_reported(self, tmp_path: Path) -> None:
        path = _write_jsonl(tmp_path / "data.jsonl", ["[1, 2, 3]"])

        with pytest.raises(DatasetLoadError, match="expected a JSON object"):
            _load(path)

    def test_failure_emits_failed_event(self, tmp_path: Path) -> None:
        path = _write_jsonl(tmp_path / "data.jsonl", ["{not json"])
        observer = FakeDatasetObserver()

        with pytest.raises(DatasetLoadError):
            JsonlDatasetLoader(observer=observer).load(
                config=DatasetConfig(path=str(path))
            )

        assert len(observer.failed) == 1
        assert observer.completed == []

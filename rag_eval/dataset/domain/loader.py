"""DatasetLoader Protocol: the port the CLI reads evaluation cases through."""

from typing import Protocol

from rag_eval.config.domain.dataset import DatasetConfig
from rag_eval.dataset.domain.eval_case import EvalCase


class DatasetLoader(Protocol):
    """Turns the dataset section of a config into cases, in file order.

    Does NOT inherit from anything (structural typing via Protocol).
    JsonlDatasetLoader is the shipped implementation.
    """

    def load(self, config: DatasetConfig) -> list[EvalCase]: ...

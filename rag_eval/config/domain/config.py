"""Top-level EvalConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from rag_eval.config.domain.dataset import DatasetConfig
from rag_eval.config.domain.execution import ExecutionConfig
from rag_eval.config.domain.judge import JudgeConfig
from rag_eval.config.domain.metric import MetricConfig


class EvalConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a rag-eval evaluation run."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    dataset: DatasetConfig
    judge: JudgeConfig
    metrics: list[MetricConfig] = Field(min_length=1)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)

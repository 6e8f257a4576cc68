"""Execution configuration model."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True):
    max_concurrency: int | None = Field(default=None, ge=1)
    timeout_per_unit_seconds: float = Field(default=60.0, gt=0.0)
    # None leaves each metric's own include_reason in effect.
    include_reason: bool | None = None

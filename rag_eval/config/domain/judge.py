"""Judge configuration model."""

from pydantic import BaseModel, Field


class JudgeConfig(BaseModel, frozen=True):
    provider: str = Field(default="litellm", min_length=1)
    model: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    max_tokens: int = Field(default=4096, ge=1)
    num_retries: int = Field(default=2, ge=0)
    # None means "ask LiteLLM whether the model supports response schemas".
    structured_outputs: bool | None = None

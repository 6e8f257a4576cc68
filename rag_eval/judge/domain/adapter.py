"""JudgeAdapter Protocol — structural interface for all judge-model clients."""

from typing import Protocol, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class JudgeAdapter(Protocol):
    """Structural interface satisfied by any judge-model client.

    `generate_with_schema` receives a closed pydantic model and returns a
    validated instance of it. Implementations own retry and backoff; callers
    never retry.
    """

    def model_name(self) -> str: ...

    def supports_structured_outputs(self) -> bool: ...

    def supports_log_probs(self) -> bool: ...

    def supports_multimodal(self) -> bool: ...

    async def generate(self, prompt: str) -> str: ...

    async def generate_with_schema(
        self, prompt: str, schema: type[T]
    ) -> T: ...

"""LiteLLMJudgeAdapter — judge adapter that delegates model calls to LiteLLM."""

import time
from typing import Any, TypeVar

import litellm
from pydantic import BaseModel

from rag_eval.config.domain.judge import JudgeConfig
from rag_eval.judge.domain.observer import JudgeObserver
from rag_eval.judge.infrastructure.errors import (
    JudgeInvocationError,
    SchemaViolationError,
)
from rag_eval.judge.infrastructure.json_output import parse_model, schema_instructions

T = TypeVar("T", bound=BaseModel)


class LiteLLMJudgeAdapter:
    """Judge adapter backed by `litellm.acompletion`.

    Models that support response schemas receive the pydantic schema as
    `response_format`. Other models get the JSON schema embedded in the prompt
    and their reply is parsed leniently (markdown fences, <output> tags).
    Retries are delegated to LiteLLM via `num_retries`.

    Does NOT inherit from JudgeAdapter (structural typing via Protocol).
    """

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                model=config.model,
                temperature=config.temperature,
            )

    def model_name(self) -> str:
        return self._config.model

    def supports_structured_outputs(self) -> bool:
        if self._config.structured_outputs is not None:
            return self._config.structured_outputs
        return bool(litellm.supports_response_schema(model=self._config.model))

    def supports_log_probs(self) -> bool:
        try:
            params = litellm.get_supported_openai_params(model=self._config.model)
        except litellm.exceptions.BadRequestError:
            # Raised for models LiteLLM cannot map to a provider.
            return False
        return "logprobs" in (params or [])

    def supports_multimodal(self) -> bool:
        return bool(litellm.supports_vision(model=self._config.model))

    async def generate(self, prompt: str) -> str:
        """Send prompt to the judge model and return its free-text reply.

        Raises:
            JudgeInvocationError: if the LiteLLM call fails.
        """
        return await self._complete(prompt=prompt, schema=None)

    async def generate_with_schema(
        self, prompt: str, schema: type[T]
    ) -> T:
        """Send prompt to the judge model and return a validated schema instance.

        Raises:
            JudgeInvocationError: if the LiteLLM call fails.
            SchemaViolationError: if the reply cannot be parsed into schema.
        """
        if self.supports_structured_outputs():
            content = await self._complete(prompt=prompt, schema=schema)
        else:
            content = await self._complete(
                prompt=prompt + schema_instructions(schema), schema=None
            )
        try:
            return parse_model(content, schema)
        except SchemaViolationError as exc:
            self._observer.judge_call_failed(model=self._config.model, reason=str(exc))
            raise

    async def _complete(self, prompt: str, schema: type[BaseModel] | None) -> str:
        self._observer.judge_call_started(
            model=self._config.model,
            schema=schema.__name__ if schema is not None else None,
        )

        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "num_retries": self._config.num_retries,
            "messages": [{"role": "user", "content": prompt}],
        }
        if schema is not None:
            kwargs["response_format"] = schema

        start = time.monotonic()
        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            reason = str(exc)
            self._observer.judge_call_failed(model=self._config.model, reason=reason)
            raise JudgeInvocationError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        content = response.choices[0].message.content
        if not isinstance(content, str):
            reason = "judge returned an empty message"
            self._observer.judge_call_failed(model=self._config.model, reason=reason)
            raise JudgeInvocationError(reason=reason)

        self._observer.judge_call_completed(
            model=self._config.model,
            duration_ms=duration_ms,
            cost_usd=_completion_cost(response),
        )
        return content


def _completion_cost(response: Any) -> float | None:
    """Return the USD cost LiteLLM computes for response, or None if it cannot price it."""
    try:
        return float(litellm.completion_cost(completion_response=response))
    except Exception:  # noqa: BLE001
        return None

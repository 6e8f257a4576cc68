"""FakeJudgeAdapter — scripted judge responses keyed by prompt substrings."""

import asyncio
import json
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from rag_eval.judge.infrastructure.errors import SchemaViolationError
from rag_eval.judge.infrastructure.json_output import parse_model

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ScriptedResponse:
    """Answer `response` to the first prompt containing `pattern`.

    `response` may be a dict (validated against the requested schema), a str
    (parsed as the judge's raw reply), a pydantic model, or an Exception
    (raised). Rules are matched in order, so put more specific patterns first.
    """

    pattern: str
    response: object
    delay_seconds: float = 0.0


@dataclass(frozen=True)
class JudgeCall:
    prompt: str
    schema: str | None


class FakeJudgeAdapter:
    """Satisfies the JudgeAdapter protocol without any network access.

    Every call is recorded in `calls` so tests can assert on prompts and on
    which schemas were requested.
    """

    def __init__(
        self,
        responses: list[ScriptedResponse] | None = None,
        model: str = "fake-judge",
        structured_outputs: bool = True,
    ) -> None:
        self._responses = list(responses or [])
        self._model = model
        self._structured_outputs = structured_outputs
        self.calls: list[JudgeCall] = []

    def model_name(self) -> str:
        return self._model

    def supports_structured_outputs(self) -> bool:
        return self._structured_outputs

    def supports_log_probs(self) -> bool:
        return False

    def supports_multimodal(self) -> bool:
        return False

    async def generate(self, prompt: str) -> str:
        response = await self._respond(prompt=prompt, schema=None)
        if isinstance(response, str):
            return response
        if isinstance(response, BaseModel):
            return response.model_dump_json()
        return json.dumps(response)

    async def generate_with_schema(
        self, prompt: str, schema: type[T]
    ) -> T:
        response = await self._respond(prompt=prompt, schema=schema.__name__)
        if isinstance(response, schema):
            return response
        if isinstance(response, str):
            return parse_model(response, schema)
        try:
            return schema.model_validate(response)
        except ValidationError as exc:
            raise SchemaViolationError(reason=str(exc)) from exc

    def calls_matching(self, pattern: str) -> list[JudgeCall]:
        return [call for call in self.calls if pattern in call.prompt]

    async def _respond(self, prompt: str, schema: str | None) -> object:
        self.calls.append(JudgeCall(prompt=prompt, schema=schema))
        for rule in self._responses:
            if rule.pattern not in prompt:
                continue
            if rule.delay_seconds:
                await asyncio.sleep(rule.delay_seconds)
            if isinstance(rule.response, Exception):
                raise rule.response
            return rule.response
        raise AssertionError(f"no scripted response matches prompt: {prompt[:120]!r}")

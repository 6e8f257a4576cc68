"""Lenient JSON extraction from judge replies that were not schema-constrained."""

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rag_eval.judge.infrastructure.errors import SchemaViolationError

T = TypeVar("T", bound=BaseModel)

# Tried in order after a plain json.loads fails.
_WRAPPER_PATTERNS = [
    re.compile(r"<output>(.*)</output>", re.DOTALL),
    re.compile(r"```json\s*(.*?)\s*```", re.DOTALL),
    re.compile(r"```\s*(.*?)\s*```", re.DOTALL),
]


def extract_json(text: str) -> Any:
    """Return the JSON value in text, unwrapping markdown fences or <output> tags.

    Raises:
        SchemaViolationError: if no JSON value can be recovered.
    """
    stripped = text.strip()
    try:
        return json.loads(stripped)
    except json.JSONDecodeError:
        pass

    for pattern in _WRAPPER_PATTERNS:
        match = pattern.search(stripped)
        if match is None:
            continue
        try:
            return json.loads(match.group(1).strip())
        except json.JSONDecodeError:
            continue

    # Last resort: the outermost {...} span.
    start, end = stripped.find("{"), stripped.rfind("}")
    if start != -1 and end > start:
        try:
            return json.loads(stripped[start : end + 1])
        except json.JSONDecodeError:
            pass

    raise SchemaViolationError(reason=f"no JSON object found in {stripped[:80]!r}")


def parse_model(text: str, schema: type[T]) -> T:
    """Extract JSON from text and validate it against schema.

    Raises:
        SchemaViolationError: if the text holds no JSON or the JSON does not
            match schema.
    """
    data = extract_json(text)
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise SchemaViolationError(reason=f"{schema.__name__}: {exc}") from exc


def schema_instructions(schema: type[BaseModel]) -> str:
    """Render the instruction block appended to prompts for models without schema support."""
    return (
        "\n\nRespond with a single JSON object that conforms to this JSON schema. "
        "Do not include any text outside the JSON object.\n"
        f"{json.dumps(schema.model_json_schema(), indent=2)}"
    )

"""Tests for lenient JSON extraction from judge replies."""

import pytest

from rag_eval.judge.infrastructure.errors import SchemaViolationError
from rag_eval.judge.infrastructure.json_output import (
    extract_json,
    parse_model,
    schema_instructions,
)
from rag_eval.metric.domain.verdict import Claims, Reason


class TestExtractJson:
    """extract_json unwraps the common ways models decorate JSON."""

    def test_plain_json(self) -> None:
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_json_fence(self) -> None:
        assert extract_json('```json\n{"a": 1}\n```') == {"a": 1}

    def test_bare_fence(self) -> None:
        assert extract_json('```\n{"a": 1}\n```') == {"a": 1}

    def test_output_tags(self) -> None:
        assert extract_json('<output>{"a": 1}</output>') == {"a": 1}

    def test_prose_around_object(self) -> None:
        assert extract_json('Sure! Here it is: {"a": [1, 2]} Hope that helps.') == {
            "a": [1, 2]
        }

    def test_no_json_raises(self) -> None:
        with pytest.raises(SchemaViolationError):
            extract_json("no structured content here")


class TestParseModel:
    """parse_model validates extracted JSON against a schema."""

    def test_valid_reply(self) -> None:
        assert parse_model('{"claims": ["a", "b"]}', Claims) == Claims(claims=["a", "b"])

    def test_extra_key_rejected(self) -> None:
        with pytest.raises(SchemaViolationError, match="Reason"):
            parse_model('{"reason": "x", "score": 1}', Reason)

    def test_missing_key_rejected(self) -> None:
        with pytest.raises(SchemaViolationError):
            parse_model("{}", Claims)


class TestSchemaInstructions:
    """schema_instructions embeds the model's JSON schema."""

    def test_includes_property_names(self) -> None:
        text = schema_instructions(Claims)

        assert '"claims"' in text
        assert "JSON schema" in text

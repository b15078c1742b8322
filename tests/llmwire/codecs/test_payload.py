# tests/llmwire/codecs/test_payload.py
import json

from llmwire.codecs.payload import RESPONSE_FORMAT_KEY, response_format_field, with_response_format
from llmwire.types.models import Model, model_name
from llmwire.types.response_format import (
    AutoResponseFormat,
    JSONSchema,
    StructuredOutputResponseFormat,
    TypedResponseFormat,
)


def test_response_format_field_auto():
    assert response_format_field(AutoResponseFormat()) == {"response_format": {"type": "text"}}


def test_response_format_field_explicit_type():
    assert response_format_field(TypedResponseFormat(name="json_object")) == {
        "response_format": {"type": "json_object"}
    }


def test_response_format_field_structured_output():
    fmt = StructuredOutputResponseFormat(
        json_schema=JSONSchema(name="triage", schema={"type": "object", "properties": {}})
    )
    field = response_format_field(fmt)
    assert field == {
        "response_format": {
            "type": "json_schema",
            "json_schema": {
                "name": "triage",
                "schema": {"properties": {}, "type": "object"},
                "strict": True,
            },
        }
    }


def test_with_response_format_builds_request_body():
    body = {"model": model_name(Model.GPT4O_20240806), "messages": [{"role": "user", "content": "hi"}]}
    payload = with_response_format(body, TypedResponseFormat(name="json_object"))

    assert payload["model"] == "gpt-4o-2024-08-06"
    assert payload[RESPONSE_FORMAT_KEY] == {"type": "json_object"}
    # caller's body is untouched
    assert RESPONSE_FORMAT_KEY not in body

    # Must serialize cleanly
    json.dumps(payload)


def test_with_response_format_replaces_existing_value():
    body = {"model": "gpt-4o", "response_format": {"type": "json_object"}}
    payload = with_response_format(body, AutoResponseFormat())
    assert payload["response_format"] == {"type": "text"}


def test_with_response_format_none_drops_key():
    body = {"model": "gpt-4o", "response_format": {"type": "json_object"}}
    payload = with_response_format(body, None)
    assert "response_format" not in payload
    assert body["response_format"] == {"type": "json_object"}

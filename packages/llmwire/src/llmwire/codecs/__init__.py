"""
Wire codecs.

Codecs translate between llmwire's typed values and the JSON shapes the API
sends and receives. This package provides:
    - `ResponseFormatCodec`: encode/decode for `ResponseFormat`
    - `WireEncoder`: per-call encoder context with scoped key sorting
    - `response_format_field` / `with_response_format`: request body helpers
    - `ResponseFormatField`: pydantic field type using the codec

Usage Example:
    from llmwire.codecs import response_format_codec
    from llmwire.types import JSONSchema, StructuredOutputResponseFormat

    fmt = StructuredOutputResponseFormat(
        json_schema=JSONSchema(name="weather", schema={"type": "object", "properties": {}})
    )
    response_format_codec.encode(fmt)
    # {"type": "json_schema", "json_schema": {"name": "weather", "schema": {...}, "strict": True}}
"""

from .encoder import WireEncoder
from .payload import RESPONSE_FORMAT_KEY, response_format_field, with_response_format
from .response_format import ResponseFormatCodec, ResponseFormatField, response_format_codec

__all__ = [
    "WireEncoder",
    "ResponseFormatCodec",
    "ResponseFormatField",
    "response_format_codec",
    "RESPONSE_FORMAT_KEY",
    "response_format_field",
    "with_response_format",
]

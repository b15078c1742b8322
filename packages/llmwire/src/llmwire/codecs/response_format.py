# llmwire/codecs/response_format.py
"""
Wire codec for `ResponseFormat`.

Encoding:
    AutoResponseFormat()                 -> {"type": "text"}
    TypedResponseFormat(name=n)          -> {"type": n}
    StructuredOutputResponseFormat(js)   -> {"type": "json_schema",
                                             "json_schema": {"name": ..., "schema": ..., "strict": ...}}

The `json_schema` document is always emitted with sorted keys, recursively.
Strict-mode validation on the API side compares the structure exactly, so
when the caller's encoder is not sorting keys the codec forces it for the
duration of the schema encode and then restores the caller's setting.

Decoding (first match wins):
    1. an object with a string `type`   -> TypedResponseFormat(name=type)
    2. the bare string "auto"           -> AutoResponseFormat()
    3. anything else                    -> InvalidResponseFormatError

Decoding never rebuilds `StructuredOutputResponseFormat` (nor maps "text" back
to `AutoResponseFormat`): the API does not echo the schema document back.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from llmwire.conf import settings
from llmwire.tracing import codec_span
from llmwire.types.response_format import (
    RESPONSE_FORMAT_VARIANTS,
    AutoResponseFormat,
    JSONSchema,
    ResponseFormat,
    StructuredOutputResponseFormat,
    TypedResponseFormat,
)
from .encoder import WireEncoder
from .exceptions import InvalidResponseFormatError, WireContractError

logger = logging.getLogger(__name__)

__all__ = [
    "ResponseFormatCodec",
    "ResponseFormatField",
    "response_format_codec",
    "AUTO_WIRE_TYPE",
    "AUTO_LITERAL",
    "JSON_SCHEMA_WIRE_TYPE",
]

# Fixed by the API; not configurable.
AUTO_WIRE_TYPE = "text"
AUTO_LITERAL = "auto"
JSON_SCHEMA_WIRE_TYPE = "json_schema"


def _describe(raw: Any) -> str:
    if isinstance(raw, Mapping):
        keys = ", ".join(sorted(str(k) for k in raw)) or "<no keys>"
        return f"object with keys [{keys}]"
    if isinstance(raw, str):
        return f"string {raw!r}"
    return type(raw).__name__


class ResponseFormatCodec:
    """Encode/decode `ResponseFormat` values to and from their wire shape.

    The codec holds no mutable state; one instance can be shared freely.
    Every encode uses its own `WireEncoder` unless the caller passes one.
    """

    name = "response_format"

    # ----------------------------------------------------------------------
    # Encoding
    # ----------------------------------------------------------------------
    def encode(self, value: ResponseFormat, *, encoder: WireEncoder | None = None) -> dict[str, Any]:
        """Return the wire object for `value`."""
        with codec_span(self.name, "encode", {"llmwire.response_format.kind": getattr(value, "kind", None)}):
            if isinstance(value, AutoResponseFormat):
                return {"type": AUTO_WIRE_TYPE}
            if isinstance(value, TypedResponseFormat):
                return {"type": value.name}
            if isinstance(value, StructuredOutputResponseFormat):
                owned = encoder is None
                return {
                    "type": JSON_SCHEMA_WIRE_TYPE,
                    "json_schema": self.encode_schema(
                        value.json_schema,
                        encoder=WireEncoder() if owned else encoder,
                        owned=owned,
                    ),
                }
            raise TypeError(f"Unsupported response format: {type(value).__name__!r}")

    def encode_schema(self, schema: JSONSchema, *, encoder: WireEncoder, owned: bool = False) -> dict[str, Any]:
        """Return the `json_schema` document with keys sorted at every level."""
        if encoder.sort_keys:
            return self._render_schema(schema, encoder)

        if owned:
            logger.debug("response_format.json_schema: enabling sorted keys on %r", encoder)
        else:
            logger.warning(
                "response_format.json_schema: encoder %r is not sorting keys; "
                "forcing sorted keys for schema %r",
                encoder,
                schema.name,
            )
        with encoder.sorted_keys():
            self._check_sorted(encoder, schema)
            return self._render_schema(schema, encoder)

    def encode_json(self, value: ResponseFormat, *, encoder: WireEncoder | None = None) -> str:
        """Return the wire object for `value` as JSON text."""
        wire = self.encode(value, encoder=encoder)
        return (encoder or WireEncoder()).dumps(wire)

    @staticmethod
    def _render_schema(schema: JSONSchema, encoder: WireEncoder) -> dict[str, Any]:
        return {
            "name": schema.name,
            "schema": encoder.encode(schema.schema),
            "strict": schema.strict,
        }

    @staticmethod
    def _check_sorted(encoder: WireEncoder, schema: JSONSchema) -> None:
        if encoder.sort_keys:
            return
        message = (
            f"{type(encoder).__name__} did not enable sorted keys while encoding "
            f"json_schema {schema.name!r}; strict-mode schemas require sorted keys"
        )
        if settings["STRICT_KEY_ORDER"]:
            raise WireContractError(message)
        logger.error(message)

    # ----------------------------------------------------------------------
    # Decoding
    # ----------------------------------------------------------------------
    def decode(self, raw: Any) -> ResponseFormat:
        """Return the `ResponseFormat` for a decoded JSON value.

        Raises:
            InvalidResponseFormatError: if `raw` is neither an object with a
                string `type` nor the string "auto".
        """
        with codec_span(self.name, "decode", {"llmwire.response_format.input": type(raw).__name__}):
            if isinstance(raw, Mapping):
                wire_type = raw.get("type")
                if isinstance(wire_type, str):
                    return TypedResponseFormat(name=wire_type)
            elif isinstance(raw, str) and raw == AUTO_LITERAL:
                return AutoResponseFormat()

            logger.debug("response_format.decode_failed: %s", _describe(raw))
            raise InvalidResponseFormatError(f"Invalid response_format structure: {_describe(raw)}")

    def decode_json(self, data: str | bytes) -> ResponseFormat:
        """Parse JSON text and decode it."""
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidResponseFormatError(f"Invalid response_format structure: malformed JSON ({e.msg})") from e
        return self.decode(raw)


response_format_codec = ResponseFormatCodec()


def _validate_field(value: Any) -> ResponseFormat:
    if isinstance(value, RESPONSE_FORMAT_VARIANTS):
        return value
    try:
        return response_format_codec.decode(value)
    except InvalidResponseFormatError as e:
        # pydantic only wraps ValueError/AssertionError into ValidationError
        raise ValueError(str(e)) from e


def _serialize_field(value: ResponseFormat) -> dict[str, Any]:
    return response_format_codec.encode(value)


#: Pydantic field type carrying a `ResponseFormat` in its wire shape.
ResponseFormatField = Annotated[
    Any,
    PlainValidator(_validate_field),
    PlainSerializer(_serialize_field, return_type=dict),
]

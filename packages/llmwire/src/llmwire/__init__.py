"""
llmwire — wire-format value types for generative-AI HTTP APIs.

This package provides request/response payload types and their JSON codecs:

- Response format selectors and Structured Outputs schemas (`llmwire.types`)
- Model identifiers (`llmwire.types.models`)
- Embedding vectors (`llmwire.types.embeddings`)
- Codecs for encoding/decoding wire shapes (`llmwire.codecs`)
- Unified exception hierarchy (`llmwire.exceptions`)

It does not talk to the network. An HTTP client embeds the encoded values in
its request bodies and feeds response JSON back into the decoders.

Import Guidelines:
------------------
- Use `llmwire.types` for the value types.
- Use `llmwire.codecs` for encoding/decoding wire data.
- Use `llmwire.conf.settings` to change defaults (e.g. `STRICT_KEY_ORDER`).
"""
from importlib.metadata import PackageNotFoundError, version

from .codecs import (
    ResponseFormatCodec,
    ResponseFormatField,
    WireEncoder,
    response_format_codec,
    response_format_field,
    with_response_format,
)
from .codecs.exceptions import (
    CodecDecodeError,
    CodecEncodeError,
    CodecError,
    EmbeddingDecodeError,
    InvalidResponseFormatError,
    WireContractError,
)
from .exceptions import InvalidModelNameError, LLMWireError
from .types import (
    AutoResponseFormat,
    EmbeddingObject,
    JSONSchema,
    Model,
    ModelName,
    ResponseFormat,
    StructuredOutputResponseFormat,
    TypedResponseFormat,
    model_name,
)

try:
    __version__ = version("llmwire")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AutoResponseFormat",
    "TypedResponseFormat",
    "StructuredOutputResponseFormat",
    "ResponseFormat",
    "JSONSchema",
    "Model",
    "ModelName",
    "model_name",
    "EmbeddingObject",
    "ResponseFormatCodec",
    "ResponseFormatField",
    "WireEncoder",
    "response_format_codec",
    "response_format_field",
    "with_response_format",
    "LLMWireError",
    "InvalidModelNameError",
    "CodecError",
    "CodecEncodeError",
    "CodecDecodeError",
    "InvalidResponseFormatError",
    "EmbeddingDecodeError",
    "WireContractError",
]

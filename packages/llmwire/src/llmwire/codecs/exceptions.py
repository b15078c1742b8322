# llmwire/codecs/exceptions.py
from llmwire.exceptions.base import LLMWireError

__all__ = [
    "CodecError",
    "CodecEncodeError",
    "CodecDecodeError",
    "InvalidResponseFormatError",
    "EmbeddingDecodeError",
    "WireContractError",
]


class CodecError(LLMWireError):
    """Base error for all codec-related failures."""


class CodecEncodeError(CodecError):
    """Failed to render a value into its wire representation."""


class CodecDecodeError(CodecError):
    """Failed to decode a wire value into a typed value.

    By default, these errors are non-retriable (immediate failure).
    Set `retriable=True` for transient failures that may succeed on retry.
    """

    def __init__(self, message: str, *, retriable: bool = False):
        super().__init__(message)
        self.retriable = retriable


class InvalidResponseFormatError(CodecDecodeError):
    """Wire value is neither an object with a string `type` nor the literal "auto"."""


class EmbeddingDecodeError(CodecDecodeError):
    """Embedding payload did not match the embedding object shape."""


class WireContractError(CodecError):
    """The encoder could not guarantee sorted keys for a structured-output document.

    This is a programming error, not a data error: downstream strict-mode
    validation depends on the exact key order.
    """

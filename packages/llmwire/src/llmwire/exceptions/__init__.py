"""
Unified exception hierarchy for llmwire.

Every error raised by the package derives from `LLMWireError`, so callers can
catch the whole family in one place. Codec failures are defined next to the
codecs (`llmwire.codecs.exceptions`) and re-exported from the package root:

    LLMWireError
    ├── CodecError
    │   ├── CodecEncodeError
    │   ├── CodecDecodeError
    │   │   ├── InvalidResponseFormatError
    │   │   └── EmbeddingDecodeError
    │   └── WireContractError
    └── InvalidModelNameError

Codec errors are not re-exported here: `llmwire.codecs.exceptions` imports
this package, so doing so would be circular.
"""
from .base import InvalidModelNameError, LLMWireError

__all__ = [
    "LLMWireError",
    "InvalidModelNameError",
]

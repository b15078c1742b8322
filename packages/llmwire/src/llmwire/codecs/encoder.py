# llmwire/codecs/encoder.py
"""
Per-call JSON encoder context.

`WireEncoder` turns caller values (pydantic models, `WireSerializable` objects,
plain JSON values) into plain JSON values and text. Its only setting is
`sort_keys`; `sorted_keys()` flips it on for a `with` block and restores the
previous value on exit. Encoders are never shared between calls, so the
override cannot leak into another encode.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import BaseModel

from llmwire.conf import settings
from llmwire.types.base import WireSerializable
from .exceptions import CodecEncodeError

logger = logging.getLogger(__name__)

__all__ = ["WireEncoder"]

_JSON_SCALARS = (str, int, float, bool, type(None))


class WireEncoder:
    def __init__(self, *, sort_keys: bool | None = None) -> None:
        self.sort_keys: bool = bool(settings["ENCODER_SORT_KEYS"] if sort_keys is None else sort_keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sort_keys={self.sort_keys})"

    @contextmanager
    def sorted_keys(self) -> Iterator[WireEncoder]:
        """Force sorted keys for the duration of the block."""
        previous = self.sort_keys
        self.sort_keys = True
        try:
            yield self
        finally:
            self.sort_keys = previous

    def encode(self, value: Any) -> Any:
        """Return `value` as plain JSON values (dict/list/str/int/float/bool/None).

        Raises:
            CodecEncodeError: if some part of `value` has no JSON rendering.
        """
        if isinstance(value, type) and issubclass(value, BaseModel):
            return self.encode(value.model_json_schema())
        if isinstance(value, BaseModel):
            return self.encode(value.model_dump(mode="json"))
        if isinstance(value, WireSerializable):
            return self.encode(value.to_wire())
        if isinstance(value, Mapping):
            return self._encode_mapping(value)
        if isinstance(value, (list, tuple)):
            return [self.encode(item) for item in value]
        if isinstance(value, _JSON_SCALARS):
            return value
        raise CodecEncodeError(f"Value of type {type(value).__name__!r} is not JSON serializable")

    def dumps(self, value: Any) -> str:
        """Render `value` as JSON text, honouring `sort_keys`."""
        return json.dumps(self.encode(value), sort_keys=self.sort_keys)

    def _encode_mapping(self, value: Mapping[Any, Any]) -> dict[str, Any]:
        for key in value:
            if not isinstance(key, str):
                raise CodecEncodeError(f"Object keys must be strings, got {type(key).__name__!r}")
        keys = sorted(value) if self.sort_keys else list(value)
        return {key: self.encode(value[key]) for key in keys}

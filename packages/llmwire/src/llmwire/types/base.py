# llmwire/types/base.py
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

__all__ = ("StrictBaseModel", "FrozenWireModel", "WireSerializable")


class StrictBaseModel(BaseModel):
    """Default Pydantic strict model used across llmwire."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class FrozenWireModel(StrictBaseModel):
    """Immutable value type; equality is structural."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


@runtime_checkable
class WireSerializable(Protocol):
    """Anything that can render itself as plain JSON values.

    `to_wire()` may return nested pydantic models or other `WireSerializable`
    objects; the encoder resolves them recursively.
    """

    def to_wire(self) -> Any: ...

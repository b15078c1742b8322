# llmwire/types/response_format.py
"""
Response format selectors for chat completion requests.

Defaults to text. Setting the type to `json_object` enables JSON mode, which
guarantees the generated message is valid JSON; the system prompt must still
ask for JSON. Structured Outputs go one step further and constrain the message
to a caller-supplied JSON Schema:

    response_format: {"type": "json_schema", "json_schema": {..., "strict": true}}

`ResponseFormat` is a closed union of three variants, discriminated by `kind`:

    - `AutoResponseFormat`: no explicit format; sent as `{"type": "text"}`
    - `TypedResponseFormat`: an explicit named format, e.g. `json_object`
    - `StructuredOutputResponseFormat`: schema-constrained output

Wire encoding and decoding live in `llmwire.codecs.response_format`.
"""
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, TypeAlias, Union

from pydantic import Field

from .base import FrozenWireModel

__all__ = (
    "JSONSchema",
    "AutoResponseFormat",
    "TypedResponseFormat",
    "StructuredOutputResponseFormat",
    "ResponseFormat",
    "RESPONSE_FORMAT_VARIANTS",
)


@dataclass(frozen=True)
class JSONSchema:
    """Schema payload for Structured Outputs.

    `schema` is opaque to this package. It may be a pydantic model class
    (rendered with `model_json_schema()`), a pydantic model instance, an object
    implementing `WireSerializable`, or plain JSON values.

    Equality compares all three fields; the hash skips `schema`, which is
    usually an unhashable dict.
    """

    name: str
    schema: Any = field(hash=False)
    strict: bool = True


#
# ---- Variants ----------------------------------------------------------------
#

class AutoResponseFormat(FrozenWireModel):
    """No explicit format requested."""
    kind: Literal["auto"] = "auto"


class TypedResponseFormat(FrozenWireModel):
    """An explicit named format (`text`, `json_object`, ...)."""
    kind: Literal["type"] = "type"
    name: str


class StructuredOutputResponseFormat(FrozenWireModel):
    """Schema-constrained output."""
    kind: Literal["structured_output"] = "structured_output"
    json_schema: JSONSchema


#
# ---- Union -------------------------------------------------------------------
#

RESPONSE_FORMAT_VARIANTS = (
    AutoResponseFormat,
    TypedResponseFormat,
    StructuredOutputResponseFormat,
)

ResponseFormat: TypeAlias = Annotated[
    Union[AutoResponseFormat, TypedResponseFormat, StructuredOutputResponseFormat],
    Field(discriminator="kind"),
]

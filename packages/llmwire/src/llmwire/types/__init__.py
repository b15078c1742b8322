# llmwire/types/__init__.py
from .base import *
from .embeddings import *
from .models import *
from .response_format import *

__all__ = [
    "StrictBaseModel",
    "FrozenWireModel",
    "WireSerializable",

    "JSONSchema",
    "ResponseFormat",
    "AutoResponseFormat",
    "TypedResponseFormat",
    "StructuredOutputResponseFormat",
    "RESPONSE_FORMAT_VARIANTS",

    "Model",
    "ModelName",
    "model_name",

    "EmbeddingObject",
]

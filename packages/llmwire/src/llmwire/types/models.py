# llmwire/types/models.py
"""
Model identifiers accepted by the API.

See https://platform.openai.com/docs/models. Known models are members of
`Model`; any other identifier (fine-tunes, newer releases) can be passed as a
plain string wherever a `ModelName` is accepted.
"""
from enum import Enum
from typing import TypeAlias

from llmwire.exceptions.base import InvalidModelNameError

__all__ = ("Model", "ModelName", "model_name")


class Model(str, Enum):
    # Chat completion
    GPT4O = "gpt-4o"  # points to gpt-4o-2024-05-13
    GPT4O_20240513 = "gpt-4o-2024-05-13"  # 128k context, training data up to Oct 2023
    GPT4O_20240806 = "gpt-4o-2024-08-06"  # supports response_format of type json_schema
    GPT4O_MINI = "gpt-4o-mini"

    GPT35_TURBO = "gpt-3.5-turbo"
    GPT35_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT35_TURBO_0125 = "gpt-3.5-turbo-0125"
    GPT4 = "gpt-4"  # 8,192 tokens
    GPT4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT35_TURBO_0613 = "gpt-3.5-turbo-0613"
    GPT35_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
    GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"  # points to gpt-4-0125-preview
    GPT4_0125_PREVIEW = "gpt-4-0125-preview"
    GPT4_TURBO_20240409 = "gpt-4-turbo-2024-04-09"
    GPT4_TURBO = "gpt-4-turbo"

    # Vision
    GPT4_VISION_PREVIEW = "gpt-4-vision-preview"

    # Images
    DALLE2 = "dall-e-2"
    DALLE3 = "dall-e-3"

    def __str__(self) -> str:
        return self.value


ModelName: TypeAlias = Model | str


def model_name(model: ModelName) -> str:
    """Return the wire identifier for a known `Model` or a custom model string."""
    if isinstance(model, Model):
        return model.value
    if not isinstance(model, str) or not model.strip():
        raise InvalidModelNameError(f"Model name must be a non-empty string, got {model!r}")
    return model

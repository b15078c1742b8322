# tests/llmwire/types/test_models.py
import pytest

from llmwire.exceptions import InvalidModelNameError, LLMWireError
from llmwire.types.models import Model, model_name


def test_known_model_values():
    assert Model.GPT4O.value == "gpt-4o"
    assert Model.GPT4O_20240806.value == "gpt-4o-2024-08-06"
    assert Model.GPT4O_MINI.value == "gpt-4o-mini"
    assert Model.GPT35_TURBO_16K_0613.value == "gpt-3.5-turbo-16k-0613"
    assert Model.GPT4_TURBO_20240409.value == "gpt-4-turbo-2024-04-09"
    assert Model.GPT4_VISION_PREVIEW.value == "gpt-4-vision-preview"
    assert Model.DALLE2.value == "dall-e-2"
    assert Model.DALLE3.value == "dall-e-3"


def test_model_count():
    assert len(Model) == 18


def test_model_lookup_by_wire_value():
    assert Model("gpt-4-turbo") is Model.GPT4_TURBO


def test_model_str_is_wire_value():
    assert str(Model.GPT4) == "gpt-4"
    assert f"{Model.GPT4O_MINI}" == "gpt-4o-mini"


def test_model_name_for_known_model():
    assert model_name(Model.GPT4O_MINI) == "gpt-4o-mini"


def test_model_name_passes_custom_string_through():
    assert model_name("ft:gpt-4o-mini:acme::abc123") == "ft:gpt-4o-mini:acme::abc123"


@pytest.mark.parametrize("bad", ["", "   ", None, 42])
def test_model_name_rejects_empty_or_non_string(bad):
    with pytest.raises(InvalidModelNameError):
        model_name(bad)  # type: ignore[arg-type]


def test_invalid_model_name_error_is_value_error():
    with pytest.raises(ValueError):
        model_name("")
    assert issubclass(InvalidModelNameError, LLMWireError)

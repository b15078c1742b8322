import pytest

from llmwire.conf import settings


@pytest.fixture(autouse=True)
def _reset_settings():
    """Drop any settings overrides a test made."""
    yield
    settings.reset()

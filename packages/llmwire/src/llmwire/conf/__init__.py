# llmwire/conf/__init__.py
from .defaults import DEFAULTS
from .settings import ENV_PREFIX, Settings, settings

__all__ = ["DEFAULTS", "ENV_PREFIX", "Settings", "settings"]

"""Process-wide llmwire switches, seeded from ``DEFAULTS`` and ``LLMWIRE_*`` env vars."""

import logging
import os
from collections import ChainMap
from typing import Iterator, Mapping, MutableMapping

from .defaults import DEFAULTS

logger = logging.getLogger(__name__)

ENV_PREFIX = "LLMWIRE_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{key} must be a boolean flag, got {raw!r}")


class Settings(MutableMapping[str, bool]):
    """Boolean switches: an override layer over an environment layer over defaults.

    Only keys present in ``DEFAULTS`` can be set; a typo raises ``KeyError``
    instead of silently adding a setting nothing reads.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._storage = ChainMap({}, _from_environ(os.environ if environ is None else environ), dict(DEFAULTS))

    def __getitem__(self, key: str) -> bool:
        return self._storage[key]

    def __setitem__(self, key: str, value: bool) -> None:
        if key not in DEFAULTS:
            raise KeyError(key)
        self._storage.maps[0][key] = bool(value)

    def __delitem__(self, key: str) -> None:
        del self._storage.maps[0][key]

    def __iter__(self) -> Iterator[str]:
        return iter(DEFAULTS)

    def __len__(self) -> int:
        return len(DEFAULTS)

    def reset(self) -> None:
        """Drop runtime overrides; environment and defaults stay in effect."""
        self._storage.maps[0].clear()


def _from_environ(environ: Mapping[str, str]) -> dict[str, bool]:
    layer: dict[str, bool] = {}
    for key in DEFAULTS:
        raw = environ.get(f"{ENV_PREFIX}{key}")
        if raw is None:
            continue
        layer[key] = _parse_bool(key, raw)
        logger.debug("settings.env_override: %s=%s", key, layer[key])
    return layer


settings = Settings()

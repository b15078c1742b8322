# llmwire/codecs/payload.py
"""Helpers for placing encoded values into an API request body."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from llmwire.types.response_format import ResponseFormat
from .encoder import WireEncoder
from .response_format import response_format_codec

logger = logging.getLogger(__name__)

__all__ = ["RESPONSE_FORMAT_KEY", "response_format_field", "with_response_format"]

RESPONSE_FORMAT_KEY = "response_format"


def response_format_field(value: ResponseFormat, *, encoder: WireEncoder | None = None) -> dict[str, Any]:
    """Return `{"response_format": <wire object>}` for merging into a request body."""
    return {RESPONSE_FORMAT_KEY: response_format_codec.encode(value, encoder=encoder)}


def with_response_format(
    body: Mapping[str, Any],
    value: ResponseFormat | None,
    *,
    encoder: WireEncoder | None = None,
) -> dict[str, Any]:
    """Return a copy of `body` with `response_format` set.

    A `None` value drops any `response_format` already present, so the API
    falls back to its default (text).
    """
    payload = dict(body)
    if value is None:
        payload.pop(RESPONSE_FORMAT_KEY, None)
        return payload

    if RESPONSE_FORMAT_KEY in payload:
        logger.debug("[payload] replacing existing response_format: %r", payload[RESPONSE_FORMAT_KEY])
    payload.update(response_format_field(value, encoder=encoder))
    return payload

# llmwire/tracing/__init__.py
from .tracing import TRACER_NAME, codec_span, get_tracer, service_span_sync

__all__ = [
    "TRACER_NAME",
    "codec_span",
    "get_tracer",
    "service_span_sync",
]

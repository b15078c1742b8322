import logging
from collections.abc import Mapping, Sequence
from contextlib import contextmanager, nullcontext
from typing import Any, ContextManager, Iterator

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

from llmwire.conf import settings

logger = logging.getLogger(__name__)

TRACER_NAME = "llmwire"

# OpenTelemetry attribute values: scalars of these types, or homogeneous sequences of them.
_SCALARS = (bool, str, bytes, int, float)


def get_tracer() -> Tracer:
    return trace.get_tracer(TRACER_NAME)


def _apply_attributes(span: Span, attrs: Mapping[str, Any] | None) -> None:
    for key, value in (attrs or {}).items():
        if value is None:
            continue
        if isinstance(value, _SCALARS):
            span.set_attribute(key, value)
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            kept = [v for v in value if isinstance(v, _SCALARS)]
            if kept:
                span.set_attribute(key, kept)
        else:
            logger.debug("trace.attr.skipped", extra={"key": key, "type": type(value).__name__})


@contextmanager
def service_span_sync(name: str, *, attributes: Mapping[str, Any] | None = None) -> Iterator[Span]:
    """Open an internal span; mark it `ok` or record the exception and re-raise."""
    with get_tracer().start_as_current_span(name, kind=SpanKind.INTERNAL) as span:
        _apply_attributes(span, attributes)
        try:
            yield span
        except Exception as e:
            span.set_attribute("ok", False)
            span.set_attribute("exception.type", type(e).__name__)
            span.set_status(Status(StatusCode.ERROR, description=str(e)))
            raise
        span.set_attribute("ok", True)


def codec_span(codec: str, op: str, attributes: Mapping[str, Any] | None = None) -> ContextManager[Any]:
    """Span named `llmwire.codec.<codec>.<op>`, or a no-op when tracing is disabled."""
    if not settings["TRACING_ENABLED"]:
        return nullcontext()
    return service_span_sync(f"{TRACER_NAME}.codec.{codec}.{op}", attributes=attributes)


__all__ = [
    "TRACER_NAME",
    "get_tracer",
    "service_span_sync",
    "codec_span",
]

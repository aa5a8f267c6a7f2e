"""Telemetry package - tracing and metrics for schema type operations."""

from contextlib import contextmanager
from typing import Iterator, Optional

from opentelemetry import trace

from ..config import telemetry_enabled
from .metrics import (
    record_transform,
    record_validation,
    transform_latency_ms,
    transform_total,
    validation_total,
)
from .runtime import INSTRUMENTATION_NAME, get_tracer, meter


@contextmanager
def operation_span(operation: str, type_name: str) -> Iterator[Optional[trace.Span]]:
    """Open a span named ``schematype.<operation>:<type_name>``.

    Yields ``None`` when telemetry is disabled. Exceptions raised inside the
    block are recorded on the span and propagate unchanged.
    """

    if not telemetry_enabled():
        yield None
        return

    with get_tracer().start_as_current_span(
        f"{INSTRUMENTATION_NAME}.{operation}:{type_name}",
        attributes={"schematype.type": type_name},
    ) as span:
        yield span


__all__ = [
    "INSTRUMENTATION_NAME",
    "get_tracer",
    "meter",
    "operation_span",
    "record_transform",
    "record_validation",
    "transform_latency_ms",
    "transform_total",
    "validation_total",
]

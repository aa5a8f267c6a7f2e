# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for schema types."""

from __future__ import annotations

import logging
import time

from ..config import telemetry_enabled
from .runtime import meter

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="schematype.validation.total",
    description="Counts validation runs partitioned by type and outcome.",
    unit="1",
)

transform_total = meter.create_counter(
    name="schematype.transform.total",
    description="Counts wrap/unwrap calls partitioned by type, direction and outcome.",
    unit="1",
)

transform_latency_ms = meter.create_histogram(
    name="schematype.transform.latency.ms",
    description="Time spent inside a wrap or unwrap hook.",
    unit="ms",
)


def record_validation(type_name: str, outcome: str) -> None:
    """Count one validation run; *outcome* is ``"accepted"`` or ``"rejected"``."""

    if not telemetry_enabled():
        return
    try:
        validation_total.add(1, {"type": type_name, "outcome": outcome})
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record validation metric", exc_info=True)


def record_transform(type_name: str, direction: str, outcome: str, started_at: float) -> None:
    """Record latency and count for a wrap/unwrap call.

    Args:
        type_name: ``name`` of the schema type
        direction: ``"wrap"`` or ``"unwrap"``
        outcome: ``"success"``, ``"rejected"`` or ``"error"``
        started_at: Timestamp from ``time.perf_counter()`` when the call started
    """

    if not telemetry_enabled():
        return
    duration_ms = (time.perf_counter() - started_at) * 1000.0
    attributes = {"type": type_name, "direction": direction, "outcome": outcome}
    try:
        transform_latency_ms.record(duration_ms, attributes)
        transform_total.add(1, attributes)
    except Exception:
        logger.debug("Failed to record transform metrics", exc_info=True)


__all__ = [
    "record_transform",
    "record_validation",
    "transform_latency_ms",
    "transform_total",
    "validation_total",
]

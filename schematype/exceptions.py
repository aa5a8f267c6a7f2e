# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception types raised by schema types.

Validation failures are always ``SchemaAssertionError`` instances so callers
can tell them apart from programming errors raised by hook implementations.
"""

from __future__ import annotations

import traceback
from typing import Any, Dict, Mapping, Optional

#: Property keys copied from ``assert_`` properties onto a failure.
RECOGNIZED_PROPERTIES = ("actual", "expected", "operator")


class SchemaTypeError(Exception):
    """Base class for every error raised by the schematype package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(SchemaTypeError):
    """Raised when a type is acquired or configured with invalid arguments."""


class HookNotImplementedError(SchemaTypeError, NotImplementedError):
    """Raised by the default hook bodies a concrete type forgot to override."""

    def __init__(self, type_name: Optional[str], hook: str):
        self.type_name = type_name
        self.hook = hook
        super().__init__(f"{hook} not implemented for type '{type_name}'")


class SchemaAssertionError(SchemaTypeError, AssertionError):
    """Structured validation failure.

    Carries the failure ``message`` plus the comparison metadata supplied by
    the hook (``actual``, ``expected``, ``operator``) and the ``topic``, the
    value that was under validation when the assertion failed.

    ``name`` identifies the failure kind independently of the Python class
    so serialized failures stay distinguishable from generic errors.
    """

    name = "AssertionError"

    def __init__(
        self,
        message: str = "Unspecified AssertionError",
        properties: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.properties: Dict[str, Any] = dict(properties or {})
        self.actual = self.properties.get("actual")
        self.expected = self.properties.get("expected")
        self.operator = self.properties.get("operator")
        self.topic = self.properties.get("topic")

    def to_dict(self, include_stack: bool = False) -> Dict[str, Any]:
        """Return a plain-dict view suitable for JSON encoding."""

        data: Dict[str, Any] = {"name": self.name, "message": self.message}
        data.update(self.properties)
        if include_stack and self.__traceback__ is not None:
            data["stack"] = "".join(traceback.format_tb(self.__traceback__))
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, {self.properties!r})"


def build_assertion_error(
    message: str,
    properties: Optional[Mapping[str, Any]] = None,
    topic: Any = None,
) -> SchemaAssertionError:
    """Build a failure from the recognized *properties* plus *topic*.

    Unrecognized keys are dropped; recognized keys are only copied when the
    caller supplied them.
    """

    source = properties or {}
    data = {key: source[key] for key in RECOGNIZED_PROPERTIES if key in source}
    data["topic"] = topic
    return SchemaAssertionError(message, data)


__all__ = [
    "RECOGNIZED_PROPERTIES",
    "ConfigurationError",
    "HookNotImplementedError",
    "SchemaAssertionError",
    "SchemaTypeError",
    "build_assertion_error",
]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Acquire the schema type contract without inheriting from ``SchemaType``.

The operations are copied onto the target once; the target keeps no link to
``SchemaType`` afterwards, so later changes to ``SchemaType`` are not seen by
already mixed-in targets.

Both call styles are supported:

```python
@schema_type("custom")
class CustomType:
    def _validate(self, value, spec): ...

class PointType:
    pass

schema_type("point", PointType)
PointType._validate = validate_point
```
"""

from __future__ import annotations

import contextlib
import logging
import types
from typing import Any, Callable, Dict, Tuple, TypeVar, Union

from .base import SchemaType, check_name
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Public operations always copied onto the target.
CONTRACT_OPERATIONS: Tuple[str, ...] = (
    "rejected",
    "valid",
    "wrap",
    "cast",
    "unwrap",
    "extract",
    "assert_",
)

#: Fail-fast hook placeholders, copied only where the target has none.
DEFAULT_HOOKS: Tuple[str, ...] = ("_validate", "_wrap", "_unwrap")

# Sentinel object to detect if a target was provided by the caller
_sentinel = object()


def _attach(target: Any, key: str, func: Callable[..., Any], is_class: bool) -> None:
    if is_class:
        setattr(target, key, func)
    else:
        setattr(target, key, types.MethodType(func, target))


def _own_attribute(target: Any, key: str) -> Any:
    return getattr(target, "__dict__", {}).get(key, _sentinel)


def _rollback(target: Any, previous: Dict[str, Any]) -> None:
    """Put back the target's own attributes as they were before the mixin."""

    for key, value in previous.items():
        with contextlib.suppress(AttributeError, TypeError):
            if value is _sentinel:
                if key in getattr(target, "__dict__", {}):
                    delattr(target, key)
            else:
                setattr(target, key, value)


def mixin(name: str, target: T) -> T:
    """Copy the contract onto *target* (a class or a single object) and name it.

    Either every operation is attached or, when the target refuses an
    attribute, none is and ``ConfigurationError`` is raised.
    """

    check_name(name)
    is_class = isinstance(target, type)
    table = vars(SchemaType)
    copied = []
    previous: Dict[str, Any] = {}

    def remember(key: str) -> None:
        previous.setdefault(key, _own_attribute(target, key))

    try:
        for key in CONTRACT_OPERATIONS:
            remember(key)
            _attach(target, key, table[key], is_class)
            copied.append(key)

        for key in DEFAULT_HOOKS:
            if hasattr(target, key):
                continue
            remember(key)
            _attach(target, key, table[key], is_class)
            copied.append(key)

        remember("name")
        target.name = name
        remember("__schematype_operations__")
        target.__schematype_operations__ = tuple(copied)
    except (AttributeError, TypeError) as exc:
        _rollback(target, previous)
        raise ConfigurationError(
            f"Cannot mix schema type '{name}' into {target!r}: {exc}"
        ) from exc

    logger.debug("(%s) mixed into %r: %s", name, target, ", ".join(copied))
    return target


def schema_type(name: str, target: Any = _sentinel) -> Union[Any, Callable[[T], T]]:
    """Mix the contract into *target*, or return a class decorator when omitted."""

    check_name(name)
    if target is _sentinel:
        def decorator(obj: T) -> T:
            return mixin(name, obj)

        return decorator
    return mixin(name, target)


__all__ = [
    "CONTRACT_OPERATIONS",
    "DEFAULT_HOOKS",
    "mixin",
    "schema_type",
]

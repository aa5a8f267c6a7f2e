# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""schematype - the validate/wrap/unwrap contract shared by schema data types."""

from .base import UNSET, Binding, SchemaType, SchemaTypeLike
from .config import Settings, get_settings, reset_settings
from .exceptions import (
    ConfigurationError,
    HookNotImplementedError,
    SchemaAssertionError,
    SchemaTypeError,
    build_assertion_error,
)
from .mixin import CONTRACT_OPERATIONS, DEFAULT_HOOKS, mixin, schema_type

__version__ = "0.3.0"

__all__ = [
    "Binding",
    "CONTRACT_OPERATIONS",
    "ConfigurationError",
    "DEFAULT_HOOKS",
    "HookNotImplementedError",
    "SchemaAssertionError",
    "SchemaType",
    "SchemaTypeError",
    "SchemaTypeLike",
    "Settings",
    "UNSET",
    "build_assertion_error",
    "get_settings",
    "mixin",
    "reset_settings",
    "schema_type",
]

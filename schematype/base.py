# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The schema type contract.

``SchemaType`` is the base for every concrete data type (string, number,
point, ...). It should not be used directly but extended, or acquired with
``schematype.mixin.schema_type`` when inheritance is not wanted.

Concrete types supply three hooks:

- ``_validate(value, spec)``: call ``assert_`` (or raise) for every violated
  condition, return normally when the value is acceptable
- ``_wrap(value, spec)``: forward transform to the wire representation
- ``_unwrap(value, spec)``: backward transform from the wire representation

Example:
    ```python
    class CustomType(SchemaType):
        def __init__(self):
            super().__init__("custom")

        def _validate(self, value, spec):
            self.assert_(
                isinstance(value, str),
                f"Expected type to be a string but got {type(value).__name__}.",
                {"actual": type(value).__name__, "expected": "str", "operator": "isinstance"},
            )

        def _wrap(self, value, spec):
            return value.upper() if spec.get("case") == "upper" else value

        def _unwrap(self, value, spec):
            return value.lower() if spec.get("case") == "upper" else value
    ```
"""

from __future__ import annotations

import contextvars
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from .exceptions import ConfigurationError, HookNotImplementedError, build_assertion_error
from .telemetry import operation_span, record_transform, record_validation


class _Unset:
    """Marker for an omitted ``value`` argument (``None`` is a legal value)."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

# Value currently passing through ``_validate``; read by ``assert_`` for ``topic``.
_SUBJECT: contextvars.ContextVar[Any] = contextvars.ContextVar("schematype_subject", default=UNSET)


@dataclass(frozen=True)
class Binding:
    """A spec and the value it governs, stored once on a value-bound type."""

    spec: Any = None
    value: Any = None


@runtime_checkable
class SchemaTypeLike(Protocol):
    """Public surface shared by every type that acquired the contract."""

    name: str

    def rejected(self, value: Any = ..., spec: Any = ...) -> Optional[Exception]: ...

    def valid(self, value: Any = ..., spec: Any = ...) -> bool: ...

    def wrap(self, value: Any = ..., spec: Any = ..., *, validate: bool = ...) -> Any: ...

    def cast(self, value: Any = ..., spec: Any = ..., *, validate: bool = ...) -> Any: ...

    def unwrap(self, value: Any = ..., spec: Any = ...) -> Any: ...

    def extract(self, value: Any = ..., spec: Any = ...) -> Any: ...

    def assert_(self, test: Any, message: str, properties: Optional[Mapping[str, Any]] = ...) -> None: ...


def _channel(name: str) -> logging.Logger:
    """Per-type diagnostic channel, e.g. ``schematype.types.point``."""

    return logging.getLogger(f"schematype.types.{name}")


def check_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"Schema type name must be a non-empty string, got {name!r}")
    return name


def _resolve(obj: Any, value: Any, spec: Any) -> tuple:
    """Fill an omitted value/spec from the binding, then from ``spec_factory``."""

    binding = getattr(obj, "binding", None)
    if value is UNSET:
        value = binding.value if binding is not None else None
    if spec is None:
        if binding is not None and binding.spec is not None:
            spec = binding.spec
        else:
            spec = getattr(obj, "spec_factory", dict)()
    return value, spec


class SchemaType:
    """Base for all schema data types.

    Args:
        name: Type label such as ``"string"`` or ``"point"``; fixed for the
            lifetime of the instance
        binding: Optional spec/value pair used when an operation is called
            without them
    """

    #: Builds the spec handed to hooks when the caller passes none.
    spec_factory: Callable[[], Any] = dict

    binding: Optional[Binding] = None

    def __init__(self, name: str, binding: Optional[Binding] = None):
        object.__setattr__(self, "name", check_name(name))
        self.binding = binding
        _channel(name).debug("(%s) constructed", name)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError(f"name of schema type '{self.name}' cannot be changed")
        super().__setattr__(key, value)

    @classmethod
    def _construct(cls, name: str, binding: Optional[Binding]) -> "SchemaType":
        # Subclass constructors often fix their own name (``__init__(self)``),
        # so only the base initializer runs here.
        instance = cls.__new__(cls)
        SchemaType.__init__(instance, name, binding)
        return instance

    @classmethod
    def create(cls, name: str) -> "SchemaType":
        """Construct an unbound type; values and specs are passed per call.

        The subclass ``__init__`` is not called; only ``SchemaType.__init__``.
        """

        return cls._construct(name, None)

    @classmethod
    def bind(cls, name: str, spec: Any = None, value: Any = None) -> "SchemaType":
        """Construct a type bound to one *value* and the *spec* governing it.

        The subclass ``__init__`` is not called; only ``SchemaType.__init__``.
        """

        return cls._construct(name, Binding(spec=spec, value=value))

    @property
    def value(self) -> Any:
        """The bound value, or ``None`` for an unbound type."""

        return self.binding.value if self.binding is not None else None

    @property
    def spec(self) -> Any:
        """The bound spec, or ``None`` for an unbound type."""

        return self.binding.spec if self.binding is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def rejected(self, value: Any = UNSET, spec: Any = None) -> Optional[Exception]:
        """Run the validation rules and return the failure, or ``None`` on pass.

        Never raises for an ``Exception`` raised by ``_validate``: the exact
        object raised is returned. Use ``valid`` when the reason is not needed.

        ```python
        failure = custom.rejected(value, spec)
        if failure is not None:
            raise failure
        ```
        """

        name = self.name
        value, spec = _resolve(self, value, spec)
        failure: Optional[Exception] = None

        token = _SUBJECT.set(value)
        try:
            self._validate(value, spec)
            _channel(name).debug("(%s) validate success", name)
        except Exception as exc:
            failure = exc
            _channel(name).debug("(%s) validate error: %s", name, exc)
        finally:
            _SUBJECT.reset(token)

        record_validation(name, "accepted" if failure is None else "rejected")
        return failure

    def valid(self, value: Any = UNSET, spec: Any = None) -> bool:
        """Return ``True`` when the validation rules pass."""

        return self.rejected(value, spec) is None

    def wrap(self, value: Any = UNSET, spec: Any = None, *, validate: bool = True) -> Any:
        """Validate *value* then apply the forward transform.

        Raises the validation failure instead of transforming when the value
        is rejected; ``_wrap`` is not called in that case. Pass
        ``validate=False`` to skip the check when the caller already knows
        the value is valid. Errors from ``_wrap`` propagate unchanged.
        """

        name = self.name
        value, spec = _resolve(self, value, spec)
        started_at = time.perf_counter()

        with operation_span("wrap", name) as span:
            if span is not None:
                span.set_attribute("schematype.validate", validate)

            if validate:
                failure = self.rejected(value, spec)
                if failure is not None:
                    _channel(name).debug("(%s) wrap error: %s", name, failure)
                    record_transform(name, "wrap", "rejected", started_at)
                    raise failure

            try:
                result = self._wrap(value, spec)
            except Exception as exc:
                _channel(name).debug("(%s) wrap error: %s", name, exc)
                record_transform(name, "wrap", "error", started_at)
                raise

        _channel(name).debug("(%s) wrap success", name)
        record_transform(name, "wrap", "success", started_at)
        return result

    def cast(self, value: Any = UNSET, spec: Any = None, *, validate: bool = True) -> Any:
        """Alias of ``wrap``."""

        return self.wrap(value, spec, validate=validate)

    def unwrap(self, value: Any = UNSET, spec: Any = None) -> Any:
        """Apply the backward transform. Does not validate."""

        name = self.name
        value, spec = _resolve(self, value, spec)
        started_at = time.perf_counter()

        with operation_span("unwrap", name):
            try:
                result = self._unwrap(value, spec)
            except Exception as exc:
                _channel(name).debug("(%s) unwrap error: %s", name, exc)
                record_transform(name, "unwrap", "error", started_at)
                raise

        _channel(name).debug("(%s) unwrap success", name)
        record_transform(name, "unwrap", "success", started_at)
        return result

    def extract(self, value: Any = UNSET, spec: Any = None) -> Any:
        """Alias of ``unwrap``."""

        return self.unwrap(value, spec)

    def assert_(self, test: Any, message: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        """Raise a ``SchemaAssertionError`` unless *test* is truthy.

        Hooks should signal every failed condition through this method so
        failures share one shape. Only ``actual``, ``expected`` and
        ``operator`` are kept from *properties*; ``topic`` is set to the value
        under validation (or the bound value outside validation).
        """

        if test:
            return

        topic = _SUBJECT.get()
        if topic is UNSET:
            binding = getattr(self, "binding", None)
            topic = binding.value if binding is not None else None
        raise build_assertion_error(message, properties, topic)

    # ------------------------------------------------------------------
    # Hooks for implementors
    # ------------------------------------------------------------------

    def _validate(self, value: Any, spec: Any) -> None:
        raise HookNotImplementedError(getattr(self, "name", None), "_validate")

    def _wrap(self, value: Any, spec: Any) -> Any:
        raise HookNotImplementedError(getattr(self, "name", None), "_wrap")

    def _unwrap(self, value: Any, spec: Any) -> Any:
        raise HookNotImplementedError(getattr(self, "name", None), "_unwrap")


__all__ = [
    "Binding",
    "SchemaType",
    "SchemaTypeLike",
    "UNSET",
    "check_name",
]

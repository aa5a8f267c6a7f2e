"""Shared pytest fixtures for the schematype test-suite.

The ``custom`` fixtures build the same concrete type twice, once through
inheritance and once through the copy-mixin, so contract tests can be
parametrized over both acquisition modes.
"""
from __future__ import annotations

import pytest

from schematype import SchemaType, reset_settings, schema_type

TEST_STR = "hello universe"
TEST_STR_UPPER = "HELLO UNIVERSE"


def _validate_string(self, value, spec):
    self.assert_(
        isinstance(value, str),
        f"Expected type to be a string but got {type(value).__name__}.",
        {
            "actual": type(value).__name__,
            "expected": "str",
            "operator": "isinstance",
        },
    )


def _upper_on_wrap(self, value, spec):
    return value.upper() if spec.get("case") == "upper" else value


def _lower_on_unwrap(self, value, spec):
    return value.lower() if spec.get("case") == "upper" else value


class InheritedCustomType(SchemaType):
    """String type acquired by subclassing ``SchemaType``."""

    def __init__(self):
        super().__init__("custom")

    _validate = _validate_string
    _wrap = _upper_on_wrap
    _unwrap = _lower_on_unwrap


class MixedCustomType:
    """String type acquired through the copy-mixin (hooks assigned afterwards)."""


schema_type("custom", MixedCustomType)
MixedCustomType._validate = _validate_string
MixedCustomType._wrap = _upper_on_wrap
MixedCustomType._unwrap = _lower_on_unwrap


@pytest.fixture(params=["inherited", "mixin"])
def custom(request):
    """A ``custom`` string type instance, once per acquisition mode."""
    if request.param == "inherited":
        return InheritedCustomType()
    return MixedCustomType()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings read from a clean environment."""
    monkeypatch.delenv("SCHEMATYPE_TELEMETRY", raising=False)
    monkeypatch.delenv("SCHEMATYPE_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the public operations of the schema type contract.

Each test runs against the ``custom`` type in both acquisition modes
(subclass and copy-mixin), see ``conftest.py``:
- accepts only ``str`` values
- ``wrap`` upper-cases when ``spec["case"] == "upper"``
- ``unwrap`` lower-cases when ``spec["case"] == "upper"``
"""
from __future__ import annotations

import pytest

from schematype import (
    CONTRACT_OPERATIONS,
    SchemaAssertionError,
    SchemaType,
    SchemaTypeLike,
)

TEST_STR = "hello universe"
TEST_STR_UPPER = "HELLO UNIVERSE"


def test_name_is_assigned(custom):
    assert custom.name == "custom"


def test_every_contract_operation_is_callable(custom):
    for key in CONTRACT_OPERATIONS:
        assert callable(getattr(custom, key)), key
    assert isinstance(custom, SchemaTypeLike)


# ------------------------------------------------------------------
# rejected / valid
# ------------------------------------------------------------------


def test_rejected_returns_none_on_pass(custom):
    assert custom.rejected(TEST_STR) is None


def test_rejected_returns_assertion_error_on_fail(custom):
    failure = custom.rejected(42)

    assert failure is not None
    assert isinstance(failure, SchemaAssertionError)
    assert isinstance(failure, AssertionError)
    assert failure.name == "AssertionError"
    assert failure.message == "Expected type to be a string but got int."
    assert failure.actual == "int"
    assert failure.expected == "str"
    assert failure.operator == "isinstance"
    assert failure.topic == 42


def test_valid_returns_true_on_pass(custom):
    assert custom.valid(TEST_STR) is True


def test_valid_returns_false_on_fail(custom):
    assert custom.valid(42) is False


@pytest.mark.parametrize("value", [TEST_STR, "", 42, None, 3.5, ["a"], {"a": 1}])
def test_rejected_is_none_exactly_when_valid(custom, value):
    assert (custom.rejected(value) is None) is custom.valid(value)


def test_rejected_preserves_identity_of_raised_failure():
    raised = []

    class Strict(SchemaType):
        def _validate(self, value, spec):
            error = SchemaAssertionError("nope", {"topic": value})
            raised.append(error)
            raise error

    failure = Strict("strict").rejected("anything")

    assert failure is raised[0]
    assert failure.name == "AssertionError"


def test_rejected_captures_plain_exceptions_from_validate():
    class Picky(SchemaType):
        def _validate(self, value, spec):
            raise ValueError("not today")

    failure = Picky("picky").rejected(1)

    assert isinstance(failure, ValueError)
    assert str(failure) == "not today"


def test_rejected_does_not_swallow_keyboard_interrupt():
    class Interrupted(SchemaType):
        def _validate(self, value, spec):
            raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        Interrupted("interrupted").rejected(1)


def test_validate_receives_empty_spec_when_omitted():
    seen = []

    class Recorder(SchemaType):
        def _validate(self, value, spec):
            seen.append(spec)

    Recorder("recorder").valid("x")

    assert seen == [{}]


def test_spec_factory_builds_default_spec():
    seen = []

    class WithDefaults(SchemaType):
        spec_factory = staticmethod(lambda: {"case": "upper"})

        def _validate(self, value, spec):
            seen.append(spec)

        def _wrap(self, value, spec):
            return value.upper() if spec["case"] == "upper" else value

    assert WithDefaults("defaults").wrap("abc") == "ABC"
    assert seen == [{"case": "upper"}]


# ------------------------------------------------------------------
# wrap / cast
# ------------------------------------------------------------------


def test_wrap_returns_the_correct_value(custom):
    assert custom.wrap(TEST_STR, {"case": "upper"}) == TEST_STR_UPPER
    assert custom.wrap(TEST_STR, {"case": "other"}) == TEST_STR


def test_cast_is_an_alias_of_wrap(custom):
    assert custom.cast(TEST_STR, {"case": "upper"}) == TEST_STR_UPPER
    assert custom.cast(TEST_STR, {"case": "other"}, validate=False) == TEST_STR


def test_wrap_raises_the_same_failure_rejected_would_return():
    calls = []
    failure = SchemaAssertionError("bad value")

    class Counting(SchemaType):
        def _validate(self, value, spec):
            raise failure

        def _wrap(self, value, spec):
            calls.append(value)
            return value

    counting = Counting("counting")
    assert counting.rejected(42) is failure

    with pytest.raises(SchemaAssertionError) as excinfo:
        counting.wrap(42)

    assert excinfo.value is failure
    assert calls == []


def test_wrap_validates_by_default(custom):
    with pytest.raises(SchemaAssertionError) as excinfo:
        custom.wrap(42, {"case": "upper"})

    assert excinfo.value.name == "AssertionError"
    assert excinfo.value.topic == 42


def test_wrap_without_validation_calls_hook_and_surfaces_its_error(custom):
    with pytest.raises(AttributeError) as excinfo:
        custom.wrap(42, {"case": "upper"}, validate=False)

    assert not isinstance(excinfo.value, SchemaAssertionError)


def test_wrap_without_validation_skips_validate_hook():
    class NeverValid(SchemaType):
        def _validate(self, value, spec):
            raise AssertionError("should not be called")

        def _wrap(self, value, spec):
            return [value]

    assert NeverValid("never").wrap(1, validate=False) == [1]


def test_wrap_propagates_hook_errors_unchanged():
    boom = RuntimeError("boom")

    class Exploding(SchemaType):
        def _validate(self, value, spec):
            return None

        def _wrap(self, value, spec):
            raise boom

    with pytest.raises(RuntimeError) as excinfo:
        Exploding("exploding").wrap("x")

    assert excinfo.value is boom


# ------------------------------------------------------------------
# unwrap / extract
# ------------------------------------------------------------------


def test_unwrap_returns_the_correct_value(custom):
    assert custom.unwrap(TEST_STR_UPPER, {"case": "upper"}) == TEST_STR
    assert custom.unwrap(TEST_STR_UPPER, {"case": "lower"}) == TEST_STR_UPPER


def test_extract_is_an_alias_of_unwrap(custom):
    assert custom.extract(TEST_STR_UPPER, {"case": "upper"}) == TEST_STR


def test_unwrap_does_not_validate():
    class Unvalidated(SchemaType):
        def _validate(self, value, spec):
            raise AssertionError("should not be called")

        def _unwrap(self, value, spec):
            return value * 2

    assert Unvalidated("unvalidated").unwrap(21) == 42


def test_unwrap_propagates_hook_errors(custom):
    with pytest.raises(AttributeError):
        custom.unwrap(42, {"case": "upper"})


@pytest.mark.parametrize("case", ["upper", "other"])
def test_unwrap_inverts_wrap(custom, case):
    spec = {"case": case}
    assert custom.unwrap(custom.wrap(TEST_STR, spec), spec) == TEST_STR


# ------------------------------------------------------------------
# assert_
# ------------------------------------------------------------------


def test_assert_returns_silently_on_truthy_test(custom):
    assert custom.assert_(True, "never raised") is None
    assert custom.assert_(1, "never raised", {"actual": 1}) is None


def test_assert_keeps_only_recognized_properties(custom):
    with pytest.raises(SchemaAssertionError) as excinfo:
        custom.assert_(
            False,
            "values differ",
            {"actual": 1, "expected": 2, "operator": "==", "extra": "dropped"},
        )

    error = excinfo.value
    assert error.message == "values differ"
    assert error.properties == {"actual": 1, "expected": 2, "operator": "==", "topic": None}
    assert not hasattr(error, "extra")


def test_assert_without_properties(custom):
    with pytest.raises(SchemaAssertionError) as excinfo:
        custom.assert_(0, "falsy test")

    assert excinfo.value.properties == {"topic": None}
    assert excinfo.value.actual is None

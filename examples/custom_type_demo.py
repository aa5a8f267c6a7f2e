# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Custom Type Demo: One String Type, Two Ways To Build It.

This demo builds the same "custom" string type twice, once by subclassing
SchemaType and once with the copy-mixin, then runs validation, wrap and
unwrap on both.

Run with:
    python examples/custom_type_demo.py
"""

from schematype import SchemaAssertionError, SchemaType, schema_type


class InheritedCustomType(SchemaType):
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


@schema_type("custom")
class MixedCustomType:
    _validate = InheritedCustomType._validate
    _wrap = InheritedCustomType._wrap
    _unwrap = InheritedCustomType._unwrap


def demo(custom):
    print("\n" + "=" * 70)
    print(f"DEMO: {type(custom).__name__} (name={custom.name!r})")
    print("=" * 70)

    print(f"\n  rejected('hello universe') -> {custom.rejected('hello universe')!r}")

    failure = custom.rejected(42)
    print(f"  rejected(42)               -> {failure.name}: {failure.message}")
    print(f"    details: {failure.to_dict()}")

    spec = {"case": "upper"}
    wire = custom.wrap("hello universe", spec)
    print(f"\n  wrap('hello universe', {spec}) -> {wire!r}")
    print(f"  unwrap({wire!r}, {spec}) -> {custom.unwrap(wire, spec)!r}")

    try:
        custom.wrap(42, spec)
    except SchemaAssertionError as error:
        print(f"\n  wrap(42) refused before transforming: {error.message}")

    try:
        custom.wrap(42, spec, validate=False)
    except AttributeError as error:
        print(f"  wrap(42, validate=False) reached the hook: {error}")


if __name__ == "__main__":
    demo(InheritedCustomType())
    demo(MixedCustomType())

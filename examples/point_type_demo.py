# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Point Type Demo: Object On The Inside, Array On The Wire.

A point is handled as ``{"x": .., "y": ..}`` by application code and sent as
``[x, y]``. The demo also shows the value-bound style, where the value and
its spec are stored on the type instance once.

Run with:
    python examples/point_type_demo.py
"""

import json
import logging

from schematype import SchemaType


class PointType(SchemaType):
    def _validate(self, value, spec):
        self.assert_(
            isinstance(value, dict),
            f"Expected a mapping but got {type(value).__name__}.",
            {"actual": type(value).__name__, "expected": "dict", "operator": "isinstance"},
        )
        for axis in ("x", "y"):
            self.assert_(
                isinstance(value.get(axis), (int, float)),
                f"Expected numeric '{axis}' coordinate.",
                {"actual": value.get(axis), "expected": "number", "operator": "isinstance"},
            )

    def _wrap(self, value, spec):
        digits = spec.get("precision")
        if digits is None:
            return [value["x"], value["y"]]
        return [round(value["x"], digits), round(value["y"], digits)]

    def _unwrap(self, value, spec):
        return {"x": value[0], "y": value[1]}


def demo_per_call():
    print("\n" + "=" * 70)
    print("DEMO 1: Spec passed per call")
    print("=" * 70)

    point = PointType.create("point")
    wire = point.wrap({"x": 1.23456, "y": 6.54321}, {"precision": 2})
    print(f"\n  wire form: {json.dumps(wire)}")
    print(f"  back again: {point.unwrap(wire)}")

    failure = point.rejected({"x": 1, "y": "north"})
    print(f"\n  rejected: {json.dumps(failure.to_dict())}")


def demo_bound():
    print("\n" + "=" * 70)
    print("DEMO 2: Value-bound point")
    print("=" * 70)

    bound = PointType.bind("point", spec={"precision": 0}, value={"x": 3.7, "y": 4.2})
    print(f"\n  valid(): {bound.valid()}")
    print(f"  wrap():  {bound.wrap()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")
    demo_per_call()
    demo_bound()

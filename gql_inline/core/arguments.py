"""Canonical keys for field arguments.

Two fields request the same data only if their arguments are equal by value,
regardless of the order they were written in. ``argument_key`` turns an
argument list into a string that is equal for exactly those cases.
"""

import json
from typing import Any, Iterable

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
    VariableNode,
)

# Query-language names cannot start with "$", so no object literal can
# produce this key.
VARIABLE_TAG = "$variable"


def canonical_value(value: ValueNode) -> Any:
    """Convert a value node into plain JSON-compatible data.

    Object fields become a dict (serialized with sorted keys), lists keep
    their order, variables become ``{"$variable": name}`` and scalar
    literals collapse to their raw value.
    """
    if isinstance(value, ObjectValueNode):
        return {f.name.value: canonical_value(f.value) for f in value.fields}
    if isinstance(value, ListValueNode):
        return [canonical_value(v) for v in value.values]
    if isinstance(value, VariableNode):
        return {VARIABLE_TAG: value.name.value}
    if isinstance(
        value,
        (BooleanValueNode, StringValueNode, IntValueNode, FloatValueNode, EnumValueNode),
    ):
        return value.value
    if isinstance(value, NullValueNode):
        return None
    raise TypeError(f"Unsupported value node: {value.kind}")


def argument_key(arguments: Iterable[ArgumentNode] | None) -> str:
    """Return the canonical key for a field's arguments ("" when there are none)."""
    if not arguments:
        return ""

    normalized = [
        {"name": arg.name.value, "value": canonical_value(arg.value)}
        for arg in arguments
    ]
    if not normalized:
        return ""
    normalized.sort(key=lambda arg: arg["name"])
    return json.dumps(normalized, sort_keys=True, separators=(",", ":"))

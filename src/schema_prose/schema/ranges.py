"""Numeric range restrictions.

draft-04 marks a bound as exclusive with a boolean flag next to it:

    {"minimum": 0, "exclusiveMinimum": true}

draft-06 puts the bound into the exclusive keyword itself, and allows an
inclusive bound on the same side at the same time:

    {"exclusiveMinimum": 0}

Both are normalized into a RangeDescriptor (flag convention) before
rendering, so every draft produces the same set-builder notation:

    { x ∈ ℝ | 0 < x ≤ 2 }
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Union

from schema_prose.schema.node import SchemaNode, TypeSpec

Number = Union[int, float, Decimal]

INTEGER_SET = "ℤ"  # DOUBLE-STRUCK CAPITAL Z
REAL_SET = "ℝ"  # DOUBLE-STRUCK CAPITAL R


@dataclass(frozen=True)
class RangeDescriptor:
    """Bounds of a numeric range, exclusivity given as flags."""

    min: Number | None = None
    min_exclusive: bool = False
    max: Number | None = None
    max_exclusive: bool = False

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _normalize_side(bound: Any, exclusive: Any, lower: bool) -> tuple[Number | None, bool]:
    if not _is_number(bound):
        bound = None

    if isinstance(exclusive, bool):
        return bound, exclusive and bound is not None

    if not _is_number(exclusive):
        return bound, False
    if bound is None:
        return exclusive, True

    # Both present: the stricter bound wins, exclusive on a tie
    stricter = exclusive >= bound if lower else exclusive <= bound
    if stricter:
        return exclusive, True
    return bound, False


def normalize_range(node: SchemaNode | Mapping[str, Any]) -> RangeDescriptor:
    """Reconcile draft-04 and draft-06 bounds into one RangeDescriptor.

    The convention is read per side from the value of the exclusive keyword:
    a boolean is a draft-04 flag, a number is a draft-06 bound.

    Args:
        node: The schema node (or raw mapping). It is not modified.

    Returns:
        The normalized range. Absent bounds stay None.
    """
    node = SchemaNode.wrap(node)
    low, low_exclusive = _normalize_side(node.get("minimum"), node.exclusive_minimum, lower=True)
    high, high_exclusive = _normalize_side(node.get("maximum"), node.exclusive_maximum, lower=False)
    return RangeDescriptor(
        min=low,
        min_exclusive=low_exclusive,
        max=high,
        max_exclusive=high_exclusive,
    )


def format_number(value: Number) -> str:
    """Render a number exactly as it was parsed from the schema."""
    if isinstance(value, float):
        return repr(value)
    return str(value)


def render_range(
    descriptor: RangeDescriptor,
    type_name: str = "number",
    label: str = "x",
) -> str:
    """Render a range in set-builder notation.

    Args:
        descriptor: The normalized range.
        type_name: "integer" renders over ℤ, anything else over ℝ.
        label: Name of the bound variable.

    Returns:
        e.g. "{ x ∈ ℤ | 0 ≤ x < 10 }", or "" when neither bound is set.
    """
    low = descriptor.min
    high = descriptor.max

    if low is not None and high is not None:
        low_op = "<" if descriptor.min_exclusive else "≤"
        high_op = "<" if descriptor.max_exclusive else "≤"
        condition = f"{format_number(low)} {low_op} {label} {high_op} {format_number(high)}"
    elif low is not None:
        op = ">" if descriptor.min_exclusive else "≥"
        condition = f"{label} {op} {format_number(low)}"
    elif high is not None:
        op = "<" if descriptor.max_exclusive else "≤"
        condition = f"{label} {op} {format_number(high)}"
    else:
        return ""

    set_symbol = INTEGER_SET if type_name == "integer" else REAL_SET
    return f"{{ {label} ∈ {set_symbol} | {condition} }}"


def numeric_type_for(type_spec: TypeSpec) -> str | None:
    """Pick "number" or "integer" for a type, or None if it cannot be numeric."""
    if type_spec.could_be("number"):
        return "number"
    if type_spec.could_be("integer"):
        return "integer"
    return None


def numeric_range(node: SchemaNode | Mapping[str, Any], label: str = "x") -> str:
    """Render the range of a node, or "" for non-numeric or unbounded nodes."""
    node = SchemaNode.wrap(node)
    type_name = numeric_type_for(node.type_spec)
    if type_name is None:
        return ""
    return render_range(normalize_range(node), type_name, label)


def multiple_of_restriction(node: SchemaNode | Mapping[str, Any], label: str = "x") -> str | None:
    node = SchemaNode.wrap(node)
    factor = node.get("multipleOf")
    if not _is_number(factor):
        return None
    return f"{label} ∈ {format_number(factor)}·{INTEGER_SET}"


def numeric_restrictions(node: SchemaNode | Mapping[str, Any], label: str = "x") -> list[str]:
    """All numeric restriction fragments of a node, empty ones left out."""
    node = SchemaNode.wrap(node)
    if not node.type_spec.could_be_numeric:
        return []
    fragments = [numeric_range(node, label), multiple_of_restriction(node, label)]
    return [fragment for fragment in fragments if fragment]

"""Tests for numeric range normalization and rendering."""

from __future__ import annotations

import copy
from decimal import Decimal

import pytest

from schema_prose.schema.ranges import (
    REAL_SET,
    RangeDescriptor,
    format_number,
    multiple_of_restriction,
    normalize_range,
    numeric_range,
    numeric_restrictions,
    render_range,
)


class TestNormalizeRangeFlagConvention:
    """Tests for draft-04 boolean exclusivity flags."""

    def test_exclusive_minimum_flag(self) -> None:
        """Test a true flag marks the minimum exclusive."""
        result = normalize_range({"minimum": 0, "exclusiveMinimum": True, "maximum": 2})
        assert result == RangeDescriptor(min=0, min_exclusive=True, max=2, max_exclusive=False)

    def test_false_flag_is_inclusive(self) -> None:
        """Test a false flag leaves the bound inclusive."""
        result = normalize_range({"maximum": 5, "exclusiveMaximum": False})
        assert result == RangeDescriptor(max=5, max_exclusive=False)

    def test_flag_without_bound(self) -> None:
        """Test a flag on its own produces no bound."""
        result = normalize_range({"exclusiveMinimum": True})
        assert result.min is None
        assert not result.min_exclusive
        assert result.is_unbounded

    def test_legacy_spelling(self) -> None:
        """Test the minimumExclusive/maximumExclusive aliases."""
        result = normalize_range({"minimum": 1, "minimumExclusive": True, "maximum": 3, "maximumExclusive": True})
        assert result == RangeDescriptor(min=1, min_exclusive=True, max=3, max_exclusive=True)


class TestNormalizeRangeValueConvention:
    """Tests for draft-06 numeric exclusive bounds."""

    def test_exclusive_bound_alone(self) -> None:
        """Test the exclusive keyword carries the bound."""
        result = normalize_range({"exclusiveMinimum": 0, "exclusiveMaximum": 10})
        assert result == RangeDescriptor(min=0, min_exclusive=True, max=10, max_exclusive=True)

    def test_equal_bounds_prefer_exclusive(self) -> None:
        """Test an exclusive bound equal to the inclusive one wins."""
        result = normalize_range({"minimum": 0, "exclusiveMinimum": 0})
        assert result.min == 0
        assert result.min_exclusive

    def test_stricter_exclusive_minimum_wins(self) -> None:
        """Test a larger exclusive minimum replaces the inclusive one."""
        result = normalize_range({"exclusiveMinimum": 1, "minimum": 0})
        assert result.min == 1
        assert result.min_exclusive

    def test_stricter_inclusive_minimum_wins(self) -> None:
        """Test a larger inclusive minimum replaces the exclusive one."""
        result = normalize_range({"exclusiveMinimum": 1, "minimum": 5})
        assert result.min == 5
        assert not result.min_exclusive

    def test_stricter_exclusive_maximum_wins(self) -> None:
        """Test a smaller exclusive maximum replaces the inclusive one."""
        result = normalize_range({"maximum": 10, "exclusiveMaximum": 8})
        assert result.max == 8
        assert result.max_exclusive

    def test_stricter_inclusive_maximum_wins(self) -> None:
        """Test a smaller inclusive maximum replaces the exclusive one."""
        result = normalize_range({"maximum": 3, "exclusiveMaximum": 8})
        assert result.max == 3
        assert not result.max_exclusive

    def test_zero_bounds_are_present(self) -> None:
        """Test zero is treated as a bound, not as absent."""
        result = normalize_range({"maximum": 0, "exclusiveMaximum": 0})
        assert result == RangeDescriptor(max=0, max_exclusive=True)

    def test_input_not_mutated(self) -> None:
        """Test normalization leaves the schema untouched."""
        schema = {"minimum": 0, "exclusiveMinimum": 1, "maximum": True}
        original = copy.deepcopy(schema)
        normalize_range(schema)
        assert schema == original


class TestRenderRange:
    """Tests for render_range."""

    def test_lower_bound_only(self) -> None:
        assert render_range(RangeDescriptor(min=2)) == "{ x ∈ ℝ | x ≥ 2 }"

    def test_exclusive_lower_bound_only(self) -> None:
        assert render_range(RangeDescriptor(min=0, min_exclusive=True)) == "{ x ∈ ℝ | x > 0 }"

    def test_upper_bound_only(self) -> None:
        assert render_range(RangeDescriptor(max=2)) == "{ x ∈ ℝ | x ≤ 2 }"

    def test_exclusive_upper_bound_only(self) -> None:
        assert render_range(RangeDescriptor(max=2, max_exclusive=True)) == "{ x ∈ ℝ | x < 2 }"

    def test_two_sided(self) -> None:
        """Test each side uses its own operator."""
        descriptor = RangeDescriptor(min=0, min_exclusive=True, max=2)
        assert render_range(descriptor) == "{ x ∈ ℝ | 0 < x ≤ 2 }"

        descriptor = RangeDescriptor(min=0, max=2, max_exclusive=True)
        assert render_range(descriptor) == "{ x ∈ ℝ | 0 ≤ x < 2 }"

    def test_unbounded_is_empty(self) -> None:
        assert render_range(RangeDescriptor()) == ""

    def test_integer_symbol_and_label(self) -> None:
        descriptor = RangeDescriptor(min=0, max=2)
        assert render_range(descriptor, "integer", label="n") == "{ n ∈ ℤ | 0 ≤ n ≤ 2 }"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2, "2"),
            (2.0, "2.0"),
            (0.1, "0.1"),
            (-17, "-17"),
            (Decimal("1.50"), "1.50"),
            (12345678901234567890, "12345678901234567890"),
        ],
    )
    def test_numbers_reproduced_exactly(self, value: object, expected: str) -> None:
        """Test literals are neither rounded nor padded."""
        assert format_number(value) == expected


class TestNumericRange:
    """Tests for the node-level numeric helpers."""

    def test_number_lower_bound(self) -> None:
        assert numeric_range({"minimum": 2, "type": "number"}) == "{ x ∈ ℝ | x ≥ 2 }"

    def test_integer_two_sided(self) -> None:
        assert numeric_range({"minimum": 0, "maximum": 2, "type": "integer"}) == "{ x ∈ ℤ | 0 ≤ x ≤ 2 }"

    def test_unspecified_type_is_real(self) -> None:
        assert numeric_range({"maximum": 2}) == f"{{ x ∈ {REAL_SET} | x ≤ 2 }}"

    def test_mixed_numeric_types_use_real(self) -> None:
        assert numeric_range({"type": ["integer", "number"], "minimum": 1}) == "{ x ∈ ℝ | x ≥ 1 }"

    def test_non_numeric_type_is_ignored(self) -> None:
        assert numeric_range({"type": "string", "minimum": 2, "maximum": 3}) == ""

    def test_empty_ranges(self) -> None:
        assert numeric_range({}) == ""
        assert numeric_range({"type": "integer"}) == ""
        assert numeric_range({"type": "number"}) == ""

    def test_draft06_integer_range(self, draft06_schema: dict) -> None:
        count = draft06_schema["definitions"]["count"]
        assert numeric_range(count) == "{ x ∈ ℤ | 0 < x < 100 }"

    def test_draft04_number_range(self, draft04_schema: dict) -> None:
        ratio = draft04_schema["definitions"]["ratio"]
        assert numeric_range(ratio) == "{ x ∈ ℝ | 0 < x ≤ 1.5 }"

    def test_multiple_of(self) -> None:
        assert multiple_of_restriction({"multipleOf": 3}) == "x ∈ 3·ℤ"
        assert multiple_of_restriction({}) is None

    def test_numeric_restrictions(self) -> None:
        schema = {"type": "integer", "minimum": 1, "multipleOf": 2}
        assert numeric_restrictions(schema) == ["{ x ∈ ℤ | x ≥ 1 }", "x ∈ 2·ℤ"]

    def test_numeric_restrictions_for_strings(self) -> None:
        assert numeric_restrictions({"type": "string", "minimum": 1}) == []

    def test_deterministic(self) -> None:
        schema = {"type": "number", "exclusiveMinimum": 0.5, "maximum": 7}
        assert {numeric_range(schema) for _ in range(5)} == {"{ x ∈ ℝ | 0.5 < x ≤ 7 }"}

"""Tests for natural-language enumerations."""

from __future__ import annotations

import pytest

from schema_prose.prose import join_prose


class TestJoinProse:
    """Tests for join_prose."""

    def test_single_item(self) -> None:
        assert join_prose(["a"]) == "a"

    def test_two_items(self) -> None:
        assert join_prose(["a", "b"]) == "a and b"

    def test_three_items(self) -> None:
        assert join_prose(["a", "b", "c"]) == "a, b and c"

    def test_many_items(self) -> None:
        assert join_prose(["a", "b", "c", "d"]) == "a, b, c and d"

    def test_render_callback(self) -> None:
        """Test each item is rendered before joining."""
        result = join_prose([1, 2, 3], render=lambda value: f"<code>{value}</code>")
        assert result == "<code>1</code>, <code>2</code> and <code>3</code>"

    def test_default_render_stringifies(self) -> None:
        assert join_prose([1, 2]) == "1 and 2"

    def test_tuple_input(self) -> None:
        assert join_prose(("x", "y")) == "x and y"

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            join_prose([])

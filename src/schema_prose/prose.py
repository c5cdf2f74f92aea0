"""Natural-language enumerations."""

from __future__ import annotations

from typing import Any, Callable, Sequence


def join_prose(items: Sequence[Any], render: Callable[[Any], str] = str) -> str:
    """Join items into "a", "a and b" or "a, b and c".

    Args:
        items: Non-empty sequence of items.
        render: Renders each item before joining, e.g. a template's inline
            partial.

    Raises:
        ValueError: If `items` is empty.
    """
    if not items:
        raise ValueError("Cannot enumerate an empty sequence")
    rendered = [render(item) for item in items]
    if len(rendered) == 1:
        return rendered[0]
    return f"{', '.join(rendered[:-1])} and {rendered[-1]}"

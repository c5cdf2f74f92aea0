"""Restriction sentences for string, array and object keywords."""

from __future__ import annotations

from typing import Any, Mapping

from schema_prose.markup import html_element
from schema_prose.schema.node import SchemaNode
from schema_prose.schema.ranges import format_number

REGEX_CLASS = "json-schema--regex"


def _present(value: Any) -> bool:
    return value is not None and not isinstance(value, bool)


def string_restrictions(node: SchemaNode | Mapping[str, Any], label: str = "x") -> list[str]:
    """Length and pattern restrictions of a string node.

    The pattern fragment is HTML; the pattern text inside it is escaped.
    """
    node = SchemaNode.wrap(node)
    fragments = []

    min_length = node.get("minLength")
    if _present(min_length):
        fragments.append(f"{label}.length ≥ {format_number(min_length)}")

    max_length = node.get("maxLength")
    if _present(max_length):
        fragments.append(f"{label}.length ≤ {format_number(max_length)}")

    pattern = node.get("pattern")
    if pattern is not None:
        regex = html_element("span", str(pattern), {"class": REGEX_CLASS})
        fragments.append(f"{label} matches {regex}")

    return fragments


def _item_count(count: Any) -> str:
    noun = "item" if count == 1 else "items"
    return f"{format_number(count)} {noun}"


def array_restrictions(node: SchemaNode | Mapping[str, Any]) -> list[str]:
    """Item count and uniqueness restrictions of an array node."""
    node = SchemaNode.wrap(node)
    fragments = []

    min_items = node.get("minItems")
    max_items = node.get("maxItems")
    if _present(min_items) and _present(max_items):
        fragments.append(
            f"The array must have between {format_number(min_items)} "
            f"and {format_number(max_items)} items."
        )
    elif _present(min_items):
        fragments.append(f"The array must have at least {_item_count(min_items)}.")
    elif _present(max_items):
        fragments.append(f"The array must have at most {_item_count(max_items)}.")

    if node.get("uniqueItems") is True:
        fragments.append("The items of the array must be unique.")

    return fragments


def count_phrase(
    minimum: int | None,
    maximum: int | None,
    singular: str,
    plural: str | None = None,
) -> str | None:
    """Describe how many occurrences of something are allowed.

    Args:
        minimum: Lower bound, or None.
        maximum: Upper bound, or None for unbounded.
        singular: Noun used with "one", e.g. "property".
        plural: Noun used with other counts; defaults to singular + "s".

    Returns:
        A phrase such as "exactly one property" or "2 to 4 properties",
        or None when neither bound is given.
    """
    if not _present(minimum):
        minimum = None
    if not _present(maximum):
        maximum = None
    if plural is None:
        plural = f"{singular}s"

    if minimum is None and maximum is None:
        return None
    if minimum == 1 and maximum == 1:
        return f"exactly one {singular}"
    if minimum == 1 and maximum is None:
        return f"at least one {singular}"
    if minimum is None and maximum == 1:
        return f"at most one {singular}"

    if minimum is not None and maximum is not None:
        if minimum == maximum:
            return f"exactly {format_number(minimum)} {plural}"
        return f"{format_number(minimum)} to {format_number(maximum)} {plural}"
    if minimum is not None:
        return f"at least {format_number(minimum)} {plural}"
    return f"at most {format_number(maximum)} {plural}"


def property_count_restriction(node: SchemaNode | Mapping[str, Any]) -> str | None:
    """Sentence for minProperties/maxProperties, or None."""
    node = SchemaNode.wrap(node)
    phrase = count_phrase(
        node.get("minProperties"),
        node.get("maxProperties"),
        "property",
        "properties",
    )
    if phrase is None:
        return None
    return f"The object must have {phrase}."


def is_required(node: SchemaNode | Mapping[str, Any], property_name: str) -> bool:
    """Check whether a property is listed in the node's "required" keyword."""
    return property_name in SchemaNode.wrap(node).required

"""Compact type signatures such as ``string|array<array<integer>>``."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from schema_prose.schema.node import SchemaNode

logger = logging.getLogger(__name__)

WILDCARD = "*"
SEPARATOR = "|"
ARRAY = "array"


def _array_member(items_signature: str) -> str:
    return f"{ARRAY}<{items_signature}>"


def type_signature(node: SchemaNode | Mapping[str, Any]) -> str:
    """Format the type of a node as a signature.

    Examples:
        {} -> "*"
        {"type": ["string", "integer"]} -> "string|integer"
        {"type": "array", "items": {"type": "string"}} -> "array<string>"
        {"type": ["integer", "array"]} -> "integer|array<*>"

    Every entry of a "type" list is kept, repeats included, so a list of n
    names always yields n - 1 separators. Only "array" nests, and only
    through "items", so the schema is walked as a chain instead of
    recursively; the depth of the input is not limited by the interpreter
    stack. Positional (list-valued) "items" render as "*".
    """
    current = SchemaNode.wrap(node)
    levels: list[tuple[str, ...]] = []
    seen: set[int] = set()

    while True:
        spec = current.type_spec
        if spec.is_unspecified:
            terminal = WILDCARD
            break
        names = spec.names
        if ARRAY not in names:
            terminal = SEPARATOR.join(names)
            break
        levels.append(names)

        seen.add(id(current.raw))
        items = current.items
        if items is None or isinstance(items, tuple):
            terminal = WILDCARD
            break
        if id(items.raw) in seen:
            logger.debug("Circular 'items' chain after %d levels", len(levels))
            terminal = WILDCARD
            break
        current = items

    # Levels with a single "array" entry are kept as pending prefix/suffix
    # pairs; a level with several copies the inner signature into each.
    inner = terminal
    prefixes: list[str] = []
    suffixes: list[str] = []
    for names in reversed(levels):
        if names.count(ARRAY) == 1:
            index = names.index(ARRAY)
            prefixes.append("".join(name + SEPARATOR for name in names[:index]) + f"{ARRAY}<")
            suffixes.append(">" + "".join(SEPARATOR + name for name in names[index + 1:]))
            continue
        items_signature = "".join(reversed(prefixes)) + inner + "".join(suffixes)
        prefixes.clear()
        suffixes.clear()
        inner = SEPARATOR.join(
            _array_member(items_signature) if name == ARRAY else name for name in names
        )

    return "".join(reversed(prefixes)) + inner + "".join(suffixes)


def split_signature(signature: str) -> list[str]:
    """Split a signature at its top-level separators.

    Separators nested inside ``array<...>`` are left alone, so
    ``"integer|array<string|null>"`` splits into two parts.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    for position, char in enumerate(signature):
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        elif char == SEPARATOR and depth == 0:
            parts.append(signature[start:position])
            start = position + 1
    parts.append(signature[start:])
    return parts


def describe_signature(signature: str) -> str:
    """Presentation form of a signature: "string or array<string>", "any type"."""
    parts = ["any type" if part == WILDCARD else part for part in split_signature(signature)]
    return " or ".join(parts)

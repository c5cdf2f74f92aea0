"""Read-only view of a resolved JSON-Schema node."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

NUMERIC_TYPES = ("number", "integer")


class TypeKind(Enum):
    """Shapes the "type" keyword can take."""

    UNSPECIFIED = "unspecified"  # keyword absent
    SINGLE = "single"  # "type": "string"
    MULTIPLE = "multiple"  # "type": ["string", "null"]


@dataclass(frozen=True)
class TypeSpec:
    """The "type" keyword of a node, as a tagged variant."""

    kind: TypeKind
    names: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, value: Any) -> TypeSpec:
        """Parse the raw value of a "type" keyword."""
        if value is None:
            return cls(TypeKind.UNSPECIFIED)
        if isinstance(value, (list, tuple)):
            if not value:
                return cls(TypeKind.UNSPECIFIED)
            return cls(TypeKind.MULTIPLE, tuple(str(name) for name in value))
        return cls(TypeKind.SINGLE, (str(value),))

    @property
    def is_unspecified(self) -> bool:
        return self.kind is TypeKind.UNSPECIFIED

    def could_be(self, name: str) -> bool:
        """Check whether a value of type `name` may match this node.

        An unspecified type could be anything.
        """
        return self.is_unspecified or name in self.names

    @property
    def could_be_numeric(self) -> bool:
        return any(self.could_be(name) for name in NUMERIC_TYPES)


class SchemaNode:
    """Wraps a schema mapping without copying or modifying it.

    Nested "items" are wrapped on access, so wrapping a node costs the same
    regardless of how deep the schema is.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Mapping[str, Any] = data if data is not None else {}

    @classmethod
    def wrap(cls, value: SchemaNode | Mapping[str, Any] | None) -> SchemaNode:
        """Coerce a mapping (or an existing node) into a SchemaNode."""
        if isinstance(value, SchemaNode):
            return value
        if value is None or isinstance(value, Mapping):
            return cls(value)
        raise TypeError(f"Expected a schema mapping, got {type(value).__name__}")

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._data

    def get(self, keyword: str, default: Any = None) -> Any:
        return self._data.get(keyword, default)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._data

    def __repr__(self) -> str:
        return f"SchemaNode({dict(self._data)!r})"

    @property
    def type_spec(self) -> TypeSpec:
        return TypeSpec.from_json(self._data.get("type"))

    @property
    def exclusive_minimum(self) -> Any:
        """Raw "exclusiveMinimum"; bool in draft-04, number in draft-06."""
        if "exclusiveMinimum" in self._data:
            return self._data["exclusiveMinimum"]
        # legacy spelling
        return self._data.get("minimumExclusive")

    @property
    def exclusive_maximum(self) -> Any:
        if "exclusiveMaximum" in self._data:
            return self._data["exclusiveMaximum"]
        return self._data.get("maximumExclusive")

    @property
    def items(self) -> SchemaNode | tuple[SchemaNode, ...] | None:
        """The "items" keyword: one node, a tuple of positional nodes, or None."""
        value = self._data.get("items")
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return tuple(_wrap_subschema(item) for item in value)
        return _wrap_subschema(value)

    @property
    def required(self) -> frozenset[str]:
        value = self._data.get("required")
        if not isinstance(value, (list, tuple, set, frozenset)):
            return frozenset()
        return frozenset(value)


def _wrap_subschema(value: Any) -> SchemaNode:
    # draft-06 allows "true"/"false" as schemas; neither constrains the type.
    # Anything else that is not a mapping is malformed and constrains nothing.
    if isinstance(value, SchemaNode):
        return value
    if not isinstance(value, Mapping):
        return SchemaNode()
    return SchemaNode(value)

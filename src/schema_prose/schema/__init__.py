"""Descriptions of individual schema nodes."""

from schema_prose.schema.node import NUMERIC_TYPES, SchemaNode, TypeKind, TypeSpec
from schema_prose.schema.ranges import (
    INTEGER_SET,
    REAL_SET,
    RangeDescriptor,
    format_number,
    multiple_of_restriction,
    normalize_range,
    numeric_range,
    numeric_restrictions,
    render_range,
    numeric_type_for,
)
from schema_prose.schema.restrictions import (
    array_restrictions,
    count_phrase,
    is_required,
    property_count_restriction,
    string_restrictions,
)
from schema_prose.schema.signature import (
    SEPARATOR,
    WILDCARD,
    describe_signature,
    split_signature,
    type_signature,
)

__all__ = [
    # Nodes
    "NUMERIC_TYPES",
    "SchemaNode",
    "TypeKind",
    "TypeSpec",
    # Ranges
    "INTEGER_SET",
    "REAL_SET",
    "RangeDescriptor",
    "format_number",
    "multiple_of_restriction",
    "normalize_range",
    "numeric_range",
    "numeric_restrictions",
    "render_range",
    "numeric_type_for",
    # Restrictions
    "array_restrictions",
    "count_phrase",
    "is_required",
    "property_count_restriction",
    "string_restrictions",
    # Signatures
    "SEPARATOR",
    "WILDCARD",
    "describe_signature",
    "split_signature",
    "type_signature",
]

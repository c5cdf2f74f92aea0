"""schema-prose - plain-language descriptions of JSON-Schema constraints.

Turns the constraints of a resolved schema node into short fragments for a
documentation page. draft-04 and draft-06 schemas are both supported.

Example:
    from schema_prose import numeric_range, type_signature, resolve_reference

    node = {"type": "integer", "minimum": 0, "exclusiveMaximum": 10}

    type_signature(node)   # "integer"
    numeric_range(node)    # "{ x ∈ ℤ | 0 ≤ x < 10 }"

    # Link a keyword to the draft declared by the root document
    link = resolve_reference("http://json-schema.org/draft-06/schema#", "minimum")
    link.section           # "6.4"
    link.markup            # ' (<a href="...#section-6.4" ...>🛈 6.4</a>)'

    # Template integration
    from schema_prose import RenderContext, template_helpers

    helpers = template_helpers(RenderContext.from_root(root_schema))
"""

from schema_prose.errors import (
    RenderContextError,
    SchemaDraft,
    SchemaProseError,
    UnknownKeywordError,
)
from schema_prose.helpers import RenderContext, subschema_name, template_helpers
from schema_prose.prose import join_prose
from schema_prose.schema import (
    RangeDescriptor,
    SchemaNode,
    TypeKind,
    TypeSpec,
    array_restrictions,
    count_phrase,
    describe_signature,
    is_required,
    normalize_range,
    numeric_range,
    numeric_restrictions,
    property_count_restriction,
    render_range,
    split_signature,
    string_restrictions,
    type_signature,
)
from schema_prose.versions import (
    DEFAULT_VERSION,
    DRAFT_04,
    DRAFT_06,
    SchemaVersion,
    resolve_version,
)
from schema_prose.xref import CrossReference, doclink, format_link, resolve_reference

__version__ = "0.1.0"

__all__ = [
    # Versions
    "SchemaDraft",
    "SchemaVersion",
    "DRAFT_04",
    "DRAFT_06",
    "DEFAULT_VERSION",
    "resolve_version",
    # Cross-references
    "CrossReference",
    "doclink",
    "format_link",
    "resolve_reference",
    # Nodes
    "SchemaNode",
    "TypeKind",
    "TypeSpec",
    # Rendering
    "RangeDescriptor",
    "normalize_range",
    "render_range",
    "numeric_range",
    "numeric_restrictions",
    "type_signature",
    "split_signature",
    "describe_signature",
    "string_restrictions",
    "array_restrictions",
    "count_phrase",
    "property_count_restriction",
    "is_required",
    "join_prose",
    # Errors
    "SchemaProseError",
    "UnknownKeywordError",
    "RenderContextError",
    # Template integration
    "RenderContext",
    "subschema_name",
    "template_helpers",
]

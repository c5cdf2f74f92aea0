"""Template integration helpers for schema_prose.

Provides the rendering functions under stable names so a page layer can
register them as template filters or globals:

    from jinja2 import Environment
    from schema_prose.helpers import RenderContext, template_helpers

    context = RenderContext.from_root(root_schema)
    env = Environment()
    env.filters.update(template_helpers(context))

Helpers that link into the specification need the draft of the root
document; it is passed explicitly through RenderContext.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from schema_prose.errors import RenderContextError
from schema_prose.prose import join_prose
from schema_prose.schema.node import SchemaNode
from schema_prose.schema.ranges import numeric_range, numeric_restrictions
from schema_prose.schema.restrictions import (
    array_restrictions,
    is_required,
    property_count_restriction,
    string_restrictions,
)
from schema_prose.schema.signature import describe_signature, type_signature
from schema_prose.versions import SchemaVersion, resolve_version
from schema_prose.xref import (
    doclink,
    format_link,
    unknown_version_reference,
)

DEFINITIONS_PREFIX = "#/definitions/"


@dataclass(frozen=True)
class RenderContext:
    """Per-document settings for version-aware helpers."""

    declared_version: str | None = None  # "$schema" of the root document
    label: str = "x"  # variable name used in range and length formulas

    @classmethod
    def from_root(cls, root: Mapping[str, Any], label: str = "x") -> RenderContext:
        return cls(declared_version=root.get("$schema"), label=label)

    @property
    def version(self) -> SchemaVersion | None:
        """The supported draft, or None if the declared one is unknown."""
        return resolve_version(self.declared_version)


def subschema_name(ref: str) -> str:
    """Extract the definition name from a local "$ref"."""
    return ref.replace(DEFINITIONS_PREFIX, "")


def datatype(schema: Mapping[str, Any] | None) -> str | None:
    if schema is None:
        return None
    return type_signature(schema)


def type_label(schema: Mapping[str, Any]) -> str:
    return describe_signature(type_signature(schema))


def could_be_of_type(schema: Mapping[str, Any], type_name: str) -> bool:
    return SchemaNode.wrap(schema).type_spec.could_be(type_name)


def could_be_numeric(schema: Mapping[str, Any]) -> bool:
    return SchemaNode.wrap(schema).type_spec.could_be_numeric


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _require_context(context: RenderContext | None, helper: str) -> RenderContext:
    if context is None:
        raise RenderContextError(helper)
    if not isinstance(context, RenderContext):
        raise RenderContextError(
            helper,
            f"Helper '{helper}' expected a RenderContext, got {type(context).__name__}",
        )
    return context


def _context_doclink(
    context: RenderContext | None,
    keyword: str,
    with_text: bool = False,
) -> str:
    context = _require_context(context, "json_schema__doclink")
    version = context.version
    if version is None:
        return unknown_version_reference(keyword, context.declared_version).markup
    return doclink(version, keyword, with_text).markup


def _context_formatlink(context: RenderContext | None, format_name: str) -> str:
    context = _require_context(context, "json_schema__formatlink")
    version = context.version
    if version is None:
        return unknown_version_reference(format_name, context.declared_version).markup
    return format_link(version, format_name).markup


def _labelled(func: Callable[..., Any], context: RenderContext | None) -> Callable[..., Any]:
    label = context.label if isinstance(context, RenderContext) else "x"
    return functools.partial(func, label=label)


def template_helpers(context: RenderContext | None = None) -> dict[str, Callable[..., Any]]:
    """Build the helper table for one document.

    Args:
        context: Rendering context of the root document. Version-independent
            helpers work without it; link helpers raise RenderContextError
            when called without one.

    Returns:
        Mapping of helper name to callable.
    """
    return {
        "json_schema__datatype": datatype,
        "json_schema__type_label": type_label,
        "json_schema__subschema_name": subschema_name,
        "json_schema__could_be_numeric": could_be_numeric,
        "json_schema__could_be_of_type": could_be_of_type,
        "json_schema__is_array": is_array,
        "json_schema__number_range": _labelled(numeric_range, context),
        "json_schema__numeric_restrictions": _labelled(numeric_restrictions, context),
        "json_schema__string_restrictions": _labelled(string_restrictions, context),
        "json_schema__array_item_restrictions": array_restrictions,
        "json_schema__object_restrictions": property_count_restriction,
        "json_schema__is_required": is_required,
        "json_schema__join": join_prose,
        "json_schema__doclink": functools.partial(_context_doclink, context),
        "json_schema__formatlink": functools.partial(_context_formatlink, context),
    }

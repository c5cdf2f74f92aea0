"""Links from rendered restrictions to the validation specification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from schema_prose.markup import html_element
from schema_prose.versions import SchemaVersion, resolve_version

logger = logging.getLogger(__name__)

UNKNOWN_VERSION_CLASS = "json-schema--unknown-version"
INFO_SIGN = "🛈"

KEYWORD_DESCRIPTIONS = MappingProxyType({
    "items": "All items must match the following schema",
    "items_array": "The first items must match the following schemas",
    "contains": "At least one item must match the following schema",
    "additionalItems": "Additional items must match the following schema",
    "properties": "Properties must match the following schemas",
    "patternProperties": "Properties with matching names must match the following schemas",
    "additionalProperties": "Additional properties must match the following schema",
    "propertyNames": "All property names must match the following schema",
    "dependencies": "Present properties require further properties or schemas",
    "allOf": "The value must match all of the following schemas",
    "anyOf": "The value must match at least one of the following schemas",
    "oneOf": "The value must match exactly one of the following schemas",
    "not": "The value must not match the following schema",
})


@dataclass(frozen=True)
class CrossReference:
    """A resolved link to a section of the validation specification."""

    keyword: str
    section: str | None
    url: str | None
    markup: str  # pre-escaped HTML

    @property
    def known(self) -> bool:
        return self.section is not None


def _link(
    version: SchemaVersion,
    keyword: str,
    section: str,
    description: str | None,
    with_text: bool,
) -> CrossReference:
    url = version.section_url(section)
    anchor = html_element(
        "a",
        f"{INFO_SIGN} {section}",
        {"href": url, "title": description or keyword},
    )
    text = description if with_text and description else ""
    return CrossReference(keyword=keyword, section=section, url=url, markup=f"{text} ({anchor})")


def unknown_version_reference(keyword: str, declared: Any = None) -> CrossReference:
    """Placeholder rendered instead of a link when the draft is not supported."""
    if declared is None:
        message = "(unknown schema version)"
    else:
        message = f'(unknown schema version "{declared}")'
    markup = html_element("span", message, {"class": UNKNOWN_VERSION_CLASS})
    return CrossReference(keyword=keyword, section=None, url=None, markup=markup)


def doclink(
    version: SchemaVersion | None,
    keyword: str,
    with_text: bool = False,
) -> CrossReference:
    """Link a keyword to the section of the draft that defines it.

    Args:
        version: The draft of the root document; None if it is unsupported.
        keyword: A schema keyword, or "items_array" for positional items.
        with_text: Prefix the link with a description of the keyword.

    Returns:
        The cross-reference, or a diagnostic placeholder when version is None.

    Raises:
        UnknownKeywordError: If the draft does not tabulate the keyword.
    """
    if version is None:
        return unknown_version_reference(keyword)
    section = version.section_for(keyword)
    return _link(version, keyword, section, KEYWORD_DESCRIPTIONS.get(keyword), with_text)


def format_link(version: SchemaVersion | None, format_name: str) -> CrossReference:
    """Link a "format" value (e.g. "date-time") to its definition."""
    if version is None:
        return unknown_version_reference(format_name)
    section = version.format_section_for(format_name)
    return _link(version, format_name, section, None, with_text=False)


def resolve_reference(
    declared_version: Any,
    keyword: str,
    with_text: bool = False,
) -> CrossReference:
    """Resolve the draft declared by a root document and link a keyword.

    Unsupported version strings produce a placeholder instead of an error.
    """
    version = resolve_version(declared_version)
    if version is None:
        logger.debug("No section table for %r, rendering placeholder", declared_version)
        return unknown_version_reference(keyword, declared_version)
    return doclink(version, keyword, with_text)

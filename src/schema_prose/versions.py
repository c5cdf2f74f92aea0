"""Section tables for the supported JSON-Schema drafts.

Each draft numbers the sections of its validation specification differently,
so every cross-reference is looked up in the table of the draft declared by
the root document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from schema_prose.errors import SchemaDraft, UnknownKeywordError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaVersion:
    """Section numbering of one draft of the validation specification."""

    draft: SchemaDraft
    uri: str  # value of "$schema" in a root document
    doc_base: str  # section anchors are appended as "-<section>"
    keywords: Mapping[str, str] = field(repr=False)
    formats: Mapping[str, str] = field(repr=False)

    @property
    def name(self) -> str:
        return self.draft.value

    def section_for(self, keyword: str) -> str:
        """Get the section that defines a keyword.

        Raises:
            UnknownKeywordError: If the keyword is not tabulated for this draft.
        """
        try:
            return self.keywords[keyword]
        except KeyError:
            raise UnknownKeywordError(self.draft, keyword) from None

    def format_section_for(self, format_name: str) -> str:
        """Get the section that defines a "format" value."""
        try:
            return self.formats[format_name]
        except KeyError:
            raise UnknownKeywordError(self.draft, format_name, table="formats") from None

    def section_url(self, section: str) -> str:
        return f"{self.doc_base}-{section}"


def _create_draft_04() -> SchemaVersion:
    """Sections of draft-fge-json-schema-validation-00."""
    keywords = {
        "multipleOf": "5.1.1",
        "maximum": "5.1.2",
        "exclusiveMaximum": "5.1.2",
        "minimum": "5.1.3",
        "exclusiveMinimum": "5.1.3",
        "maxLength": "5.2.1",
        "minLength": "5.2.2",
        "pattern": "5.2.3",
        "items": "5.3.1",
        "items_array": "5.3.1",
        "additionalItems": "5.3.1",
        "maxItems": "5.3.2",
        "minItems": "5.3.3",
        "uniqueItems": "5.3.4",
        "maxProperties": "5.4.1",
        "minProperties": "5.4.2",
        "required": "5.4.3",
        "properties": "5.4.4",
        "patternProperties": "5.4.4",
        "additionalProperties": "5.4.4",
        "dependencies": "5.4.5",
        "enum": "5.5.1",
        "type": "5.5.2",
        "allOf": "5.5.3",
        "anyOf": "5.5.4",
        "oneOf": "5.5.5",
        "not": "5.5.6",
        "definitions": "5.5.7",
        "title": "6.1",
        "description": "6.1",
        "default": "6.2",
        "format": "7",
    }
    formats = {
        "date-time": "7.3.1",
        "email": "7.3.2",
        "hostname": "7.3.3",
        "ipv4": "7.3.4",
        "ipv6": "7.3.5",
        "uri": "7.3.6",
    }
    return SchemaVersion(
        draft=SchemaDraft.DRAFT_04,
        uri="http://json-schema.org/draft-04/schema",
        doc_base="https://tools.ietf.org/html/draft-fge-json-schema-validation-00#section",
        keywords=MappingProxyType(keywords),
        formats=MappingProxyType(formats),
    )


def _create_draft_06() -> SchemaVersion:
    """Sections of draft-wright-json-schema-validation-01."""
    keywords = {
        "multipleOf": "6.1",
        "maximum": "6.2",
        "exclusiveMaximum": "6.3",
        "minimum": "6.4",
        "exclusiveMinimum": "6.5",
        "maxLength": "6.6",
        "minLength": "6.7",
        "pattern": "6.8",
        "items": "6.9",
        "items_array": "6.9",
        "additionalItems": "6.10",
        "minItems": "6.11",
        "maxItems": "6.12",
        "uniqueItems": "6.13",
        "contains": "6.14",
        "minProperties": "6.15",
        "maxProperties": "6.16",
        "required": "6.17",
        "properties": "6.18",
        "patternProperties": "6.19",
        "additionalProperties": "6.20",
        "dependencies": "6.21",
        "propertyNames": "6.22",
        "enum": "6.23",
        "const": "6.24",
        "type": "6.25",
        "allOf": "6.26",
        "anyOf": "6.27",
        "oneOf": "6.28",
        "not": "6.29",
        "definitions": "7.1",
        "title": "7.2",
        "description": "7.2",
        "default": "7.3",
        "examples": "7.4",
        "format": "8",
    }
    formats = {
        "date-time": "8.3.1",
        "email": "8.3.2",
        "hostname": "8.3.3",
        "ipv4": "8.3.4",
        "ipv6": "8.3.5",
        "uri": "8.3.6",
        "uri-reference": "8.3.7",
        "json-pointer": "8.3.9",
    }
    return SchemaVersion(
        draft=SchemaDraft.DRAFT_06,
        uri="http://json-schema.org/draft-06/schema",
        doc_base="https://tools.ietf.org/html/draft-wright-json-schema-validation-01#section",
        keywords=MappingProxyType(keywords),
        formats=MappingProxyType(formats),
    )


DRAFT_04 = _create_draft_04()
DRAFT_06 = _create_draft_06()
DEFAULT_VERSION = DRAFT_06

VERSIONS: Mapping[SchemaDraft, SchemaVersion] = MappingProxyType({
    SchemaDraft.DRAFT_04: DRAFT_04,
    SchemaDraft.DRAFT_06: DRAFT_06,
})


def _normalize_identifier(identifier: str) -> str:
    normalized = identifier.strip().rstrip("#").lower()
    if normalized.startswith("https://"):
        normalized = "http://" + normalized[len("https://"):]
    return normalized


_BY_IDENTIFIER: Mapping[str, SchemaVersion] = MappingProxyType({
    key: version
    for version in VERSIONS.values()
    for key in (_normalize_identifier(version.uri), version.name)
})


def resolve_version(identifier: str | None) -> SchemaVersion | None:
    """Get the draft declared by a root document.

    Args:
        identifier: The "$schema" value of the root document, or a short
            draft name such as "draft-04".

    Returns:
        The matching SchemaVersion, DEFAULT_VERSION when no identifier was
        declared, or None when the identifier is not a supported draft.
    """
    if identifier is None or (isinstance(identifier, str) and not identifier.strip()):
        return DEFAULT_VERSION
    version = None
    if isinstance(identifier, str):
        version = _BY_IDENTIFIER.get(_normalize_identifier(identifier))
    if version is None:
        logger.debug("Unsupported schema version %r", identifier)
    return version

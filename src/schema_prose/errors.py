"""Error types and draft definitions."""

from enum import Enum


class SchemaDraft(Enum):
    """JSON-Schema drafts that can be documented."""

    DRAFT_04 = "draft-04"  # draft-fge-json-schema-validation-00
    DRAFT_06 = "draft-06"  # draft-wright-json-schema-validation-01


class SchemaProseError(Exception):
    """Base class for errors raised while rendering schema documentation."""


class UnknownKeywordError(SchemaProseError, KeyError):
    """A keyword or format is missing from the section table of a known draft.

    The tables are exhaustive for the supported drafts, so this points at a
    defect in the caller rather than at the schema being documented.
    """

    def __init__(self, draft: SchemaDraft, name: str, table: str = "keywords"):
        super().__init__(f"'{name}' is not listed in the {table} of {draft.value}")
        self.draft = draft
        self.name = name
        self.table = table

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class RenderContextError(SchemaProseError):
    """A helper was called without the rendering context it needs."""

    def __init__(self, helper: str, message: str | None = None):
        super().__init__(message or f"Helper '{helper}' requires a RenderContext")
        self.helper = helper

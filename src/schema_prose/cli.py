"""Command-line interface for schema-prose."""

from __future__ import annotations

import json
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from schema_prose.helpers import RenderContext
from schema_prose.markup import to_plain_text
from schema_prose.schema.node import SchemaNode
from schema_prose.schema.ranges import numeric_restrictions
from schema_prose.schema.restrictions import (
    array_restrictions,
    property_count_restriction,
    string_restrictions,
)
from schema_prose.schema.signature import describe_signature, type_signature
from schema_prose.versions import SchemaVersion
from schema_prose.xref import CrossReference, doclink, format_link

console = Console()
error_console = Console(stderr=True)

ROOT_NAME = "(root)"


def _load_schema(path: Path) -> dict[str, Any]:
    try:
        # Decimal keeps numeric literals exactly as written
        data = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object.")
    return data


def _collect_nodes(root: Mapping[str, Any]) -> list[tuple[str, Mapping[str, Any]]]:
    nodes: list[tuple[str, Mapping[str, Any]]] = [(ROOT_NAME, root)]
    definitions = root.get("definitions")
    if isinstance(definitions, Mapping):
        for name in sorted(definitions):
            if isinstance(definitions[name], Mapping):
                nodes.append((name, definitions[name]))
    return nodes


def _reference(link: CrossReference) -> dict[str, str] | None:
    if not link.known:
        return None
    return {"section": link.section, "url": link.url}


def _format_reference(version: SchemaVersion | None, format_name: str | None) -> dict[str, str] | None:
    # Formats outside the draft's table are documented without a link
    if version is None or format_name not in version.formats:
        return None
    return _reference(format_link(version, format_name))


def describe_node(name: str, node: Mapping[str, Any], context: RenderContext) -> dict[str, Any]:
    """Collect everything the documentation page shows for one node."""
    restrictions = numeric_restrictions(node, context.label)
    restrictions += [to_plain_text(fragment) for fragment in string_restrictions(node, context.label)]
    restrictions += array_restrictions(node)
    object_restriction = property_count_restriction(node)
    if object_restriction:
        restrictions.append(object_restriction)

    version = context.version
    format_name = node.get("format")
    if not isinstance(format_name, str):
        format_name = None
    return {
        "name": name,
        "type": describe_signature(type_signature(node)),
        "restrictions": restrictions,
        "required": sorted(str(prop) for prop in SchemaNode.wrap(node).required),
        "reference": _reference(doclink(version, "type")),
        "format": format_name,
        "format_reference": _format_reference(version, format_name),
    }


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--schema-version",
    "-s",
    "schema_version",
    default=None,
    help="Draft to document against (overrides the document's $schema).",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@click.option(
    "--label",
    default="x",
    show_default=True,
    help="Variable name used in range and length formulas.",
)
def main(path: Path, schema_version: str | None, output: str, label: str) -> None:
    """Describe the constraints of a JSON schema in plain language.

    PATH is a JSON schema file; the root schema and each entry of
    "definitions" are described.
    """
    try:
        root = _load_schema(path)
    except ValueError as exc:
        error_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    declared = schema_version or root.get("$schema")
    if declared is not None and not isinstance(declared, str):
        # e.g. a numeric "$schema", parsed as Decimal
        declared = str(declared)
    context = RenderContext(declared_version=declared, label=label)
    if context.version is None:
        error_console.print(
            f"[yellow]Warning:[/yellow] Unsupported schema version {escape(repr(declared))}; "
            "specification links are omitted."
        )

    descriptions = [describe_node(name, node, context) for name, node in _collect_nodes(root)]

    if output == "json":
        _output_json(descriptions, context)
    else:
        _output_text(descriptions, context)


def _output_text(descriptions: list[dict[str, Any]], context: RenderContext) -> None:
    """Output descriptions as a table."""
    version = context.version
    title = f"Schema ({version.name})" if version else "Schema"
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Definition", style="cyan")
    table.add_column("Type")
    table.add_column("Restrictions")
    table.add_column("Required")
    table.add_column("Spec", style="dim")

    for item in descriptions:
        reference = item["reference"]
        table.add_row(
            Text(item["name"]),
            Text(item["type"]),
            Text("\n".join(item["restrictions"])),
            Text(", ".join(item["required"])),
            Text(reference["section"] if reference else "-"),
        )

    console.print(table)


def _output_json(descriptions: list[dict[str, Any]], context: RenderContext) -> None:
    """Output descriptions as JSON."""
    version = context.version
    output = {
        "version": version.name if version else None,
        "declared_version": context.declared_version,
        "definitions": descriptions,
    }
    console.print_json(json.dumps(output, ensure_ascii=False))


if __name__ == "__main__":
    main()

"""pytest configuration and fixtures for schema_prose tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from schema_prose import DRAFT_04, DRAFT_06, RenderContext
from tests.fixture_loader import fixture_path, load_fixture_json


@pytest.fixture
def draft04_schema() -> dict[str, Any]:
    """A draft-04 document using boolean exclusivity flags."""
    return load_fixture_json("draft-04.json")


@pytest.fixture
def draft06_schema() -> dict[str, Any]:
    """A draft-06 document using numeric exclusive bounds."""
    return load_fixture_json("draft-06.json")


@pytest.fixture
def draft04_path() -> Path:
    return fixture_path("draft-04.json")


@pytest.fixture
def draft06_path() -> Path:
    return fixture_path("draft-06.json")


@pytest.fixture
def unknown_version_path() -> Path:
    return fixture_path("unknown-version.json")


@pytest.fixture
def draft04_context() -> RenderContext:
    return RenderContext(declared_version=DRAFT_04.uri + "#")


@pytest.fixture
def draft06_context() -> RenderContext:
    return RenderContext(declared_version=DRAFT_06.uri + "#")


def nested_array(depth: int, terminal: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build an array schema nested `depth` levels deep without recursion."""
    node: dict[str, Any] = terminal if terminal is not None else {"type": "string"}
    for _ in range(depth):
        node = {"type": "array", "items": node}
    return node


@pytest.fixture
def make_nested_array():
    return nested_array

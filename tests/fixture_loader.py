"""Shared fixture loading helpers for tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def fixture_path(*parts: str) -> Path:
    """Get the path of a fixture file."""
    return FIXTURES_DIR.joinpath(*parts)


def load_fixture_text(*parts: str) -> str:
    """Load fixture contents as text."""
    return fixture_path(*parts).read_text(encoding="utf-8")


def load_fixture_json(*parts: str) -> Any:
    """Load a JSON fixture."""
    return json.loads(load_fixture_text(*parts))

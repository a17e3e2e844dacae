"""Shared fixtures for the sidebar test suite."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from docs_sidebar.content import InMemoryContentIndex

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def api_index() -> InMemoryContentIndex:
    """Return the content index from the worked ``Guide`` example."""
    return InMemoryContentIndex.from_mapping(
        {
            "/api": [
                {"slug": "/api/foo"},
                {"slug": "/api/bar", "orderHint": 1},
            ],
            "/empty": [],
        },
        extra_slugs=["/intro"],
    )


@pytest.fixture
def guide_sidebar() -> list[dict[str, typ.Any]]:
    """Return the worked ``Guide`` sidebar literal."""
    return [
        {
            "label": "Guide",
            "children": [
                {"label": "Intro", "destination": "/intro"},
                {"directory": "/api"},
            ],
        }
    ]


@pytest.fixture
def write_docs(tmp_path: Path) -> typ.Callable[[dict[str, str]], Path]:
    """Return a helper that writes Markdown files below ``tmp_path/docs``."""

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "docs"
        root.mkdir(exist_ok=True)
        for relative, body in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(body).lstrip(), encoding="utf-8")
        return root

    return _write

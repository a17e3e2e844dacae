"""Unit tests for loading ``sidebar.yaml`` site configuration."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from docs_sidebar.config import SiteConfigError, load_site_config
from docs_sidebar.navigation import BuildOptions, DanglingLinkPolicy

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "sidebar.yaml"
    path.write_text(dedent(body).lstrip(), encoding="utf-8")
    return path


def test_defaults_apply_when_sections_are_absent(tmp_path: Path) -> None:
    """Only ``sidebar`` is required; other sections fall back to defaults."""
    path = _write_config(
        tmp_path,
        """
        sidebar:
          - label: Intro
            slug: intro
        """,
    )
    config = load_site_config(path)

    assert config.sidebar == [{"label": "Intro", "slug": "intro"}]
    assert config.title is None
    assert config.content.directory == tmp_path.resolve() / "src/content/docs"
    assert config.content.extensions == (".md", ".mdx")
    assert config.navigation.build_options() == BuildOptions(max_workers=1)
    assert config.source_path == path


def test_sections_override_defaults(tmp_path: Path) -> None:
    """Explicit content and navigation values are honoured and normalised."""
    absolute_docs = tmp_path / "elsewhere"
    path = _write_config(
        tmp_path,
        f"""
        title: "  Handbook  "
        content:
          directory: {absolute_docs}
          extensions: [md, .Markdown]
        navigation:
          max_depth: 2
          dangling_links: WARN
          workers: 4
        sidebar:
          - directory: guides
        """,
    )
    config = load_site_config(path)

    assert config.title == "Handbook"
    assert config.content.directory == absolute_docs
    assert config.content.extensions == (".md", ".markdown")
    assert config.navigation.max_depth == 2
    assert config.navigation.dangling_links is DanglingLinkPolicy.WARN
    assert config.navigation.build_options().max_workers == 4


def test_schema_fixture_loads() -> None:
    """The newer schema fixture doubles as a complete site config."""
    config = load_site_config(FIXTURES_DIR / "sidebar_v2.yaml")
    assert config.title == "ContextVM Documentation"
    assert config.navigation.max_depth == 2
    assert len(config.sidebar) == 7


@pytest.mark.parametrize(
    ("body", "fragment"),
    [
        ("title: Empty\n", "No sidebar entries defined"),
        ("sidebar:\n  label: Intro\n", "'sidebar' must be a list"),
        ("sidebar: [intro]\nnavigation: [1]\n", "'navigation' configuration must be a mapping"),
        ("sidebar: [intro]\nnavigation:\n  max_depth: 0\n", "'navigation.max_depth'"),
        ("sidebar: [intro]\nnavigation:\n  workers: true\n", "'navigation.workers'"),
        ("sidebar: [intro]\nnavigation:\n  dangling_links: loud\n", "dangling_links"),
        ("sidebar: [intro]\ncontent:\n  extensions: []\n", "content.extensions"),
        ("sidebar: [intro]\ncontent:\n  extensions: ['', '  ']\n", "non-blank suffix"),
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, body: str, fragment: str) -> None:
    """Invalid sections raise SiteConfigError with a pointed message."""
    path = _write_config(tmp_path, body)
    with pytest.raises(SiteConfigError) as excinfo:
        load_site_config(path)
    assert fragment in str(excinfo.value), f"unexpected message: {excinfo.value}"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing configuration file is a FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


def test_config_error_is_value_error() -> None:
    """SiteConfigError should remain catchable as ValueError."""
    assert issubclass(SiteConfigError, ValueError)
    assert str(SiteConfigError("boom")) == "boom"

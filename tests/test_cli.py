"""Tests for the ``sidebar`` CLI commands and JSON export.

The commands are invoked as plain functions against a temporary site made
of a ``sidebar.yaml`` file and a Markdown content directory, mirroring how a
docs build would call them. JSON output is decoded with ``msgspec`` to check
the payload handed to the renderer.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import msgspec.json as msgspec_json
import pytest

from docs_sidebar import cli
from docs_sidebar.export import build_to_data, encode_tree, tree_to_data
from docs_sidebar.navigation import (
    Badge,
    DanglingLinkError,
    NavigationBuild,
    NavigationGroup,
    NavigationLink,
    NavigationTree,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def site(
    tmp_path: Path, write_docs: typ.Callable[[dict[str, str]], Path]
) -> typ.Callable[[str], Path]:
    """Return a helper writing ``sidebar.yaml`` next to a small docs tree."""
    write_docs(
        {
            "intro.md": "---\ntitle: Introduction\n---\n",
            "api/foo.md": "# Foo\n",
            "api/bar.md": "---\nsidebar:\n  order: 1\n---\n",
        }
    )

    def _write(sidebar: str) -> Path:
        path = tmp_path / "sidebar.yaml"
        path.write_text(
            "content:\n  directory: docs\n" + dedent(sidebar).lstrip(),
            encoding="utf-8",
        )
        return path

    return _write


def test_build_prints_resolved_tree(
    site: typ.Callable[[str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """``build`` without ``--output`` prints the JSON document."""
    config = site(
        """
        sidebar:
          - label: Guide
            collapsed: true
            children:
              - label: Intro
                destination: /intro
              - directory: /api
        """
    )
    cli.build(config=config)

    payload = msgspec_json.decode(capsys.readouterr().out)
    (guide,) = payload["sidebar"]
    assert guide["type"] == "group"
    assert guide["collapsed"] is True
    assert [item["destination"] for item in guide["items"]] == [
        "/intro",
        "api/bar",
        "api/foo",
    ], f"unexpected item order: {guide['items']!r}"
    assert payload["warnings"] == []


def test_build_writes_output_file(
    site: typ.Callable[[str], Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``--output`` writes the JSON file and reports the path."""
    config = site("sidebar:\n  - label: Intro\n    slug: intro\n")
    output = tmp_path / "dist" / "sidebar.json"
    cli.build(config=config, output=output)

    assert output.exists(), "expected the sidebar JSON to be written"
    payload = msgspec_json.decode(output.read_bytes())
    assert payload["sidebar"] == [
        {"type": "link", "label": "Intro", "destination": "intro"}
    ]
    assert "wrote" in capsys.readouterr().out


def test_build_reports_warnings_under_warn_policy(
    site: typ.Callable[[str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """Demoted dangling links are printed and included in the payload."""
    config = site(
        """
        navigation:
          dangling_links: warn
        sidebar:
          - label: Gone
            slug: gone
        """
    )
    cli.build(config=config)

    out = capsys.readouterr().out
    assert out.startswith("warning: sidebar[0]: link 'Gone' points at 'gone'")
    payload = msgspec_json.decode(out.split("\n", 1)[1])
    assert payload["warnings"][0]["location"] == "sidebar[0]"


def test_check_reports_link_count(
    site: typ.Callable[[str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """``check`` prints a summary for a healthy sidebar."""
    config = site("sidebar:\n  - slug: intro\n    label: Intro\n  - directory: api\n")
    cli.check(config=config)
    assert capsys.readouterr().out.strip() == "ok: 3 links"


def test_check_lists_every_defect_and_exits(
    site: typ.Callable[[str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """Every validation violation is printed before exiting with status 1."""
    config = site(
        """
        sidebar:
          - label: ""
            slug: intro
          - label: Again
            slug: /intro
        """
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config)

    assert excinfo.value.code == 1
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2, f"expected two defects, got {lines!r}"
    assert all(line.startswith("error: ") for line in lines)


def test_check_reports_missing_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing configuration file is reported rather than raised."""
    with pytest.raises(SystemExit):
        cli.check(config=tmp_path / "absent.yaml")
    assert "not found" in capsys.readouterr().out


def test_export_omits_unset_optional_fields() -> None:
    """Badges and external flags only appear when set."""
    tree = NavigationTree(
        items=(
            NavigationGroup(
                label="Ref",
                badge=Badge("New", "tip"),
                children=(
                    NavigationLink("Home", "https://example.invalid", external=True),
                ),
            ),
        )
    )
    assert tree_to_data(tree) == [
        {
            "type": "group",
            "label": "Ref",
            "collapsed": False,
            "items": [
                {
                    "type": "link",
                    "label": "Home",
                    "destination": "https://example.invalid",
                    "external": True,
                }
            ],
            "badge": {"text": "New", "variant": "tip"},
        }
    ]


def test_export_includes_warnings() -> None:
    """Warnings are exported with their rendered location."""
    warning = DanglingLinkError("Gone", "gone", (2, 1))
    data = build_to_data(NavigationBuild(tree=NavigationTree(), warnings=(warning,)))
    assert data["warnings"][0]["location"] == "sidebar[2].items[1]"
    assert data["sidebar"] == []


def test_check_reports_malformed_config_yaml(
    site: typ.Callable[[str], Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """Unparsable ``sidebar.yaml`` is reported as a defect, not a traceback."""
    config = site("sidebar: [\n")
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config)

    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("error: ")


def test_check_reports_malformed_front_matter(
    site: typ.Callable[[str], Path],
    write_docs: typ.Callable[[dict[str, str]], Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Broken front matter in a document fails the check with its path."""
    write_docs({"broken.md": "---\ntitle: [unclosed\n---\n"})
    config = site("sidebar:\n  - slug: intro\n    label: Intro\n")
    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config)

    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("error: Invalid front matter"), f"unexpected output: {out!r}"
    assert "broken.md" in out


def test_encode_tree_emits_entries_only() -> None:
    """``encode_tree`` serializes the sidebar entries without warnings."""
    tree = NavigationTree(items=(NavigationLink("Intro", "intro"),))
    assert msgspec_json.decode(encode_tree(tree)) == [
        {"type": "link", "label": "Intro", "destination": "intro"}
    ]

"""Serialize resolved sidebars for an external renderer.

The renderer receives plain data: a list of entries where links carry
``type: "link"`` and groups carry ``type: "group"`` with nested ``items``.
Optional fields (``badge``, ``external``) are omitted when unset so the
payload stays small and stable.

Example
-------
>>> from docs_sidebar.navigation import NavigationLink, NavigationTree
>>> tree_to_data(NavigationTree(items=(NavigationLink("Intro", "intro"),)))
[{'type': 'link', 'label': 'Intro', 'destination': 'intro'}]
"""

from __future__ import annotations

import json
import typing as typ

from .navigation.models import (
    Badge,
    NavigationBuild,
    NavigationGroup,
    NavigationLink,
    NavigationTree,
    format_location,
)


def _badge_to_data(badge: Badge) -> dict[str, str]:
    return {"text": badge.text, "variant": badge.variant}


def _node_to_data(node: NavigationLink | NavigationGroup) -> dict[str, typ.Any]:
    match node:
        case NavigationLink():
            data: dict[str, typ.Any] = {
                "type": "link",
                "label": node.label,
                "destination": node.destination,
            }
            if node.external:
                data["external"] = True
        case NavigationGroup():
            data = {
                "type": "group",
                "label": node.label,
                "collapsed": node.collapsed,
                "items": [_node_to_data(child) for child in node.children],  # type: ignore[arg-type]
            }
    if node.badge is not None:
        data["badge"] = _badge_to_data(node.badge)
    return data


def tree_to_data(tree: NavigationTree) -> list[dict[str, typ.Any]]:
    """Return the tree as JSON-ready nested lists and dictionaries."""
    return [_node_to_data(node) for node in tree.items]


def build_to_data(build: NavigationBuild) -> dict[str, typ.Any]:
    """Return the tree together with any dangling-link warnings."""
    return {
        "sidebar": tree_to_data(build.tree),
        "warnings": [
            {
                "location": format_location(warning.location),
                "label": warning.label,
                "destination": warning.destination,
                "message": str(warning),
            }
            for warning in build.warnings
        ],
    }


def encode_tree(tree: NavigationTree, *, indent: int | None = 2) -> str:
    """Encode the sidebar entries of ``tree`` as a JSON array."""
    return json.dumps(tree_to_data(tree), indent=indent, ensure_ascii=False)


def encode_build(build: NavigationBuild, *, indent: int | None = 2) -> str:
    """Encode ``build`` as a JSON document."""
    return json.dumps(build_to_data(build), indent=indent, ensure_ascii=False)


__all__ = ["build_to_data", "encode_build", "encode_tree", "tree_to_data"]

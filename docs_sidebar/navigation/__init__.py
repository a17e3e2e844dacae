"""Parse, expand, validate, and resolve documentation sidebars.

This subpackage turns a sidebar literal (nested mappings and lists, usually
read from ``sidebar.yaml``) into an immutable :class:`NavigationTree`. The
stages run in order and each is a pure function of the previous output:

- :func:`parse_sidebar` builds typed nodes and rejects unknown shapes.
- :func:`expand_tree` replaces autogenerate directives with links drawn from
  a :class:`~docs_sidebar.content.ContentIndex`.
- :func:`validate_tree` enforces non-empty labels, unique destinations, and
  the nesting limit, reporting every violation at once.
- :func:`resolve_links` checks destinations against the content index.

:func:`build_navigation` chains them.

Examples
--------
>>> from docs_sidebar.content import InMemoryContentIndex
>>> from docs_sidebar.navigation import build_navigation
>>> index = InMemoryContentIndex.from_mapping({}, extra_slugs=["intro"])
>>> build = build_navigation([{"label": "Intro", "slug": "intro"}], index)
>>> build.tree.destinations()
['intro']
"""

from .expander import expand_directive, expand_tree
from .loader import parse_sidebar
from .models import (
    AutogenerateDirective,
    Badge,
    BuildStage,
    DanglingLinkError,
    DanglingLinkPolicy,
    DocumentDescriptor,
    MissingDirectoryError,
    NavigationBuild,
    NavigationError,
    NavigationGroup,
    NavigationLink,
    NavigationNode,
    NavigationTree,
    SchemaError,
    UnresolvedLinksError,
    ValidationError,
    Violation,
    format_location,
)
from .pipeline import BuildOptions, build_navigation
from .resolver import find_dangling_links, resolve_links
from .validator import validate_tree

__all__ = [
    "AutogenerateDirective",
    "Badge",
    "BuildOptions",
    "BuildStage",
    "DanglingLinkError",
    "DanglingLinkPolicy",
    "DocumentDescriptor",
    "MissingDirectoryError",
    "NavigationBuild",
    "NavigationError",
    "NavigationGroup",
    "NavigationLink",
    "NavigationNode",
    "NavigationTree",
    "SchemaError",
    "UnresolvedLinksError",
    "ValidationError",
    "Violation",
    "build_navigation",
    "expand_directive",
    "expand_tree",
    "find_dangling_links",
    "format_location",
    "parse_sidebar",
    "resolve_links",
    "validate_tree",
]

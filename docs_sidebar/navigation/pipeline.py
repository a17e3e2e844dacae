"""Compose the sidebar stages into a single one-shot build.

A build walks ``UNPARSED -> PARSED -> EXPANDED -> VALIDATED -> RESOLVED``.
Any stage failure aborts the build with the stage's error; no partial tree
is ever returned.

Example
-------
>>> from docs_sidebar.content import InMemoryContentIndex
>>> index = InMemoryContentIndex.from_mapping(
...     {"/api": [{"slug": "/api/foo"}, {"slug": "/api/bar", "order": 1}]},
...     extra_slugs=["/intro"],
... )
>>> build = build_navigation(
...     [
...         {
...             "label": "Guide",
...             "children": [
...                 {"label": "Intro", "destination": "/intro"},
...                 {"directory": "/api"},
...             ],
...         }
...     ],
...     index,
... )
>>> [link.label for link in build.tree.items[0].children]
['Intro', 'bar', 'foo']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from docs_sidebar._constants import DEFAULT_MAX_DEPTH

from .expander import expand_tree
from .loader import parse_sidebar
from .models import BuildStage, DanglingLinkPolicy, NavigationBuild, NavigationError
from .resolver import resolve_links
from .validator import validate_tree

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from docs_sidebar.content import ContentIndex

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BuildOptions:
    """Knobs applied to one sidebar build."""

    max_depth: int = DEFAULT_MAX_DEPTH
    dangling_links: DanglingLinkPolicy = DanglingLinkPolicy.ERROR
    max_workers: int | None = None


def build_navigation(
    raw: object,
    index: ContentIndex,
    options: BuildOptions | None = None,
) -> NavigationBuild:
    """Run the full pipeline over a sidebar literal.

    Parameters
    ----------
    raw : object
        Sidebar literal (list of entries).
    index : ContentIndex
        Read-only content index for expansion and resolution.
    options : BuildOptions, optional
        Depth limit, dangling-link policy, and expansion workers.

    Returns
    -------
    NavigationBuild
        Resolved tree plus dangling-link warnings when the policy is ``WARN``.

    Raises
    ------
    NavigationError
        The first failing stage's error: ``SchemaError``,
        ``MissingDirectoryError``, ``ValidationError``, or
        ``UnresolvedLinksError``.
    """
    options = options or BuildOptions()
    stage = BuildStage.UNPARSED
    try:
        nodes = parse_sidebar(raw)
        stage = _advance(stage, BuildStage.PARSED)
        expanded = expand_tree(nodes, index, max_workers=options.max_workers)
        stage = _advance(stage, BuildStage.EXPANDED)
        tree = validate_tree(expanded, max_depth=options.max_depth)
        stage = _advance(stage, BuildStage.VALIDATED)
        build = resolve_links(tree, index, policy=options.dangling_links)
        _advance(stage, BuildStage.RESOLVED)
    except NavigationError as exc:
        logger.debug(f"Sidebar build failed after stage {stage.value}: {exc}")
        raise
    return build


def _advance(current: BuildStage, target: BuildStage) -> BuildStage:
    logger.debug(f"Sidebar stage {current.value} -> {target.value}")
    return target


__all__ = ["BuildOptions", "build_navigation"]

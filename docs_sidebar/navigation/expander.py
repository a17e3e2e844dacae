"""Expand autogenerate directives into concrete sidebar links.

Each :class:`~docs_sidebar.navigation.models.AutogenerateDirective` is
replaced by one :class:`~docs_sidebar.navigation.models.NavigationLink` per
document the content index lists under the directive's directory. Ordering
depends only on the descriptors, never on enumeration order:

1. documents with an ``order`` hint, ascending by hint;
2. documents without a hint;

with ties inside either run broken lexically by slug.

Example
-------
>>> from docs_sidebar.content import InMemoryContentIndex
>>> from docs_sidebar.navigation.models import AutogenerateDirective
>>> index = InMemoryContentIndex.from_mapping(
...     {"/api": [{"slug": "/api/foo"}, {"slug": "/api/bar", "order": 1}]}
... )
>>> [link.label for link in expand_directive(AutogenerateDirective("/api"), index)]
['bar', 'foo']
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from concurrent.futures import ThreadPoolExecutor

from .helpers import label_from_slug
from .models import (
    AutogenerateDirective,
    DocumentDescriptor,
    Location,
    MissingDirectoryError,
    NavigationGroup,
    NavigationLink,
    NavigationNode,
)

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from docs_sidebar.content import ContentIndex

logger = logging.getLogger(__name__)


def _sort_key(document: DocumentDescriptor) -> tuple[int, int, str]:
    if document.order is None:
        return (1, 0, document.slug)
    return (0, document.order, document.slug)


def expand_directive(
    directive: AutogenerateDirective,
    index: ContentIndex,
    *,
    location: Location | None = None,
) -> tuple[NavigationLink, ...]:
    """Return the links generated for ``directive``.

    Parameters
    ----------
    directive : AutogenerateDirective
        Directive naming the content directory to expand.
    index : ContentIndex
        Read-only content index queried for the directory's documents.
    location : Location, optional
        Position of the directive in the sidebar, used in error messages.

    Returns
    -------
    tuple[NavigationLink, ...]
        One link per document, ordered by hint then slug. Empty when the
        directory exists but holds no documents.

    Raises
    ------
    MissingDirectoryError
        If the directory is unknown to the content index.
    """
    if not index.has_directory(directive.directory):
        raise MissingDirectoryError(directive.directory, location)
    documents = sorted(index.list_documents(directive.directory), key=_sort_key)
    if not documents:
        logger.debug(f"Autogenerate directory '{directive.directory}' is empty")
    return tuple(
        NavigationLink(
            label=document.label or label_from_slug(document.slug),
            destination=document.slug,
        )
        for document in documents
    )


def expand_tree(
    nodes: cabc.Sequence[NavigationNode],
    index: ContentIndex,
    *,
    max_workers: int | None = None,
) -> tuple[NavigationLink | NavigationGroup, ...]:
    """Replace every directive in ``nodes`` with its generated links.

    Generated links are spliced into the directive's parent in place of the
    directive. When ``max_workers`` is greater than one, directories are
    expanded concurrently; the result is identical to a serial expansion.
    The first missing directory in sidebar order is raised.
    """
    directives = list(_collect_directives(nodes, ()))
    if max_workers is not None and max_workers > 1 and len(directives) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(expand_directive, directive, index, location=location)
                for location, directive in directives
            ]
            expansions = [future.result() for future in futures]
    else:
        expansions = [
            expand_directive(directive, index, location=location)
            for location, directive in directives
        ]
    logger.debug(f"Expanded {len(directives)} autogenerate directive(s)")

    by_location = {
        location: links
        for (location, _), links in zip(directives, expansions, strict=True)
    }
    return _splice(nodes, (), by_location)


def _collect_directives(
    nodes: cabc.Sequence[NavigationNode], path: Location
) -> cabc.Iterator[tuple[Location, AutogenerateDirective]]:
    for position, node in enumerate(nodes):
        location = (*path, position)
        match node:
            case AutogenerateDirective():
                yield location, node
            case NavigationGroup(children=children):
                yield from _collect_directives(children, location)
            case _:
                continue


def _splice(
    nodes: cabc.Sequence[NavigationNode],
    path: Location,
    expansions: cabc.Mapping[Location, tuple[NavigationLink, ...]],
) -> tuple[NavigationLink | NavigationGroup, ...]:
    result: list[NavigationLink | NavigationGroup] = []
    for position, node in enumerate(nodes):
        location = (*path, position)
        match node:
            case AutogenerateDirective():
                result.extend(expansions[location])
            case NavigationGroup(children=children):
                result.append(
                    NavigationGroup(
                        label=node.label,
                        children=_splice(children, location, expansions),
                        collapsed=node.collapsed,
                        badge=node.badge,
                    )
                )
            case _:
                result.append(node)
    return tuple(result)


__all__ = ["expand_directive", "expand_tree"]

"""Check sidebar destinations against the content index."""

from __future__ import annotations

import logging
import typing as typ

from .models import (
    DanglingLinkError,
    DanglingLinkPolicy,
    NavigationBuild,
    NavigationTree,
    UnresolvedLinksError,
)

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from docs_sidebar.content import ContentIndex

logger = logging.getLogger(__name__)


def find_dangling_links(
    tree: NavigationTree, index: ContentIndex
) -> list[DanglingLinkError]:
    """Return one error per link whose destination is not a known document.

    External links (absolute URLs) are never checked.
    """
    return [
        DanglingLinkError(link.label, link.destination, location)
        for location, link in tree.iter_links()
        if not link.external and not index.exists(link.destination)
    ]


def resolve_links(
    tree: NavigationTree,
    index: ContentIndex,
    *,
    policy: DanglingLinkPolicy = DanglingLinkPolicy.ERROR,
) -> NavigationBuild:
    """Resolve every link in ``tree`` and apply the dangling-link policy.

    Parameters
    ----------
    tree : NavigationTree
        Validated sidebar.
    index : ContentIndex
        Content index holding the known document slugs.
    policy : DanglingLinkPolicy, optional
        ``ERROR`` (default) raises, ``WARN`` returns dangling links as
        warnings next to the tree, ``IGNORE`` drops them.

    Returns
    -------
    NavigationBuild
        The unchanged tree plus any warnings.

    Raises
    ------
    UnresolvedLinksError
        Under the ``ERROR`` policy when at least one link dangles; carries
        every dangling link.
    """
    dangling = find_dangling_links(tree, index)
    if not dangling:
        return NavigationBuild(tree=tree)

    match policy:
        case DanglingLinkPolicy.ERROR:
            raise UnresolvedLinksError(dangling)
        case DanglingLinkPolicy.WARN:
            for error in dangling:
                logger.warning(str(error))
            return NavigationBuild(tree=tree, warnings=tuple(dangling))
        case _:
            logger.debug(f"Ignoring {len(dangling)} dangling sidebar link(s)")
            return NavigationBuild(tree=tree)


__all__ = ["find_dangling_links", "resolve_links"]

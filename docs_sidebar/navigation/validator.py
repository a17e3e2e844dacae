"""Enforce the structural invariants of an expanded sidebar."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging

from docs_sidebar._constants import DEFAULT_MAX_DEPTH

from .models import (
    AutogenerateDirective,
    Location,
    NavigationGroup,
    NavigationLink,
    NavigationNode,
    NavigationTree,
    ValidationError,
    Violation,
    format_location,
    normalize_destination,
)

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class _Walk:
    """Running state of one depth-first validation pass."""

    max_depth: int
    seen: dict[str, Location] = dc.field(default_factory=dict)
    violations: list[Violation] = dc.field(default_factory=list)

    def report(self, kind: str, message: str, *locations: Location) -> None:
        self.violations.append(Violation(kind=kind, message=message, locations=locations))


def validate_tree(
    nodes: cabc.Sequence[NavigationNode],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> NavigationTree:
    """Check an expanded sidebar and freeze it into a :class:`NavigationTree`.

    Every violation is collected in a single pass: empty or whitespace-only
    labels, groups nested deeper than ``max_depth`` (top-level groups sit at
    depth 1), destinations used more than once, and directives that were
    never expanded.

    Raises
    ------
    ValueError
        If ``max_depth`` is smaller than 1.
    ValidationError
        If any violation was found; ``violations`` lists them in sidebar order.
    """
    if max_depth < 1:
        msg = f"max_depth must be at least 1, got {max_depth}"
        raise ValueError(msg)

    walk = _Walk(max_depth=max_depth)
    _visit(nodes, (), 1, walk, depth_reported=False)
    if walk.violations:
        logger.debug(f"Sidebar validation found {len(walk.violations)} violation(s)")
        raise ValidationError(walk.violations)

    items: list[NavigationLink | NavigationGroup] = []
    for node in nodes:
        if isinstance(node, NavigationLink | NavigationGroup):
            items.append(node)
    return NavigationTree(items=tuple(items))


def _visit(
    nodes: cabc.Sequence[NavigationNode],
    path: Location,
    depth: int,
    walk: _Walk,
    *,
    depth_reported: bool,
) -> None:
    for position, node in enumerate(nodes):
        location = (*path, position)
        where = format_location(location)
        match node:
            case AutogenerateDirective(directory=directory):
                walk.report(
                    "unexpanded-directive",
                    f"{where}: autogenerate directive for '{directory}' was not expanded",
                    location,
                )
            case NavigationLink():
                _check_label(node.label, location, walk)
                _check_destination(node, location, walk)
            case NavigationGroup(children=children):
                _check_label(node.label, location, walk)
                too_deep = depth > walk.max_depth
                if too_deep and not depth_reported:
                    walk.report(
                        "max-depth",
                        f"{where}: group '{node.label}' is nested {depth} levels "
                        f"deep (maximum {walk.max_depth})",
                        location,
                    )
                _visit(
                    children,
                    location,
                    depth + 1,
                    walk,
                    depth_reported=depth_reported or too_deep,
                )


def _check_label(label: str, location: Location, walk: _Walk) -> None:
    if not label.strip():
        walk.report(
            "empty-label",
            f"{format_location(location)}: label must not be empty",
            location,
        )


def _check_destination(link: NavigationLink, location: Location, walk: _Walk) -> None:
    key = normalize_destination(link.destination)
    first = walk.seen.get(key)
    if first is None:
        walk.seen[key] = location
        return
    walk.report(
        "duplicate-destination",
        f"destination '{link.destination}' is used by both "
        f"{format_location(first)} and {format_location(location)}",
        first,
        location,
    )


__all__ = ["validate_tree"]

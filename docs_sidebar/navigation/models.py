"""Typed navigation nodes, build results, and the sidebar error taxonomy."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import typing as typ

Location = tuple[int, ...]

BADGE_VARIANTS = frozenset({"default", "note", "tip", "success", "caution", "danger"})


class BuildStage(enum.Enum):
    """Stages a sidebar passes through during a single build."""

    UNPARSED = "unparsed"
    PARSED = "parsed"
    EXPANDED = "expanded"
    VALIDATED = "validated"
    RESOLVED = "resolved"
    FAILED = "failed"


class DanglingLinkPolicy(enum.Enum):
    """How the resolver treats links whose destination has no document."""

    ERROR = "error"
    WARN = "warn"
    IGNORE = "ignore"


def format_location(location: Location) -> str:
    """Render an index chain as ``sidebar[0].items[2]``."""
    if not location:
        return "sidebar"
    head, *rest = location
    return f"sidebar[{head}]" + "".join(f".items[{index}]" for index in rest)


def normalize_destination(destination: str) -> str:
    """Return the comparison key for a destination.

    Comparison is case-sensitive; only whitespace and surrounding slashes are
    ignored, so ``/guide/intro/`` and ``guide/intro`` collide.
    """
    return destination.strip().strip("/")


@dc.dataclass(frozen=True, slots=True)
class Badge:
    """Decoration tag rendered next to a sidebar entry."""

    text: str
    variant: str = "default"


@dc.dataclass(frozen=True, slots=True)
class NavigationLink:
    """Leaf entry pointing at a document slug or an external URL."""

    label: str
    destination: str
    badge: Badge | None = None
    external: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavigationGroup:
    """Labelled group owning an ordered run of child nodes."""

    label: str
    children: tuple[NavigationNode, ...] = ()
    collapsed: bool = False
    badge: Badge | None = None


@dc.dataclass(frozen=True, slots=True)
class AutogenerateDirective:
    """Placeholder expanded into links from a content directory."""

    directory: str
    collapsed: bool | None = None


NavigationNode: typ.TypeAlias = NavigationLink | NavigationGroup | AutogenerateDirective


@dc.dataclass(frozen=True, slots=True)
class DocumentDescriptor:
    """Entry of the content index describing a single document.

    Attributes
    ----------
    slug : str
        Canonical path identifier of the document.
    order : int or None
        Explicit ordering hint; lower values sort first.
    label : str or None
        Preferred sidebar label, typically taken from front matter.
    """

    slug: str
    order: int | None = None
    label: str | None = None


@dc.dataclass(frozen=True, slots=True)
class NavigationTree:
    """Validated, expansion-complete sidebar handed to a renderer."""

    items: tuple[NavigationLink | NavigationGroup, ...] = ()

    def iter_links(self) -> cabc.Iterator[tuple[Location, NavigationLink]]:
        """Yield every link with its location, depth first, in sidebar order."""
        stack: list[tuple[Location, NavigationNode]] = [
            ((index,), node) for index, node in reversed(list(enumerate(self.items)))
        ]
        while stack:
            location, node = stack.pop()
            match node:
                case NavigationLink():
                    yield location, node
                case NavigationGroup(children=children):
                    stack.extend(
                        ((*location, index), child)
                        for index, child in reversed(list(enumerate(children)))
                    )
                case _:  # pragma: no cover - validated trees hold no directives
                    continue

    def destinations(self) -> list[str]:
        """Return every link destination in sidebar order."""
        return [link.destination for _, link in self.iter_links()]


@dc.dataclass(frozen=True, slots=True)
class NavigationBuild:
    """Outcome of a successful build: the tree plus non-fatal warnings."""

    tree: NavigationTree
    warnings: tuple[DanglingLinkError, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Violation:
    """Single structural defect found by the validator."""

    kind: str
    message: str
    locations: tuple[Location, ...]

    def __str__(self) -> str:
        return self.message


class NavigationError(ValueError):
    """Base class for every sidebar build failure."""

    stage: BuildStage = BuildStage.FAILED


class SchemaError(NavigationError):
    """Raised when a configuration node matches no recognised shape."""

    stage = BuildStage.UNPARSED

    def __init__(self, message: str, path: Location) -> None:
        self.path = path
        super().__init__(f"{format_location(path)}: {message}")


class MissingDirectoryError(NavigationError):
    """Raised when an autogenerate directive names an unknown directory."""

    stage = BuildStage.PARSED

    def __init__(self, directory: str, location: Location | None = None) -> None:
        self.directory = directory
        self.location = location
        prefix = f"{format_location(location)}: " if location is not None else ""
        super().__init__(
            f"{prefix}autogenerate directory '{directory}' does not exist"
        )


class ValidationError(NavigationError):
    """Raised with every structural violation found in one pass."""

    stage = BuildStage.EXPANDED

    def __init__(self, violations: cabc.Sequence[Violation]) -> None:
        self.violations = tuple(violations)
        count = len(self.violations)
        noun = "violation" if count == 1 else "violations"
        details = "; ".join(str(violation) for violation in self.violations)
        super().__init__(f"{count} sidebar {noun}: {details}")


class DanglingLinkError(NavigationError):
    """A link whose destination has no document in the content index."""

    stage = BuildStage.VALIDATED

    def __init__(self, label: str, destination: str, location: Location) -> None:
        self.label = label
        self.destination = destination
        self.location = location
        super().__init__(
            f"{format_location(location)}: link '{label}' points at "
            f"'{destination}', which is not a known document"
        )


class UnresolvedLinksError(NavigationError):
    """Raised when dangling links are fatal; carries every dangling link."""

    stage = BuildStage.VALIDATED

    def __init__(self, errors: cabc.Sequence[DanglingLinkError]) -> None:
        self.errors = tuple(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"{len(self.errors)} dangling sidebar link(s): {details}")


__all__ = [
    "BADGE_VARIANTS",
    "AutogenerateDirective",
    "Badge",
    "BuildStage",
    "DanglingLinkError",
    "DanglingLinkPolicy",
    "DocumentDescriptor",
    "Location",
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
    "format_location",
    "normalize_destination",
]

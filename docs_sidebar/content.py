r"""Read-only content indexes consumed by the sidebar pipeline.

The navigation core never touches the filesystem. It asks a
:class:`ContentIndex` which documents live under a directory and whether a
slug exists. Two implementations ship here:

- :class:`InMemoryContentIndex` for fixtures and hosts that already hold a
  catalogue of documents.
- :class:`MarkdownContentIndex`, which scans a Markdown content directory
  once, reading ``title`` and ``sidebar.label``/``sidebar.order`` from each
  document's YAML front matter.

Example
-------
>>> from docs_sidebar.content import InMemoryContentIndex
>>> index = InMemoryContentIndex.from_mapping(
...     {"/api": [{"slug": "/api/foo"}, {"slug": "/api/bar", "order": 1}]}
... )
>>> index.exists("/api/bar")
True
>>> [doc.slug for doc in index.list_documents("api")]
['/api/foo', '/api/bar']
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONTENT_EXTENSIONS, FRONT_MATTER_DELIMITER, INDEX_STEM
from .navigation.models import DocumentDescriptor, normalize_destination

logger = logging.getLogger(__name__)

DescriptorLike = DocumentDescriptor | str | cabc.Mapping[str, typ.Any]


@typ.runtime_checkable
class ContentIndex(typ.Protocol):
    """Read-only catalogue of the documents available to the sidebar."""

    def list_documents(self, directory: str) -> cabc.Sequence[DocumentDescriptor]:
        """Return the documents under ``directory``; raise ``KeyError`` if absent."""
        ...

    def has_directory(self, directory: str) -> bool:
        """Return whether ``directory`` exists in the index."""
        ...

    def exists(self, slug: str) -> bool:
        """Return whether a document with ``slug`` exists."""
        ...


class InMemoryContentIndex:
    """Content index backed by plain mappings.

    Directory and slug lookups ignore surrounding slashes, so ``/api`` and
    ``api`` name the same directory. Every slug listed under a directory is
    also known to :meth:`exists`; ``extra_slugs`` registers documents that
    are linked explicitly but not listed under any directory.
    """

    __slots__ = ("_directories", "_slugs")

    def __init__(
        self,
        directories: cabc.Mapping[str, cabc.Sequence[DocumentDescriptor]],
        *,
        extra_slugs: cabc.Iterable[str] = (),
    ) -> None:
        self._directories: dict[str, tuple[DocumentDescriptor, ...]] = {
            normalize_destination(directory): tuple(documents)
            for directory, documents in directories.items()
        }
        self._slugs = {normalize_destination(slug) for slug in extra_slugs}
        for documents in self._directories.values():
            self._slugs.update(normalize_destination(doc.slug) for doc in documents)

    @classmethod
    def from_mapping(
        cls,
        directories: cabc.Mapping[str, cabc.Iterable[DescriptorLike]],
        *,
        extra_slugs: cabc.Iterable[str] = (),
    ) -> InMemoryContentIndex:
        """Build an index from descriptors, slugs, or descriptor mappings.

        Mapping entries accept ``slug`` plus optional ``order`` (or
        ``orderHint``) and ``label`` keys.
        """
        return cls(
            {
                directory: [_coerce_descriptor(entry) for entry in entries]
                for directory, entries in directories.items()
            },
            extra_slugs=extra_slugs,
        )

    def list_documents(self, directory: str) -> tuple[DocumentDescriptor, ...]:
        """Return the documents registered under ``directory``."""
        key = normalize_destination(directory)
        try:
            return self._directories[key]
        except KeyError as exc:
            msg = f"Unknown content directory '{directory}'"
            raise KeyError(msg) from exc

    def has_directory(self, directory: str) -> bool:
        """Return whether ``directory`` was registered."""
        return normalize_destination(directory) in self._directories

    def exists(self, slug: str) -> bool:
        """Return whether ``slug`` names a known document (case-sensitive)."""
        return normalize_destination(slug) in self._slugs

    def __len__(self) -> int:
        return len(self._slugs)


class MarkdownContentIndex(InMemoryContentIndex):
    """Content index built from a directory of Markdown documents."""

    __slots__ = ("root",)

    def __init__(
        self,
        root: Path,
        directories: cabc.Mapping[str, cabc.Sequence[DocumentDescriptor]],
    ) -> None:
        super().__init__(directories)
        self.root = root

    @classmethod
    def scan(
        cls,
        root: Path,
        *,
        extensions: cabc.Iterable[str] = DEFAULT_CONTENT_EXTENSIONS,
    ) -> MarkdownContentIndex:
        """Walk ``root`` once and index every document found below it.

        Parameters
        ----------
        root : Path
            Content directory, for example ``src/content/docs``.
        extensions : Iterable[str], optional
            File suffixes treated as documents.

        Returns
        -------
        MarkdownContentIndex
            Index where each directory lists the documents directly inside it
            and nested below it. ``index`` documents take their directory's
            slug.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not an existing directory.
        """
        if not root.is_dir():
            msg = f"Content directory '{root}' not found."
            raise FileNotFoundError(msg)

        suffixes = {suffix.lower() for suffix in extensions}
        directories: dict[str, list[DocumentDescriptor]] = {"": []}
        for path in sorted(root.rglob("*")):
            relative = path.relative_to(root)
            if path.is_dir():
                directories.setdefault(relative.as_posix(), [])
                continue
            if path.suffix.lower() not in suffixes:
                continue
            descriptor = _read_descriptor(path, relative)
            for parent in relative.parents:
                key = "" if parent == Path(".") else parent.as_posix()
                directories.setdefault(key, []).append(descriptor)

        logger.debug(f"Indexed {len(directories[''])} documents under {root}")
        return cls(root, directories)


def _coerce_descriptor(entry: DescriptorLike) -> DocumentDescriptor:
    match entry:
        case DocumentDescriptor():
            return entry
        case str():
            return DocumentDescriptor(slug=entry)
        case cabc.Mapping():
            order = entry.get("order", entry.get("orderHint"))
            return DocumentDescriptor(
                slug=str(entry["slug"]),
                order=int(order) if order is not None else None,
                label=entry.get("label"),
            )
        case _:
            msg = f"Cannot build a document descriptor from {entry!r}"
            raise TypeError(msg)


def _slug_for(relative: Path) -> str:
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == INDEX_STEM:
        parts.pop()
    return "/".join(parts)


def _read_front_matter(path: Path) -> cabc.Mapping[str, typ.Any]:
    """Return the YAML front matter of ``path`` or an empty mapping."""
    text = path.read_text(encoding="utf-8")
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}
    try:
        end = next(
            index
            for index, line in enumerate(lines[1:], start=1)
            if line.strip() == FRONT_MATTER_DELIMITER
        )
    except StopIteration:
        return {}

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load("\n".join(lines[1:end])) or {}
    except YAMLError as exc:
        msg = f"Invalid front matter in '{path}': {exc}"
        raise ValueError(msg) from exc
    return loaded if isinstance(loaded, dict) else {}


def _read_descriptor(path: Path, relative: Path) -> DocumentDescriptor:
    front_matter = _read_front_matter(path)
    sidebar = front_matter.get("sidebar")
    if not isinstance(sidebar, dict):
        sidebar = {}

    order = sidebar.get("order")
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        logger.warning(f"Ignoring non-integer sidebar.order {order!r} in {path}")
        order = None

    label = sidebar.get("label") or front_matter.get("title")
    return DocumentDescriptor(
        slug=_slug_for(relative),
        order=order,
        label=str(label).strip() if label else None,
    )


__all__ = [
    "ContentIndex",
    "InMemoryContentIndex",
    "MarkdownContentIndex",
]

"""Typed dataclasses describing sidebar site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from docs_sidebar._constants import (
    DEFAULT_CONTENT_DIR,
    DEFAULT_CONTENT_EXTENSIONS,
    DEFAULT_MAX_DEPTH,
)
from docs_sidebar.navigation import BuildOptions, DanglingLinkPolicy


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ContentConfig:
    """Where documents live and which files count as documents."""

    directory: Path = Path(DEFAULT_CONTENT_DIR)
    extensions: tuple[str, ...] = DEFAULT_CONTENT_EXTENSIONS


@dc.dataclass(slots=True)
class NavigationConfig:
    """Build options applied to the sidebar pipeline."""

    max_depth: int = DEFAULT_MAX_DEPTH
    dangling_links: DanglingLinkPolicy = DanglingLinkPolicy.ERROR
    workers: int = 1

    def build_options(self) -> BuildOptions:
        """Return the pipeline options described by this section."""
        return BuildOptions(
            max_depth=self.max_depth,
            dangling_links=self.dangling_links,
            max_workers=self.workers,
        )


@dc.dataclass(slots=True)
class SidebarSiteConfig:
    """Sidebar literal alongside content and navigation settings."""

    sidebar: list[typ.Any]
    title: str | None = None
    content: ContentConfig = dc.field(default_factory=ContentConfig)
    navigation: NavigationConfig = dc.field(default_factory=NavigationConfig)
    source_path: Path | None = None


__all__ = [
    "ContentConfig",
    "NavigationConfig",
    "SidebarSiteConfig",
    "SiteConfigError",
]

"""Load sidebar site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_content_config,
    _build_navigation_config,
    _optional_str,
    _require_mapping,
)
from .models import SidebarSiteConfig, SiteConfigError


def load_site_config(path: Path) -> SidebarSiteConfig:
    """Load the YAML configuration describing the sidebar and its build options.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``sidebar.yaml``).

    Returns
    -------
    SidebarSiteConfig
        Parsed configuration holding the raw sidebar literal, the content
        directory (resolved against the file's directory), and navigation
        options.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the sidebar is missing or empty, or a section holds invalid
        values.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_sidebar.config import load_site_config
    >>> config = load_site_config(Path("sidebar.yaml"))  # doctest: +SKIP
    >>> config.navigation.max_depth  # doctest: +SKIP
    3
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    sidebar = raw.get("sidebar")
    if not sidebar:
        msg = "No sidebar entries defined in configuration."
        raise SiteConfigError(msg)
    if not isinstance(sidebar, list):
        msg = "'sidebar' must be a list of entries."
        raise SiteConfigError(msg)

    content = _build_content_config(
        _require_mapping(raw.get("content"), "content"),
        base_dir=path.resolve().parent,
    )
    navigation = _build_navigation_config(
        _require_mapping(raw.get("navigation"), "navigation")
    )

    return SidebarSiteConfig(
        sidebar=sidebar,
        title=_optional_str(raw.get("title")),
        content=content,
        navigation=navigation,
        source_path=path,
    )


__all__ = ["load_site_config"]

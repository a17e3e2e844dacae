"""Utility helpers shared by the sidebar configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from docs_sidebar._constants import DEFAULT_CONTENT_DIR, DEFAULT_CONTENT_EXTENSIONS
from docs_sidebar.navigation import DanglingLinkPolicy

from .models import ContentConfig, NavigationConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating a missing section as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{section}' configuration must be a mapping."
        raise SiteConfigError(msg)
    return value


def _positive_int(value: object, key: str) -> int:
    """Return ``value`` when it is an integer of at least 1."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"'{key}' must be a positive integer, got {value!r}."
        raise SiteConfigError(msg)
    return value


def _normalize_extensions(value: object | None) -> tuple[str, ...]:
    """Normalize extension definitions into lower-case dotted suffixes."""
    if value is None:
        return DEFAULT_CONTENT_EXTENSIONS
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value:
        msg = "'content.extensions' must be a non-empty list of suffixes."
        raise SiteConfigError(msg)
    normalized: list[str] = []
    for segment in value:
        text = str(segment).strip().lower()
        if not text:
            continue
        normalized.append(text if text.startswith(".") else f".{text}")
    if not normalized:
        msg = "'content.extensions' must name at least one non-blank suffix."
        raise SiteConfigError(msg)
    return tuple(normalized)


def _build_content_config(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> ContentConfig:
    """Build a ContentConfig, resolving relative directories against ``base_dir``."""
    directory = Path(payload.get("directory") or DEFAULT_CONTENT_DIR)
    if not directory.is_absolute():
        directory = base_dir / directory
    return ContentConfig(
        directory=directory,
        extensions=_normalize_extensions(payload.get("extensions")),
    )


def _build_navigation_config(payload: typ.Mapping[str, typ.Any]) -> NavigationConfig:
    """Build a NavigationConfig from the ``navigation`` mapping."""
    base = NavigationConfig()
    raw_policy = payload.get("dangling_links", base.dangling_links.value)
    try:
        policy = DanglingLinkPolicy(str(raw_policy).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in DanglingLinkPolicy)
        msg = f"'navigation.dangling_links' must be one of {allowed}, got {raw_policy!r}."
        raise SiteConfigError(msg) from exc

    return NavigationConfig(
        max_depth=_positive_int(
            payload.get("max_depth", base.max_depth), "navigation.max_depth"
        ),
        dangling_links=policy,
        workers=_positive_int(payload.get("workers", base.workers), "navigation.workers"),
    )


__all__ = [
    "_build_content_config",
    "_build_navigation_config",
    "_normalize_extensions",
    "_optional_str",
    "_positive_int",
    "_require_mapping",
]

"""Utility helpers shared by the sidebar loader and expander."""

from __future__ import annotations

from urllib.parse import urlsplit

from .models import normalize_destination


def label_from_slug(slug: str) -> str:
    """Return the final path segment of ``slug`` as a fallback label."""
    normalized = normalize_destination(slug)
    return normalized.rsplit("/", 1)[-1]


def is_external(destination: str) -> bool:
    """Return whether ``destination`` is an absolute URL rather than a slug."""
    return bool(urlsplit(destination.strip()).scheme)


def describe_type(value: object) -> str:
    """Name the YAML-ish type of ``value`` for schema error messages."""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list() | tuple():
            return "list"
        case dict():
            return "mapping"
        case _:
            return type(value).__name__


__all__ = ["describe_type", "is_external", "label_from_slug"]

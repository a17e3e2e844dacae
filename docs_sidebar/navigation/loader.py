"""Parse raw sidebar literals into typed navigation nodes."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .helpers import describe_type, is_external, label_from_slug
from .models import (
    BADGE_VARIANTS,
    AutogenerateDirective,
    Badge,
    Location,
    NavigationGroup,
    NavigationLink,
    NavigationNode,
    SchemaError,
)

LINK_TARGET_KEYS = ("destination", "slug", "link")
GROUP_CHILD_KEYS = ("children", "items")

_LINK_KEYS = frozenset({"label", "badge", *LINK_TARGET_KEYS})
_GROUP_KEYS = frozenset({"label", "collapsed", "badge", *GROUP_CHILD_KEYS})
_WRAPPED_AUTOGENERATE_KEYS = frozenset({"label", "collapsed", "badge", "autogenerate"})
_DIRECTIVE_KEYS = frozenset({"directory", "collapsed"})
_BARE_DIRECTIVE_KEYS = frozenset({"directory"})


def parse_sidebar(raw: object) -> tuple[NavigationNode, ...]:
    """Parse a sidebar literal into navigation nodes.

    Parameters
    ----------
    raw : object
        List of sidebar entries built from plain mappings, lists, and
        strings, as produced by a YAML loader or written inline.

    Returns
    -------
    tuple[NavigationNode, ...]
        Top-level nodes. Autogenerate directives are left unexpanded.

    Raises
    ------
    SchemaError
        If an entry matches no node shape, mixes shapes, carries unknown keys,
        or has a missing or mistyped field. ``path`` locates the first
        offending entry.

    Examples
    --------
    >>> nodes = parse_sidebar(
    ...     [{"label": "Guide", "items": [{"label": "Intro", "slug": "intro"}]}]
    ... )
    >>> nodes[0].children[0].destination
    'intro'
    """
    return _parse_items(raw, ())


def _parse_items(raw: object, path: Location) -> tuple[NavigationNode, ...]:
    if isinstance(raw, str) or not isinstance(raw, cabc.Sequence):
        msg = f"expected a list of sidebar entries, got {describe_type(raw)}"
        raise SchemaError(msg, path)
    return tuple(_parse_node(entry, (*path, index)) for index, entry in enumerate(raw))


def _parse_node(raw: object, path: Location) -> NavigationNode:
    match raw:
        case str():
            return NavigationLink(
                label=label_from_slug(raw),
                destination=raw,
                external=is_external(raw),
            )
        case cabc.Mapping():
            return _parse_mapping(raw, path)
        case _:
            msg = f"expected a mapping or a slug string, got {describe_type(raw)}"
            raise SchemaError(msg, path)


def _parse_mapping(raw: cabc.Mapping[typ.Any, typ.Any], path: Location) -> NavigationNode:
    for key in raw:
        if not isinstance(key, str):
            msg = f"entry keys must be strings, got {describe_type(key)}"
            raise SchemaError(msg, path)

    targets = [key for key in LINK_TARGET_KEYS if key in raw]
    child_keys = [key for key in GROUP_CHILD_KEYS if key in raw]
    shapes = [
        name
        for name, present in (
            ("link", bool(targets)),
            ("group", bool(child_keys)),
            ("autogenerate group", "autogenerate" in raw),
            ("autogenerate", "directory" in raw),
        )
        if present
    ]
    if not shapes:
        keys = ", ".join(sorted(raw)) or "no keys"
        msg = f"entry ({keys}) matches no link, group, or autogenerate shape"
        raise SchemaError(msg, path)
    if len(shapes) > 1:
        msg = f"entry mixes {' and '.join(shapes)} fields"
        raise SchemaError(msg, path)
    if len(targets) > 1 or len(child_keys) > 1:
        conflicting = targets if len(targets) > 1 else child_keys
        msg = f"entry sets more than one of {', '.join(conflicting)}"
        raise SchemaError(msg, path)

    match shapes[0]:
        case "link":
            _reject_unknown(raw, _LINK_KEYS, path)
            return _parse_link(raw, targets[0], path)
        case "group":
            _reject_unknown(raw, _GROUP_KEYS, path)
            return NavigationGroup(
                label=_require_str(raw, "label", path),
                children=_parse_items(raw[child_keys[0]], path),
                collapsed=_optional_bool(raw, "collapsed", path) or False,
                badge=_parse_badge(raw.get("badge"), path),
            )
        case "autogenerate group":
            _reject_unknown(raw, _WRAPPED_AUTOGENERATE_KEYS, path)
            return _parse_wrapped_autogenerate(raw, path)
        case _:
            if "collapsed" in raw:
                msg = (
                    "'collapsed' needs a group: wrap the directory as "
                    "{label, autogenerate: {directory, collapsed}}"
                )
                raise SchemaError(msg, path)
            _reject_unknown(raw, _BARE_DIRECTIVE_KEYS, path)
            return AutogenerateDirective(directory=_require_str(raw, "directory", path))


def _parse_link(
    raw: cabc.Mapping[str, typ.Any], target_key: str, path: Location
) -> NavigationLink:
    destination = _require_str(raw, target_key, path)
    if not destination.strip():
        msg = f"'{target_key}' must not be empty"
        raise SchemaError(msg, path)
    return NavigationLink(
        label=_require_str(raw, "label", path),
        destination=destination,
        badge=_parse_badge(raw.get("badge"), path),
        external=target_key == "link" and is_external(destination),
    )


def _parse_wrapped_autogenerate(
    raw: cabc.Mapping[str, typ.Any], path: Location
) -> NavigationGroup:
    options = raw["autogenerate"]
    if not isinstance(options, cabc.Mapping):
        msg = f"'autogenerate' must be a mapping, got {describe_type(options)}"
        raise SchemaError(msg, path)
    _reject_unknown(options, _DIRECTIVE_KEYS, path)
    nested_collapsed = _optional_bool(options, "collapsed", path)
    collapsed = _optional_bool(raw, "collapsed", path)
    if collapsed is None:
        collapsed = nested_collapsed
    directive = AutogenerateDirective(
        directory=_require_str(options, "directory", path),
        collapsed=nested_collapsed,
    )
    return NavigationGroup(
        label=_require_str(raw, "label", path),
        children=(directive,),
        collapsed=bool(collapsed),
        badge=_parse_badge(raw.get("badge"), path),
    )


def _parse_badge(raw: object, path: Location) -> Badge | None:
    match raw:
        case None:
            return None
        case str():
            if not raw.strip():
                msg = "'badge' text must not be empty"
                raise SchemaError(msg, path)
            return Badge(text=raw)
        case cabc.Mapping():
            _reject_unknown(raw, frozenset({"text", "variant"}), path)
            text = _require_str(raw, "text", path)
            variant = raw.get("variant", "default")
            if not isinstance(variant, str):
                msg = f"'variant' must be a string, got {describe_type(variant)}"
                raise SchemaError(msg, path)
            if variant not in BADGE_VARIANTS:
                allowed = ", ".join(sorted(BADGE_VARIANTS))
                msg = f"badge variant {variant!r} is not one of {allowed}"
                raise SchemaError(msg, path)
            return Badge(text=text, variant=variant)
        case _:
            msg = f"'badge' must be a string or mapping, got {describe_type(raw)}"
            raise SchemaError(msg, path)


def _reject_unknown(
    raw: cabc.Mapping[str, typ.Any], allowed: frozenset[str], path: Location
) -> None:
    unknown = sorted(set(raw) - allowed)
    if unknown:
        msg = f"unrecognised field(s): {', '.join(unknown)}"
        raise SchemaError(msg, path)


def _require_str(raw: cabc.Mapping[str, typ.Any], key: str, path: Location) -> str:
    if key not in raw:
        msg = f"missing required field '{key}'"
        raise SchemaError(msg, path)
    value = raw[key]
    if not isinstance(value, str):
        msg = f"'{key}' must be a string, got {describe_type(value)}"
        raise SchemaError(msg, path)
    return value


def _optional_bool(
    raw: cabc.Mapping[str, typ.Any], key: str, path: Location
) -> bool | None:
    value = raw.get(key)
    if value is None or isinstance(value, bool):
        return value
    msg = f"'{key}' must be a boolean, got {describe_type(value)}"
    raise SchemaError(msg, path)


__all__ = ["GROUP_CHILD_KEYS", "LINK_TARGET_KEYS", "parse_sidebar"]

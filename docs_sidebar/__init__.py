"""Build, validate, and resolve documentation site sidebars.

This package exposes the CLI entry points used by ``uv run sidebar`` to turn
a ``sidebar.yaml`` configuration into a resolved navigation tree, and the
:mod:`docs_sidebar.navigation` pipeline those commands wrap.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docs_sidebar import app
>>> app(["check", "--config", "sidebar.yaml"])  # doctest: +SKIP
ok: 12 links
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

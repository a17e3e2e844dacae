"""Cyclopts CLI entrypoint for building and checking documentation sidebars.

The ``sidebar`` console script defined here loads ``sidebar.yaml``, indexes
the Markdown content directory it names, and runs the navigation pipeline:
parse, expand autogenerate directives, validate, and resolve every link.
``sidebar build`` emits the resolved tree as JSON for the site renderer;
``sidebar check`` reports every defect and exits non-zero when the sidebar
is unusable, which suits CI.

Examples
--------
Check the default configuration:

>>> from docs_sidebar.cli import main
>>> main()  # doctest: +SKIP

Write the resolved sidebar to a file:

>>> from docs_sidebar.cli import app
>>> app(["build", "--output", "dist/sidebar.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG_FILENAME
from .config import load_site_config
from .content import MarkdownContentIndex
from .export import encode_build
from .navigation import (
    NavigationBuild,
    UnresolvedLinksError,
    ValidationError,
    build_navigation,
)

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)

app = App(name="sidebar", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _defects(error: Exception) -> list[str]:
    """Flatten a build failure into one message per defect."""
    match error:
        case ValidationError():
            return [str(violation) for violation in error.violations]
        case UnresolvedLinksError():
            return [str(dangling) for dangling in error.errors]
        case _:
            return [str(error)]


def _run_pipeline(config: Path) -> NavigationBuild:
    site = load_site_config(config)
    index = MarkdownContentIndex.scan(
        site.content.directory, extensions=site.content.extensions
    )
    return build_navigation(site.sidebar, index, site.navigation.build_options())


def _run_or_exit(config: Path) -> NavigationBuild:
    try:
        result = _run_pipeline(config)
    except (ValueError, TypeError, YAMLError, FileNotFoundError) as exc:
        for defect in _defects(exc):
            print(f"error: {defect}")
        raise SystemExit(1) from exc
    for warning in result.warnings:
        print(f"warning: {warning}")
    return result


@app.command(help="Resolve the sidebar and emit it as JSON.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to sidebar config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write JSON here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log pipeline stages", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Build the sidebar described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``sidebar.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Destination for the JSON document; stdout when ``None``.
    verbose : bool, optional
        Emit debug logging for each pipeline stage.

    Returns
    -------
    None
        Writes the resolved sidebar and prints warnings.

    Raises
    ------
    SystemExit
        With status 1 when the configuration or sidebar is invalid.
    """
    _configure_logging(verbose)
    result = _run_or_exit(config)
    document = encode_build(result)
    if output is None:
        print(document)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document + "\n", encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Validate the sidebar and report every defect.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to sidebar config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[
        bool, Parameter(help="Log pipeline stages", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Run the sidebar pipeline without writing output."""
    _configure_logging(verbose)
    result = _run_or_exit(config)
    links = sum(1 for _ in result.tree.iter_links())
    print(f"ok: {links} links")


def main() -> None:
    """Invoke the Cyclopts application that powers the `sidebar` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

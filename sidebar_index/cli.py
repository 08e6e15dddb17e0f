"""Cyclopts CLI entrypoint for rendering and checking sidebar indexes.

The ``sidebar`` console script defined here renders the sidebar HTML for every
page in ``config/sidebar.yaml``, validates ``sidebar-items.js`` or JSON index
files, and converts between the two formats.

Examples
--------
Render every configured sidebar:

>>> from sidebar_index.cli import main
>>> main()  # doctest: +SKIP

Validate a single index strictly:

>>> from sidebar_index.cli import app
>>> app(["check", "public/shape/sidebar-items.js"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .codec import inspect_index, read_index, write_index
from .config import load_sidebar_config
from .models import SidebarIndexError
from .navigation import CurrentItem, DocPage
from .renderer import SidebarRenderer
from .validation import Severity

DEFAULT_CONFIG = Path("config/sidebar.yaml")

logger = logging.getLogger(__name__)

app = App(name="sidebar", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render sidebar HTML for the configured pages.")
def generate(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page identifier", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to sidebar config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Render the sidebar of each configured page.

    Parameters
    ----------
    page : str or None, optional
        Specific page key to render; when ``None`` (default) all pages are
        rendered.
    config : Path, optional
        Path to the ``sidebar.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).

    Raises
    ------
    SidebarIndexError
        If an index file is malformed, or fails validation for a page
        configured with ``strict: true``.
    """
    site_config = load_sidebar_config(config)
    if page:
        target_pages = [site_config.get_page(page)]
    else:
        target_pages = list(site_config.pages.values())

    renderer = SidebarRenderer()
    for page_config in target_pages:
        index = read_index(page_config.index_path, strict=page_config.strict)
        current = (
            CurrentItem(page_config.current.name, page_config.current.category)
            if page_config.current
            else None
        )
        doc_page = DocPage(
            index,
            module_path=page_config.module_path,
            current=current,
            relpath=page_config.relpath,
        )
        written = renderer.write(
            doc_page.sidebar,
            page_config.output_path,
            relpath=doc_page.relpath,
            current=doc_page.current,
            title=doc_page.module_path,
        )
        logger.debug(
            "rendered %d entries for page %s",
            doc_page.sidebar.entry_count,
            page_config.key,
        )
        print(f"wrote {_format_path(written)}")


@app.command(help="Validate sidebar index files.")
def check(
    paths: list[Path],
    *,
    strict: typ.Annotated[
        bool, Parameter(help="Fail on duplicate or empty names and labels")
    ] = True,
) -> None:
    """Load each index file and report structural and semantic issues.

    Parameters
    ----------
    paths : list[Path]
        ``sidebar-items.js`` or JSON files to check.
    strict : bool, optional
        When ``True`` (default) error-level issues make the command fail;
        otherwise they are only reported.

    Raises
    ------
    SystemExit
        With status 1 when any file is malformed or, in strict mode, has
        error-level issues.
    """
    failed = False
    for path in paths:
        try:
            index, issues = inspect_index(path)
        except (OSError, SidebarIndexError) as exc:
            print(f"{_format_path(path)}: {exc}")
            failed = True
            continue
        for issue in issues:
            print(f"{_format_path(path)}: {issue}")
        if strict and any(issue.severity is Severity.ERROR for issue in issues):
            failed = True
        elif not issues:
            print(f"{_format_path(path)}: ok ({index.entry_count} entries)")
    if failed:
        raise SystemExit(1)


@app.command(help="Convert a sidebar index between script and JSON forms.")
def convert(source: Path, dest: Path) -> None:
    """Read ``source`` and write it to ``dest`` in the format its suffix implies."""
    index = read_index(source)
    written = write_index(index, dest)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sidebar`` command."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

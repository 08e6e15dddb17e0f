"""Model, serialize, and render documentation sidebar indexes.

A sidebar index maps category labels such as ``"struct"`` to the ordered
``(name, summary)`` entries a documentation page lists in its navigation
sidebar. This package exposes the immutable index type, its JSON and
``sidebar-items.js`` codecs, page-scoped registration, and the HTML renderer,
plus the CLI entry points used by ``uv run sidebar``.

Exports
-------
- ``SidebarIndex`` / ``Entry``: the immutable data model.
- ``loads`` / ``dumps`` / ``load_script`` / ``dump_script``: wire codecs.
- ``DocPage`` / ``SidebarNavigation``: page-scoped registration.
- ``SidebarRenderer``: navigation groups and HTML output.
- ``app`` / ``main``: Cyclopts application entry.

Examples
--------
>>> from sidebar_index import DocPage, loads
>>> page = DocPage(loads('{"struct": [["Box", "An axis-aligned box."]]}'))
>>> page.sidebar.names("struct")
['Box']
"""

from __future__ import annotations

from .cli import app, main
from .codec import dump_script, dumps, load_script, loads, read_index, write_index
from .models import (
    Entry,
    SidebarFormatError,
    SidebarIndex,
    SidebarIndexError,
    SidebarRegistrationError,
    SidebarValidationError,
)
from .navigation import CurrentItem, DocPage, NavigationSession, SidebarNavigation
from .renderer import SidebarRenderer

__all__ = [
    "CurrentItem",
    "DocPage",
    "Entry",
    "NavigationSession",
    "SidebarFormatError",
    "SidebarIndex",
    "SidebarIndexError",
    "SidebarNavigation",
    "SidebarRegistrationError",
    "SidebarRenderer",
    "SidebarValidationError",
    "app",
    "dump_script",
    "dumps",
    "load_script",
    "loads",
    "main",
    "read_index",
    "write_index",
]

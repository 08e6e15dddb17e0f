"""Turn a sidebar index into navigation groups and HTML.

:class:`SidebarRenderer` is the consumer side of the index contract. It groups
entries by resolved category, keeps the emitter's entry order untouched, and
renders the result through the ``sidebar.jinja`` template. Malformed but
well-shaped data is rendered best-effort: duplicate names appear as given and
unknown categories become generic groups after the known ones.

Example
-------
>>> from sidebar_index.models import SidebarIndex
>>> from sidebar_index.renderer import SidebarRenderer
>>> index = SidebarIndex({"mod": [("shape", "")], "fn": [("setup", "")]})
>>> [item.href for group in SidebarRenderer().build_groups(index)
...  for item in group.items]
['shape/index.html', 'fn.setup.html']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .categories import Category, ItemKind, category_sort_key, resolve_category

if typ.TYPE_CHECKING:
    from .models import Entry, SidebarIndex
    from .navigation import CurrentItem


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """A clickable sidebar link.

    Attributes
    ----------
    name : str
        Symbol name used as the link text.
    summary : str
        One-line description used as the link title; may be empty.
    href : str
        Relative URL of the symbol's page.
    current : bool
        Whether the link points at the page being viewed.
    """

    name: str
    summary: str
    href: str
    current: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """A titled block of sidebar links for one category."""

    category: Category
    items: tuple[NavItem, ...]

    @property
    def title(self) -> str:
        """Return the heading shown above the group."""
        return self.category.title

    @property
    def css_class(self) -> str:
        """Return the CSS class of the group block."""
        return self.category.css_class


def item_href(category: Category, name: str, relpath: str = "") -> str:
    """Return the page URL for symbol ``name`` in ``category``."""
    if category.kind is ItemKind.MODULE:
        return f"{relpath}{name}/index.html"
    return f"{relpath}{category.label}.{name}.html"


class SidebarRenderer:
    """Build and render sidebar navigation for a registered index."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``sidebar.jinja``. Defaults to the
            ``sidebar_index/templates`` directory when ``None``.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("sidebar.jinja")

    def build_groups(
        self,
        index: SidebarIndex,
        *,
        relpath: str = "",
        current: CurrentItem | None = None,
    ) -> list[NavGroup]:
        """Return navigation groups for ``index`` in display order.

        Known categories come first in vocabulary order, followed by unknown
        ones in index order. Categories without entries produce no group.
        """
        ordered = sorted(
            enumerate(index.categories()),
            key=lambda pair: category_sort_key(pair[1], pair[0]),
        )
        groups: list[NavGroup] = []
        for _position, category in ordered:
            entries = index[category.label]
            if not entries:
                continue
            items = tuple(
                self._build_item(category, entry, relpath, current) for entry in entries
            )
            groups.append(NavGroup(category=category, items=items))
        return groups

    def render(
        self,
        index: SidebarIndex,
        *,
        relpath: str = "",
        current: CurrentItem | None = None,
        title: str | None = None,
    ) -> str:
        """Render the sidebar HTML fragment for ``index``."""
        groups = self.build_groups(index, relpath=relpath, current=current)
        html = self.template.render(groups=groups, title=title)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(
        self,
        index: SidebarIndex,
        output_path: Path,
        *,
        relpath: str = "",
        current: CurrentItem | None = None,
        title: str | None = None,
    ) -> Path:
        """Render ``index`` and write UTF-8 HTML to ``output_path``."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        html = self.render(index, relpath=relpath, current=current, title=title)
        output_path.write_text(html, encoding="utf-8")
        return output_path

    @staticmethod
    def _build_item(
        category: Category,
        entry: Entry,
        relpath: str,
        current: CurrentItem | None,
    ) -> NavItem:
        is_current = (
            current is not None
            and current.name == entry.name
            and resolve_category(current.category).kind is category.kind
            and (category.known or current.category == category.label)
        )
        return NavItem(
            name=entry.name,
            summary=entry.summary,
            href=item_href(category, entry.name, relpath),
            current=is_current,
        )


__all__ = ["NavGroup", "NavItem", "SidebarRenderer", "item_href"]

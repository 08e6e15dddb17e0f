"""Page-scoped registration of sidebar indexes.

Each documentation page owns exactly one :class:`SidebarNavigation`. The page
receives its :class:`~sidebar_index.models.SidebarIndex` as a constructor
argument and registers it once; nothing is shared between pages. A
:class:`NavigationSession` stands in for the browser tab: loading a new page
replaces the previous page and all of its navigation groups.

Example
-------
>>> from sidebar_index.models import SidebarIndex
>>> from sidebar_index.navigation import DocPage, NavigationSession
>>> page = DocPage(SidebarIndex({"enum": [("CapsuleUvProfile", "")]}))
>>> session = NavigationSession()
>>> [group.title for group in session.load(page)]  # doctest: +SKIP
['Enums']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import SidebarIndex, SidebarRegistrationError
from .renderer import SidebarRenderer

if typ.TYPE_CHECKING:
    from .renderer import NavGroup


@dc.dataclass(frozen=True, slots=True)
class CurrentItem:
    """The symbol a page documents, highlighted in its sidebar."""

    name: str
    category: str


class SidebarNavigation:
    """Hold the one sidebar index registered for a page."""

    def __init__(self) -> None:
        self._index: SidebarIndex | None = None

    @property
    def registered(self) -> bool:
        """Return ``True`` once an index has been registered."""
        return self._index is not None

    @property
    def index(self) -> SidebarIndex:
        """Return the registered index, or an empty one before registration."""
        return self._index if self._index is not None else SidebarIndex.empty()

    def register(self, index: SidebarIndex) -> None:
        """Hand ``index`` to the navigation; allowed once per page.

        Raises
        ------
        TypeError
            If ``index`` is not a :class:`SidebarIndex`.
        SidebarRegistrationError
            If an index was already registered.
        """
        if not isinstance(index, SidebarIndex):
            msg = f"Expected a SidebarIndex, got {type(index).__name__}."
            raise TypeError(msg)
        if self._index is not None:
            msg = "A sidebar index is already registered for this page."
            raise SidebarRegistrationError(msg)
        self._index = index


class DocPage:
    """A documentation page with its own sidebar navigation."""

    def __init__(
        self,
        sidebar: SidebarIndex,
        *,
        module_path: str = "",
        current: CurrentItem | None = None,
        relpath: str = "",
    ) -> None:
        """Create the page and register ``sidebar`` with its navigation.

        Parameters
        ----------
        sidebar : SidebarIndex
            Index for the module this page belongs to.
        module_path : str, optional
            Display path of the documented module, e.g. ``bevy::prelude``.
        current : CurrentItem, optional
            Symbol documented by this page, highlighted in the sidebar.
        relpath : str, optional
            Prefix from this page to the directory holding the module's pages.
        """
        self.module_path = module_path
        self.current = current
        self.relpath = relpath
        self.navigation = SidebarNavigation()
        self.navigation.register(sidebar)

    @property
    def sidebar(self) -> SidebarIndex:
        """Return the index registered for this page."""
        return self.navigation.index


class NavigationSession:
    """Track the currently loaded page and its rendered navigation groups."""

    def __init__(self, renderer: SidebarRenderer | None = None) -> None:
        self.renderer = renderer or SidebarRenderer()
        self.page: DocPage | None = None
        self.groups: list[NavGroup] = []

    def load(self, page: DocPage) -> list[NavGroup]:
        """Make ``page`` current, replacing all prior navigation state."""
        self.page = page
        self.groups = self.renderer.build_groups(
            page.sidebar, relpath=page.relpath, current=page.current
        )
        return self.groups

    def render(self) -> str:
        """Return sidebar HTML for the current page, or ``""`` with none loaded."""
        if self.page is None:
            return ""
        return self.renderer.render(
            self.page.sidebar,
            relpath=self.page.relpath,
            current=self.page.current,
            title=self.page.module_path or None,
        )


__all__ = ["CurrentItem", "DocPage", "NavigationSession", "SidebarNavigation"]

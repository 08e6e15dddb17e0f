"""Tests for page-scoped sidebar registration.

Registration is a write-once hand-off from a page to its navigation. These
tests cover the once-only rule, empty indexes, and the guarantee that loading
a new page leaves nothing behind from the previous one.
"""

from __future__ import annotations

import pytest

from sidebar_index.models import SidebarIndex, SidebarRegistrationError
from sidebar_index.navigation import (
    CurrentItem,
    DocPage,
    NavigationSession,
    SidebarNavigation,
)


def test_register_once() -> None:
    """A navigation accepts exactly one index."""
    navigation = SidebarNavigation()
    assert not navigation.registered
    index = SidebarIndex({"struct": [("Box", "")]})
    navigation.register(index)
    assert navigation.registered
    assert navigation.index is index
    with pytest.raises(SidebarRegistrationError):
        navigation.register(SidebarIndex.empty())
    assert navigation.index is index, "expected the first index to stay registered"


def test_register_empty_index() -> None:
    """Registering an empty index is valid and yields an empty sidebar."""
    navigation = SidebarNavigation()
    navigation.register(SidebarIndex.empty())
    assert navigation.registered
    assert len(navigation.index) == 0


def test_register_rejects_raw_mappings() -> None:
    """Only SidebarIndex values can be registered."""
    navigation = SidebarNavigation()
    with pytest.raises(TypeError):
        navigation.register({"struct": [["Box", ""]]})  # type: ignore[arg-type]
    assert not navigation.registered


def test_unregistered_navigation_is_empty() -> None:
    """Before registration the navigation exposes an empty index."""
    assert SidebarNavigation().index == SidebarIndex.empty()


def test_pages_do_not_share_state() -> None:
    """Each page owns its own navigation."""
    first = DocPage(SidebarIndex({"struct": [("Box", "")]}))
    second = DocPage(SidebarIndex({"enum": [("CapsuleUvProfile", "")]}))
    assert first.navigation is not second.navigation
    assert list(first.sidebar) == ["struct"]
    assert list(second.sidebar) == ["enum"]


def test_new_page_load_replaces_navigation() -> None:
    """Loading a different page leaves no residual entries behind."""
    session = NavigationSession()
    session.load(DocPage(SidebarIndex({"struct": [("Box", ""), ("Circle", "")]})))
    groups = session.load(DocPage(SidebarIndex({"enum": [("CapsuleUvProfile", "")]})))
    names = [item.name for group in groups for item in group.items]
    assert names == ["CapsuleUvProfile"]
    assert session.groups == groups
    assert "Circle" not in session.render()


def test_session_render_uses_page_context() -> None:
    """Rendering uses the page's module path, relpath, and current item."""
    session = NavigationSession()
    assert session.render() == "", "expected no sidebar before a page loads"
    page = DocPage(
        SidebarIndex({"struct": [("Box", "")]}),
        module_path="bevy::prelude::shape",
        current=CurrentItem("Box", "struct"),
        relpath="../",
    )
    session.load(page)
    html = session.render()
    assert "bevy::prelude::shape" in html
    assert 'href="../struct.Box.html"' in html
    assert "current" in html

"""Tests for sidebar navigation groups and HTML rendering.

These tests drive :class:`SidebarRenderer` with small indexes and inspect both
the intermediate :class:`NavGroup` objects and the rendered HTML, parsed with
BeautifulSoup, to confirm grouping, ordering, hrefs, and best-effort handling
of imperfect data.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from sidebar_index.codec import loads
from sidebar_index.models import SidebarIndex
from sidebar_index.navigation import CurrentItem
from sidebar_index.renderer import SidebarRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

EXAMPLE_PAYLOAD = (
    '{"struct": [["Box","An axis-aligned box..."],["Circle","A circle..."]],'
    ' "enum": [["CapsuleUvProfile","Manner..."]]}'
)


@pytest.fixture(scope="module")
def renderer() -> SidebarRenderer:
    """Return a renderer using the packaged templates."""
    return SidebarRenderer()


def test_example_payload_produces_two_groups(renderer: SidebarRenderer) -> None:
    """Two categories render as two groups with entries in the given order."""
    groups = renderer.build_groups(loads(EXAMPLE_PAYLOAD))
    summary = {
        group.category.label: [item.name for item in group.items] for group in groups
    }
    assert summary == {"struct": ["Box", "Circle"], "enum": ["CapsuleUvProfile"]}
    assert [group.title for group in groups] == ["Structs", "Enums"]


def test_empty_index_renders_no_groups(renderer: SidebarRenderer) -> None:
    """Zero categories produce zero navigation groups."""
    assert renderer.build_groups(SidebarIndex.empty()) == []
    soup = BeautifulSoup(renderer.render(SidebarIndex.empty()), "html.parser")
    assert soup.select("div.block") == []


def test_empty_category_is_skipped(renderer: SidebarRenderer) -> None:
    """A category with no entries contributes no group."""
    index = SidebarIndex({"struct": [], "fn": [("setup", "")]})
    assert [group.category.label for group in renderer.build_groups(index)] == ["fn"]


def test_hrefs_follow_site_layout(renderer: SidebarRenderer) -> None:
    """Modules link to their index page, other items to kind-prefixed pages."""
    index = SidebarIndex({"mod": [("shape", "")], "struct": [("Box", "")]})
    hrefs = [
        item.href
        for group in renderer.build_groups(index, relpath="../")
        for item in group.items
    ]
    assert hrefs == ["../shape/index.html", "../struct.Box.html"]


def test_unknown_category_rendered_after_known(renderer: SidebarRenderer) -> None:
    """Unknown labels become generic groups placed after known ones."""
    index = SidebarIndex({"widget": [("Knob", "")], "trait": [("Shape", "")]})
    groups = renderer.build_groups(index)
    assert [group.title for group in groups] == ["Traits", "widget"]
    assert groups[1].items[0].href == "widget.Knob.html"


def test_duplicates_rendered_best_effort(renderer: SidebarRenderer) -> None:
    """Duplicate names are rendered as given rather than dropped."""
    index = SidebarIndex({"struct": [("Box", "one"), ("Box", "two")]})
    (group,) = renderer.build_groups(index)
    assert [item.summary for item in group.items] == ["one", "two"]


def test_current_item_is_flagged(renderer: SidebarRenderer) -> None:
    """Only the entry matching both name and category is marked current."""
    index = SidebarIndex({"struct": [("Box", "")], "fn": [("Box", "")]})
    groups = renderer.build_groups(index, current=CurrentItem("Box", "struct"))
    flags = {group.category.label: group.items[0].current for group in groups}
    assert flags == {"struct": True, "fn": False}


def test_html_output(renderer: SidebarRenderer) -> None:
    """Rendered HTML exposes groups, titles, and name-only items."""
    index = SidebarIndex({"struct": [("Box", "An axis-aligned box."), ("Cube", "")]})
    html = renderer.render(
        index, title="bevy::prelude::shape", current=CurrentItem("Cube", "struct")
    )
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.block.struct")
    assert block is not None, "expected a struct block in the sidebar"
    assert block.h3 is not None
    assert block.h3.get_text() == "Structs"
    links = block.select("a")
    assert [link.get_text() for link in links] == ["Box", "Cube"]
    assert links[0].get("title") == "An axis-aligned box."
    assert links[1].get("title") is None, "expected no title for an empty summary"
    assert "current" in links[1].get("class", [])
    location = soup.select_one("h2.location")
    assert location is not None
    assert location.get_text() == "bevy::prelude::shape"


def test_html_escapes_untrusted_text(renderer: SidebarRenderer) -> None:
    """Names and summaries are autoescaped."""
    index = SidebarIndex({"fn": [("<script>", 'say "hi" & <b>bye</b>')]})
    html = renderer.render(index)
    assert "<script>" not in html
    soup = BeautifulSoup(html, "html.parser")
    link = soup.select_one("a")
    assert link is not None
    assert link.get_text() == "<script>"
    assert link.get("title") == 'say "hi" & <b>bye</b>'


def test_write_creates_parent_dirs(renderer: SidebarRenderer, tmp_path: Path) -> None:
    """Writing creates missing directories and ends with a newline."""
    output = renderer.write(
        loads(EXAMPLE_PAYLOAD), tmp_path / "a" / "b" / "sidebar.html"
    )
    text = output.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "CapsuleUvProfile" in text

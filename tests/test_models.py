"""Unit tests for the immutable sidebar index model.

These tests cover construction from pairs and :class:`Entry` objects, the
structural checks that reject malformed data, and the read-only behaviour of
the resulting mapping.

Usage
-----
Run ``pytest tests/test_models.py -v`` to execute the suite.
"""

from __future__ import annotations

import dataclasses as dc
import re

import pytest

from sidebar_index.categories import ItemKind
from sidebar_index.models import Entry, SidebarFormatError, SidebarIndex


def test_index_preserves_entry_order() -> None:
    """Entries keep the emitter's order rather than being re-sorted."""
    index = SidebarIndex({"struct": [("Torus", ""), ("Box", ""), ("Circle", "")]})
    assert index.names("struct") == ["Torus", "Box", "Circle"], (
        "expected entry order to match the input order"
    )


def test_index_accepts_entries_and_pairs() -> None:
    """Pairs are coerced into Entry objects equal to explicit ones."""
    index = SidebarIndex({"enum": [Entry("CapsuleUvProfile", "UV layout.")]})
    other = SidebarIndex({"enum": [["CapsuleUvProfile", "UV layout."]]})
    assert index == other, "expected Entry and list pair inputs to compare equal"
    assert index["enum"] == (Entry("CapsuleUvProfile", "UV layout."),)


def test_empty_summary_is_kept() -> None:
    """An undocumented symbol keeps an empty summary instead of disappearing."""
    index = SidebarIndex({"struct": [("Cube", "")]})
    assert index["struct"][0].summary == ""
    assert index.entry_count == 1


def test_empty_index() -> None:
    """An index without categories is valid."""
    index = SidebarIndex.empty()
    assert len(index) == 0
    assert index.entry_count == 0
    assert index == SidebarIndex({})


def test_index_is_read_only() -> None:
    """Neither the mapping nor its entries can be mutated."""
    index = SidebarIndex({"struct": [("Box", "")]})
    with pytest.raises(TypeError):
        index["struct"] = ()  # type: ignore[index]
    with pytest.raises(dc.FrozenInstanceError):
        index["struct"][0].name = "Other"  # type: ignore[misc]
    assert isinstance(index["struct"], tuple)


def test_index_is_hashable() -> None:
    """Equal indexes hash equally so they can key caches."""
    first = SidebarIndex({"struct": [("Box", "a")]})
    second = SidebarIndex({"struct": [("Box", "a")]})
    assert hash(first) == hash(second)


def test_category_order_does_not_affect_equality_or_hash() -> None:
    """Indexes differing only in category order are equal and hash equally."""
    box = [("Box", "")]
    profile = [("CapsuleUvProfile", "")]
    first = SidebarIndex({"struct": box, "enum": profile})
    second = SidebarIndex({"enum": profile, "struct": box})
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1, "expected equal indexes to collapse in a set"


@pytest.mark.parametrize(
    ("groups", "fragment"),
    [
        ([("struct", [("Box", "")])], "must map category labels"),
        ({1: [("Box", "")]}, "labels must be strings"),
        ({"struct": "Box"}, "must hold a list"),
        ({"struct": [("Box",)]}, "(name, summary) pair"),
        ({"struct": [("Box", "", "extra")]}, "(name, summary) pair"),
        ({"struct": [(1, "summary")]}, "name must be a string"),
        ({"struct": [("Box", None)]}, "must be a string"),
    ],
)
def test_malformed_data_fails_fast(groups: dict, fragment: str) -> None:
    """Structural defects raise a descriptive SidebarFormatError."""
    with pytest.raises(SidebarFormatError, match=re.escape(fragment)):
        SidebarIndex(groups)


def test_categories_resolve_labels() -> None:
    """Category helpers resolve known and unknown labels."""
    index = SidebarIndex({"struct": [("Box", "")], "widget": [("Knob", "")]})
    kinds = [category.kind for category in index.categories()]
    assert kinds == [ItemKind.STRUCT, ItemKind.OTHER]

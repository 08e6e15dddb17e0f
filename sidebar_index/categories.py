"""Category vocabulary understood by the sidebar renderer.

Emitters label every sidebar group with a short category string such as
``"struct"`` or ``"fn"``. The renderer knows a closed set of these labels and
uses them to pick a heading and a display position. Labels outside the set are
still accepted: they resolve to :attr:`ItemKind.OTHER` and render as a generic
group titled with the raw label.

Example
-------
>>> from sidebar_index.categories import resolve_category
>>> resolve_category("struct").title
'Structs'
>>> resolve_category("function").kind.value
'fn'
>>> resolve_category("widget").title
'widget'
"""

from __future__ import annotations

import dataclasses as dc
import enum


class ItemKind(enum.StrEnum):
    """Known sidebar categories, declared in display order."""

    PRIMITIVE = "primitive"
    MODULE = "mod"
    MACRO = "macro"
    ATTRIBUTE_MACRO = "attr"
    DERIVE_MACRO = "derive"
    STRUCT = "struct"
    ENUM = "enum"
    UNION = "union"
    CONSTANT = "constant"
    STATIC = "static"
    TRAIT = "trait"
    FUNCTION = "fn"
    TYPE = "type"
    FOREIGN_TYPE = "foreigntype"
    KEYWORD = "keyword"
    TRAIT_ALIAS = "traitalias"
    OTHER = "other"

    @property
    def order(self) -> int:
        """Return the display position of this kind; ``OTHER`` sorts last."""
        return _ORDER[self]


KIND_TITLES: dict[ItemKind, str] = {
    ItemKind.PRIMITIVE: "Primitive Types",
    ItemKind.MODULE: "Modules",
    ItemKind.MACRO: "Macros",
    ItemKind.ATTRIBUTE_MACRO: "Attribute Macros",
    ItemKind.DERIVE_MACRO: "Derive Macros",
    ItemKind.STRUCT: "Structs",
    ItemKind.ENUM: "Enums",
    ItemKind.UNION: "Unions",
    ItemKind.CONSTANT: "Constants",
    ItemKind.STATIC: "Statics",
    ItemKind.TRAIT: "Traits",
    ItemKind.FUNCTION: "Functions",
    ItemKind.TYPE: "Type Definitions",
    ItemKind.FOREIGN_TYPE: "Foreign Types",
    ItemKind.KEYWORD: "Keywords",
    ItemKind.TRAIT_ALIAS: "Trait Aliases",
}

LABEL_ALIASES: dict[str, ItemKind] = {
    "module": ItemKind.MODULE,
    "function": ItemKind.FUNCTION,
    "const": ItemKind.CONSTANT,
}

_ORDER: dict[ItemKind, int] = {kind: idx for idx, kind in enumerate(ItemKind)}
_KNOWN_LABELS: dict[str, ItemKind] = {
    kind.value: kind for kind in ItemKind if kind is not ItemKind.OTHER
}


@dc.dataclass(frozen=True, slots=True)
class Category:
    """A category label paired with the kind the renderer resolved it to.

    Attributes
    ----------
    label : str
        Label exactly as it appears in the index; used for hrefs and CSS.
    kind : ItemKind
        Resolved kind, or ``ItemKind.OTHER`` for unrecognized labels.
    """

    label: str
    kind: ItemKind

    @property
    def known(self) -> bool:
        """Return ``True`` when the label belongs to the known vocabulary."""
        return self.kind is not ItemKind.OTHER

    @property
    def title(self) -> str:
        """Return the group heading shown in the sidebar."""
        if self.known:
            return KIND_TITLES[self.kind]
        return self.label.strip() or "Other"

    @property
    def css_class(self) -> str:
        """Return the CSS class applied to the group block."""
        return self.kind.value


def resolve_category(label: str) -> Category:
    """Resolve ``label`` against the known vocabulary and aliases.

    Lookup is exact first, then case-insensitive, then through
    :data:`LABEL_ALIASES`. Unknown labels never raise.
    """
    normalized = label.strip().lower()
    kind = (
        _KNOWN_LABELS.get(label)
        or _KNOWN_LABELS.get(normalized)
        or LABEL_ALIASES.get(normalized)
        or ItemKind.OTHER
    )
    return Category(label=label, kind=kind)


def category_sort_key(category: Category, position: int) -> tuple[int, int]:
    """Return a sort key placing known kinds first, in vocabulary order."""
    return (category.kind.order, position)


__all__ = [
    "KIND_TITLES",
    "LABEL_ALIASES",
    "Category",
    "ItemKind",
    "category_sort_key",
    "resolve_category",
]

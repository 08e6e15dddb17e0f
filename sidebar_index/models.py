"""Immutable data structures describing a documentation sidebar index.

A :class:`SidebarIndex` maps category labels (``"struct"``, ``"enum"`` ...) to
an ordered tuple of :class:`Entry` values. Entry order is the emitter's display
order and is preserved exactly; category key order carries no meaning.

Structural problems (wrong types, malformed entry pairs) are rejected on
construction with :class:`SidebarFormatError`. Semantic problems such as
duplicate names are left to :mod:`sidebar_index.validation`.

Example
-------
>>> from sidebar_index.models import SidebarIndex
>>> index = SidebarIndex({"struct": [("Box", "An axis-aligned box.")]})
>>> index["struct"][0].name
'Box'
>>> index.entry_count
1
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from types import MappingProxyType

from .categories import Category, resolve_category

if typ.TYPE_CHECKING:
    from .validation import ValidationIssue

EntryLike = typ.Union["Entry", cabc.Sequence[str]]


class SidebarIndexError(ValueError):
    """Base class for sidebar index failures."""


class SidebarFormatError(SidebarIndexError):
    """Raised when sidebar data has the wrong shape or types."""


class SidebarValidationError(SidebarIndexError):
    """Raised when strict validation finds semantic defects in an index."""

    def __init__(self, issues: cabc.Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Sidebar index failed validation: {details}")


class SidebarRegistrationError(SidebarIndexError):
    """Raised when a sidebar index is registered twice on the same page."""


@dc.dataclass(frozen=True, slots=True)
class Entry:
    """A documented symbol shown in the sidebar.

    Attributes
    ----------
    name : str
        Symbol identifier, unique within its category.
    summary : str
        Single-line description; empty when the symbol is undocumented.
    """

    name: str
    summary: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            msg = f"Entry name must be a string, got {type(self.name).__name__}."
            raise SidebarFormatError(msg)
        if not isinstance(self.summary, str):
            msg = (
                f"Summary for entry '{self.name}' must be a string, "
                f"got {type(self.summary).__name__}."
            )
            raise SidebarFormatError(msg)

    def as_pair(self) -> tuple[str, str]:
        """Return the ``(name, summary)`` pair used by the wire format."""
        return (self.name, self.summary)


def _coerce_entry(label: str, position: int, value: object) -> Entry:
    """Return ``value`` as an :class:`Entry`, accepting two-item sequences."""
    match value:
        case Entry():
            return value
        case [name, summary]:
            return Entry(name, summary)  # type: ignore[arg-type]
    msg = (
        f"Entry {position} in category '{label}' must be a (name, summary) pair, "
        f"got {value!r}."
    )
    raise SidebarFormatError(msg)


class SidebarIndex(cabc.Mapping[str, tuple[Entry, ...]]):
    """Read-only mapping from category label to ordered entries."""

    __slots__ = ("_groups",)

    def __init__(
        self, groups: cabc.Mapping[str, cabc.Iterable[EntryLike]] | None = None
    ) -> None:
        """Build an index from a mapping of labels to entries.

        Parameters
        ----------
        groups : Mapping[str, Iterable[Entry | Sequence[str]]], optional
            Category labels mapped to entries, either :class:`Entry` objects or
            ``(name, summary)`` pairs. ``None`` builds an empty index.

        Raises
        ------
        SidebarFormatError
            If ``groups`` is not a mapping, a label is not a string, a category
            is not iterable, or an entry is not a well-formed pair of strings.
        """
        if groups is None:
            groups = {}
        if not isinstance(groups, cabc.Mapping):
            msg = (
                "Sidebar data must map category labels to entries, "
                f"got {type(groups).__name__}."
            )
            raise SidebarFormatError(msg)
        built: dict[str, tuple[Entry, ...]] = {}
        for label, entries in groups.items():
            if not isinstance(label, str):
                msg = f"Category labels must be strings, got {label!r}."
                raise SidebarFormatError(msg)
            if isinstance(entries, str | bytes) or not isinstance(
                entries, cabc.Iterable
            ):
                msg = f"Category '{label}' must hold a list of entries."
                raise SidebarFormatError(msg)
            built[label] = tuple(
                _coerce_entry(label, idx, value) for idx, value in enumerate(entries)
            )
        self._groups = MappingProxyType(built)

    @classmethod
    def empty(cls) -> SidebarIndex:
        """Return an index with no categories."""
        return cls()

    def __getitem__(self, label: str) -> tuple[Entry, ...]:
        return self._groups[label]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __hash__(self) -> int:
        return hash(frozenset(self._groups.items()))

    def __repr__(self) -> str:
        summary = ", ".join(
            f"{label!r}: {len(entries)}" for label, entries in self._groups.items()
        )
        return f"{type(self).__name__}({{{summary}}})"

    @property
    def entry_count(self) -> int:
        """Return the total number of entries across all categories."""
        return sum(len(entries) for entries in self._groups.values())

    def categories(self) -> list[Category]:
        """Return the resolved :class:`Category` for each label, in index order."""
        return [resolve_category(label) for label in self._groups]

    def names(self, label: str) -> list[str]:
        """Return entry names for ``label`` in display order."""
        return [entry.name for entry in self._groups.get(label, ())]


__all__ = [
    "Entry",
    "SidebarFormatError",
    "SidebarIndex",
    "SidebarIndexError",
    "SidebarRegistrationError",
    "SidebarValidationError",
]

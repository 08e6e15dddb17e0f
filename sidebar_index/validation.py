"""Semantic checks for sidebar indexes.

Structural errors are caught when a :class:`~sidebar_index.models.SidebarIndex`
is built. This module looks for the defects that still leave a well-shaped
index: duplicate entry names, empty category labels or names, and labels the
renderer does not recognize. Unknown labels are only warnings because the
renderer falls back to a generic group for them. Category labels repeated in
the source text are reported by :func:`find_duplicate_categories`, because
decoding collapses them into one key.

Example
-------
>>> from sidebar_index.models import SidebarIndex
>>> from sidebar_index.validation import find_issues
>>> index = SidebarIndex({"struct": [("Box", ""), ("Box", "again")]})
>>> [issue.code for issue in find_issues(index)]
['duplicate-name']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ
from collections import Counter

from .categories import resolve_category
from .models import SidebarValidationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import SidebarIndex

logger = logging.getLogger(__name__)


class Severity(enum.StrEnum):
    """How seriously a validation issue should be treated."""

    WARNING = "warning"
    ERROR = "error"


@dc.dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single semantic defect found in an index.

    Attributes
    ----------
    code : str
        Stable identifier such as ``"duplicate-name"``.
    category : str
        Category label the issue belongs to.
    message : str
        Human-readable description.
    severity : Severity
        ``ERROR`` issues fail strict validation; ``WARNING`` issues never do.
    name : str | None
        Entry name involved, when the issue concerns a single entry.
    """

    code: str
    category: str
    message: str
    severity: Severity = Severity.ERROR
    name: str | None = None

    def __str__(self) -> str:
        return f"[{self.severity}] {self.code}: {self.message}"


def find_issues(index: SidebarIndex) -> list[ValidationIssue]:
    """Return every semantic issue in ``index``, in index order."""
    issues: list[ValidationIssue] = []
    for category in index.categories():
        label = category.label
        if not label.strip():
            issues.append(
                ValidationIssue(
                    code="empty-category",
                    category=label,
                    message="Category label is empty.",
                )
            )
        elif not category.known:
            issues.append(
                ValidationIssue(
                    code="unknown-category",
                    category=label,
                    message=f"Category '{label}' is not a known sidebar category.",
                    severity=Severity.WARNING,
                )
            )
        seen: set[str] = set()
        reported: set[str] = set()
        for position, entry in enumerate(index[label]):
            if not entry.name.strip():
                issues.append(
                    ValidationIssue(
                        code="empty-name",
                        category=label,
                        message=f"Entry {position} in '{label}' has an empty name.",
                        name=entry.name,
                    )
                )
                continue
            if entry.name in seen and entry.name not in reported:
                reported.add(entry.name)
                issues.append(
                    ValidationIssue(
                        code="duplicate-name",
                        category=label,
                        message=f"Entry '{entry.name}' appears more than once in "
                        f"'{label}'.",
                        name=entry.name,
                    )
                )
            seen.add(entry.name)
    return issues


def find_duplicate_categories(labels: cabc.Iterable[str]) -> list[ValidationIssue]:
    """Return one issue per category label that occurs more than once.

    A decoded mapping keeps only the last value for a repeated key, so the
    labels must come from the source text in their original order.
    """
    counts = Counter(labels)
    return [
        ValidationIssue(
            code="duplicate-category",
            category=label,
            message=f"Category '{label}' appears {count} times; only the last "
            "occurrence is kept.",
        )
        for label, count in counts.items()
        if count > 1
    ]


def validate_index(
    index: SidebarIndex,
    *,
    strict: bool = True,
    extra: cabc.Iterable[ValidationIssue] = (),
) -> list[ValidationIssue]:
    """Validate ``index`` and return the issues found.

    Parameters
    ----------
    index : SidebarIndex
        Index to inspect.
    strict : bool, optional
        When ``True`` (default), any ``ERROR`` issue raises. When ``False``
        every issue is logged as a warning and the index is accepted.
    extra : Iterable[ValidationIssue], optional
        Issues found before the index was built, such as repeated category
        keys in the source text. They are reported ahead of the index's own.

    Returns
    -------
    list[ValidationIssue]
        All issues found, including warnings.

    Raises
    ------
    SidebarValidationError
        In strict mode, when at least one ``ERROR`` issue is present.
    """
    issues = [*extra, *find_issues(index)]
    errors = [issue for issue in issues if issue.severity is Severity.ERROR]
    if strict and errors:
        raise SidebarValidationError(errors)
    for issue in issues:
        logger.warning("sidebar index: %s", issue)
    return issues


__all__ = [
    "Severity",
    "ValidationIssue",
    "find_duplicate_categories",
    "find_issues",
    "validate_index",
]

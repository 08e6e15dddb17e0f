"""Helpers for documentation generators that emit sidebar indexes.

Symbol discovery belongs to the generator. Once it knows a symbol's category,
name, and doc comment, :class:`SidebarIndexBuilder` turns those into a
:class:`~sidebar_index.models.SidebarIndex` with alphabetized entries and
single-line summaries.

Example
-------
>>> from sidebar_index.emitter import SidebarIndexBuilder
>>> builder = SidebarIndexBuilder()
>>> builder.add("struct", "Torus", "A torus (donut) shape.\\n\\nMore detail.")
>>> builder.add("struct", "Cube")
>>> builder.build()["struct"][0].name
'Cube'
"""

from __future__ import annotations

import html
import re
import typing as typ

from markdown import Markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

from .models import Entry, SidebarIndex, SidebarValidationError
from .validation import ValidationIssue

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element
else:  # pragma: no cover - type-checking fallback
    Element = typ.Any

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
WHITESPACE = re.compile(r"\s+")

# Below the built-in ``unescape`` pass (0) so backslash escapes are restored.
PLAIN_TEXT_PRIORITY = -5


class PlainTextExtension(Extension):
    """Capture the text content of a converted markdown document.

    After ``Markdown.convert`` runs, :attr:`text` holds the document with every
    element flattened away, inline HTML tags dropped, and character entities
    decoded.
    """

    def __init__(self) -> None:
        super().__init__()
        self.processor: PlainTextTreeprocessor | None = None

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the plain-text treeprocessor on the Markdown instance."""
        self.processor = PlainTextTreeprocessor(md)
        md.treeprocessors.register(
            self.processor, "sidebar_plain_text", PLAIN_TEXT_PRIORITY
        )

    @property
    def text(self) -> str:
        """Return the text captured by the last conversion."""
        return self.processor.text if self.processor else ""


class PlainTextTreeprocessor(Treeprocessor):
    """Join the text nodes of the parsed tree into a single string."""

    def __init__(self, md: Markdown) -> None:
        super().__init__(md)
        self.text = ""

    def run(self, root: Element) -> Element:
        """Record the flattened text of ``root`` and leave the tree unchanged."""
        joined = "".join(root.itertext())
        self.text = html.unescape(HTML_PLACEHOLDER_RE.sub(self._stashed_text, joined))
        return root

    def _stashed_text(self, match: re.Match[str]) -> str:
        """Keep stashed character entities and drop stashed inline tags."""
        raw = self.md.htmlStash.rawHtmlBlocks[int(match.group(1))]
        if isinstance(raw, str) and raw.startswith("&"):
            return raw
        return ""


def summarize(docs: str | None) -> str:
    """Return a single-line plain-text summary of a markdown doc comment.

    Only the first paragraph is kept. Inline markdown such as emphasis, code
    spans, and links is parsed and then flattened to its text.
    """
    text = (docs or "").strip()
    if not text:
        return ""
    first_paragraph = PARAGRAPH_BREAK.split(text, maxsplit=1)[0]
    extension = PlainTextExtension()
    Markdown(extensions=[extension]).convert(first_paragraph)
    return WHITESPACE.sub(" ", extension.text).strip()


class SidebarIndexBuilder:
    """Collect documented symbols and build a sorted sidebar index."""

    def __init__(self) -> None:
        self._groups: dict[str, dict[str, str]] = {}

    def add(self, category: str, name: str, docs: str | None = None) -> None:
        """Record a symbol under ``category``.

        Raises
        ------
        SidebarValidationError
            If ``name`` was already added to ``category``.
        """
        entries = self._groups.setdefault(category, {})
        if name in entries:
            issue = ValidationIssue(
                code="duplicate-name",
                category=category,
                message=f"Entry '{name}' was emitted twice for '{category}'.",
                name=name,
            )
            raise SidebarValidationError([issue])
        entries[name] = summarize(docs)

    def build(self) -> SidebarIndex:
        """Return the collected symbols with categories and names sorted."""
        return SidebarIndex(
            {
                category: [
                    Entry(name, summary) for name, summary in sorted(entries.items())
                ]
                for category, entries in sorted(self._groups.items())
            }
        )


__all__ = ["SidebarIndexBuilder", "summarize"]

r"""Serialize sidebar indexes to and from their wire formats.

Two textual forms exist for the same payload:

* plain JSON, an object whose values are arrays of ``[name, summary]`` pairs;
* the ``sidebar-items.js`` script, which wraps that JSON in a
  ``initSidebarItems(...);`` call so a page can load it with a script tag.

Decoding is typed through ``msgspec`` so shape errors report the JSON path of
the offending value. Every decode validates the result: structural errors
always raise :class:`~sidebar_index.models.SidebarFormatError`, semantic
issues raise only when ``strict`` is set and are logged otherwise. A category
label repeated in the source object is one such issue: only its last value
survives decoding.

Example
-------
>>> from sidebar_index.codec import dump_script, loads
>>> index = loads('{"enum": [["CapsuleUvProfile", "UV layout."]]}')
>>> dump_script(index)
'initSidebarItems({"enum":[["CapsuleUvProfile","UV layout."]]});'
"""

from __future__ import annotations

import json
import re
import typing as typ

import msgspec
import msgspec.json

from ._constants import SCRIPT_CALLBACK, SCRIPT_TEMPLATE
from .models import SidebarFormatError, SidebarIndex
from .validation import find_duplicate_categories, find_issues, validate_index

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .validation import ValidationIssue

WireFormat = dict[str, list[tuple[str, str]]]

SCRIPT_PATTERN = re.compile(
    rf"^\s*{SCRIPT_CALLBACK}\s*\((?P<payload>.*)\)\s*;?\s*$", re.DOTALL
)
SCRIPT_SUFFIXES = frozenset({".js"})

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder(WireFormat)


def to_wire(index: SidebarIndex) -> dict[str, list[list[str]]]:
    """Return ``index`` as plain nested lists ready for any JSON encoder."""
    return {
        label: [list(entry.as_pair()) for entry in entries]
        for label, entries in index.items()
    }


def from_wire(payload: object, *, strict: bool = False) -> SidebarIndex:
    """Build an index from already-decoded Python data.

    Parameters
    ----------
    payload : object
        Mapping of category labels to lists of ``[name, summary]`` pairs.
    strict : bool, optional
        Reject semantic defects instead of logging them.

    Raises
    ------
    SidebarFormatError
        If ``payload`` does not have the wire shape.
    SidebarValidationError
        If ``strict`` is set and the index has semantic defects.
    """
    try:
        groups = msgspec.convert(payload, type=WireFormat)
    except msgspec.ValidationError as exc:
        msg = f"Sidebar data has an invalid shape: {exc}"
        raise SidebarFormatError(msg) from exc
    return _finish(groups, strict=strict)


def dumps(index: SidebarIndex, *, indent: int | None = None) -> str:
    """Encode ``index`` as JSON text, compact unless ``indent`` is given."""
    encoded = _encoder.encode(to_wire(index))
    if indent is not None:
        encoded = msgspec.json.format(encoded, indent=indent)
    return encoded.decode("utf-8")


def loads(data: str | bytes, *, strict: bool = False) -> SidebarIndex:
    """Decode JSON text into an index.

    Raises
    ------
    SidebarFormatError
        If ``data`` is not valid JSON or does not have the wire shape.
    SidebarValidationError
        If ``strict`` is set and the index has semantic defects, including a
        category label that appears more than once in ``data``.
    """
    groups, issues = _decode(data)
    return _finish(groups, strict=strict, issues=issues)


def dump_script(index: SidebarIndex) -> str:
    """Encode ``index`` in the ``initSidebarItems(...);`` script form."""
    return SCRIPT_TEMPLATE.format(payload=dumps(index))


def load_script(text: str, *, strict: bool = False) -> SidebarIndex:
    """Decode a ``sidebar-items.js`` script body into an index.

    Raises
    ------
    SidebarFormatError
        If the text is not a single ``initSidebarItems`` call or its payload is
        malformed.
    """
    return loads(_script_payload(text), strict=strict)


def read_index(path: Path, *, strict: bool = False) -> SidebarIndex:
    """Load an index from ``path``, choosing the format from its suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in SCRIPT_SUFFIXES:
        return load_script(text, strict=strict)
    return loads(text, strict=strict)


def inspect_index(path: Path) -> tuple[SidebarIndex, list[ValidationIssue]]:
    """Load ``path`` and return the index with every issue found in it.

    Unlike :func:`read_index`, semantic issues are neither raised nor logged;
    the caller decides how to report them.

    Raises
    ------
    SidebarFormatError
        If the file content is structurally malformed.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in SCRIPT_SUFFIXES:
        text = _script_payload(text)
    groups, issues = _decode(text)
    index = SidebarIndex(groups)
    return index, [*issues, *find_issues(index)]


def write_index(index: SidebarIndex, path: Path) -> Path:
    """Write ``index`` to ``path`` in the format implied by its suffix."""
    if path.suffix.lower() in SCRIPT_SUFFIXES:
        text = dump_script(index)
    else:
        text = dumps(index, indent=2) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _script_payload(text: str) -> str:
    match = SCRIPT_PATTERN.match(text)
    if match is None:
        msg = f"Expected a single {SCRIPT_CALLBACK}(...) call in sidebar script."
        raise SidebarFormatError(msg)
    return match.group("payload")


def _decode(data: str | bytes) -> tuple[WireFormat, list[ValidationIssue]]:
    """Decode ``data`` and report category labels the decoder collapsed."""
    try:
        groups = _decoder.decode(data)
    except msgspec.DecodeError as exc:
        msg = f"Could not decode sidebar data: {exc}"
        raise SidebarFormatError(msg) from exc
    # The decoded dict keeps one value per label, so count labels in the text.
    pairs = json.loads(data, object_pairs_hook=list)
    return groups, find_duplicate_categories(label for label, _ in pairs)


def _finish(
    groups: WireFormat, *, strict: bool, issues: list[ValidationIssue] | None = None
) -> SidebarIndex:
    index = SidebarIndex(groups)
    validate_index(index, strict=strict, extra=issues or ())
    return index


__all__ = [
    "SCRIPT_PATTERN",
    "WireFormat",
    "dump_script",
    "dumps",
    "from_wire",
    "inspect_index",
    "load_script",
    "loads",
    "read_index",
    "to_wire",
    "write_index",
]

"""Load sidebar configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from sidebar_index._constants import SIDEBAR_HTML_FILENAME

from .models import (
    ConfigError,
    CurrentItemConfig,
    SidebarPageConfig,
    SidebarSiteConfig,
)


def load_sidebar_config(path: Path) -> SidebarSiteConfig:
    """Load the YAML configuration describing which sidebars to render.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/sidebar.yaml``).

    Returns
    -------
    SidebarSiteConfig
        Parsed configuration with every page's defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If no pages are defined or a page lacks its ``index`` path.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    page_defaults = _PageDefaults(
        strict=bool(defaults.get("strict", False)),
        output_dir=Path(defaults.get("output_dir", "public")),
        relpath=str(defaults.get("relpath", "") or ""),
    )

    pages_raw = raw.get("pages") or {}
    if not pages_raw:
        msg = "No pages defined in sidebar configuration."
        raise ConfigError(msg)

    pages: dict[str, SidebarPageConfig] = {}
    for key, payload in pages_raw.items():
        match payload:
            case dict():
                pages[key] = _build_page_config(
                    key=str(key), payload=payload, defaults=page_defaults
                )
            case _:
                continue

    return SidebarSiteConfig(
        pages=pages,
        strict=page_defaults.strict,
        output_dir=page_defaults.output_dir,
    )


@dc.dataclass(slots=True)
class _PageDefaults:
    """Internal container for page default configuration values."""

    strict: bool
    output_dir: Path
    relpath: str


def _build_page_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _PageDefaults,
) -> SidebarPageConfig:
    """Build a SidebarPageConfig for a single page entry using defaults."""
    index = payload.get("index")
    if not index:
        msg = f"Page '{key}' is missing 'index'."
        raise ConfigError(msg)

    output = payload.get("output")
    output_path = (
        Path(output) if output else defaults.output_dir / key / SIDEBAR_HTML_FILENAME
    )
    return SidebarPageConfig(
        key=key,
        index_path=Path(index),
        output_path=output_path,
        module_path=str(payload.get("module_path") or key),
        relpath=str(payload.get("relpath", defaults.relpath) or ""),
        strict=bool(payload.get("strict", defaults.strict)),
        current=_build_current(key, payload.get("current")),
    )


def _build_current(key: str, value: object) -> CurrentItemConfig | None:
    """Return the highlighted item for a page, if one is configured."""
    match value:
        case None:
            return None
        case {"name": str(name), "category": str(category)}:
            return CurrentItemConfig(name=name, category=category)
        case _:
            msg = (
                f"Page '{key}' has an invalid 'current' entry; "
                "expected name and category."
            )
            raise ConfigError(msg)


__all__ = ["load_sidebar_config"]

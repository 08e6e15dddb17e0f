"""Typed dataclasses describing sidebar generation configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class ConfigError(ValueError):
    """Raised when the sidebar configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class CurrentItemConfig:
    """Symbol highlighted in a page's sidebar."""

    name: str
    category: str


@dc.dataclass(slots=True)
class SidebarPageConfig:
    """A fully resolved page definition sourced from YAML config."""

    key: str
    index_path: Path
    output_path: Path
    module_path: str
    relpath: str
    strict: bool
    current: CurrentItemConfig | None = None


@dc.dataclass(slots=True)
class SidebarSiteConfig:
    """Collection of page configs alongside shared defaults."""

    pages: dict[str, SidebarPageConfig]
    strict: bool = False
    output_dir: Path = Path("public")

    def get_page(self, page_id: str) -> SidebarPageConfig:
        """Return the requested page configuration."""
        try:
            return self.pages[page_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.pages))
            msg = f"Unknown page '{page_id}'. Known pages: {available}"
            raise KeyError(msg) from exc


__all__ = [
    "ConfigError",
    "CurrentItemConfig",
    "SidebarPageConfig",
    "SidebarSiteConfig",
]

"""Load and validate sidebar generation YAML.

This subpackage parses ``config/sidebar.yaml``, merges global defaults with
per-page overrides, and produces typed dataclasses
(:class:`SidebarSiteConfig`, :class:`SidebarPageConfig`) that the CLI
consumes. The primary entry point is :func:`load_sidebar_config`.

Examples
--------
>>> from pathlib import Path
>>> from sidebar_index.config import load_sidebar_config
>>> site = load_sidebar_config(Path("config/sidebar.yaml"))  # doctest: +SKIP
>>> site.get_page("shape").index_path  # doctest: +SKIP
PosixPath('bevy/prelude/shape/sidebar-items.js')
"""

from .loader import load_sidebar_config
from .models import (
    ConfigError,
    CurrentItemConfig,
    SidebarPageConfig,
    SidebarSiteConfig,
)

__all__ = [
    "ConfigError",
    "CurrentItemConfig",
    "SidebarPageConfig",
    "SidebarSiteConfig",
    "load_sidebar_config",
]

"""Load and validate the course site configuration YAML.

This subpackage parses the project's ``site.yaml`` file into strongly typed
dataclasses (:class:`SiteConfig`, :class:`ThemeConfig`, :class:`SidebarGroup`,
etc.) that the validator and the ``config.js`` exporter consume. The primary
entry point is :func:`load_site_config`, which rejects ambiguous documents and
returns a :class:`SiteConfig` that is never mutated afterwards.

Examples
--------
>>> from pathlib import Path
>>> from course_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_group("/introduction/").pages[:2]  # doctest: +SKIP
['', '01_introduction_to_computer_programming/']
"""

from .loader import build_site_config, load_site_config
from .models import (
    MarkdownConfig,
    NavLink,
    PluginDeclaration,
    SidebarGroup,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "MarkdownConfig",
    "NavLink",
    "PluginDeclaration",
    "SidebarGroup",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "build_site_config",
    "load_site_config",
]

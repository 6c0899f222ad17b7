"""Typed dataclasses describing the course site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or ambiguous."""


@dc.dataclass(slots=True)
class NavLink:
    """Top-level link shown in the primary navigation bar."""

    text: str
    link: str

    @property
    def is_external(self) -> bool:
        """Return ``True`` when the link leaves the documentation site."""
        return self.link.lower().startswith(("http://", "https://", "mailto:"))


@dc.dataclass(slots=True)
class SidebarGroup:
    """Ordered list of page identifiers sharing a path prefix.

    Attributes
    ----------
    prefix : str
        Route prefix such as ``/introduction/``; ``/`` is the fallback group.
    pages : list[str]
        Page identifiers relative to ``prefix``. An empty string denotes the
        group's index page and entries starting with ``/`` are absolute.
    """

    prefix: str
    pages: list[str] = dc.field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        """Return ``True`` for the catch-all ``/`` group."""
        return self.prefix == "/"


@dc.dataclass(slots=True)
class PluginDeclaration:
    """Optional renderer behaviour enabled with the given options."""

    name: str
    options: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class MarkdownConfig:
    """Markdown rendering switches passed through to the renderer."""

    line_numbers: bool = False


@dc.dataclass(slots=True)
class ThemeConfig:
    """Navigation, sidebar, and repository settings for the default theme."""

    nav: list[NavLink] = dc.field(default_factory=list)
    sidebar: dict[str, SidebarGroup] = dc.field(default_factory=dict)
    sidebar_depth: int = 1
    repo: str | None = None
    docs_dir: str = "docs"
    docs_branch: str = "master"


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration sourced from YAML."""

    title: str
    description: str = ""
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    markdown: MarkdownConfig = dc.field(default_factory=MarkdownConfig)
    service_worker: bool = False
    plugins: list[PluginDeclaration] = dc.field(default_factory=list)

    @property
    def repo_url(self) -> str | None:
        """Return the GitHub URL of the configured repository, if any."""
        if not self.theme.repo:
            return None
        return f"https://github.com/{self.theme.repo}"

    def get_group(self, prefix: str) -> SidebarGroup:
        """Return the sidebar group registered under ``prefix``."""
        try:
            return self.theme.sidebar[prefix]
        except KeyError as exc:
            available = ", ".join(self.theme.sidebar) or "<none>"
            msg = f"Unknown sidebar group '{prefix}'. Known groups: {available}"
            raise KeyError(msg) from exc

    def group_for(self, route: str) -> SidebarGroup | None:
        """Return the group whose prefix is the longest match for ``route``.

        The ``/`` group matches every route, so it is only returned when no
        more specific prefix applies.
        """
        groups = self.theme.sidebar.values()
        matches = [
            group
            for group in groups
            if not group.is_fallback and route.startswith(group.prefix)
        ]
        if matches:
            return max(matches, key=lambda group: len(group.prefix))
        return next((group for group in groups if group.is_fallback), None)


__all__ = [
    "MarkdownConfig",
    "NavLink",
    "PluginDeclaration",
    "SidebarGroup",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
]

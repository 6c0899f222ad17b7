"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .models import (
    MarkdownConfig,
    NavLink,
    PluginDeclaration,
    SidebarGroup,
    SiteConfigError,
    ThemeConfig,
)

DEFAULT_DOCS_DIR = "docs"
DEFAULT_DOCS_BRANCH = "master"
DEFAULT_SIDEBAR_DEPTH = 1


def _pick(
    payload: cabc.Mapping[str, typ.Any],
    key: str,
    alias: str | None = None,
    default: typ.Any = None,
) -> typ.Any:
    """Return ``payload[key]`` or ``payload[alias]``, rejecting double definitions.

    The external renderer spells its keys in camelCase while the YAML file
    prefers snake_case. Both spellings are accepted, but giving both for the
    same setting is ambiguous.
    """
    if alias and key in payload and alias in payload:
        msg = f"Both '{key}' and '{alias}' are set; keep only one."
        raise SiteConfigError(msg)
    if key in payload:
        return payload[key]
    if alias and alias in payload:
        return payload[alias]
    return default


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value: object, *, field: str) -> bool:
    match value:
        case bool():
            return value
        case None:
            return False
        case _:
            msg = f"'{field}' must be true or false, got {value!r}."
            raise SiteConfigError(msg)


def _as_mapping(value: object, *, field: str) -> cabc.Mapping[str, typ.Any]:
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"'{field}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _build_nav(payload: object) -> list[NavLink]:
    """Build the ordered navigation entries from a YAML sequence."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = "'nav' must be a list of {text, link} entries."
        raise SiteConfigError(msg)
    links: list[NavLink] = []
    for idx, entry in enumerate(payload):
        if not isinstance(entry, cabc.Mapping):
            msg = f"Nav entry #{idx + 1} must be a mapping."
            raise SiteConfigError(msg)
        text = _optional_str(entry.get("text"))
        link = _optional_str(entry.get("link"))
        if not text or not link:
            msg = f"Nav entry #{idx + 1} needs both 'text' and 'link'."
            raise SiteConfigError(msg)
        links.append(NavLink(text=text, link=link))
    return links


def _build_sidebar(payload: object) -> dict[str, SidebarGroup]:
    """Build sidebar groups keyed by prefix, preserving declaration order."""
    groups: dict[str, SidebarGroup] = {}
    for prefix, pages in _as_mapping(payload, field="sidebar").items():
        prefix_text = str(prefix)
        if not (prefix_text.startswith("/") and prefix_text.endswith("/")):
            msg = f"Sidebar prefix '{prefix_text}' must start and end with '/'."
            raise SiteConfigError(msg)
        if pages is None:
            pages = []
        if not isinstance(pages, list):
            msg = f"Sidebar group '{prefix_text}' must be a list of page paths."
            raise SiteConfigError(msg)
        entries: list[str] = []
        for page in pages:
            # YAML turns a bare empty entry into null; it means the index page.
            if page is None:
                page = ""
            if not isinstance(page, str):
                msg = (
                    f"Sidebar group '{prefix_text}' contains a non-string "
                    f"entry: {page!r}."
                )
                raise SiteConfigError(msg)
            entries.append(page.strip())
        groups[prefix_text] = SidebarGroup(prefix=prefix_text, pages=entries)
    return groups


def _build_plugin(entry: object, position: int) -> PluginDeclaration:
    """Build one plugin declaration from any of the accepted spellings.

    Accepted forms are a bare name, a ``{name, options}`` mapping, and the
    renderer's own ``[name, options]`` pair.
    """
    name: object
    options: object
    match entry:
        case str():
            name, options = entry, None
        case cabc.Mapping():
            name, options = entry.get("name"), entry.get("options")
        case [first]:
            name, options = first, None
        case [first, second]:
            name, options = first, second
        case _:
            msg = f"Plugin #{position} has an unsupported shape: {entry!r}."
            raise SiteConfigError(msg)
    plugin_name = _optional_str(name)
    if not plugin_name:
        msg = f"Plugin #{position} is missing a name."
        raise SiteConfigError(msg)
    plugin_options = _as_mapping(options, field=f"plugins[{plugin_name}].options")
    return PluginDeclaration(name=plugin_name, options=dict(plugin_options))


def _build_plugins(payload: object) -> list[PluginDeclaration]:
    """Build plugin declarations in declaration order."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = "'plugins' must be a list."
        raise SiteConfigError(msg)
    return [_build_plugin(entry, idx + 1) for idx, entry in enumerate(payload)]


def _build_theme_config(payload: cabc.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the provided mapping payload."""
    depth = _pick(payload, "sidebar_depth", "sidebarDepth", DEFAULT_SIDEBAR_DEPTH)
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        msg = f"'sidebar_depth' must be a non-negative integer, got {depth!r}."
        raise SiteConfigError(msg)
    return ThemeConfig(
        nav=_build_nav(payload.get("nav")),
        sidebar=_build_sidebar(payload.get("sidebar")),
        sidebar_depth=depth,
        repo=_optional_str(payload.get("repo")),
        docs_dir=_optional_str(_pick(payload, "docs_dir", "docsDir"))
        or DEFAULT_DOCS_DIR,
        docs_branch=_optional_str(_pick(payload, "docs_branch", "docsBranch"))
        or DEFAULT_DOCS_BRANCH,
    )


def _build_markdown_config(payload: cabc.Mapping[str, typ.Any]) -> MarkdownConfig:
    line_numbers = _pick(payload, "line_numbers", "lineNumbers", False)
    return MarkdownConfig(
        line_numbers=_as_bool(line_numbers, field="markdown.line_numbers")
    )


__all__ = [
    "DEFAULT_DOCS_BRANCH",
    "DEFAULT_DOCS_DIR",
    "DEFAULT_SIDEBAR_DEPTH",
    "_as_bool",
    "_as_mapping",
    "_build_markdown_config",
    "_build_nav",
    "_build_plugin",
    "_build_plugins",
    "_build_sidebar",
    "_build_theme_config",
    "_optional_str",
    "_pick",
]

"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.constructor import DuplicateKeyError
from ruamel.yaml.error import YAMLError

from .helpers import (
    _as_bool,
    _as_mapping,
    _build_markdown_config,
    _build_plugins,
    _build_theme_config,
    _optional_str,
    _pick,
)
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML document describing the course site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with navigation, sidebar groups, markdown
        switches, and plugin declarations in declaration order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the document is ambiguous (duplicate keys, a setting given in both
        snake_case and camelCase), the YAML cannot be parsed, or a required
        field is missing or malformed.

    Examples
    --------
    >>> from pathlib import Path
    >>> from course_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> list(config.theme.sidebar)  # doctest: +SKIP
    ['/introduction/', '/oop/', '/']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except DuplicateKeyError as exc:
        msg = f"Duplicate key in '{path}': {exc.problem}"
        raise SiteConfigError(msg) from exc
    except YAMLError as exc:
        msg = f"Invalid YAML in '{path}': {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_site_config(loaded)


def build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already parsed mapping."""
    title = _optional_str(raw.get("title"))
    if not title:
        msg = "Site configuration is missing 'title'."
        raise SiteConfigError(msg)

    theme_raw = _as_mapping(_pick(raw, "theme", "themeConfig"), field="theme")
    markdown_raw = _as_mapping(raw.get("markdown"), field="markdown")

    # The renderer accepts plugins at the top level or under the theme.
    if "plugins" in raw and "plugins" in theme_raw:
        msg = "Plugins are declared both at the top level and under 'theme'."
        raise SiteConfigError(msg)
    plugins_raw = raw.get("plugins", theme_raw.get("plugins"))

    return SiteConfig(
        title=title,
        description=_optional_str(raw.get("description")) or "",
        theme=_build_theme_config(theme_raw),
        markdown=_build_markdown_config(markdown_raw),
        service_worker=_as_bool(
            _pick(raw, "service_worker", "serviceWorker", False),
            field="service_worker",
        ),
        plugins=_build_plugins(plugins_raw),
    )


__all__ = ["build_site_config", "load_site_config"]

"""Render the site configuration as the renderer's ``config.js`` module.

The external site generator reads ``docs/.vuepress/config.js``. This module
turns a loaded :class:`~course_pages.config.SiteConfig` into that file so the
YAML document stays the single source of truth. The main entry point is
``ConfigJsBuilder``, which loads the template, serialises every value with
Jinja's ``tojson`` filter, and writes the result.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from course_pages.config import load_site_config
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> ConfigJsBuilder(config).run()  # doctest: +SKIP
PosixPath('docs/.vuepress/config.js')

Templates reside under ``course_pages/templates`` unless a custom directory
is provided. Side effects are limited to reading the template and writing the
output file.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import DEFAULT_CONFIG_PATH, DEFAULT_EXPORT_PATH

if typ.TYPE_CHECKING:
    from .config import SiteConfig


class ConfigJsBuilder:
    """Render ``config.js`` from structured site configuration."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        output: Path = DEFAULT_EXPORT_PATH,
        source: Path = DEFAULT_CONFIG_PATH,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : SiteConfig
            Loaded site configuration to export.
        output : Path, optional
            Destination of the generated module; defaults to
            ``docs/.vuepress/config.js``.
        source : Path, optional
            Path of the YAML file the config came from, recorded in the
            generated header comment.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``course_pages/templates``.
        """
        self.config = config
        self.output = output
        self.source = source
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Plugin options keep their declared order in the generated file.
        self.env.policies["json.dumps_kwargs"] = {"sort_keys": False}
        self.template = self.env.get_template("config_js.jinja")

    def render(self) -> str:
        """Return the generated module text, always ending with a newline."""
        text = self.template.render(
            config=self.config, source=self.source.as_posix()
        )
        if not text.endswith("\n"):
            text += "\n"
        return text

    def run(self) -> Path:
        """Render and write ``config.js``, returning the output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(self.render(), encoding="utf-8")
        return self.output


__all__ = ["ConfigJsBuilder"]

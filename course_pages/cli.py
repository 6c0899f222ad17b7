"""Cyclopts CLI entrypoint for checking and exporting the course site config.

The ``course-pages`` console script defined here validates the sidebar and
navigation in ``config/site.yaml`` against the Markdown tree, lists the
resolved pages with their titles, and exports the configuration as the
``config.js`` module read by the external site generator. Typical usage
involves running ``course-pages validate`` in CI before the site build and
``course-pages export`` whenever the YAML changes.

Examples
--------
Validate the default configuration:

>>> from course_pages.cli import main
>>> main()  # doctest: +SKIP

Export into a custom location:

>>> from course_pages.cli import app
>>> app(["export", "--output", "build/config.js"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH, DEFAULT_EXPORT_PATH
from .config import SiteConfig, SiteConfigError, load_site_config
from .export import ConfigJsBuilder
from .pages import iter_site_pages
from .validation import validate_site

EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2

app = App(name="course-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_or_exit(config: Path) -> SiteConfig:
    """Load the site config, turning configuration errors into exit status 2."""
    try:
        return load_site_config(config)
    except (FileNotFoundError, TypeError, SiteConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_CONFIG_ERROR) from exc


def _resolve_docs_dir(site_config: SiteConfig, docs_dir: Path | None) -> Path:
    return docs_dir if docs_dir is not None else Path(site_config.theme.docs_dir)


@app.command(help="Check sidebar, navigation, and plugins against the docs tree.")
def validate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    docs_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the docs directory", env_var="INPUT_DOCS_DIR"),
    ] = None,
    strict: typ.Annotated[
        bool, Parameter(help="Fail on warnings as well as errors")
    ] = False,
) -> None:
    """Validate the site configuration and print every finding.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    docs_dir : Path or None, optional
        Markdown content root; defaults to the configured ``docs_dir``
        relative to the working directory.
    strict : bool, optional
        Treat warnings as failures.

    Raises
    ------
    SystemExit
        With status 1 when validation fails and 2 when the configuration
        cannot be loaded.
    """
    site_config = _load_or_exit(config)
    root = _resolve_docs_dir(site_config, docs_dir)
    report = validate_site(site_config, root)
    for issue in report.issues:
        print(issue)
    print(
        f"{_format_path(config)}: {len(report.errors)} error(s), "
        f"{len(report.warnings)} warning(s)"
    )
    if not report.passes(strict=strict):
        raise SystemExit(EXIT_INVALID)


@app.command(help="Write the renderer config.js generated from the YAML config.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    output: typ.Annotated[
        Path, Parameter(help="Where to write config.js", env_var="INPUT_OUTPUT")
    ] = DEFAULT_EXPORT_PATH,
) -> None:
    """Export the site configuration as ``config.js`` and log the written path."""
    site_config = _load_or_exit(config)
    written = ConfigJsBuilder(site_config, output=output, source=config).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="List sidebar pages with their routes and titles.")
def pages(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    docs_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the docs directory", env_var="INPUT_DOCS_DIR"),
    ] = None,
) -> None:
    """Print one line per sidebar entry: route, page id, and title."""
    site_config = _load_or_exit(config)
    root = _resolve_docs_dir(site_config, docs_dir)
    try:
        for page in iter_site_pages(site_config, root):
            if not page.exists:
                label = "(missing)"
            elif page.metadata and page.metadata.title:
                label = page.metadata.title
            else:
                label = "(untitled)"
            print(f"{page.route}\t{page.page_id}\t{label}")
    except SiteConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_CONFIG_ERROR) from exc


def main() -> None:
    """Invoke the Cyclopts application that powers the ``course-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

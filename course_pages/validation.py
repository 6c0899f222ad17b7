"""Structural validation of the site configuration against the docs tree.

The external renderer only reports a broken sidebar or navigation link when a
build fails, if at all. :func:`validate_site` checks the loaded
:class:`~course_pages.config.SiteConfig` against the Markdown files on disk
and returns a :class:`ValidationReport` listing every finding. Findings are
data rather than exceptions so callers can print all of them at once.

>>> from pathlib import Path
>>> from course_pages.config import load_site_config
>>> from course_pages.validation import validate_site
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> report = validate_site(config, Path("docs"))  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .pages import find_page_source, page_id, page_route

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import PluginDeclaration, SiteConfig

Severity = typ.Literal["error", "warning"]

MISSING_DOCS_DIR = "missing-docs-dir"
MISSING_PAGE = "missing-page"
UNKNOWN_SECTION = "unknown-section"
DUPLICATE_ENTRY = "duplicate-entry"
DUPLICATE_PLUGIN = "duplicate-plugin"
PLUGIN_CONFLICT = "plugin-conflict"


@dc.dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single validation finding.

    Attributes
    ----------
    code : str
        Stable identifier such as ``"missing-page"``.
    severity : {"error", "warning"}
        Errors fail the report; warnings only fail it in strict mode.
    message : str
        Human-readable description of the problem.
    location : str
        Where the problem was found, e.g. ``sidebar[/introduction/]``.
    """

    code: str
    severity: Severity
    message: str
    location: str

    def __str__(self) -> str:
        return f"{self.severity}: {self.location}: {self.message} [{self.code}]"


@dc.dataclass(slots=True)
class ValidationReport:
    """Ordered collection of validation findings."""

    issues: list[ValidationIssue] = dc.field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Return the issues with ``error`` severity."""
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Return the issues with ``warning`` severity."""
        return [issue for issue in self.issues if issue.severity == "warning"]

    @property
    def ok(self) -> bool:
        """Return ``True`` when no errors were found."""
        return not self.errors

    def passes(self, *, strict: bool = False) -> bool:
        """Return whether the report passes, treating warnings as errors if strict."""
        if strict:
            return not self.issues
        return self.ok

    def codes(self) -> list[str]:
        """Return the issue codes in discovery order."""
        return [issue.code for issue in self.issues]

    def add(
        self, code: str, severity: Severity, message: str, location: str
    ) -> None:
        """Append a new issue to the report."""
        self.issues.append(
            ValidationIssue(
                code=code, severity=severity, message=message, location=location
            )
        )


def validate_site(config: SiteConfig, docs_dir: Path) -> ValidationReport:
    """Validate sidebar, navigation, and plugin declarations.

    Parameters
    ----------
    config : SiteConfig
        Loaded site configuration.
    docs_dir : Path
        Root of the Markdown content tree (the renderer's ``docsDir``).

    Returns
    -------
    ValidationReport
        Every finding, sidebar issues first, then navigation, then plugins.
        When ``docs_dir`` does not exist the report holds only that error.
    """
    report = ValidationReport()
    if not docs_dir.is_dir():
        report.add(
            MISSING_DOCS_DIR,
            "error",
            f"docs directory '{docs_dir}' does not exist",
            "theme.docs_dir",
        )
        return report
    _check_sidebar(config, docs_dir, report)
    _check_nav(config, docs_dir, report)
    _check_plugins(config.plugins, report)
    return report


def _check_sidebar(
    config: SiteConfig, docs_dir: Path, report: ValidationReport
) -> None:
    for prefix, group in config.theme.sidebar.items():
        location = f"sidebar[{prefix}]"
        seen: set[str] = set()
        for entry in group.pages:
            route = page_route(prefix, entry)
            if route in seen:
                report.add(
                    DUPLICATE_ENTRY,
                    "warning",
                    f"page '{page_id(route)}' is listed more than once",
                    location,
                )
                continue
            seen.add(route)
            if find_page_source(docs_dir, route) is None:
                report.add(
                    MISSING_PAGE,
                    "error",
                    f"entry '{entry}' references missing page '{page_id(route)}'",
                    location,
                )


def _check_nav(
    config: SiteConfig, docs_dir: Path, report: ValidationReport
) -> None:
    sections = config.theme.sidebar
    for idx, link in enumerate(config.theme.nav):
        if link.is_external:
            continue
        location = f"nav[{idx}] '{link.text}'"
        source = find_page_source(docs_dir, link.link)
        if link.link in sections:
            if source is None:
                report.add(
                    MISSING_PAGE,
                    "error",
                    f"section '{link.link}' has no index page "
                    f"'{page_id(link.link)}'",
                    location,
                )
            continue
        if source is None:
            report.add(
                UNKNOWN_SECTION,
                "error",
                f"link '{link.link}' is neither a sidebar section nor a page",
                location,
            )


def _check_plugins(
    plugins: list[PluginDeclaration], report: ValidationReport
) -> None:
    # Option values seen so far for each plugin name, across all declarations.
    seen_options: dict[str, dict[str, typ.Any]] = {}
    for idx, plugin in enumerate(plugins):
        location = f"plugins[{idx}] '{plugin.name}'"
        merged = seen_options.get(plugin.name)
        if merged is None:
            seen_options[plugin.name] = dict(plugin.options)
            continue
        conflicts = sorted(
            key
            for key in merged.keys() & plugin.options.keys()
            if merged[key] != plugin.options[key]
        )
        for key, value in plugin.options.items():
            merged.setdefault(key, value)
        if conflicts:
            keys = ", ".join(conflicts)
            report.add(
                PLUGIN_CONFLICT,
                "error",
                f"redeclared with conflicting values for option(s): {keys}",
                location,
            )
        else:
            report.add(
                DUPLICATE_PLUGIN,
                "warning",
                "declared more than once",
                location,
            )


__all__ = [
    "DUPLICATE_ENTRY",
    "DUPLICATE_PLUGIN",
    "MISSING_DOCS_DIR",
    "MISSING_PAGE",
    "PLUGIN_CONFLICT",
    "UNKNOWN_SECTION",
    "ValidationIssue",
    "ValidationReport",
    "validate_site",
]

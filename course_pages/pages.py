r"""Resolve sidebar entries to content pages and read their metadata.

Sidebar groups list page identifiers relative to a route prefix. This module
turns those identifiers into site routes (``/introduction/02_basics/``), page
ids (``introduction/02_basics/index``), and Markdown files inside the docs
directory, then reads each page's ``title``/``description`` from its front
matter.

Example
-------
>>> from course_pages.pages import page_id, page_route
>>> page_route("/introduction/", "02_basics/")
'/introduction/02_basics/'
>>> page_id("/introduction/02_basics/")
'introduction/02_basics/index'
>>> page_id("/")
'index'
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import INDEX_FILENAMES, PAGE_SUFFIX
from .config import SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SiteConfig, ThemeConfig

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)", re.DOTALL | re.MULTILINE
)
HEADING_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)


@dc.dataclass(slots=True)
class PageMetadata:
    """Per-page title and description.

    Attributes
    ----------
    title : str or None
        Front matter ``title``, or the first level-one heading when the front
        matter does not provide one.
    description : str or None
        Front matter ``description``; never derived from the body.
    """

    title: str | None = None
    description: str | None = None


@dc.dataclass(slots=True)
class SitePage:
    """A sidebar entry resolved against the docs directory."""

    group: str
    entry: str
    route: str
    page_id: str
    source: Path | None = None
    metadata: PageMetadata | None = None
    edit_url: str | None = None

    @property
    def exists(self) -> bool:
        """Return ``True`` when a Markdown source was found for the page."""
        return self.source is not None


def page_route(prefix: str, entry: str) -> str:
    """Join a sidebar entry onto its group prefix.

    Entries starting with ``/`` are already routes and are returned as-is; the
    empty entry is the group's index page.
    """
    if entry.startswith("/"):
        return entry
    return posixpath.join(prefix, entry) if entry else prefix


def page_id(route: str) -> str:
    """Return the page id for ``route``.

    Directory routes map to their ``index`` page and file suffixes are
    dropped, so ``/oop/`` becomes ``oop/index`` and ``/guide/setup.html``
    becomes ``guide/setup``.
    """
    relative = route.lstrip("/")
    if not relative or relative.endswith("/"):
        return f"{relative}index"
    stem, suffix = posixpath.splitext(relative)
    if suffix in {PAGE_SUFFIX, ".html"}:
        return stem
    return relative


def find_page_source(docs_dir: Path, route: str) -> Path | None:
    """Return the Markdown file that renders ``route``, or None if absent."""
    relative = route.lstrip("/")
    if not relative or relative.endswith("/"):
        directory = docs_dir / relative
        candidates = [directory / name for name in INDEX_FILENAMES]
    else:
        stem, suffix = posixpath.splitext(relative)
        if suffix in {PAGE_SUFFIX, ".html"}:
            relative = f"{stem}{PAGE_SUFFIX}"
        else:
            relative = f"{relative}{PAGE_SUFFIX}"
        candidates = [docs_dir / relative]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def parse_page_metadata(text: str, *, source: str = "<page>") -> PageMetadata:
    """Extract page metadata from Markdown text.

    Parameters
    ----------
    text : str
        Raw page content, optionally starting with ``---`` fenced YAML front
        matter.
    source : str, optional
        Label used in error messages, usually the file path.

    Returns
    -------
    PageMetadata
        Title and description; both may be ``None``.

    Raises
    ------
    SiteConfigError
        If the front matter is not valid YAML or not a mapping.
    """
    front: dict[str, typ.Any] = {}
    body = text
    match = FRONT_MATTER_PATTERN.match(text)
    if match:
        front = _load_front_matter(match.group(1), source=source)
        body = text[match.end() :]

    title = _clean(front.get("title"))
    if title is None:
        heading = HEADING_PATTERN.search(body)
        if heading:
            title = _clean(heading.group(1))
    return PageMetadata(title=title, description=_clean(front.get("description")))


def read_page_metadata(path: Path) -> PageMetadata:
    """Read and parse the metadata of the Markdown file at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Page '{path}' is not valid UTF-8: {exc}"
        raise SiteConfigError(msg) from exc
    return parse_page_metadata(text, source=str(path))


def build_edit_url(theme: ThemeConfig, relative_source: str) -> str | None:
    """Return the GitHub "edit this page" URL for a docs-relative file path."""
    if not theme.repo:
        return None
    docs_dir = theme.docs_dir.strip("/")
    path = posixpath.join(docs_dir, relative_source) if docs_dir else relative_source
    return f"https://github.com/{theme.repo}/edit/{theme.docs_branch}/{path}"


def resolve_page(
    config: SiteConfig, docs_dir: Path, group: str, entry: str
) -> SitePage:
    """Resolve one sidebar entry of ``group`` into a :class:`SitePage`."""
    route = page_route(group, entry)
    source = find_page_source(docs_dir, route)
    metadata = None
    edit_url = None
    if source is not None:
        metadata = read_page_metadata(source)
        edit_url = build_edit_url(
            config.theme, source.relative_to(docs_dir).as_posix()
        )
    return SitePage(
        group=group,
        entry=entry,
        route=route,
        page_id=page_id(route),
        source=source,
        metadata=metadata,
        edit_url=edit_url,
    )


def iter_site_pages(config: SiteConfig, docs_dir: Path) -> cabc.Iterator[SitePage]:
    """Yield every sidebar entry as a :class:`SitePage`, in sidebar order."""
    for prefix, group in config.theme.sidebar.items():
        for entry in group.pages:
            yield resolve_page(config, docs_dir, prefix, entry)


def _load_front_matter(text: str, *, source: str) -> dict[str, typ.Any]:
    loader = YAML(typ="safe")
    try:
        loaded = loader.load(text)
    except YAMLError as exc:
        msg = f"Invalid front matter in '{source}': {exc}"
        raise SiteConfigError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"Front matter in '{source}' must be a mapping."
        raise SiteConfigError(msg)
    return loaded


def _clean(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = [
    "PageMetadata",
    "SitePage",
    "build_edit_url",
    "find_page_source",
    "iter_site_pages",
    "page_id",
    "page_route",
    "parse_page_metadata",
    "read_page_metadata",
    "resolve_page",
]

"""Shared fixtures for building throwaway site configs and docs trees."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SITE_YAML = dedent(
    """
    title: Programming - From Base to Ace
    description: CSharp Programming Course
    theme:
      nav:
        - text: Introduction to Programming
          link: /introduction/
        - text: Object Oriented Programming
          link: /oop/
      sidebar:
        /introduction/:
          - ''
          - 01_introduction/
          - 02_basics/
        /oop/:
          - ''
        /:
          - ''
          - /introduction/
          - /oop/
      repo: owner/course
    plugins:
      - name: vuepress-plugin-zooming
        options:
          selector: img
    """
).strip()

COMPLETE_PAGES = (
    "README.md",
    "introduction/README.md",
    "introduction/01_introduction/README.md",
    "introduction/02_basics/README.md",
    "oop/README.md",
)


@pytest.fixture
def write_config(tmp_path: Path) -> cabc.Callable[[str], Path]:
    """Return a helper that writes YAML text to ``tmp_path/site.yaml``."""

    def _write(text: str = SITE_YAML) -> Path:
        path = tmp_path / "site.yaml"
        path.write_text(text.strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_docs(tmp_path: Path) -> cabc.Callable[..., Path]:
    """Return a helper that creates Markdown pages under ``tmp_path/docs``."""

    def _make(pages: cabc.Iterable[str] = COMPLETE_PAGES) -> Path:
        root = tmp_path / "docs"
        root.mkdir(exist_ok=True)
        for relative in pages:
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            title = target.parent.name if target.stem == "README" else target.stem
            target.write_text(f"# {title}\n\nBody.\n", encoding="utf-8")
        return root

    return _make

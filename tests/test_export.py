"""Tests for rendering the renderer's ``config.js`` module."""

from __future__ import annotations

import typing as typ

from course_pages.config import load_site_config
from course_pages.export import ConfigJsBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def test_render_contains_nav_sidebar_and_plugins(
    write_config: cabc.Callable[..., Path], tmp_path: Path
) -> None:
    """The generated module mirrors the YAML in declaration order."""
    config_path = write_config()
    config = load_site_config(config_path)

    text = ConfigJsBuilder(config, output=tmp_path / "config.js").render()

    assert text.startswith("// Generated by course-pages"), text[:80]
    assert "module.exports = {" in text
    assert 'title: "Programming - From Base to Ace",' in text
    assert (
        '{text: "Introduction to Programming", link: "/introduction/"},' in text
    ), "expected the first nav entry as a JS object literal"
    assert '"/introduction/": ["", "01_introduction/", "02_basics/"],' in text
    assert text.index('"/introduction/":') < text.index('"/oop/":') < text.index(
        '"/": ['
    ), "expected sidebar groups in declaration order"
    assert 'repo: "owner/course",' in text
    assert 'docsDir: "docs",' in text
    assert "lineNumbers: false," in text
    assert "serviceWorker: false," in text
    assert '["vuepress-plugin-zooming", {"selector": "img"}],' in text
    assert text.endswith("\n")


def test_plugin_options_keep_declared_order(
    write_config: cabc.Callable[..., Path], tmp_path: Path
) -> None:
    """Option keys are not re-sorted when serialised."""
    config = load_site_config(
        write_config(
            "title: T\nplugins:\n  - name: zoom\n    options: {zIndex: 1, bgColor: black}"
        )
    )

    text = ConfigJsBuilder(config, output=tmp_path / "config.js").render()

    assert '["zoom", {"zIndex": 1, "bgColor": "black"}],' in text
    assert "repo:" not in text, "repo should be omitted when not configured"


def test_run_writes_output(
    write_config: cabc.Callable[..., Path], tmp_path: Path
) -> None:
    """``run`` creates parent directories and returns the written path."""
    config = load_site_config(write_config())
    output = tmp_path / "docs" / ".vuepress" / "config.js"

    written = ConfigJsBuilder(config, output=output).run()

    assert written == output
    assert output.read_text(encoding="utf-8").startswith("// Generated")

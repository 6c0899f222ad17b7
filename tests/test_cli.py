"""Tests for the ``course-pages`` command functions."""

from __future__ import annotations

import typing as typ

import pytest

from course_pages import cli

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def test_validate_passes_on_complete_tree(
    write_config: cabc.Callable[..., Path],
    make_docs: cabc.Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A complete tree prints a zero-issue summary and does not exit."""
    cli.validate(config=write_config(), docs_dir=make_docs())

    out = capsys.readouterr().out
    assert "0 error(s), 0 warning(s)" in out, out


def test_validate_exits_one_on_missing_page(
    write_config: cabc.Callable[..., Path],
    make_docs: cabc.Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A missing sidebar page prints the issue and exits with status 1."""
    docs = make_docs(
        [
            "README.md",
            "introduction/README.md",
            "introduction/01_introduction/README.md",
            "oop/README.md",
        ]
    )

    with pytest.raises(SystemExit) as excinfo:
        cli.validate(config=write_config(), docs_dir=docs)

    assert excinfo.value.code == cli.EXIT_INVALID
    out = capsys.readouterr().out
    assert "introduction/02_basics/index" in out
    assert "[missing-page]" in out


def test_validate_strict_fails_on_warnings(
    write_config: cabc.Callable[..., Path],
    make_docs: cabc.Callable[..., Path],
) -> None:
    """Strict mode turns warnings into a failing exit status."""
    config = write_config(
        "title: T\ntheme:\n  sidebar:\n    /oop/: ['', '']\n"
    )
    docs = make_docs(["oop/README.md"])

    cli.validate(config=config, docs_dir=docs)
    with pytest.raises(SystemExit) as excinfo:
        cli.validate(config=config, docs_dir=docs, strict=True)
    assert excinfo.value.code == cli.EXIT_INVALID


def test_config_errors_exit_two(
    write_config: cabc.Callable[..., Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Unloadable configuration exits with status 2 and reports on stderr."""
    with pytest.raises(SystemExit) as excinfo:
        cli.validate(config=write_config("title: T\ntitle: U"), docs_dir=tmp_path)

    assert excinfo.value.code == cli.EXIT_CONFIG_ERROR
    assert "Duplicate key" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        cli.export(config=tmp_path / "missing.yaml", output=tmp_path / "c.js")
    assert excinfo.value.code == cli.EXIT_CONFIG_ERROR

    with pytest.raises(SystemExit) as excinfo:
        cli.validate(
            config=write_config("title: T\ntheme: [unclosed\n"), docs_dir=tmp_path
        )
    assert excinfo.value.code == cli.EXIT_CONFIG_ERROR
    assert "Invalid YAML" in capsys.readouterr().err


def test_export_writes_config_js(
    write_config: cabc.Callable[..., Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Export writes the module and prints the written path."""
    output = tmp_path / ".vuepress" / "config.js"

    cli.export(config=write_config(), output=output)

    assert output.exists()
    assert "wrote " in capsys.readouterr().out


def test_pages_lists_routes_and_titles(
    write_config: cabc.Callable[..., Path],
    make_docs: cabc.Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Each sidebar entry prints its route, page id, and title."""
    docs = make_docs(["introduction/README.md"])

    cli.pages(config=write_config(), docs_dir=docs)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "/introduction/\tintroduction/index\tintroduction"
    assert lines[1] == (
        "/introduction/01_introduction/\tintroduction/01_introduction/index\t(missing)"
    )


def test_pages_exits_two_on_undecodable_page(
    write_config: cabc.Callable[..., Path],
    make_docs: cabc.Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A page that is not UTF-8 is reported on stderr with exit status 2."""
    docs = make_docs(["introduction/README.md"])
    (docs / "introduction" / "README.md").write_bytes(b"# \xff\xfe bad\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.pages(config=write_config(), docs_dir=docs)

    assert excinfo.value.code == cli.EXIT_CONFIG_ERROR
    assert "not valid UTF-8" in capsys.readouterr().err


def test_docs_dir_comes_from_environment(
    write_config: cabc.Callable[..., Path],
    make_docs: cabc.Callable[..., Path],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``INPUT_DOCS_DIR`` supplies the docs directory when no flag is given."""
    config = write_config()
    docs = make_docs()
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)
    monkeypatch.setenv("INPUT_DOCS_DIR", str(docs))

    try:
        cli.app(["validate", "--config", str(config)])
    except SystemExit as exc:  # newer Cyclopts releases exit after the command
        assert exc.code in (0, None), f"expected success, got exit {exc.code!r}"

    out = capsys.readouterr().out
    assert "0 error(s), 0 warning(s)" in out, out

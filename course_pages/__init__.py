"""Utilities for maintaining the course documentation site configuration.

This package loads the site's ``site.yaml``, checks its sidebar and navigation
against the Markdown content tree, and exports the ``config.js`` module read
by the external site generator.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from course_pages import main
>>> main()  # doctest: +SKIP
>>> from course_pages import app
>>> app(["validate", "--docs-dir", "docs"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

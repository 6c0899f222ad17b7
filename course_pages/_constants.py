"""Common literal values used across course_pages.

These constants keep default paths and page filenames centralized so the CLI,
the page resolver, and tests can import the same values without drifting.
Intended for internal use within the course_pages package.

Examples
--------
>>> from course_pages import _constants
>>> _constants.INDEX_FILENAMES[0]
'README.md'
>>> str(_constants.DEFAULT_EXPORT_PATH)
'docs/.vuepress/config.js'
"""

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config/site.yaml")
DEFAULT_EXPORT_PATH = Path("docs/.vuepress/config.js")
INDEX_FILENAMES = ("README.md", "index.md")
PAGE_SUFFIX = ".md"

"""Common literal values used across docs_sidebar.

These constants keep file names, defaults, and front-matter markers
centralized so the loader, content index, CLI, and tests share the same
values without drifting. Intended for internal use within the docs_sidebar
package.

Examples
--------
>>> from docs_sidebar import _constants
>>> _constants.DEFAULT_MAX_DEPTH
3
>>> ".md" in _constants.DEFAULT_CONTENT_EXTENSIONS
True
"""

DEFAULT_CONFIG_FILENAME = "sidebar.yaml"
DEFAULT_CONTENT_DIR = "src/content/docs"
DEFAULT_CONTENT_EXTENSIONS = (".md", ".mdx")
DEFAULT_MAX_DEPTH = 3
FRONT_MATTER_DELIMITER = "---"
INDEX_STEM = "index"

"""Load and validate sidebar site configuration YAML.

This subpackage parses the project's ``sidebar.yaml`` file: the raw sidebar
literal, the content directory the autogenerate directives draw from, and
the navigation options (nesting limit, dangling-link policy, expansion
workers). The primary entry point is :func:`load_site_config`, which checks
required sections, applies defaults, and returns a
:class:`SidebarSiteConfig` ready for :func:`docs_sidebar.navigation.build_navigation`.

Examples
--------
>>> from pathlib import Path
>>> from docs_sidebar.config import load_site_config
>>> site = load_site_config(Path("sidebar.yaml"))  # doctest: +SKIP
>>> site.navigation.dangling_links.value  # doctest: +SKIP
'error'
"""

from .loader import load_site_config
from .models import (
    ContentConfig,
    NavigationConfig,
    SidebarSiteConfig,
    SiteConfigError,
)

__all__ = [
    "ContentConfig",
    "NavigationConfig",
    "SidebarSiteConfig",
    "SiteConfigError",
    "load_site_config",
]

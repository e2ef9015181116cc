"""Scaffold tabbed Fyne dashboards written in Go.

The package turns a project name and a list of tab labels into a consistent
set of identifiers, renders the entry point and one UI module per tab from
small string templates, and writes the resulting tree. It can be used
programmatically or through the ``dashforge`` command line interface.
"""

from __future__ import annotations

from .config import ProjectConfig, parse_tab_names
from .errors import NoTabsError, ScaffoldError, ScaffoldWriteError
from .naming import label_case, sanitize_identifier, title_case
from .scaffold import DashboardScaffolder, ScaffoldResult
from .schema import ProjectSpec, TabSpec
from .sources import render_entry_point, render_gitignore, render_tab_module
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "DashboardScaffolder",
    "NoTabsError",
    "ProjectConfig",
    "ProjectSpec",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldWriteError",
    "TabSpec",
    "TemplateRenderer",
    "TemplateRenderingError",
    "label_case",
    "parse_tab_names",
    "render_entry_point",
    "render_gitignore",
    "render_tab_module",
    "sanitize_identifier",
    "title_case",
]

__version__ = "0.1.0"

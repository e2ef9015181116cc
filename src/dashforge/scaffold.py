"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ScaffoldWriteError
from .schema import ProjectSpec
from .sources import ENTRY_POINT_FILE_NAME, render_entry_point, render_gitignore, render_tab_module
from .template import TemplateRenderer

__all__ = ["DashboardScaffolder", "ScaffoldResult", "planned_files"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a successful :meth:`DashboardScaffolder.create` call."""

    root: Path
    created: list[Path] = field(default_factory=list)


def planned_files(spec: ProjectSpec, renderer: TemplateRenderer | None = None) -> list[tuple[str, str]]:
    """Return ``(relative_path, content)`` pairs in write order.

    Paths are relative to the project root directory (``spec.module_name``).
    Tabs sharing a file name appear once per tab; the later entry wins on disk.
    """

    renderer = renderer or TemplateRenderer()
    module = spec.module_name
    files = [
        (f"cmd/{module}/{ENTRY_POINT_FILE_NAME}", render_entry_point(module, spec.tabs, renderer)),
    ]
    files.extend(
        (f"internal/ui/{tab.file_name}", render_tab_module(tab, renderer)) for tab in spec.tabs
    )
    files.append((".gitignore", render_gitignore()))
    return files


class DashboardScaffolder:
    """Write the directory tree of a Fyne dashboard described by a :class:`ProjectSpec`."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def create(self, spec: ProjectSpec, target_dir: str | Path) -> ScaffoldResult:
        """Create ``<target_dir>/<module_name>`` and write every generated file.

        An existing project directory is reused and its files overwritten. Any
        other filesystem failure aborts immediately with
        :class:`ScaffoldWriteError`; files written before the failure are left
        in place.
        """

        root = Path(target_dir).expanduser() / spec.module_name
        files = planned_files(spec, self.renderer)

        try:
            root.mkdir(parents=True)
        except FileExistsError:
            if not root.is_dir():
                raise ScaffoldWriteError(root, FileExistsError(f"{root} exists and is not a directory"))
            LOGGER.warning(
                "Directory %s already exists. Files might be overwritten if they exist.", root
            )
        except OSError as exc:
            raise ScaffoldWriteError(root, exc) from exc

        for directory in (root / "cmd" / spec.module_name, root / "internal" / "ui"):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ScaffoldWriteError(directory, exc) from exc

        result = ScaffoldResult(root=root)
        for relative_path, content in files:
            destination = root / relative_path
            try:
                destination.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise ScaffoldWriteError(destination, exc) from exc
            LOGGER.debug("wrote %s (%d bytes)", destination, len(content))
            result.created.append(destination)

        return result

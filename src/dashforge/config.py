"""Configuration helpers shared by the scaffolder and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import NoTabsError
from .schema import ProjectSpec

DEFAULT_PROJECT_NAME = "mydashboard"
DEFAULT_TAB_NAME = "Items"


def parse_tab_names(text: str) -> Tuple[str, ...]:
    """Split a comma separated answer into trimmed, non-empty tab labels.

    Blank input selects the single :data:`DEFAULT_TAB_NAME` tab. Input made
    only of separators yields an empty tuple, which callers must reject.
    """

    if not text.strip():
        return (DEFAULT_TAB_NAME,)
    return tuple(part.strip() for part in text.split(",") if part.strip())


@dataclass(slots=True)
class ProjectConfig:
    """Answers collected from the user, normalised for generation.

    Attributes
    ----------
    name:
        The project name as entered, or :data:`DEFAULT_PROJECT_NAME`.
    tab_names:
        Trimmed tab labels in input order.
    spec:
        The :class:`ProjectSpec` built from :attr:`name` and :attr:`tab_names`.
    default_name_used / default_tabs_used:
        Whether the corresponding answer was blank and replaced by a default.
    """

    name: str
    tab_names: Tuple[str, ...]
    spec: ProjectSpec
    default_name_used: bool = False
    default_tabs_used: bool = False

    @classmethod
    def from_input(cls, project_name: str, tabs: str) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from the two raw prompt answers."""

        name = project_name.strip()
        default_name_used = not name
        if default_name_used:
            name = DEFAULT_PROJECT_NAME

        tab_names = parse_tab_names(tabs)
        if not tab_names:
            raise NoTabsError("no valid tab names provided")

        return cls(
            name=name,
            tab_names=tab_names,
            spec=ProjectSpec.from_names(name, tab_names),
            default_name_used=default_name_used,
            default_tabs_used=not tabs.strip(),
        )

    @property
    def module_name(self) -> str:
        """Sanitized project name, as held by :attr:`spec`."""

        return self.spec.module_name

    def to_spec(self) -> ProjectSpec:
        """Return the immutable :class:`ProjectSpec` for this run."""

        return self.spec


__all__ = ["DEFAULT_PROJECT_NAME", "DEFAULT_TAB_NAME", "ProjectConfig", "parse_tab_names"]

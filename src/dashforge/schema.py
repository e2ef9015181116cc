"""Immutable records describing one generation run."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .naming import sanitize_identifier, title_case

DATA_SUFFIX = "Data"
SOURCE_EXTENSION = ".go"


class TabSpec(BaseModel):
    """One requested tab and the identifiers derived from its label.

    Only :attr:`display_name` is stored; every other name is computed from it,
    so a tab's file, variable and function names always agree.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    display_name: str = Field(..., description="Trimmed label shown to the user, used verbatim.")

    @field_validator("display_name")
    @classmethod
    def _require_trimmed_display_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("display_name must not be blank")
        if value != value.strip():
            raise ValueError("display_name must not have surrounding whitespace")
        return value

    @classmethod
    def from_display_name(cls, name: str) -> "TabSpec":
        """Build a tab from a user supplied label, trimming it first."""

        display_name = name.strip()
        if not display_name:
            raise ValueError("tab name must not be empty")
        return cls(display_name=display_name)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def identifier_base(self) -> str:
        """Sanitized label used for file and variable names."""

        return sanitize_identifier(self.display_name)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title_case_name(self) -> str:
        """UpperCamelCase fragment used in exported function names; may be empty."""

        return title_case(self.display_name)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def variable_name(self) -> str:
        return self.identifier_base + DATA_SUFFIX

    @computed_field  # type: ignore[prop-decorator]
    @property
    def file_name(self) -> str:
        return self.identifier_base + SOURCE_EXTENSION

    @property
    def function_name(self) -> str:
        """Name of the generated accessor, e.g. ``MakeShoppingListUI``."""

        return f"Make{self.title_case_name}UI"


class ProjectSpec(BaseModel):
    """Complete description of a scaffold: module name plus ordered tabs."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Project name as entered by the user.")
    tabs: Tuple[TabSpec, ...] = Field(..., min_length=1, description="Tabs in user input order.")

    @classmethod
    def from_names(cls, project_name: str, tab_names: Iterable[str]) -> "ProjectSpec":
        """Build a spec from a project name and raw tab labels, skipping blank labels."""

        tabs = tuple(TabSpec.from_display_name(name) for name in tab_names if name.strip())
        return cls(project_name=project_name, tabs=tabs)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def module_name(self) -> str:
        """Sanitized project name used for directories and the Go import path."""

        return sanitize_identifier(self.project_name)

    def duplicate_file_names(self) -> list[str]:
        """Return file names claimed by more than one tab, in first-seen order."""

        return _duplicates(tab.file_name for tab in self.tabs)

    def duplicate_function_names(self) -> list[str]:
        """Return accessor names declared by more than one tab."""

        return _duplicates(tab.function_name for tab in self.tabs)


def _duplicates(values: Iterable[str]) -> list[str]:
    counts = Counter(values)
    return [value for value, count in counts.items() if count > 1]


__all__ = ["DATA_SUFFIX", "ProjectSpec", "SOURCE_EXTENSION", "TabSpec"]

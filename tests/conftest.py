from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from dashforge.schema import ProjectSpec  # noqa: E402


@pytest.fixture()
def life_dashboard() -> ProjectSpec:
    """Spec for the ``Life Dashboard`` example with an Ideas and a To-Do List tab."""

    return ProjectSpec.from_names("Life Dashboard", ["Ideas", "To-Do List"])

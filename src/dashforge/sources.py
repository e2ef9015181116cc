"""Templates for the files of a generated Fyne dashboard.

Each generated file has exactly one render function taking a typed record
(:class:`~dashforge.schema.TabSpec` or the module name plus its tabs). Names
shared between files, such as a tab's accessor function, are read from the
record rather than rebuilt in the template, and the renderer rejects any
placeholder it cannot resolve.
"""

from __future__ import annotations

from typing import Sequence

from .errors import NoTabsError
from .schema import TabSpec
from .template import TemplateRenderer

__all__ = [
    "ENTRY_POINT_FILE_NAME",
    "ENTRY_POINT_TEMPLATE",
    "GITIGNORE_TEMPLATE",
    "TAB_ITEM_TEMPLATE",
    "TAB_MODULE_TEMPLATE",
    "render_entry_point",
    "render_gitignore",
    "render_tab_module",
]


ENTRY_POINT_FILE_NAME = "main.go"
WINDOW_WIDTH = 700
WINDOW_HEIGHT = 500

TAB_ITEM_SEPARATOR = ",\n\t\t"

TAB_ITEM_TEMPLATE = (
    'container.NewTabItem("{{ tab.display_name|go_string }}", ui.{{ tab.function_name }}(myWindow))'
)

ENTRY_POINT_TEMPLATE = """package main

import (
	"{{ module_name }}/internal/ui" // Import from our internal UI package

	"fyne.io/fyne/v2"
	"fyne.io/fyne/v2/app"
	"fyne.io/fyne/v2/container"
)

func main() {
	myApp := app.New()
	myWindow := myApp.NewWindow("Dashboard")

	tabs := container.NewAppTabs(
		{{ tab_items }},
	)

	myWindow.SetContent(tabs)
	myWindow.Resize(fyne.NewSize({{ width }}, {{ height }}))
	myWindow.ShowAndRun()
}
"""

TAB_MODULE_TEMPLATE = """package ui

import (
	"strings"

	"fyne.io/fyne/v2"
	"fyne.io/fyne/v2/container"
	"fyne.io/fyne/v2/widget"
)

// {{ tab.variable_name }} holds the list of items for the "{{ tab.display_name|go_comment }}" tab.
// For a real application, you'd load/save this data.
var {{ tab.variable_name }} = []string{"Sample Item 1 for {{ tab.display_name|go_string }}", "Sample Item 2 for {{ tab.display_name|go_string }}"}

// {{ tab.function_name }} creates and returns the canvas object for the "{{ tab.display_name|go_comment }}" tab.
func {{ tab.function_name }}(win fyne.Window) fyne.CanvasObject {
	input := widget.NewEntry()
	input.SetPlaceHolder("Enter new {{ tab.display_name|lower|go_string }}...")

	var itemList *widget.List

	itemList = widget.NewList(
		func() int {
			return len({{ tab.variable_name }})
		},
		func() fyne.CanvasObject {
			return widget.NewLabel("template item")
		},
		func(i widget.ListItemID, o fyne.CanvasObject) {
			o.(*widget.Label).SetText({{ tab.variable_name }}[i])
		},
	)

	addButton := widget.NewButton("Add {{ tab.display_name|label|go_string }}", func() {
		text := strings.TrimSpace(input.Text)
		if text != "" {
			{{ tab.variable_name }} = append({{ tab.variable_name }}, text)
			itemList.Refresh()
			input.SetText("")
		}
	})

	inputBox := container.NewHBox(input, addButton)
	return container.NewBorder(inputBox, nil, nil, nil, itemList)
}
"""

GITIGNORE_TEMPLATE = """# Binaries for programs and plugins
*.exe
*.exe~
*.dll
*.so
*.dylib

# Test binary, built with 'go test -c'
*.test

# Output of the go coverage tool
*.out

# Dependency directories (e.g., vendor)
vendor/

# Go workspace file
go.work
go.work.sum

# Environment variables file
.env

# IDE / Editor specific
.vscode/
.idea/
*.swp
*~
"""


def _renderer(renderer: TemplateRenderer | None) -> TemplateRenderer:
    return renderer or TemplateRenderer()


def render_tab_module(tab: TabSpec, renderer: TemplateRenderer | None = None) -> str:
    """Return the Go source of the ``internal/ui`` module for ``tab``."""

    return _renderer(renderer).render_string(TAB_MODULE_TEMPLATE, {"tab": tab})


def render_entry_point(
    module_name: str,
    tabs: Sequence[TabSpec],
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the Go source of ``cmd/<module_name>/main.go``.

    One tab item is listed per entry of ``tabs``, in order, each calling the
    accessor named by :attr:`TabSpec.function_name`. An empty ``tabs`` would
    produce an app without tabs and is rejected with :class:`NoTabsError`.
    """

    if not tabs:
        raise NoTabsError("entry point requires at least one tab")

    renderer = _renderer(renderer)
    tab_items = TAB_ITEM_SEPARATOR.join(
        renderer.render_string(TAB_ITEM_TEMPLATE, {"tab": tab}) for tab in tabs
    )
    context = {
        "module_name": module_name,
        "tab_items": tab_items,
        "width": WINDOW_WIDTH,
        "height": WINDOW_HEIGHT,
    }
    return renderer.render_string(ENTRY_POINT_TEMPLATE, context)


def render_gitignore() -> str:
    """Return the ``.gitignore`` written at the root of a generated project."""

    return GITIGNORE_TEMPLATE

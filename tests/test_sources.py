from __future__ import annotations

import pytest

from dashforge.errors import NoTabsError
from dashforge.schema import ProjectSpec, TabSpec
from dashforge.sources import render_entry_point, render_gitignore, render_tab_module


def test_tab_module_declares_collection_and_accessor():
    source = render_tab_module(TabSpec.from_display_name("Shopping List"))

    assert source.startswith("package ui\n")
    assert '"fyne.io/fyne/v2/widget"' in source
    assert (
        'var shopping_listData = []string{"Sample Item 1 for Shopping List", '
        '"Sample Item 2 for Shopping List"}'
    ) in source
    assert "func MakeShoppingListUI(win fyne.Window) fyne.CanvasObject {" in source
    assert "return len(shopping_listData)" in source
    assert "{{" not in source


def test_tab_module_add_button_appends_trimmed_text_and_clears_input():
    source = render_tab_module(TabSpec.from_display_name("to-do LIST"))

    assert 'input.SetPlaceHolder("Enter new to-do list...")' in source
    assert 'widget.NewButton("Add To-Do List", func() {' in source
    assert "text := strings.TrimSpace(input.Text)" in source
    assert "todo_listData = append(todo_listData, text)" in source
    assert "itemList.Refresh()" in source
    assert 'input.SetText("")' in source
    assert '\t"strings"\n' in source


def test_tab_module_escapes_display_name_in_string_literals():
    source = render_tab_module(TabSpec.from_display_name('Say "Hi"'))

    assert '"Sample Item 1 for Say \\"Hi\\""' in source
    assert "var say_hiData = " in source


def test_tab_module_without_title_fragment_is_rendered_as_is():
    source = render_tab_module(TabSpec.from_display_name("---"))

    assert "func MakeUI(win fyne.Window) fyne.CanvasObject {" in source
    assert "var mydashboardData = " in source


def test_entry_point_lists_tabs_in_order(life_dashboard: ProjectSpec):
    source = render_entry_point(life_dashboard.module_name, life_dashboard.tabs)

    assert source.startswith("package main\n")
    assert '"life_dashboard/internal/ui"' in source
    assert source.count("container.NewTabItem(") == 2
    assert (
        '\t\tcontainer.NewTabItem("Ideas", ui.MakeIdeasUI(myWindow)),\n'
        '\t\tcontainer.NewTabItem("To-Do List", ui.MakeToDoListUI(myWindow)),\n'
    ) in source
    assert "myWindow.Resize(fyne.NewSize(700, 500))" in source
    assert "myWindow.ShowAndRun()" in source


def test_entry_point_and_modules_agree_on_function_names(life_dashboard: ProjectSpec):
    entry = render_entry_point(life_dashboard.module_name, life_dashboard.tabs)

    for tab in life_dashboard.tabs:
        assert f"ui.{tab.function_name}(myWindow)" in entry
        assert f"func {tab.function_name}(win fyne.Window)" in render_tab_module(tab)


def test_file_name_and_function_name_use_different_rules(life_dashboard: ProjectSpec):
    todo = life_dashboard.tabs[1]

    assert todo.file_name == "todo_list.go"
    assert todo.function_name == "MakeToDoListUI"
    assert todo.identifier_base == "todo_list"
    assert todo.title_case_name == "ToDoList"


def test_entry_point_requires_tabs():
    with pytest.raises(NoTabsError):
        render_entry_point("demo", [])


def test_no_tabs_error_is_a_value_error():
    with pytest.raises(ValueError):
        render_entry_point("demo", ())


def test_gitignore_covers_go_artifacts():
    content = render_gitignore()

    assert content.startswith("# Binaries for programs and plugins\n")
    for pattern in ("*.exe", "*.test", "*.out", "vendor/", "go.work", ".env", ".idea/"):
        assert f"\n{pattern}\n" in content


def test_tab_module_keeps_line_breaks_inside_literals_and_comments():
    source = render_tab_module(TabSpec.from_display_name("Line\nBreak"))

    assert '// linebreakData holds the list of items for the "Line Break" tab.' in source
    assert '// MakeLineBreakUI creates and returns the canvas object for the "Line Break" tab.' in source
    assert '"Sample Item 1 for Line\\nBreak", "Sample Item 2 for Line\\nBreak"}' in source
    assert 'input.SetPlaceHolder("Enter new line\\nbreak...")' in source
    assert 'widget.NewButton("Add Line\\nBreak", func() {' in source
    for line in source.splitlines():
        assert not line.startswith("Break")


def test_entry_point_escapes_control_characters():
    tab = TabSpec.from_display_name("Tab\tName")
    source = render_entry_point("demo", [tab])

    assert 'container.NewTabItem("Tab\\tName", ui.MakeTabNameUI(myWindow))' in source

"""Command line interface for the dashforge scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_TAB_NAME, ProjectConfig
from .errors import ScaffoldError
from .scaffold import DashboardScaffolder, ScaffoldResult, planned_files
from .schema import ProjectSpec

LOGGER = logging.getLogger(__name__)

PROJECT_PROMPT = "Enter the name/type for your dashboard (e.g., Life Dashboard, Project Tracker): "
TABS_PROMPT = (
    "Enter the names for your initial tabs, separated by commas (e.g., Ideas, To-Do, Shopping List): "
)


def _prompt(message: str) -> str:
    try:
        return input(message)
    except EOFError:
        return ""


def _add_answer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", help="Project name; prompted for when omitted")
    parser.add_argument(
        "--tabs",
        help="Comma separated tab names; prompted for when omitted",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scaffold a tabbed Fyne dashboard written in Go")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file operation",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="create a new dashboard project")
    _add_answer_arguments(init_parser)
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the project directory is created",
    )

    preview_parser = subparsers.add_parser(
        "preview", help="print the generated sources without writing them"
    )
    _add_answer_arguments(preview_parser)
    preview_parser.add_argument(
        "--file",
        help="Only print the file at this path relative to the project root",
    )

    return parser


def _collect_config(args: argparse.Namespace) -> ProjectConfig:
    project_name = args.name if args.name is not None else _prompt(PROJECT_PROMPT)
    tabs = args.tabs if args.tabs is not None else _prompt(TABS_PROMPT)
    config = ProjectConfig.from_input(project_name, tabs)

    if config.default_name_used:
        print(f"No project name entered, using default: {config.name}")
    if config.default_tabs_used:
        print(f"No tabs entered, creating a default '{DEFAULT_TAB_NAME}' tab.")
    return config


def _report_name_clashes(spec: ProjectSpec) -> None:
    for file_name in spec.duplicate_file_names():
        LOGGER.warning("Several tabs map to internal/ui/%s; the last one overwrites the others.", file_name)
    for function_name in spec.duplicate_function_names():
        LOGGER.warning("Several tabs declare %s; the generated project will not compile.", function_name)
    for tab in spec.tabs:
        if not tab.title_case_name:
            LOGGER.warning(
                "Tab %r has no words to build a function name from; it will be called %s.",
                tab.display_name,
                tab.function_name,
            )


def _print_next_steps(result: ScaffoldResult, module_name: str) -> None:
    print("\nProject structure created successfully!")
    print("\nNext steps:")
    print(f"1. Navigate to the project directory: cd {result.root}")
    print(f"2. Initialize Go modules: go mod init {module_name}")
    print(
        "   (If your project is hosted, use the full module path, "
        "e.g., github.com/yourusername/yourprojectname)"
    )
    print("3. Tidy dependencies: go mod tidy")
    print("   (This will download Fyne and other dependencies)")
    print(f"4. Run the application: go run ./cmd/{module_name}/main.go")
    print("\nTo build an executable:")
    print(f"   go build -o {module_name} ./cmd/{module_name}/main.go")
    print(f"   Then run: ./{module_name} (or {module_name}.exe on Windows)")


def _handle_init(args: argparse.Namespace) -> int:
    config = _collect_config(args)
    spec = config.to_spec()
    _report_name_clashes(spec)

    print(f"\nCreating project structure for: {config.name} (Module: {spec.module_name})")
    result = DashboardScaffolder().create(spec, args.directory)
    for path in result.created:
        print(f"Created: {path}")

    _print_next_steps(result, spec.module_name)
    return 0


def _handle_preview(args: argparse.Namespace) -> int:
    spec = _collect_config(args).to_spec()
    _report_name_clashes(spec)

    files = planned_files(spec)
    if args.file is not None:
        selected = [(path, content) for path, content in files if path == args.file]
        if not selected:
            raise ScaffoldError(f"{args.file} is not part of the generated project")
        sys.stdout.write(selected[-1][1])
        return 0

    for relative_path, content in files:
        sys.stdout.write(f"==> {spec.module_name}/{relative_path} <==\n")
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    handlers = {"init": _handle_init, "preview": _handle_preview}
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    try:
        return handler(args)
    except ScaffoldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Command-line entry point.

Usage::

    blueprinter projects
    blueprinter screen <project-id> "Login"
    blueprinter blueprint <project-id> -o BLUEPRINT.md
    blueprinter local export.json
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Awaitable, Callable, Optional

from . import __version__
from .blueprint.models import ProjectBlueprint
from .blueprint.pipeline import BlueprintError, assemble_blueprint, fetch_blueprint
from .blueprint.formatter import format_blueprint
from .catalog.components import format_component_catalog_text
from .catalog.patterns import ALL_PLATFORMS, format_design_patterns_text
from .client import ApiError, WaiframeClient
from .config import Config, ConfigError
from .models import Flow, ProjectContext, ProjectInfo, Screen
from .tools import (
    design_context_text,
    flow_text,
    format_component_spec,
    project_list_text,
    project_overview_text,
    screen_text,
)
from .utils import load_json, print_error, print_success, print_summary_table, print_text, write_text


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _emit(text: str, output: Optional[str]) -> None:
    if output:
        path = write_text(text, output)
        print_success(f"Wrote {path}")
    else:
        print_text(text)


def _summarize(blueprint: ProjectBlueprint) -> None:
    print_summary_table(
        {
            "Project": blueprint.project_name,
            "Platform": blueprint.platform.value,
            "Framework": blueprint.stack.framework,
            "Features": str(len(blueprint.detected_features)),
            "Routes": str(len(blueprint.routes)),
            "Packages": str(len(blueprint.stack.packages)),
            "Navigation": blueprint.navigation.type.value,
        },
        title="Blueprint",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

async def _blueprint(client: WaiframeClient, args: argparse.Namespace) -> str:
    blueprint, context = await fetch_blueprint(client, args.project_id)
    if args.output:
        _summarize(blueprint)
    return format_blueprint(blueprint, context)


def _remote(
    command: Callable[[WaiframeClient, argparse.Namespace], Awaitable[str]],
) -> Callable[[argparse.Namespace], str]:
    """Adapt an async client command into a sync handler."""

    def handler(args: argparse.Namespace) -> str:
        client = WaiframeClient.from_config(Config.from_env())
        return asyncio.run(command(client, args))

    return handler


def _local(args: argparse.Namespace) -> str:
    """Build a blueprint from a JSON export instead of the API."""
    data: dict[str, Any] = load_json(args.file)
    if "project" not in data:
        raise ValueError(f"{args.file}: missing 'project' object")

    project = ProjectInfo.model_validate(data["project"])
    context = ProjectContext.model_validate(data["context"]) if data.get("context") else None
    screens = [Screen.model_validate(s) for s in data.get("screens") or []]
    flows = [Flow.model_validate(f) for f in data.get("flows") or []]

    blueprint = assemble_blueprint(project, screens, flows)
    if args.output:
        _summarize(blueprint)
    return format_blueprint(blueprint, context or project.ai_context)


HANDLERS: dict[str, Callable[[argparse.Namespace], str]] = {
    "projects": _remote(lambda client, args: project_list_text(client)),
    "overview": _remote(lambda client, args: project_overview_text(client, args.project_id)),
    "screen": _remote(lambda client, args: screen_text(client, args.project_id, args.name)),
    "flow": _remote(lambda client, args: flow_text(client, args.project_id, args.name)),
    "context": _remote(lambda client, args: design_context_text(client, args.project_id)),
    "blueprint": _remote(_blueprint),
    "component": lambda args: format_component_spec(args.type),
    "catalog": lambda args: format_component_catalog_text(),
    "patterns": lambda args: format_design_patterns_text(args.platform),
    "local": _local,
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blueprinter",
        description="Turn Waiframe wireframes into application blueprints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment:\n"
            "  WAIFRAME_API_KEY    API key for remote commands (required)\n"
            "  WAIFRAME_BASE_URL   API base URL (default: https://waiframe.ai)\n"
            "  WAIFRAME_CACHE_TTL  Response cache lifetime in seconds (default: 300)\n"
            "  WAIFRAME_TIMEOUT    Request timeout in seconds (default: 30)\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("projects", help="List your wireframe projects")

    p = sub.add_parser("overview", help="Show a project's screens and flows")
    p.add_argument("project_id", help="Project UUID")

    p = sub.add_parser("screen", help="Show one screen in semantic form")
    p.add_argument("project_id", help="Project UUID")
    p.add_argument("name", help="Screen name (case-insensitive)")

    p = sub.add_parser("flow", help="Show one user flow")
    p.add_argument("project_id", help="Project UUID")
    p.add_argument("name", help="Flow name (case-insensitive)")

    p = sub.add_parser("context", help="Show a project's design context")
    p.add_argument("project_id", help="Project UUID")

    p = sub.add_parser("component", help="Show the props of one component type")
    p.add_argument("type", help="Component type, e.g. button-primary")

    sub.add_parser("catalog", help="Print the component catalog")
    p = sub.add_parser("patterns", help="Print the design pattern catalog")
    p.add_argument(
        "--platform", choices=ALL_PLATFORMS, default=None,
        help="Only patterns that apply to this platform",
    )

    p = sub.add_parser("blueprint", help="Generate an application blueprint")
    p.add_argument("project_id", help="Project UUID")
    p.add_argument("--output", "-o", default=None, help="Write markdown to this file")

    p = sub.add_parser("local", help="Generate a blueprint from a JSON export")
    p.add_argument("file", help="JSON file with project, context, screens and flows")
    p.add_argument("--output", "-o", default=None, help="Write markdown to this file")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``blueprinter``."""
    args = build_parser().parse_args(argv)
    handler = HANDLERS[args.command]

    try:
        text = handler(args)
    except (ConfigError, ApiError, BlueprintError, OSError, ValueError) as exc:
        print_error(str(exc))
        sys.exit(1)

    _emit(text, getattr(args, "output", None))


if __name__ == "__main__":
    main()

"""Markdown rendering of a project blueprint.

The document is an ordered list of sections. A section whose trigger is
false (no features, no modal routes, no navigation edges, ...) is left out
entirely rather than rendered empty.
"""

from __future__ import annotations

from typing import Optional

from ..models import ProjectContext, ScreenType
from .models import FeatureId, ProjectBlueprint, RouteMapping


MAX_KEY_ELEMENTS = 5


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _table(headers: list[str], rows: list[list[str]]) -> list[str]:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(h) + 2) for h in headers) + "|",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return lines


def _fenced(body: list[str], lang: str = "") -> list[str]:
    return [f"```{lang}", *body, "```"]


def _section(title: str, body: list[str]) -> list[str]:
    return [f"\n## {title}\n", *body]


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _header(blueprint: ProjectBlueprint, context: Optional[ProjectContext]) -> list[str]:
    lines = [f"# Application Blueprint: {blueprint.project_name}"]
    if blueprint.description:
        lines.append(f"\n{blueprint.description}")
    if context is not None:
        parts: list[str] = []
        if context.app_type:
            parts.append(f"**App Type**: {context.app_type}")
        if context.audience:
            parts.append(f"**Target Audience**: {context.audience}")
        if context.brand_style:
            parts.append(f"**Brand Style**: {context.brand_style}")
        if context.features:
            parts.append(f"**Key Features**: {', '.join(context.features)}")
        if parts:
            lines.append("\n" + " | ".join(parts))
    return lines


def _tech_stack(blueprint: ProjectBlueprint) -> list[str]:
    stack = blueprint.stack
    lines = [
        f"- **Framework**: {stack.framework}",
        f"- **Language**: {stack.language}",
        f"- **Styling**: {stack.styling}",
    ]
    if blueprint.has_feature(FeatureId.AUTH):
        extras = ""
        if blueprint.has_feature(FeatureId.OAUTH):
            extras += " + OAuth"
        if blueprint.has_feature(FeatureId.FILE_UPLOAD):
            extras += " + Storage"
        lines.append(f"- **Auth & Database**: Supabase (PostgreSQL + Auth{extras})")
    if blueprint.has_feature(FeatureId.COMMERCE):
        lines.append("- **Payments**: Stripe")
    return _section("Tech Stack", lines)


def _features(blueprint: ProjectBlueprint) -> list[str]:
    if not blueprint.detected_features:
        return []
    rows = [
        [f.name, f.confidence.value, ", ".join(f.detected_from)]
        for f in blueprint.detected_features
    ]
    return _section("Detected Features", _table(["Feature", "Confidence", "Detected On"], rows))


def _packages(blueprint: ProjectBlueprint) -> list[str]:
    rows = [[p.name, p.version, p.purpose] for p in blueprint.stack.packages]
    return _section("Packages", _table(["Package", "Version", "Purpose"], rows))


def _component_rows(routes: list[RouteMapping], directory: str) -> list[list[str]]:
    return [[r.screen_name, r.component_name, f"{directory}/{r.file_name}"] for r in routes]


def _routes(blueprint: ProjectBlueprint) -> list[str]:
    pages = blueprint.routes_of_type(ScreenType.SCREEN)
    modals = blueprint.routes_of_type(ScreenType.MODAL)
    drawers = blueprint.routes_of_type(ScreenType.DRAWER)
    if not (pages or modals or drawers):
        return []

    mobile = blueprint.is_mobile
    body: list[str] = []
    if pages:
        page_dir = "screens" if mobile else "app"
        rows = [
            [
                r.screen_name,
                r.route_path,
                r.component_name,
                f"{page_dir}/{r.file_name}",
                ", ".join(r.key_component_types[:MAX_KEY_ELEMENTS]),
            ]
            for r in pages
        ]
        body.append("### Page Routes\n")
        body.extend(_table(["Screen", "Route", "Component", "File", "Key Elements"], rows))

    widget_root = "widgets" if mobile else "components"
    component_groups = (
        ("Modal Components", "modals", modals),
        ("Drawer Components", "drawers", drawers),
    )
    for title, kind, routes in component_groups:
        if not routes:
            continue
        if body:
            body.append("")
        body.append(f"### {title}\n")
        body.extend(_table(
            ["Screen", "Component", "File"],
            _component_rows(routes, f"{widget_root}/{kind}"),
        ))
    return _section("Routes & Screens", body)


def _navigation(blueprint: ProjectBlueprint) -> list[str]:
    nav = blueprint.navigation
    lines = [
        f"- **Type**: {nav.type.value}",
        f"- **Entry Screen**: {nav.entry_screen}",
    ]
    if nav.primary_nav:
        lines.append(f"- **Primary Nav Items**: {', '.join(nav.primary_nav)}")
    return _section("Navigation Structure", lines)


def _navigation_graph(blueprint: ProjectBlueprint) -> list[str]:
    edges = [
        f"{r.screen_name} → {target}"
        for r in blueprint.routes
        for target in r.navigates_to
    ]
    if not edges:
        return []
    return _section("Navigation Graph", _fenced(edges))


def _project_structure(blueprint: ProjectBlueprint) -> list[str]:
    return _section("Project Structure", _fenced([blueprint.directory_structure]))


def _env_vars(blueprint: ProjectBlueprint) -> list[str]:
    env = blueprint.env_vars
    return _section("Environment Variables", _fenced(env)) if env else []


def _setup_commands(blueprint: ProjectBlueprint) -> list[str]:
    commands = blueprint.setup_commands
    return _section("Setup Commands", _fenced(commands, "bash")) if commands else []


def _config_notes(blueprint: ProjectBlueprint) -> list[str]:
    notes = blueprint.config_notes
    return _section("Configuration Notes", [f"- {n}" for n in notes]) if notes else []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_blueprint(
    blueprint: ProjectBlueprint,
    context: Optional[ProjectContext] = None,
) -> str:
    """Render *blueprint* as a markdown document.

    Args:
        blueprint: The assembled blueprint.
        context: Optional design context summarised under the title.

    Returns:
        The markdown text.
    """
    lines: list[str] = []
    lines.extend(_header(blueprint, context))
    lines.extend(_tech_stack(blueprint))
    lines.extend(_features(blueprint))
    lines.extend(_packages(blueprint))
    lines.extend(_routes(blueprint))
    lines.extend(_navigation(blueprint))
    lines.extend(_navigation_graph(blueprint))
    lines.extend(_project_structure(blueprint))
    lines.extend(_env_vars(blueprint))
    lines.extend(_setup_commands(blueprint))
    lines.extend(_config_notes(blueprint))
    return "\n".join(lines)

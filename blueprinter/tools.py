"""Text views of Waiframe entities.

Each view is a pure ``format_*`` function over already-fetched models plus
an async ``*_text`` coroutine that fetches through a :class:`WaiframeClient`
and formats the result. The output is plain markdown meant to be pasted into
an AI coding assistant's context.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .catalog.components import component_types, get_component_by_type
from .client import WaiframeClient
from .models import (
    ContextResponse,
    Flow,
    ProjectDetail,
    ProjectInfo,
    ProjectOverview,
    Screen,
    SemanticElement,
)
from .semantic import build_screen_name_map, transform_screen


NOT_AVAILABLE = "N/A"


def _dimensions(project: ProjectInfo) -> str:
    return f"{project.dimensions.width}x{project.dimensions.height}"


def _find_by_name(items: list[Any], name: str) -> Optional[Any]:
    wanted = name.lower()
    return next((item for item in items if item.name.lower() == wanted), None)


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

def format_project_list(projects: list[ProjectOverview]) -> str:
    if not projects:
        return "No wireframe projects found. Create one at waiframe.ai"
    rows = "\n".join(
        f"- {p.name} ({p.platform.value}): {p.screen_count} screens, "
        f"{p.flow_count} flows [id: {p.id}]"
        for p in projects
    )
    return f"# Your Wireframe Projects\n\n{rows}"


def format_project_overview(detail: ProjectDetail) -> str:
    """Project header, its screens and flows, and the app context if set."""
    project = detail.project
    screens = "\n".join(
        f"  - {s.name} ({s.screen_type.value}) [id: {s.id}]" for s in detail.screens
    )
    if detail.flows:
        flows = "\n".join(
            f"  - {flow.name}{f': {flow.description}' if flow.description else ''} [id: {flow.id}]"
            for flow in detail.flows
        )
    else:
        flows = "  (no flows defined)"

    lines = [
        f"# {project.name}",
        project.description or "",
        "",
        f"Platform: {project.platform.value} ({_dimensions(project)})",
        "",
        f"## Screens ({len(detail.screens)})",
        screens,
        "",
        f"## Flows ({len(detail.flows)})",
        flows,
    ]
    ctx = project.ai_context
    if ctx is not None:
        lines.extend([
            "",
            "## App Context",
            f"- Type: {ctx.app_type or NOT_AVAILABLE}",
            f"- Audience: {ctx.audience or NOT_AVAILABLE}",
            f"- Style: {ctx.brand_style or NOT_AVAILABLE}",
            f"- Features: {', '.join(ctx.features) or NOT_AVAILABLE}",
        ])
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------

def _format_prop(key: str, value: Any) -> str:
    if isinstance(value, list):
        items = ", ".join(f'"{item}"' for item in value)
        return f"{key}: [{items}]"
    if isinstance(value, str):
        return f'{key}: "{value}"'
    if isinstance(value, (bool, dict)):
        return f"{key}: {json.dumps(value)}"
    return f"{key}: {value}"


def format_semantic_elements(elements: list[SemanticElement], indent: int = 0) -> str:
    """Render semantic elements as an indented bullet tree."""
    prefix = "  " * indent
    lines: list[str] = []
    for element in elements:
        line = f"{prefix}- {element.component}"
        props = ", ".join(_format_prop(k, v) for k, v in element.props.items())
        if props:
            line += f" {{{props}}}"
        if element.navigates_to:
            line += f" → {element.navigates_to}"
        lines.append(line)
        if element.children:
            lines.append(format_semantic_elements(element.children, indent + 1))
    return "\n".join(lines)


def format_screen(screens: list[Screen], screen_name: str) -> str:
    """Render the screen named *screen_name* (case-insensitive) semantically."""
    target = _find_by_name(screens, screen_name)
    if target is None:
        available = ", ".join(s.name for s in screens)
        return f'Screen "{screen_name}" not found. Available screens: {available}'

    semantic = transform_screen(target, build_screen_name_map(screens))
    return (
        f"# Screen: {semantic.name}\n"
        f"Type: {semantic.type}\n\n"
        f"## Elements (top to bottom)\n"
        f"{format_semantic_elements(semantic.elements)}"
    )


# ---------------------------------------------------------------------------
# Flows
# ---------------------------------------------------------------------------

def format_flow(flows: list[Flow], flow_name: str) -> str:
    target: Optional[Flow] = _find_by_name(flows, flow_name)
    if target is None:
        available = ", ".join(f.name for f in flows) or "(none)"
        return f'Flow "{flow_name}" not found. Available flows: {available}'

    node_names: dict[str, str] = {}
    for node in target.nodes:
        node_names.setdefault(node.screen_id, node.screen_name or node.screen_id)
    sequence = " → ".join(n.screen_name or n.screen_id for n in target.nodes)
    transitions = "\n".join(
        f"  {node_names.get(e.source, e.source)} → {node_names.get(e.target, e.target)}"
        f"{f' ({e.label})' if e.label else ''}"
        for e in target.edges
    )
    return "\n".join([
        f"# Flow: {target.name}",
        target.description or "",
        "",
        f"Entry: {target.entry_screen_name or target.entry_screen}",
        f"Sequence: {sequence}",
        "",
        "## Transitions",
        transitions or "  (no transitions defined)",
    ])


# ---------------------------------------------------------------------------
# Design context
# ---------------------------------------------------------------------------

def format_design_context(data: ContextResponse) -> str:
    project = data.project
    platform = f"Platform: {project.platform.value} ({_dimensions(project)})"
    ctx = data.context
    if ctx is None:
        return (
            f"# {project.name}\n\n{platform}\n{project.description or ''}\n\n"
            "No additional design context has been set for this project."
        )

    lines = [
        f"# Design Context: {project.name}",
        "",
        platform,
        f"Description: {project.description}" if project.description else "",
        "",
        "## App Details",
        f"- App Type: {ctx.app_type}" if ctx.app_type else "",
        f"- Target Audience: {ctx.audience}" if ctx.audience else "",
        f"- Brand Style: {ctx.brand_style}" if ctx.brand_style else "",
        f"- Key Features: {', '.join(ctx.features)}" if ctx.features else "",
        f"\n## Additional Context\n{ctx.additional_context}" if ctx.additional_context else "",
    ]
    return "\n".join(line for line in lines if line)


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

def format_component_spec(component_type: str) -> str:
    component = get_component_by_type(component_type)
    if component is None:
        types = ", ".join(component_types())
        return f'Component "{component_type}" not found.\n\nAvailable types: {types}'

    props = "\n".join(f"  - {k}: {v}" for k, v in component.props.items())
    return (
        f"# Component: {component.type}\n"
        f"Category: {component.category}\n"
        f"{component.description}\n\n"
        f"## Properties\n{props}"
    )


# ---------------------------------------------------------------------------
# Fetch-and-format
# ---------------------------------------------------------------------------

async def project_list_text(client: WaiframeClient) -> str:
    return format_project_list(await client.list_projects())


async def project_overview_text(client: WaiframeClient, project_id: str) -> str:
    return format_project_overview(await client.get_project_overview(project_id))


async def screen_text(client: WaiframeClient, project_id: str, screen_name: str) -> str:
    # All screens are needed to resolve connection targets to names.
    return format_screen(await client.get_screens(project_id), screen_name)


async def flow_text(client: WaiframeClient, project_id: str, flow_name: str) -> str:
    return format_flow(await client.get_flows(project_id), flow_name)


async def design_context_text(client: WaiframeClient, project_id: str) -> str:
    return format_design_context(await client.get_context(project_id))

"""Blueprint orchestration.

Fetches a project's context, screens and flows concurrently, runs feature
detection, route mapping and stack selection, and renders the final
markdown document.

Usage::

    client = WaiframeClient(api_key)
    markdown = await generate_blueprint(client, project_id)
"""

from __future__ import annotations

import asyncio
from typing import Optional

from ..client import WaiframeClient
from ..models import Flow, Platform, ProjectContext, ProjectInfo, Screen
from .features import detect_features
from .formatter import format_blueprint
from .models import ProjectBlueprint
from .routes import generate_routes
from .stack import select_stack


class BlueprintError(Exception):
    """Raised when a blueprint cannot be produced for a project."""


class EmptyProjectError(BlueprintError):
    """The project has no screens to analyse."""

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(
            f'Project "{project_name}" has no screens yet. Add screens in the '
            "Waiframe editor first, then run this tool again."
        )


def assemble_blueprint(
    project: ProjectInfo,
    screens: list[Screen],
    flows: list[Flow],
) -> ProjectBlueprint:
    """Run the derivation pipeline over already-fetched project data.

    Raises:
        EmptyProjectError: If *screens* is empty.
    """
    if not screens:
        raise EmptyProjectError(project.name)

    platform = Platform(project.platform)
    features = detect_features(screens)
    stack = select_stack(platform, features)
    routes, navigation = generate_routes(screens, flows, platform)

    return ProjectBlueprint(
        project_name=project.name,
        description=project.description or "",
        platform=platform,
        stack=stack,
        detected_features=tuple(features),
        routes=tuple(routes),
        navigation=navigation,
    )


def render_blueprint(
    project: ProjectInfo,
    screens: list[Screen],
    flows: list[Flow],
    context: Optional[ProjectContext] = None,
) -> str:
    """Assemble and format a blueprint in one step."""
    return format_blueprint(assemble_blueprint(project, screens, flows), context)


async def fetch_blueprint(
    client: WaiframeClient, project_id: str
) -> tuple[ProjectBlueprint, Optional[ProjectContext]]:
    """Fetch project data in parallel and assemble its blueprint.

    Returns:
        The blueprint plus the project's design context (if any).
    """
    context_data, screens, flows = await asyncio.gather(
        client.get_context(project_id),
        client.get_screens(project_id),
        client.get_flows(project_id),
    )
    blueprint = assemble_blueprint(context_data.project, screens, flows)
    return blueprint, context_data.context


async def generate_blueprint(client: WaiframeClient, project_id: str) -> str:
    """Fetch a project and return its blueprint as markdown.

    Raises:
        EmptyProjectError: If the project has no screens.
        ApiError: If any of the three reads fails.
    """
    blueprint, context = await fetch_blueprint(client, project_id)
    return format_blueprint(blueprint, context)

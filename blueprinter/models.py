"""Pydantic v2 models for wireframe projects as served by the Waiframe API.

Payloads arrive with camelCase keys; every model declares snake_case fields
with camelCase aliases so either spelling validates. Element ``type`` and
``properties`` are deliberately open: unknown component types pass through
untouched and simply match no detection rule.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class WireModel(BaseModel):
    """Base for all API payload models (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Platform(str, Enum):
    """Target device class of a wireframe project."""
    MOBILE = "mobile"
    DESKTOP = "desktop"
    TABLET = "tablet"

    @property
    def is_mobile(self) -> bool:
        return self is Platform.MOBILE


class ScreenType(str, Enum):
    """Kind of a screen: a routable page, a modal overlay or a side drawer."""
    SCREEN = "screen"
    MODAL = "modal"
    DRAWER = "drawer"


class ActionType(str, Enum):
    """Connection action kinds that reference another screen."""
    NAVIGATE = "navigate"
    TOGGLE_MODAL = "toggle-modal"
    TOGGLE_DRAWER = "toggle-drawer"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

class Dimensions(WireModel):
    width: int = 0
    height: int = 0


class Position(WireModel):
    x: float = 0
    y: float = 0


class Size(WireModel):
    width: float = 0
    height: float = 0


# ---------------------------------------------------------------------------
# Screens & elements
# ---------------------------------------------------------------------------

class WireframeElement(WireModel):
    """A typed, property-bearing node in a screen's layout tree."""
    id: str = Field(default="", description="Element identifier")
    type: str = Field(..., description="Component type tag, e.g. 'email-input'")
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)
    properties: dict[str, Any] = Field(
        default_factory=dict, description="Open component properties"
    )
    locked: Optional[bool] = None
    hidden: Optional[bool] = None
    z_index: Optional[int] = None
    children: list[WireframeElement] = Field(default_factory=list)


class ConnectionAction(WireModel):
    """What happens when a connection fires."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    type: str = Field(..., description="navigate, toggle-modal, toggle-drawer, ...")
    to_screen: Optional[str] = None
    modal_id: Optional[str] = None
    drawer_id: Optional[str] = None
    transition: Optional[str] = None

    def target_id(self) -> Optional[str]:
        """Return the referenced screen id for navigating action kinds."""
        if self.type == ActionType.NAVIGATE.value:
            return self.to_screen
        if self.type == ActionType.TOGGLE_MODAL.value:
            return self.modal_id
        if self.type == ActionType.TOGGLE_DRAWER.value:
            return self.drawer_id
        return None


class Connection(WireModel):
    """A declared interaction edge from one element to another screen."""
    id: str = ""
    from_element: str = ""
    trigger: str = "click"
    action: ConnectionAction
    item_index: Optional[int] = Field(
        default=None, description="Index of the list item that triggers the action"
    )


class Screen(WireModel):
    """A named unit of UI layout owning an element forest and connections."""
    id: str
    name: str
    screen_type: ScreenType = ScreenType.SCREEN
    order: int = 0
    elements: list[WireframeElement] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    canvas_width: Optional[int] = None
    canvas_height: Optional[int] = None


# ---------------------------------------------------------------------------
# Flows
# ---------------------------------------------------------------------------

class FlowNode(WireModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    screen_id: str
    screen_name: Optional[str] = None


class FlowEdge(WireModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str = ""
    source: str
    target: str
    label: Optional[str] = None


class Flow(WireModel):
    """A named, ordered user journey across screens."""
    id: str
    name: str
    description: Optional[str] = None
    entry_screen: str = ""
    entry_screen_name: Optional[str] = None
    nodes: list[FlowNode] = Field(default_factory=list)
    edges: list[FlowEdge] = Field(default_factory=list)
    color: Optional[str] = None
    created_at: str = ""


# ---------------------------------------------------------------------------
# Project context & overview
# ---------------------------------------------------------------------------

class ProjectContext(WireModel):
    """Design intent attached to a project. Every field is optional."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    app_type: Optional[str] = None
    audience: Optional[str] = None
    features: list[str] = Field(default_factory=list, description="Key features")
    brand_style: Optional[str] = None
    additional_context: Optional[str] = None


class ProjectInfo(WireModel):
    """Identity and platform of a project."""
    id: str = ""
    name: str
    description: Optional[str] = None
    platform: Platform = Platform.DESKTOP
    dimensions: Dimensions = Field(default_factory=Dimensions)
    ai_context: Optional[ProjectContext] = None
    created_at: str = ""
    updated_at: str = ""


class ProjectOverview(ProjectInfo):
    """Row of the project listing."""
    screen_count: int = 0
    flow_count: int = 0


class ScreenSummary(WireModel):
    id: str
    name: str
    screen_type: ScreenType = ScreenType.SCREEN
    order: int = 0


class FlowSummary(WireModel):
    id: str
    name: str
    description: Optional[str] = None


class ProjectDetail(WireModel):
    """A project with the names of its screens and flows."""
    project: ProjectInfo
    screens: list[ScreenSummary] = Field(default_factory=list)
    flows: list[FlowSummary] = Field(default_factory=list)


class ContextResponse(WireModel):
    """Project identity plus its (optional) design context."""
    project: ProjectInfo
    context: Optional[ProjectContext] = None


# ---------------------------------------------------------------------------
# Semantic (AI-friendly) screen representation
# ---------------------------------------------------------------------------

class SemanticElement(BaseModel):
    component: str
    props: dict[str, Any] = Field(default_factory=dict)
    navigates_to: Optional[str] = None
    children: list[SemanticElement] = Field(default_factory=list)


class SemanticScreen(BaseModel):
    name: str
    type: str
    elements: list[SemanticElement] = Field(default_factory=list)

"""Pydantic v2 models for the application blueprint.

Everything here is derived from a project's screens and flows; nothing is
persisted. Models are frozen so a finished blueprint cannot drift from the
data it was computed from.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..models import Platform, ScreenType


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FeatureId(str, Enum):
    """Closed catalog of product features the detector can report."""
    AUTH = "auth"
    OAUTH = "oauth"
    COMMERCE = "commerce"
    CHARTS = "charts"
    MAPS = "maps"
    DATA_TABLES = "data-tables"
    FILE_UPLOAD = "file-upload"
    VIDEO = "video"
    IMAGE_CAROUSEL = "image-carousel"
    CALENDAR = "calendar"
    SEARCH = "search"
    NOTIFICATIONS = "notifications"
    TIMELINE = "timeline"
    RATINGS = "ratings"
    DASHBOARD = "dashboard"
    TAB_NAVIGATION = "tab-navigation"
    SIDEBAR_NAVIGATION = "sidebar-navigation"
    MODALS = "modals"
    DRAWERS = "drawers"
    FORMS = "forms"
    CHAT = "chat"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class NavigationType(str, Enum):
    TAB_BASED = "tab-based"
    SIDEBAR = "sidebar"
    STACK = "stack"
    DRAWER_BASED = "drawer-based"
    HYBRID = "hybrid"


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class DetectedFeature(_Frozen):
    """A product capability inferred from component patterns and naming."""
    id: FeatureId
    name: str
    confidence: Confidence
    detected_from: tuple[str, ...] = Field(
        default=(), description="Screen names that triggered the feature"
    )


class PackageRecommendation(_Frozen):
    name: str
    version: str
    purpose: str
    feature_id: Optional[FeatureId] = None


class RouteMapping(_Frozen):
    """File, path and component identity for one screen."""
    screen_name: str
    screen_type: ScreenType
    route_path: str = Field(default="", description="Empty for modals and drawers")
    component_name: str
    file_name: str
    key_component_types: tuple[str, ...] = ()
    navigates_to: tuple[str, ...] = ()


class NavigationStructure(_Frozen):
    type: NavigationType = NavigationType.STACK
    primary_nav: tuple[str, ...] = ()
    entry_screen: str = "Home"


class StackSelection(_Frozen):
    """Framework choice plus the resolved package list."""
    framework: str
    language: str
    styling: str
    packages: tuple[PackageRecommendation, ...] = ()


# ---------------------------------------------------------------------------
# Blueprint aggregate
# ---------------------------------------------------------------------------

class ProjectBlueprint(_Frozen):
    """Complete scaffolding plan for one wireframe project.

    The auxiliary blocks (environment variables, setup commands, configuration
    notes, directory tree) are computed from the aggregate on access and
    cannot be set independently.
    """
    project_name: str
    description: str = ""
    platform: Platform
    stack: StackSelection
    detected_features: tuple[DetectedFeature, ...] = ()
    routes: tuple[RouteMapping, ...] = ()
    navigation: NavigationStructure = Field(default_factory=NavigationStructure)

    @property
    def is_mobile(self) -> bool:
        return self.platform.is_mobile

    @property
    def feature_ids(self) -> frozenset[FeatureId]:
        return frozenset(f.id for f in self.detected_features)

    def has_feature(self, feature_id: FeatureId) -> bool:
        return feature_id in self.feature_ids

    def routes_of_type(self, screen_type: ScreenType) -> list[RouteMapping]:
        return [r for r in self.routes if r.screen_type == screen_type]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def env_vars(self) -> list[str]:
        from .scaffold import build_env_vars

        return build_env_vars(self.feature_ids, self.is_mobile)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def setup_commands(self) -> list[str]:
        from .scaffold import build_setup_commands

        return build_setup_commands(
            self.project_name, self.stack.packages, self.feature_ids, self.is_mobile
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def config_notes(self) -> list[str]:
        from .scaffold import build_config_notes

        return build_config_notes(self.feature_ids, self.is_mobile)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def directory_structure(self) -> str:
        from .scaffold import build_directory_structure

        return build_directory_structure(self.routes, self.feature_ids, self.is_mobile)

"""Application blueprint derivation.

Turns a wireframe project's screens and flows into a scaffolding plan:
detected product features, a technology stack with packages, route and file
mappings, the navigation structure, and a rendered markdown document.

Usage::

    from blueprinter.blueprint import assemble_blueprint, format_blueprint

    blueprint = assemble_blueprint(project, screens, flows)
    print(format_blueprint(blueprint, context))
"""

from blueprinter.blueprint.features import detect_features
from blueprinter.blueprint.formatter import format_blueprint
from blueprinter.blueprint.models import (
    Confidence,
    DetectedFeature,
    FeatureId,
    NavigationStructure,
    NavigationType,
    PackageRecommendation,
    ProjectBlueprint,
    RouteMapping,
    StackSelection,
)
from blueprinter.blueprint.pipeline import (
    BlueprintError,
    EmptyProjectError,
    assemble_blueprint,
    fetch_blueprint,
    generate_blueprint,
    render_blueprint,
)
from blueprinter.blueprint.routes import generate_routes
from blueprinter.blueprint.stack import select_stack

__all__ = [
    "BlueprintError",
    "Confidence",
    "DetectedFeature",
    "EmptyProjectError",
    "FeatureId",
    "NavigationStructure",
    "NavigationType",
    "PackageRecommendation",
    "ProjectBlueprint",
    "RouteMapping",
    "StackSelection",
    "assemble_blueprint",
    "detect_features",
    "fetch_blueprint",
    "format_blueprint",
    "generate_blueprint",
    "generate_routes",
    "render_blueprint",
    "select_stack",
]

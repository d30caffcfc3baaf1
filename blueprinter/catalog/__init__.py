"""Read-only reference catalogs: component types and layout patterns."""

from blueprinter.catalog.components import (
    COMPONENT_CATALOG,
    ComponentSpec,
    component_types,
    format_component_catalog_text,
    get_component_by_type,
)
from blueprinter.catalog.patterns import (
    DESIGN_PATTERNS,
    DesignPattern,
    format_design_patterns_text,
    patterns_for_platform,
)

__all__ = [
    "COMPONENT_CATALOG",
    "ComponentSpec",
    "DESIGN_PATTERNS",
    "DesignPattern",
    "component_types",
    "format_component_catalog_text",
    "format_design_patterns_text",
    "get_component_by_type",
    "patterns_for_platform",
]

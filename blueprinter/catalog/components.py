"""Static catalog of wireframe component types.

A read-only summary of every component the editor offers: its category, a
one-line description and its props with type hints. Used by the component
spec lookup and rendered as text for AI code-generation context.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ComponentSpec(BaseModel):
    """One component type and its props."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str
    category: str
    description: str
    props: Mapping[str, str]

    @field_validator("props", mode="after")
    @classmethod
    def _freeze_props(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


def _c(type_: str, category: str, description: str, **props: str) -> ComponentSpec:
    return ComponentSpec(type=type_, category=category, description=description, props=props)


COMPONENT_CATALOG: tuple[ComponentSpec, ...] = (
    # Buttons
    _c("button-primary", "buttons", "Main call-to-action button with solid background",
       label="string", disabled="boolean?", icon="string?"),
    _c("button-secondary", "buttons", "Secondary button with subtle styling",
       label="string", disabled="boolean?", icon="string?"),
    _c("button-outline", "buttons", "Button with border only, no fill",
       label="string", disabled="boolean?"),
    _c("button-ghost", "buttons", "Transparent button, visible on hover",
       label="string", disabled="boolean?"),
    _c("button-link", "buttons", "Text-only button styled as a link",
       label="string", disabled="boolean?"),
    _c("icon-button", "buttons", "Square button with only an icon",
       icon="string (Lucide icon name)", disabled="boolean?"),
    _c("fab", "buttons", "Floating action button, circular",
       icon="string", fixed="boolean?", fixedVertical="enum:top|center|bottom",
       fixedHorizontal="enum:left|center|right"),
    _c("social-button", "buttons", "Social login button (Google, Apple, Facebook, etc.)",
       text="string", provider="enum:google|apple|facebook|twitter|github|microsoft"),

    # Form inputs
    _c("text-input", "form", "Single-line text input with built-in label",
       label="string?", placeholder="string?", value="string?", disabled="boolean?"),
    _c("email-input", "form", "Email input with email keyboard on mobile",
       label="string?", placeholder="string?", disabled="boolean?"),
    _c("password-input", "form", "Password input with masked characters",
       label="string?", placeholder="string?", disabled="boolean?"),
    _c("phone-input", "form", "Phone number input",
       label="string?", placeholder="string?", disabled="boolean?"),
    _c("number-input", "form", "Numeric input",
       label="string?", placeholder="string?", min="number?", max="number?", disabled="boolean?"),
    _c("textarea", "form", "Multi-line text area",
       label="string?", placeholder="string?", rows="number?", disabled="boolean?"),
    _c("search-bar", "form", "Search input with search icon",
       placeholder="string?", value="string?"),
    _c("dropdown", "form", "Dropdown select with options",
       label="string?", placeholder="string?", items="string[]", disabled="boolean?"),
    _c("checkbox", "form", "Checkbox with label", label="string", checked="boolean?"),
    _c("radio-group", "form", "Radio button group",
       label="string?", items="string[]", selected="number?"),
    _c("toggle", "form", "Toggle/switch control", label="string?", checked="boolean?"),
    _c("slider", "form", "Range slider",
       label="string?", min="number?", max="number?", value="number?"),
    _c("date-picker", "form", "Date selection input", label="string?", placeholder="string?"),
    _c("file-upload", "form", "File upload area",
       label="string?", accept="string?", multiple="boolean?"),

    # Typography
    _c("heading", "typography", "Heading text (h1-h6 level)",
       text="string", level="enum:1|2|3|4|5|6"),
    _c("paragraph", "typography", "Body text paragraph", text="string"),
    _c("label", "typography", "Small label text", text="string"),

    # Data display
    _c("avatar", "data-display", "User avatar circle", initials="string?", size="enum:sm|md|lg"),
    _c("badge", "data-display", "Status badge/tag",
       text="string", variant="enum:default|success|warning|error|info"),
    _c("stat-card", "data-display", "Metric card with label, value, and optional change indicator",
       label="string", value="string", change="string?",
       changeType="enum:positive|negative|neutral"),
    _c("rating", "data-display", "Star rating display", value="number", max="number?"),
    _c("progress-bar", "data-display", "Progress indicator bar",
       value="number", max="number?", label="string?"),
    _c("tag", "data-display", "Removable tag/chip", text="string", removable="boolean?"),

    # Layout
    _c("card", "layout", "Content card container", title="string?", padding="boolean?"),
    _c("container", "layout", "Generic container/section wrapper", padding="boolean?"),
    _c("divider", "layout", "Horizontal divider line", label="string?"),
    _c("spacer", "layout", "Empty spacing element", height="number?"),
    _c("accordion", "layout", "Expandable section", title="string", expanded="boolean?"),
    _c("tabs", "layout", "Tab panel container", items="string[]", activeIndex="number?"),

    # Navigation
    _c("navbar", "navigation", "Top navigation bar",
       title="string?", showBack="boolean?", showMenu="boolean?"),
    _c("bottom-nav", "navigation", "Bottom tab navigation bar",
       items="string[]", activeIndex="number?", icons="string[]?"),
    _c("tab-bar", "navigation", "Horizontal tab bar", items="string[]", activeIndex="number?"),
    _c("sidebar", "navigation", "Side navigation panel",
       title="string?", items="string[]", activeIndex="number?"),
    _c("header", "navigation", "Desktop page header with nav",
       title="string?", items="string[]?", showLogo="boolean?"),
    _c("breadcrumb", "navigation", "Breadcrumb trail", items="string[]"),
    _c("pagination", "navigation", "Page navigation controls",
       totalPages="number?", currentPage="number?"),
    _c("stepper", "navigation", "Step progress indicator",
       steps="string[]", currentStep="number?"),

    # List
    _c("list", "list", "Vertical list of items",
       items="string[]", showDividers="boolean?", showArrows="boolean?"),
    _c("product-card", "list", "E-commerce product card with image area, title, price",
       title="string?", price="string?", image="boolean?"),

    # Media
    _c("image", "media", "Image placeholder", alt="string?", aspectRatio="enum:1:1|4:3|16:9|3:2"),
    _c("video-placeholder", "media", "Video placeholder with play button",
       aspectRatio="enum:16:9|4:3"),
    _c("logo-placeholder", "media", "Logo/brand placeholder", size="enum:sm|md|lg"),
    _c("icon", "media", "Single icon display",
       name="string (Lucide icon name)", size="enum:sm|md|lg"),
    _c("map-placeholder", "media", "Map view placeholder", aspectRatio="enum:1:1|4:3|16:9"),
    _c("chart-placeholder", "media", "Chart/graph placeholder",
       chartType="enum:bar|line|pie|area", title="string?"),
    _c("carousel", "media", "Image/content carousel",
       itemCount="number?", showDots="boolean?", showArrows="boolean?"),

    # Feedback
    _c("alert", "feedback", "Alert/notification banner",
       title="string?", message="string", variant="enum:info|success|warning|error"),
    _c("toast", "feedback", "Toast notification",
       message="string", variant="enum:info|success|warning|error"),
    _c("modal", "feedback", "Modal dialog overlay", title="string?", showClose="boolean?"),
    _c("tooltip", "feedback", "Tooltip popup", text="string"),
    _c("skeleton", "feedback", "Loading skeleton placeholder", lines="number?", avatar="boolean?"),
    _c("empty-state", "feedback", "Empty state with illustration placeholder",
       title="string?", message="string?", showAction="boolean?"),

    # Data
    _c("table", "data", "Data table with columns",
       columns="string[]", rows="number?", showHeader="boolean?"),
    _c("calendar", "data", "Calendar view", showHeader="boolean?"),
    _c("timeline", "data", "Vertical timeline", items="string[]"),
)

_BY_TYPE: Mapping[str, ComponentSpec] = MappingProxyType({c.type: c for c in COMPONENT_CATALOG})


def get_component_by_type(component_type: str) -> Optional[ComponentSpec]:
    """Look up a component by its exact type tag."""
    return _BY_TYPE.get(component_type)


def component_types() -> list[str]:
    """Every catalogued type tag, in catalog order."""
    return [c.type for c in COMPONENT_CATALOG]


def format_component_catalog_text() -> str:
    """Render the catalog as markdown, grouped by category in catalog order."""
    lines = ["# Waiframe Component Catalog", ""]
    current_category = ""
    for component in COMPONENT_CATALOG:
        if component.category != current_category:
            current_category = component.category
            lines.extend([f"## {current_category.capitalize()}", ""])
        props = ", ".join(f"{k}: {v}" for k, v in component.props.items())
        lines.append(f"- **{component.type}**: {component.description}")
        lines.append(f"  Props: {props}")
    return "\n".join(lines)

"""Semantic screen transform.

Reduces a raw screen to what a code generator cares about: component types,
meaningful props and named navigation targets. Ids, geometry and editor
state are dropped; elements are emitted in top-to-bottom reading order.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import Connection, Screen, SemanticElement, SemanticScreen, WireframeElement


STRIP_PROPS = frozenset({"locked", "hidden", "zIndex"})


def build_screen_name_map(screens: list[Screen]) -> dict[str, str]:
    return {s.id: s.name for s in screens}


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _clean_props(properties: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in properties.items()
        if key not in STRIP_PROPS and not _is_empty(value)
    }


def _item_label(element: WireframeElement, index: int) -> Optional[str]:
    items = element.properties.get("items")
    if not isinstance(items, list) or not 0 <= index < len(items):
        return None
    item = items[index]
    if isinstance(item, dict):
        item = item.get("label")
    return item if isinstance(item, str) and item else None


def _navigation_label(
    element: WireframeElement,
    connection: Connection,
    names: dict[str, str],
) -> Optional[str]:
    """Describe where *connection* leads, or ``None`` if it leads nowhere known."""
    action = connection.action
    label: Optional[str] = None

    if action.to_screen and action.to_screen in names:
        label = names[action.to_screen]
        if connection.item_index is not None:
            item = _item_label(element, connection.item_index)
            label += f' (from "{item}")' if item else f" (item {connection.item_index})"
    if action.modal_id and action.modal_id in names:
        label = f"{names[action.modal_id]} (modal)"
    if action.drawer_id and action.drawer_id in names:
        label = f"{names[action.drawer_id]} (drawer)"
    return label


def transform_element(
    element: WireframeElement,
    connections: list[Connection],
    names: dict[str, str],
) -> SemanticElement:
    """Convert one element (and its children) to semantic form.

    When several connections start at the element, the last resolvable one
    determines ``navigates_to``.
    """
    navigates_to: Optional[str] = None
    for connection in connections:
        if connection.from_element != element.id:
            continue
        label = _navigation_label(element, connection, names)
        if label is not None:
            navigates_to = label

    return SemanticElement(
        component=element.type,
        props=_clean_props(element.properties),
        navigates_to=navigates_to,
        children=[transform_element(c, connections, names) for c in element.children],
    )


def transform_screen(screen: Screen, names: dict[str, str]) -> SemanticScreen:
    ordered = sorted(screen.elements, key=lambda e: e.position.y)
    return SemanticScreen(
        name=screen.name,
        type=screen.screen_type.value,
        elements=[transform_element(e, screen.connections, names) for e in ordered],
    )


def transform_all_screens(screens: list[Screen]) -> list[SemanticScreen]:
    names = build_screen_name_map(screens)
    return [transform_screen(s, names) for s in screens]

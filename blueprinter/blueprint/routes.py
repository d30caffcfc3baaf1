"""Route mapping and navigation inference.

Turns screens into route paths, component names and file names for the
target platform, and infers the app's primary navigation pattern (tabs,
sidebar, drawer or plain stack) plus its entry screen.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from ..models import Flow, Platform, Screen, ScreenType, WireframeElement
from .features import collect_component_types, iter_elements
from .models import NavigationStructure, NavigationType, RouteMapping


HOME_SLUGS: frozenset[str] = frozenset({"home", "main", "landing", "index"})

DEFAULT_ENTRY_SCREEN = "Home"

TAB_NAV_TYPES: tuple[str, ...] = ("bottom-nav", "tab-bar")
SIDEBAR_TYPES: tuple[str, ...] = ("sidebar",)


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------

def slugify(name: str) -> str:
    """Lowercase, keep ``[a-z0-9 -]``, trim and join whitespace runs with hyphens.

    Examples::

        slugify("Sign In") -> "sign-in"
        slugify("Settings!") -> "settings"
    """
    slug = re.sub(r"[^a-z0-9\s-]", "", name.lower()).strip()
    return re.sub(r"\s+", "-", slug)


def is_home_slug(slug: str) -> bool:
    return slug in HOME_SLUGS


def screen_name_to_route_path(name: str) -> str:
    slug = slugify(name)
    return "/" if is_home_slug(slug) else f"/{slug}"


def screen_name_to_component_name(name: str) -> str:
    """``"user profile"`` -> ``"UserProfilePage"``."""
    cleaned = re.sub(r"[^a-zA-Z0-9\s]", "", name)
    words = cleaned.split()
    return "".join(w[0].upper() + w[1:].lower() for w in words) + "Page"


def _dart_slug(name: str) -> str:
    return slugify(name).replace("-", "_")


def screen_file_name(name: str, screen_type: ScreenType, is_mobile: bool) -> str:
    """File name for a screen, relative to the platform's pages/widgets directory."""
    slug = slugify(name)
    if screen_type == ScreenType.SCREEN:
        if is_mobile:
            return f"{_dart_slug(name)}_screen.dart"
        return "page.tsx" if is_home_slug(slug) else f"{slug}/page.tsx"
    if is_mobile:
        return f"{_dart_slug(name)}_{screen_type.value}.dart"
    return f"{slug}-{screen_type.value}.tsx"


def _suffix_file_name(file_name: str, suffix: str, is_mobile: bool) -> str:
    """Append *suffix* to the directory segment (web) or stem (mobile) of a page file.

    Both platforms take the same ``-k`` suffix as the route path.
    """
    if is_mobile:
        stem = file_name[: -len("_screen.dart")] if file_name.endswith("_screen.dart") else file_name
        return f"{stem}{suffix}_screen.dart"
    if file_name == "page.tsx":
        return f"{suffix}/page.tsx"
    return re.sub(r"/page\.tsx$", f"{suffix}/page.tsx", file_name)


# ---------------------------------------------------------------------------
# Connections
# ---------------------------------------------------------------------------

def build_screen_id_to_name_map(screens: Iterable[Screen]) -> dict[str, str]:
    return {screen.id: screen.name for screen in screens}


def get_navigation_targets(screen: Screen, id_to_name: dict[str, str]) -> list[str]:
    """Names of screens this screen navigates to, deduplicated in connection order.

    Connections pointing at unknown ids are dropped.
    """
    targets: list[str] = []
    for conn in screen.connections:
        target_id = conn.action.target_id()
        if not target_id:
            continue
        name = id_to_name.get(target_id)
        if name and name not in targets:
            targets.append(name)
    return targets


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------

def deduplicate_routes(routes: list[RouteMapping], is_mobile: bool) -> list[RouteMapping]:
    """Give every page route a unique path.

    The first screen to claim a path keeps it; later claimants get ``-2``,
    ``-3``, ... appended to the path and the file's directory segment.
    Modal and drawer mappings pass through unchanged.
    """
    claims: dict[str, int] = {}
    taken: set[str] = set()
    result: list[RouteMapping] = []

    for route in routes:
        if route.screen_type != ScreenType.SCREEN:
            result.append(route)
            continue

        base = route.route_path
        count = claims.get(base, 0)
        claims[base] = count + 1
        if base not in taken:
            taken.add(base)
            result.append(route)
            continue

        n = max(count, 1) + 1
        while f"{base}-{n}" in taken:
            n += 1
        suffix = f"-{n}"
        taken.add(f"{base}{suffix}")
        result.append(route.model_copy(update={
            "route_path": f"{base}{suffix}",
            "file_name": _suffix_file_name(route.file_name, suffix, is_mobile),
        }))

    return result


# ---------------------------------------------------------------------------
# Navigation structure
# ---------------------------------------------------------------------------

def _item_label(item: Any) -> str | None:
    if isinstance(item, str):
        return item or None
    if isinstance(item, dict):
        label = item.get("label")
        return str(label) if label else None
    return None


def _collect_nav_labels(
    elements: Iterable[WireframeElement], nav_types: tuple[str, ...], into: list[str]
) -> None:
    for element in iter_elements(elements):
        if element.type not in nav_types:
            continue
        items = element.properties.get("items")
        if not isinstance(items, list):
            continue
        for item in items:
            label = _item_label(item)
            if label and label not in into:
                into.append(label)


def _resolve_entry_screen(
    screens: list[Screen], flows: list[Flow], id_to_name: dict[str, str]
) -> str:
    main_flow = next((f for f in flows if "main" in f.name.lower()), None)
    if main_flow is None and flows:
        main_flow = flows[0]
    if main_flow is not None:
        if main_flow.entry_screen_name:
            return main_flow.entry_screen_name
        name = id_to_name.get(main_flow.entry_screen)
        if name:
            return name
    return screens[0].name if screens else DEFAULT_ENTRY_SCREEN


def detect_nav_structure(
    screens: list[Screen], flows: list[Flow], id_to_name: dict[str, str]
) -> NavigationStructure:
    """Infer the navigation pattern from nav components and drawer screens."""
    has_tabs = has_sidebar = has_drawer = False
    tab_items: list[str] = []
    sidebar_items: list[str] = []

    for screen in screens:
        if screen.screen_type == ScreenType.DRAWER:
            has_drawer = True
            continue
        if screen.screen_type != ScreenType.SCREEN:
            continue

        types = set(collect_component_types(screen.elements))
        if types.intersection(TAB_NAV_TYPES):
            has_tabs = True
            _collect_nav_labels(screen.elements, TAB_NAV_TYPES, tab_items)
        if types.intersection(SIDEBAR_TYPES):
            has_sidebar = True
            _collect_nav_labels(screen.elements, SIDEBAR_TYPES, sidebar_items)

    if has_tabs and has_sidebar:
        nav_type, primary = NavigationType.HYBRID, [*tab_items, *sidebar_items]
    elif has_tabs:
        nav_type, primary = NavigationType.TAB_BASED, tab_items
    elif has_sidebar:
        nav_type, primary = NavigationType.SIDEBAR, sidebar_items
    elif has_drawer:
        nav_type, primary = NavigationType.DRAWER_BASED, []
    else:
        nav_type, primary = NavigationType.STACK, []

    return NavigationStructure(
        type=nav_type,
        primary_nav=tuple(primary),
        entry_screen=_resolve_entry_screen(screens, flows, id_to_name),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def map_screen(screen: Screen, id_to_name: dict[str, str], is_mobile: bool) -> RouteMapping:
    """Build the (not yet deduplicated) route mapping for one screen."""
    is_page = screen.screen_type == ScreenType.SCREEN
    return RouteMapping(
        screen_name=screen.name,
        screen_type=screen.screen_type,
        route_path=screen_name_to_route_path(screen.name) if is_page else "",
        component_name=screen_name_to_component_name(screen.name),
        file_name=screen_file_name(screen.name, screen.screen_type, is_mobile),
        key_component_types=tuple(collect_component_types(screen.elements)),
        navigates_to=tuple(get_navigation_targets(screen, id_to_name)),
    )


def generate_routes(
    screens: list[Screen],
    flows: list[Flow],
    platform: Platform,
) -> tuple[list[RouteMapping], NavigationStructure]:
    """Map every screen to a route and infer the navigation structure.

    Args:
        screens: Project screens in any order; they are stably sorted by
            ``order`` before mapping. The input list is not modified.
        flows: Project flows, used to resolve the entry screen.
        platform: Target platform; selects web or Flutter file naming.

    Returns:
        A ``(routes, navigation)`` tuple with one route per screen.
    """
    is_mobile = Platform(platform).is_mobile
    ordered = sorted(screens, key=lambda s: s.order)
    id_to_name = build_screen_id_to_name_map(ordered)

    routes = [map_screen(screen, id_to_name, is_mobile) for screen in ordered]
    routes = deduplicate_routes(routes, is_mobile)

    navigation = detect_nav_structure(ordered, flows, id_to_name)
    return routes, navigation

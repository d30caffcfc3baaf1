"""Feature detection over wireframe component trees.

Classifies a project's screens into product features (auth, commerce, charts,
...) using component-type heuristics and screen-name keywords. Rules run in a
fixed order and the output keeps that order; the OAuth rule depends on the
Auth rule having already run.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..models import Screen, ScreenType, WireframeElement
from .models import Confidence, DetectedFeature, FeatureId


# ---------------------------------------------------------------------------
# Keyword and component sets
# ---------------------------------------------------------------------------

AUTH_KEYWORDS: tuple[str, ...] = (
    "login", "signin", "sign-in", "signup", "sign-up", "register", "auth",
)
COMMERCE_KEYWORDS: tuple[str, ...] = ("cart", "checkout", "payment", "shop", "store", "order")
CHAT_KEYWORDS: tuple[str, ...] = ("chat", "message", "inbox", "conversation", "dm")
DASHBOARD_KEYWORDS: tuple[str, ...] = ("dashboard", "analytics", "overview", "admin")

FORM_COMPONENT_TYPES: frozenset[str] = frozenset({
    "text-input", "email-input", "password-input", "phone-input",
    "number-input", "textarea", "dropdown", "checkbox", "radio",
    "toggle", "slider", "date-picker", "time-picker", "file-upload",
})

MIN_FORM_COMPONENTS = 3
MIN_PRODUCT_CARDS = 2
MIN_STAT_CARDS = 2


@dataclass(frozen=True)
class SimpleRule:
    """Component-triggered feature: fires when any trigger type occurs often enough."""
    id: FeatureId
    name: str
    triggers: tuple[str, ...]
    min_count: int = 1


SIMPLE_RULES: tuple[SimpleRule, ...] = (
    SimpleRule(FeatureId.CHARTS, "Charts & Graphs", ("chart-placeholder",)),
    SimpleRule(FeatureId.MAPS, "Maps", ("map-placeholder",)),
    SimpleRule(FeatureId.DATA_TABLES, "Data Tables", ("table",)),
    SimpleRule(FeatureId.FILE_UPLOAD, "File Upload", ("file-upload",)),
    SimpleRule(FeatureId.VIDEO, "Video Player", ("video-placeholder",)),
    SimpleRule(FeatureId.IMAGE_CAROUSEL, "Image Carousel", ("carousel", "gallery")),
    SimpleRule(FeatureId.CALENDAR, "Calendar", ("calendar",)),
    SimpleRule(FeatureId.SEARCH, "Search", ("search-bar", "search-input")),
    SimpleRule(FeatureId.NOTIFICATIONS, "Notifications & Alerts", ("toast", "alert")),
    SimpleRule(FeatureId.TIMELINE, "Timeline", ("timeline",)),
    SimpleRule(FeatureId.RATINGS, "Ratings", ("rating",)),
)


# ---------------------------------------------------------------------------
# Preprocessing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScreenAnalysis:
    """Per-screen view used by every rule."""
    screen_name: str
    screen_type: ScreenType
    component_types: frozenset[str]

    def has(self, *types: str) -> bool:
        """True if the screen contains any of *types*."""
        return any(t in self.component_types for t in types)

    def has_all(self, *types: str) -> bool:
        return all(t in self.component_types for t in types)

    def name_matches(self, keywords: Iterable[str]) -> bool:
        return screen_name_matches(self.screen_name, keywords)


def iter_elements(
    elements: Iterable[WireframeElement],
    _ancestors: frozenset[int] = frozenset(),
) -> Iterator[WireframeElement]:
    """Yield every element of a forest depth-first, never descending into a cycle."""
    for element in elements:
        if id(element) in _ancestors:
            continue
        yield element
        if element.children:
            yield from iter_elements(element.children, _ancestors | {id(element)})


def count_element_types(elements: Iterable[WireframeElement]) -> Counter[str]:
    """Count occurrences of each element type, recursively through children."""
    return Counter(element.type for element in iter_elements(elements))


def collect_component_types(elements: Iterable[WireframeElement]) -> list[str]:
    """Distinct element types in first-seen (depth-first) order."""
    return list(dict.fromkeys(element.type for element in iter_elements(elements)))


def screen_name_matches(name: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match of *name* against any keyword."""
    lower = name.lower()
    return any(kw in lower for kw in keywords)


def analyze_screens(screens: list[Screen]) -> list[ScreenAnalysis]:
    return [
        ScreenAnalysis(
            screen_name=screen.name,
            screen_type=screen.screen_type,
            component_types=frozenset(collect_component_types(screen.elements)),
        )
        for screen in screens
    ]


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))


def _names(analyses: Iterable[ScreenAnalysis]) -> tuple[str, ...]:
    return _unique(a.screen_name for a in analyses)


def _feature(
    feature_id: FeatureId,
    name: str,
    confidence: Confidence,
    detected_from: Iterable[str],
) -> DetectedFeature:
    return DetectedFeature(
        id=feature_id,
        name=name,
        confidence=confidence,
        detected_from=_unique(detected_from),
    )


def _confidence(is_high: bool) -> Confidence:
    return Confidence.HIGH if is_high else Confidence.MEDIUM


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def _detect_auth(analyses: list[ScreenAnalysis]) -> DetectedFeature | None:
    auth_screens = [
        a for a in analyses
        if a.has_all("email-input", "password-input") or a.name_matches(AUTH_KEYWORDS)
    ]
    if not auth_screens:
        return None
    has_components = any(a.has_all("email-input", "password-input") for a in auth_screens)
    has_name_match = any(a.name_matches(AUTH_KEYWORDS) for a in auth_screens)
    return _feature(
        FeatureId.AUTH,
        "Authentication",
        _confidence(has_components and has_name_match),
        _names(auth_screens),
    )


def _detect_oauth(
    analyses: list[ScreenAnalysis],
    global_types: Counter[str],
    auth_detected: bool,
) -> list[DetectedFeature]:
    """OAuth feature, plus a synthesized Auth feature if rule 1 did not fire."""
    if not global_types["social-button"]:
        return []
    oauth_screens = _names(a for a in analyses if a.has("social-button"))
    found = [_feature(FeatureId.OAUTH, "OAuth / Social Login", Confidence.HIGH, oauth_screens)]
    if not auth_detected:
        found.append(_feature(FeatureId.AUTH, "Authentication", Confidence.HIGH, oauth_screens))
    return found


def _detect_commerce(
    analyses: list[ScreenAnalysis], global_types: Counter[str]
) -> DetectedFeature | None:
    enough_cards = global_types["product-card"] >= MIN_PRODUCT_CARDS
    named = [a.screen_name for a in analyses if a.name_matches(COMMERCE_KEYWORDS)]
    if not enough_cards and not named:
        return None
    with_cards = [a.screen_name for a in analyses if a.has("product-card")]
    return _feature(
        FeatureId.COMMERCE,
        "E-Commerce",
        _confidence(enough_cards and bool(named)),
        [*with_cards, *named],
    )


def _detect_simple(
    rule: SimpleRule, analyses: list[ScreenAnalysis], global_types: Counter[str]
) -> DetectedFeature | None:
    total = sum(global_types[t] for t in rule.triggers)
    if total < rule.min_count:
        return None
    return _feature(
        rule.id,
        rule.name,
        Confidence.HIGH,
        _names(a for a in analyses if a.has(*rule.triggers)),
    )


def _detect_dashboard(
    analyses: list[ScreenAnalysis], global_types: Counter[str]
) -> DetectedFeature | None:
    if global_types["stat-card"] < MIN_STAT_CARDS:
        return None
    screens = [
        a for a in analyses if a.has("stat-card") or a.name_matches(DASHBOARD_KEYWORDS)
    ]
    return _feature(
        FeatureId.DASHBOARD,
        "Dashboard",
        _confidence(any(a.name_matches(DASHBOARD_KEYWORDS) for a in screens)),
        _names(screens),
    )


def _detect_tab_navigation(
    analyses: list[ScreenAnalysis], global_types: Counter[str]
) -> DetectedFeature | None:
    if not (global_types["bottom-nav"] or global_types["tab-bar"]):
        return None
    return _feature(
        FeatureId.TAB_NAVIGATION,
        "Tab Navigation",
        Confidence.HIGH,
        _names(a for a in analyses if a.has("bottom-nav", "tab-bar")),
    )


def _detect_sidebar_navigation(
    analyses: list[ScreenAnalysis], global_types: Counter[str]
) -> DetectedFeature | None:
    if not global_types["sidebar"]:
        return None
    return _feature(
        FeatureId.SIDEBAR_NAVIGATION,
        "Sidebar Navigation",
        Confidence.HIGH,
        _names(a for a in analyses if a.has("sidebar")),
    )


def _detect_modals(
    analyses: list[ScreenAnalysis], global_types: Counter[str]
) -> DetectedFeature | None:
    modal_screens = [a for a in analyses if a.screen_type == ScreenType.MODAL]
    if not modal_screens and not global_types["modal"]:
        return None
    # Attribution may be empty when only a modal element was found.
    return _feature(FeatureId.MODALS, "Modal Dialogs", Confidence.HIGH, _names(modal_screens))


def _detect_drawers(analyses: list[ScreenAnalysis]) -> DetectedFeature | None:
    drawer_screens = [a for a in analyses if a.screen_type == ScreenType.DRAWER]
    if not drawer_screens:
        return None
    return _feature(FeatureId.DRAWERS, "Drawer Panels", Confidence.HIGH, _names(drawer_screens))


def _detect_forms(analyses: list[ScreenAnalysis]) -> DetectedFeature | None:
    form_screens = [
        a for a in analyses
        if len(a.component_types & FORM_COMPONENT_TYPES) >= MIN_FORM_COMPONENTS
    ]
    if not form_screens:
        return None
    return _feature(FeatureId.FORMS, "Complex Forms", Confidence.HIGH, _names(form_screens))


def _detect_chat(analyses: list[ScreenAnalysis]) -> DetectedFeature | None:
    chat_screens = [
        a for a in analyses
        if a.name_matches(CHAT_KEYWORDS) or a.has_all("text-input", "avatar")
    ]
    if not chat_screens:
        return None
    return _feature(
        FeatureId.CHAT,
        "Chat / Messaging",
        _confidence(any(a.name_matches(CHAT_KEYWORDS) for a in chat_screens)),
        _names(chat_screens),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def detect_features(screens: list[Screen]) -> list[DetectedFeature]:
    """Detect product features from a project's screens.

    Args:
        screens: Every screen of the project, elements included.

    Returns:
        Detected features in rule-evaluation order. Each feature id appears
        at most once.
    """
    analyses = analyze_screens(screens)
    global_types: Counter[str] = Counter()
    for screen in screens:
        global_types.update(count_element_types(screen.elements))

    features: list[DetectedFeature] = []

    auth = _detect_auth(analyses)
    if auth:
        features.append(auth)

    # Must run after the auth rule: may synthesize the auth feature.
    features.extend(_detect_oauth(analyses, global_types, auth_detected=auth is not None))

    candidates: list[DetectedFeature | None] = [_detect_commerce(analyses, global_types)]
    candidates.extend(_detect_simple(rule, analyses, global_types) for rule in SIMPLE_RULES)
    candidates.extend([
        _detect_dashboard(analyses, global_types),
        _detect_tab_navigation(analyses, global_types),
        _detect_sidebar_navigation(analyses, global_types),
        _detect_modals(analyses, global_types),
        _detect_drawers(analyses),
        _detect_forms(analyses),
        _detect_chat(analyses),
    ])
    features.extend(f for f in candidates if f is not None)
    return features

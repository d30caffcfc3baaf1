"""End-to-end blueprint generation for a realistic multi-screen project.

Drives the whole pipeline (detection, stack, routes, scaffolding blocks and
markdown) from camelCase API-shaped payloads, on both platform classes.
"""

from __future__ import annotations

from typing import Any

import pytest

from blueprinter.blueprint import FeatureId, NavigationType, assemble_blueprint, format_blueprint
from blueprinter.models import Flow, ProjectInfo, Screen


def _el(id_: str, type_: str, y: float = 0, **props: Any) -> dict[str, Any]:
    return {"id": id_, "type": type_, "position": {"x": 0, "y": y}, "properties": props}


SCREENS = [
    {
        "id": "s-login", "name": "Login", "screenType": "screen", "order": 0,
        "elements": [
            _el("e1", "email-input", 10), _el("e2", "password-input", 60),
            _el("e3", "social-button", 120, provider="google"),
        ],
        "connections": [
            {"id": "c1", "fromElement": "e3", "trigger": "click",
             "action": {"type": "navigate", "toScreen": "s-home"}},
        ],
    },
    {
        "id": "s-home", "name": "Home", "screenType": "screen", "order": 1,
        "elements": [
            _el("e4", "search-bar", 0),
            _el("e5", "product-card", 80), _el("e6", "product-card", 80),
            _el("e7", "bottom-nav", 700, items=["Home", "Cart", "Settings"]),
        ],
        "connections": [
            {"id": "c2", "fromElement": "e5", "trigger": "click",
             "action": {"type": "navigate", "toScreen": "s-cart"}},
            {"id": "c3", "fromElement": "e4", "trigger": "click",
             "action": {"type": "toggle-modal", "modalId": "s-filter"}},
        ],
    },
    {
        "id": "s-cart", "name": "Cart", "screenType": "screen", "order": 2,
        "elements": [_el("e8", "list", 0, items=["Mug"]), _el("e9", "map-placeholder", 300)],
    },
    {"id": "s-set-1", "name": "Settings", "screenType": "screen", "order": 3},
    {"id": "s-set-2", "name": "Settings", "screenType": "screen", "order": 4},
    {"id": "s-set-3", "name": "Settings", "screenType": "screen", "order": 5},
    {"id": "s-filter", "name": "Filter", "screenType": "modal", "order": 6},
]

FLOWS = [
    {"id": "f1", "name": "Main", "entryScreen": "s-login", "nodes": [], "edges": []},
]


@pytest.fixture
def screens() -> list[Screen]:
    return [Screen.model_validate(s) for s in SCREENS]


@pytest.fixture
def flows() -> list[Flow]:
    return [Flow.model_validate(f) for f in FLOWS]


@pytest.mark.integration
def test_web_blueprint(screens, flows):
    project = ProjectInfo(name="Corner Shop", platform="desktop")
    blueprint = assemble_blueprint(project, screens, flows)

    ids = [f.id for f in blueprint.detected_features]
    assert ids[:3] == [FeatureId.AUTH, FeatureId.OAUTH, FeatureId.COMMERCE]
    assert {FeatureId.MAPS, FeatureId.SEARCH, FeatureId.TAB_NAVIGATION, FeatureId.MODALS} <= set(ids)

    pages = [r for r in blueprint.routes if r.route_path]
    assert [r.route_path for r in pages] == [
        "/login", "/", "/cart", "/settings", "/settings-2", "/settings-3",
    ]
    assert blueprint.navigation.type == NavigationType.TAB_BASED
    assert blueprint.navigation.primary_nav == ("Home", "Cart", "Settings")
    assert blueprint.navigation.entry_screen == "Login"

    md = format_blueprint(blueprint)
    assert "- **Auth & Database**: Supabase (PostgreSQL + Auth + OAuth)" in md
    assert "Home → Cart" in md
    assert "Home → Filter" in md
    assert "Login → Home" in md
    assert "| Filter | FilterPage | components/modals/filter-modal.tsx |" in md
    assert "pnpm add -D @types/node @types/react @types/leaflet" in md
    assert "NEXT_PUBLIC_MAPBOX_TOKEN=your-mapbox-token" in md
    assert "Configure OAuth providers" in md
    assert "│   │   ├── settings-2/page.tsx" in md


@pytest.mark.integration
def test_mobile_blueprint(screens, flows):
    project = ProjectInfo(name="Corner Shop", platform="mobile")
    blueprint = assemble_blueprint(project, screens, flows)

    files = [r.file_name for r in blueprint.routes]
    assert files[3:6] == [
        "settings_screen.dart", "settings-2_screen.dart", "settings-3_screen.dart",
    ]
    names = [p.name for p in blueprint.stack.packages]
    assert names[:3] == ["go_router", "flutter_riverpod", "riverpod_annotation"]
    assert len(names) == len(set(names))
    assert {"supabase_flutter", "flutter_stripe", "google_maps_flutter"} <= set(names)

    md = format_blueprint(blueprint)
    assert "GOOGLE_MAPS_API_KEY=your-maps-key" in md
    assert "STRIPE_SECRET_KEY" not in md
    assert "flutter create corner_shop" in md
    assert "│   │   └── filter_modal.dart" in md

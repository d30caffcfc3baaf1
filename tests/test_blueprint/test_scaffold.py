"""Unit tests for the auxiliary blueprint blocks (blueprinter.blueprint.scaffold).

Tests cover:
- Environment variables per platform and feature
- Setup commands (Flutter and Next.js, preset packages skipped)
- Configuration notes
- Directory trees rendered from the Jinja2 templates
"""

from __future__ import annotations

import pytest

from blueprinter.blueprint.models import FeatureId, PackageRecommendation, RouteMapping
from blueprinter.blueprint.scaffold import (
    build_config_notes,
    build_directory_structure,
    build_env_vars,
    build_setup_commands,
    is_auth_screen,
)
from blueprinter.models import ScreenType


def _pkg(name: str) -> PackageRecommendation:
    return PackageRecommendation(name=name, version="^1.0", purpose="test")


def _route(name: str, path: str, file_name: str, screen_type=ScreenType.SCREEN, types=()) -> RouteMapping:
    return RouteMapping(
        screen_name=name,
        screen_type=screen_type,
        route_path=path,
        component_name=f"{name}Page",
        file_name=file_name,
        key_component_types=tuple(types),
    )


# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------


class TestEnvVars:
    @pytest.mark.unit
    def test_none_without_features(self):
        assert build_env_vars(frozenset(), is_mobile=False) == []

    @pytest.mark.unit
    def test_web_auth_commerce_maps(self):
        env = build_env_vars(
            frozenset({FeatureId.AUTH, FeatureId.COMMERCE, FeatureId.MAPS}), is_mobile=False
        )
        assert env == [
            "NEXT_PUBLIC_SUPABASE_URL=your-project-url",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY=your-anon-key",
            "NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY=your-stripe-key",
            "STRIPE_SECRET_KEY=your-stripe-secret",
            "NEXT_PUBLIC_MAPBOX_TOKEN=your-mapbox-token",
        ]

    @pytest.mark.unit
    def test_mobile_has_no_prefix_or_secret(self):
        env = build_env_vars(
            frozenset({FeatureId.AUTH, FeatureId.COMMERCE, FeatureId.MAPS}), is_mobile=True
        )
        assert env == [
            "SUPABASE_URL=your-project-url",
            "SUPABASE_ANON_KEY=your-anon-key",
            "STRIPE_PUBLISHABLE_KEY=your-stripe-key",
            "GOOGLE_MAPS_API_KEY=your-maps-key",
        ]


# ---------------------------------------------------------------------------
# Setup commands
# ---------------------------------------------------------------------------


class TestSetupCommands:
    @pytest.mark.unit
    def test_flutter(self):
        commands = build_setup_commands(
            "My Cool App", [_pkg("go_router"), _pkg("fl_chart")], frozenset(), is_mobile=True
        )
        assert commands == [
            "flutter create my_cool_app",
            "cd my_cool_app",
            "flutter pub add go_router fl_chart",
        ]

    @pytest.mark.unit
    def test_next_skips_preset_packages(self):
        packages = [_pkg(n) for n in ("next", "react", "react-dom", "tailwindcss", "lucide-react")]
        commands = build_setup_commands("Shop", packages, frozenset(), is_mobile=False)
        assert commands[0].startswith("npx create-next-app@latest shop ")
        assert commands[1] == "cd shop"
        assert commands[2] == "pnpm add lucide-react"
        assert commands[3] == "pnpm add -D @types/node @types/react"

    @pytest.mark.unit
    def test_next_maps_adds_leaflet_types(self):
        commands = build_setup_commands("Shop", [], frozenset({FeatureId.MAPS}), is_mobile=False)
        assert commands[-1] == "pnpm add -D @types/node @types/react @types/leaflet"
        assert not any(c.startswith("pnpm add ") and "-D" not in c for c in commands)

    @pytest.mark.unit
    def test_unsluggable_name_gets_default(self):
        commands = build_setup_commands("!!!", [], frozenset(), is_mobile=True)
        assert commands[0] == "flutter create my_app"


# ---------------------------------------------------------------------------
# Configuration notes
# ---------------------------------------------------------------------------


class TestConfigNotes:
    @pytest.mark.unit
    def test_empty_without_features(self):
        assert build_config_notes(frozenset(), is_mobile=False) == []

    @pytest.mark.unit
    def test_webhook_note_only_on_web(self):
        web = build_config_notes(frozenset({FeatureId.COMMERCE}), is_mobile=False)
        mobile = build_config_notes(frozenset({FeatureId.COMMERCE}), is_mobile=True)
        assert any("webhook" in n for n in web)
        assert not any("webhook" in n for n in mobile)

    @pytest.mark.unit
    def test_storage_note_needs_auth(self):
        without_auth = build_config_notes(frozenset({FeatureId.FILE_UPLOAD}), is_mobile=False)
        with_auth = build_config_notes(
            frozenset({FeatureId.FILE_UPLOAD, FeatureId.AUTH}), is_mobile=False
        )
        assert without_auth == []
        assert with_auth[-1].startswith("Enable Supabase Storage")

    @pytest.mark.unit
    def test_maps_note_per_platform(self):
        web = build_config_notes(frozenset({FeatureId.MAPS}), is_mobile=False)
        mobile = build_config_notes(frozenset({FeatureId.MAPS}), is_mobile=True)
        assert "Mapbox" in web[0]
        assert "Google Cloud Console" in mobile[0]


# ---------------------------------------------------------------------------
# Directory structure
# ---------------------------------------------------------------------------


class TestDirectoryStructure:
    @pytest.mark.unit
    def test_auth_screen_detection(self):
        assert is_auth_screen(_route("Register", "/register", "register/page.tsx"))
        assert is_auth_screen(
            _route("Account", "/account", "account/page.tsx", types=("email-input", "password-input"))
        )
        assert not is_auth_screen(_route("Profile", "/profile", "profile/page.tsx"))

    @pytest.mark.unit
    def test_web_tree_groups_pages(self):
        routes = [
            _route("Home", "/", "page.tsx"),
            _route("Login", "/login", "login/page.tsx"),
            _route("Settings", "/settings", "settings/page.tsx"),
            _route("Confirm", "", "confirm-modal.tsx", ScreenType.MODAL),
        ]
        tree = build_directory_structure(routes, frozenset({FeatureId.AUTH}), is_mobile=False)
        lines = tree.splitlines()
        assert lines[0] == "src/"
        assert "│   ├── (auth)/" in lines
        assert "│   │   └── login/page.tsx" in lines
        assert "│   ├── (main)/" in lines
        assert "│   │   ├── page.tsx" in lines
        assert "│   │   └── settings/page.tsx" in lines
        assert "│       └── auth/callback/route.ts" in lines
        assert "│   ├── modals/" in lines
        assert "│   │   └── confirm-modal.tsx" in lines
        assert any("supabase/" in line for line in lines)
        assert lines[-1] == "└── package.json"

    @pytest.mark.unit
    def test_web_tree_without_auth_or_overlays(self):
        tree = build_directory_structure([_route("Home", "/", "page.tsx")], frozenset(), is_mobile=False)
        assert "(auth)" not in tree
        assert "api/" not in tree
        assert "modals/" not in tree
        assert "supabase/" not in tree

    @pytest.mark.unit
    def test_flutter_tree(self):
        routes = [
            _route("Home", "/", "home_screen.dart"),
            _route("Cart", "/cart", "cart_screen.dart"),
            _route("Menu", "", "menu_drawer.dart", ScreenType.DRAWER),
        ]
        tree = build_directory_structure(
            routes, frozenset({FeatureId.AUTH, FeatureId.COMMERCE}), is_mobile=True
        )
        lines = tree.splitlines()
        assert lines[0] == "lib/"
        assert "│   ├── home_screen.dart" in lines
        assert "│   └── cart_screen.dart" in lines
        assert "│   │   └── menu_drawer.dart" in lines
        assert "│   ├── auth_provider.dart" in lines
        assert "│   ├── supabase_service.dart" in lines
        assert "│   └── stripe_service.dart" in lines
        assert lines[-1].startswith("└── models/")

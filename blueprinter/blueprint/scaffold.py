"""Auxiliary scaffolding blocks of a blueprint.

Environment variables, setup commands, post-scaffold configuration notes and
the project directory tree. Each block depends only on the platform class and
the detected feature ids (plus routes/packages where relevant), so the same
inputs always give the same text.
"""

from __future__ import annotations

from collections.abc import Iterable, Set

from ..models import ScreenType
from .features import AUTH_KEYWORDS, screen_name_matches
from .models import FeatureId, PackageRecommendation, RouteMapping
from .renderer import default_renderer
from .routes import slugify


# Packages already installed by create-next-app.
NEXT_PRESET_PACKAGES: frozenset[str] = frozenset({"next", "react", "react-dom", "tailwindcss"})

WEB_DEV_DEPENDENCIES: tuple[str, ...] = ("@types/node", "@types/react")

DEFAULT_PROJECT_SLUG = "my-app"


# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

def build_env_vars(feature_ids: Set[FeatureId], is_mobile: bool) -> list[str]:
    """Placeholder ``KEY=value`` lines for the services the features need."""
    env: list[str] = []
    prefix = "" if is_mobile else "NEXT_PUBLIC_"

    if FeatureId.AUTH in feature_ids:
        env.append(f"{prefix}SUPABASE_URL=your-project-url")
        env.append(f"{prefix}SUPABASE_ANON_KEY=your-anon-key")

    if FeatureId.COMMERCE in feature_ids:
        env.append(f"{prefix}STRIPE_PUBLISHABLE_KEY=your-stripe-key")
        if not is_mobile:
            env.append("STRIPE_SECRET_KEY=your-stripe-secret")

    if FeatureId.MAPS in feature_ids:
        if is_mobile:
            env.append("GOOGLE_MAPS_API_KEY=your-maps-key")
        else:
            env.append("NEXT_PUBLIC_MAPBOX_TOKEN=your-mapbox-token")

    return env


# ---------------------------------------------------------------------------
# Setup commands
# ---------------------------------------------------------------------------

def build_setup_commands(
    project_name: str,
    packages: Iterable[PackageRecommendation],
    feature_ids: Set[FeatureId],
    is_mobile: bool,
) -> list[str]:
    """Scaffold, install and dev-dependency commands for the platform."""
    project_slug = slugify(project_name) or DEFAULT_PROJECT_SLUG
    names = [p.name for p in packages]
    commands: list[str] = []

    if is_mobile:
        dart_slug = project_slug.replace("-", "_")
        commands.append(f"flutter create {dart_slug}")
        commands.append(f"cd {dart_slug}")
        if names:
            commands.append(f"flutter pub add {' '.join(names)}")
        return commands

    commands.append(
        f"npx create-next-app@latest {project_slug} "
        "--typescript --tailwind --app --src-dir --use-pnpm"
    )
    commands.append(f"cd {project_slug}")
    deps = [n for n in names if n not in NEXT_PRESET_PACKAGES]
    if deps:
        commands.append(f"pnpm add {' '.join(deps)}")
    dev_deps = list(WEB_DEV_DEPENDENCIES)
    if FeatureId.MAPS in feature_ids:
        dev_deps.append("@types/leaflet")
    commands.append(f"pnpm add -D {' '.join(dev_deps)}")
    return commands


# ---------------------------------------------------------------------------
# Configuration notes
# ---------------------------------------------------------------------------

def build_config_notes(feature_ids: Set[FeatureId], is_mobile: bool) -> list[str]:
    """Reminders for accounts and provider settings to create after scaffolding."""
    notes: list[str] = []

    if FeatureId.AUTH in feature_ids:
        notes.append(
            "Create a Supabase project at supabase.com and add credentials to your env file"
        )
        notes.append(
            "Enable email/password auth in Supabase Dashboard > Authentication > Providers"
        )

    if FeatureId.OAUTH in feature_ids:
        notes.append(
            "Configure OAuth providers (Google, Apple, etc.) in "
            "Supabase Dashboard > Authentication > Providers"
        )

    if FeatureId.COMMERCE in feature_ids:
        notes.append("Create a Stripe account and add API keys to your env file")
        if not is_mobile:
            notes.append(
                "Set up Stripe webhook endpoint at /api/stripe/webhook for payment events"
            )

    if FeatureId.MAPS in feature_ids:
        if is_mobile:
            notes.append(
                "Enable Maps SDK in Google Cloud Console and add API key to "
                "AndroidManifest.xml and Info.plist"
            )
        else:
            notes.append("Create a Mapbox account and add access token to env file")

    if FeatureId.FILE_UPLOAD in feature_ids and FeatureId.AUTH in feature_ids:
        notes.append("Enable Supabase Storage and create a bucket for file uploads")

    return notes


# ---------------------------------------------------------------------------
# Directory structure
# ---------------------------------------------------------------------------

def is_auth_screen(route: RouteMapping) -> bool:
    """Auth pages are grouped separately in the web tree."""
    return screen_name_matches(route.screen_name, AUTH_KEYWORDS) or (
        "email-input" in route.key_component_types
        and "password-input" in route.key_component_types
    )


def _web_page_entry(route: RouteMapping) -> str:
    if route.route_path == "/":
        return "page.tsx"
    return f"{route.route_path.lstrip('/')}/page.tsx"


def _web_context(routes: list[RouteMapping], feature_ids: Set[FeatureId]) -> dict:
    pages = [r for r in routes if r.screen_type == ScreenType.SCREEN]
    api_routes: list[str] = []
    if FeatureId.AUTH in feature_ids:
        api_routes.append("auth/callback/route.ts")
    if FeatureId.COMMERCE in feature_ids:
        api_routes.append("stripe/webhook/route.ts")
    return {
        "auth_pages": [_web_page_entry(r) for r in pages if is_auth_screen(r)],
        "main_pages": [_web_page_entry(r) for r in pages if not is_auth_screen(r)],
        "api_routes": api_routes,
        "modals": [r.file_name for r in routes if r.screen_type == ScreenType.MODAL],
        "drawers": [r.file_name for r in routes if r.screen_type == ScreenType.DRAWER],
        "has_auth": FeatureId.AUTH in feature_ids,
    }


def _flutter_context(routes: list[RouteMapping], feature_ids: Set[FeatureId]) -> dict:
    services: list[str] = []
    if FeatureId.AUTH in feature_ids:
        services.append("supabase_service.dart")
    if FeatureId.COMMERCE in feature_ids:
        services.append("stripe_service.dart")
    return {
        "pages": [r.file_name for r in routes if r.screen_type == ScreenType.SCREEN],
        "modals": [r.file_name for r in routes if r.screen_type == ScreenType.MODAL],
        "drawers": [r.file_name for r in routes if r.screen_type == ScreenType.DRAWER],
        "has_auth": FeatureId.AUTH in feature_ids,
        "services": services,
    }


def build_directory_structure(
    routes: Iterable[RouteMapping], feature_ids: Set[FeatureId], is_mobile: bool
) -> str:
    """Render the platform's directory tree for the given routes and features."""
    route_list = list(routes)
    renderer = default_renderer()
    if is_mobile:
        return renderer.render("flutter_tree.txt.j2", _flutter_context(route_list, feature_ids))
    return renderer.render("web_tree.txt.j2", _web_context(route_list, feature_ids))

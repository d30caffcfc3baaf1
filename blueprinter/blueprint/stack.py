"""Technology stack selection.

Two hand-authored stack profiles exist: Next.js for desktop/tablet projects
and Flutter for mobile ones. Each declares base packages plus extra packages
per detected feature. Profiles are read-only module constants.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..models import Platform
from .models import DetectedFeature, FeatureId, PackageRecommendation, StackSelection


@dataclass(frozen=True)
class StackProfile:
    """Framework choice plus base and feature-gated packages for one platform class."""

    framework: str
    language: str
    styling: str
    base_packages: tuple[PackageRecommendation, ...]
    feature_packages: Mapping[FeatureId, tuple[PackageRecommendation, ...]]

    def packages_for(self, feature_id: FeatureId) -> tuple[PackageRecommendation, ...]:
        return self.feature_packages.get(feature_id, ())


def _pkg(name: str, version: str, purpose: str, feature_id: FeatureId | None = None) -> PackageRecommendation:
    return PackageRecommendation(name=name, version=version, purpose=purpose, feature_id=feature_id)


def _feature_pkgs(
    entries: dict[FeatureId, list[tuple[str, str, str]]],
) -> Mapping[FeatureId, tuple[PackageRecommendation, ...]]:
    return MappingProxyType({
        feature_id: tuple(_pkg(name, version, purpose, feature_id) for name, version, purpose in pkgs)
        for feature_id, pkgs in entries.items()
    })


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

WEB_STACK = StackProfile(
    framework="Next.js 15 (App Router)",
    language="TypeScript",
    styling="Tailwind CSS v4",
    base_packages=(
        _pkg("next", "^15.0", "React framework with App Router"),
        _pkg("react", "^19.0", "UI library"),
        _pkg("react-dom", "^19.0", "React DOM renderer"),
        _pkg("tailwindcss", "^4.0", "Utility-first CSS"),
        _pkg("lucide-react", "^0.460", "Icons (matches wireframe icon set)"),
    ),
    feature_packages=_feature_pkgs({
        FeatureId.AUTH: [
            ("@supabase/supabase-js", "^2.0", "Auth + database client"),
            ("@supabase/ssr", "^0.5", "Supabase SSR helpers for Next.js"),
        ],
        FeatureId.CHARTS: [("recharts", "^2.12", "Charts & data visualization")],
        FeatureId.MAPS: [
            ("react-leaflet", "^5.0", "Interactive maps"),
            ("leaflet", "^1.9", "Map rendering engine"),
        ],
        FeatureId.DATA_TABLES: [("@tanstack/react-table", "^8.0", "Headless data table")],
        FeatureId.COMMERCE: [
            ("@stripe/stripe-js", "^4.0", "Client-side Stripe checkout"),
            ("stripe", "^17.0", "Server-side Stripe API"),
        ],
        FeatureId.FILE_UPLOAD: [("react-dropzone", "^14.0", "Drag & drop file upload")],
        FeatureId.VIDEO: [("react-player", "^2.16", "Video playback")],
        FeatureId.IMAGE_CAROUSEL: [("embla-carousel-react", "^8.0", "Carousel / image slider")],
        FeatureId.CALENDAR: [
            ("react-day-picker", "^9.0", "Calendar date picker"),
            ("date-fns", "^4.0", "Date utility functions"),
        ],
        FeatureId.NOTIFICATIONS: [("sonner", "^1.7", "Toast notifications")],
        FeatureId.MODALS: [("@radix-ui/react-dialog", "^1.1", "Accessible modal dialogs")],
        FeatureId.DRAWERS: [("vaul", "^1.0", "Drawer component")],
        FeatureId.FORMS: [
            ("react-hook-form", "^7.0", "Form state management"),
            ("zod", "^3.23", "Schema validation"),
            ("@hookform/resolvers", "^3.0", "Zod resolver for react-hook-form"),
        ],
    }),
)

FLUTTER_STACK = StackProfile(
    framework="Flutter 3",
    language="Dart",
    styling="Material 3",
    base_packages=(
        _pkg("go_router", "^14.0", "Declarative routing"),
        _pkg("flutter_riverpod", "^2.5", "State management"),
        _pkg("riverpod_annotation", "^2.3", "Riverpod code generation"),
    ),
    feature_packages=_feature_pkgs({
        FeatureId.AUTH: [("supabase_flutter", "^2.0", "Auth + database client")],
        FeatureId.CHARTS: [("fl_chart", "^0.69", "Charts & data visualization")],
        FeatureId.MAPS: [("google_maps_flutter", "^2.9", "Google Maps integration")],
        FeatureId.COMMERCE: [("flutter_stripe", "^11.0", "Stripe payments")],
        FeatureId.FILE_UPLOAD: [("file_picker", "^8.0", "File selection")],
        FeatureId.VIDEO: [("video_player", "^2.9", "Video playback")],
        FeatureId.IMAGE_CAROUSEL: [("carousel_slider", "^5.0", "Image carousel")],
        FeatureId.CALENDAR: [("table_calendar", "^3.1", "Calendar widget")],
        FeatureId.NOTIFICATIONS: [("fluttertoast", "^8.2", "Toast notifications")],
        FeatureId.SEARCH: [("material_floating_search_bar_2", "^0.5", "Search bar widget")],
    }),
)


def get_stack_profile(platform: Platform) -> StackProfile:
    """Return the profile for *platform*: Flutter for mobile, Next.js otherwise."""
    return FLUTTER_STACK if platform.is_mobile else WEB_STACK


def resolve_packages(
    profile: StackProfile, feature_ids: Iterable[FeatureId]
) -> list[PackageRecommendation]:
    """Base packages followed by feature packages, deduplicated by name (first wins)."""
    packages: list[PackageRecommendation] = []
    seen: set[str] = set()

    def add(pkgs: Iterable[PackageRecommendation]) -> None:
        for pkg in pkgs:
            if pkg.name not in seen:
                packages.append(pkg)
                seen.add(pkg.name)

    add(profile.base_packages)
    for feature_id in dict.fromkeys(feature_ids):
        add(profile.packages_for(feature_id))
    return packages


def select_stack(platform: Platform, features: list[DetectedFeature]) -> StackSelection:
    """Pick the stack profile for *platform* and resolve its package list.

    Args:
        platform: Target platform of the project.
        features: Detected features; duplicates are ignored.

    Returns:
        Framework, language and styling labels plus the resolved packages.
    """
    profile = get_stack_profile(Platform(platform))
    return StackSelection(
        framework=profile.framework,
        language=profile.language,
        styling=profile.styling,
        packages=tuple(resolve_packages(profile, (f.id for f in features))),
    )

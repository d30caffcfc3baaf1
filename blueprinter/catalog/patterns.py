"""Static catalog of reusable screen layout patterns."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class DesignPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    platforms: tuple[str, ...]
    description: str
    layout: str
    key_components: tuple[str, ...]
    spacing_strategy: str


ALL_PLATFORMS = ("mobile", "desktop", "tablet")
LARGE_SCREENS = ("desktop", "tablet")


def _p(
    id_: str,
    name: str,
    category: str,
    platforms: tuple[str, ...],
    description: str,
    layout: str,
    key_components: tuple[str, ...],
    spacing: str,
) -> DesignPattern:
    return DesignPattern(
        id=id_,
        name=name,
        category=category,
        platforms=platforms,
        description=description,
        layout=layout,
        key_components=key_components,
        spacing_strategy=spacing,
    )


DESIGN_PATTERNS: tuple[DesignPattern, ...] = (
    _p("auth-form-centered", "Centered Auth Form", "auth", ALL_PLATFORMS,
       "Login/signup with centered card, logo above, social buttons below form",
       "vertical-centered",
       ("logo-placeholder", "card", "email-input", "password-input", "button-primary",
        "social-button", "button-link"),
       "comfortable"),
    _p("auth-split-screen", "Split Screen Auth", "auth", LARGE_SCREENS,
       "Left panel with branding/hero image, right panel with auth form",
       "horizontal-split",
       ("image", "heading", "paragraph", "email-input", "password-input", "button-primary",
        "social-button"),
       "spacious"),
    _p("dashboard-stats-grid", "Stats Grid Dashboard", "dashboard", ALL_PLATFORMS,
       "Top row of stat-cards followed by charts and recent activity list",
       "stat-grid-then-content",
       ("stat-card", "chart-placeholder", "list", "heading"),
       "comfortable"),
    _p("dashboard-sidebar-layout", "Sidebar Dashboard", "dashboard", LARGE_SCREENS,
       "Persistent sidebar navigation with main content area showing stats and charts",
       "sidebar-main",
       ("sidebar", "header", "stat-card", "chart-placeholder", "table"),
       "comfortable"),
    _p("dashboard-mobile-cards", "Mobile Card Dashboard", "dashboard", ("mobile",),
       "Stacked cards with key metrics, scrollable activity feed, bottom navigation",
       "vertical-scroll-cards",
       ("navbar", "stat-card", "card", "list", "bottom-nav"),
       "compact"),
    _p("list-searchable", "Searchable List", "list", ALL_PLATFORMS,
       "Search bar at top, filterable list with avatars and action indicators",
       "search-then-list",
       ("search-bar", "tab-bar", "list", "fab"),
       "compact"),
    _p("list-card-grid", "Card Grid", "list", LARGE_SCREENS,
       "Grid of content cards with images, titles, and metadata",
       "responsive-grid",
       ("search-bar", "card", "image", "heading", "badge"),
       "comfortable"),
    _p("detail-hero-content", "Hero Detail Page", "detail", ALL_PLATFORMS,
       "Large hero image/header, content sections below with actions",
       "hero-then-content",
       ("image", "heading", "paragraph", "badge", "button-primary", "divider", "list"),
       "spacious"),
    _p("detail-profile", "User Profile", "detail", ALL_PLATFORMS,
       "Avatar with name/bio, stats row, tabbed content sections",
       "profile-centered",
       ("avatar", "heading", "paragraph", "stat-card", "tab-bar", "list"),
       "comfortable"),
    _p("detail-product", "Product Detail", "detail", ALL_PLATFORMS,
       "Product image carousel, pricing, description, add to cart CTA",
       "image-then-details",
       ("image", "heading", "paragraph", "badge", "rating", "button-primary", "button-outline"),
       "comfortable"),
    _p("settings-grouped-list", "Grouped Settings", "settings", ALL_PLATFORMS,
       "Categorized settings with toggles, list items, and navigation arrows",
       "grouped-sections",
       ("heading", "list", "toggle", "divider", "avatar"),
       "compact"),
    _p("onboarding-carousel", "Onboarding Carousel", "onboarding", ("mobile", "tablet"),
       "Full-screen slides with illustration, heading, description, progress dots, and CTA",
       "full-screen-centered",
       ("image", "heading", "paragraph", "button-primary", "button-link"),
       "spacious"),
    _p("commerce-product-list", "Product Catalog", "commerce", ALL_PLATFORMS,
       "Product grid with filters, search, sorting, and product cards",
       "filter-then-grid",
       ("search-bar", "tab-bar", "product-card", "badge"),
       "compact"),
    _p("commerce-cart", "Shopping Cart", "commerce", ALL_PLATFORMS,
       "Cart item list with quantities, price summary, and checkout CTA",
       "list-then-summary",
       ("list", "heading", "paragraph", "divider", "button-primary", "stat-card"),
       "comfortable"),
    _p("commerce-checkout", "Checkout Form", "commerce", ALL_PLATFORMS,
       "Multi-section form with shipping, payment, and order summary",
       "stepped-form",
       ("heading", "text-input", "email-input", "dropdown", "card", "button-primary", "divider"),
       "comfortable"),
    _p("social-feed", "Social Feed", "social", ALL_PLATFORMS,
       "Scrollable feed of post cards with avatar, content, images, and engagement actions",
       "vertical-feed",
       ("card", "avatar", "paragraph", "image", "icon-button", "heading"),
       "compact"),
    _p("messaging-chat", "Chat Interface", "messaging", ALL_PLATFORMS,
       "Chat header, message bubbles area, bottom input with send button",
       "header-content-input",
       ("navbar", "container", "card", "avatar", "text-input", "icon-button"),
       "compact"),
    _p("messaging-inbox", "Message Inbox", "messaging", ALL_PLATFORMS,
       "List of conversations with avatars, preview text, timestamps, and unread indicators",
       "search-then-list",
       ("search-bar", "list", "avatar", "badge"),
       "compact"),
    _p("content-article", "Article/Blog Page", "content", ALL_PLATFORMS,
       "Hero image, title, metadata (author, date), body paragraphs with headings",
       "article-flow",
       ("image", "heading", "paragraph", "avatar", "badge", "divider"),
       "spacious"),
)


def patterns_for_platform(platform: str) -> list[DesignPattern]:
    """Patterns applicable to *platform* (``mobile``, ``desktop`` or ``tablet``)."""
    return [p for p in DESIGN_PATTERNS if platform in p.platforms]


def format_design_patterns_text(platform: Optional[str] = None) -> str:
    """Render patterns as markdown, grouped by category in catalog order.

    With *platform* set, only the patterns that apply to it are listed.
    """
    title = "# Waiframe Design Patterns"
    patterns = DESIGN_PATTERNS
    if platform:
        title = f"{title} ({platform})"
        patterns = patterns_for_platform(platform)

    lines = [title, ""]
    current_category = ""
    for pattern in patterns:
        if pattern.category != current_category:
            current_category = pattern.category
            lines.extend([f"## {current_category.capitalize()}", ""])
        lines.append(f"### {pattern.name} ({pattern.id})")
        lines.append(f"Platforms: {', '.join(pattern.platforms)}")
        lines.append(f"Layout: {pattern.layout} | Spacing: {pattern.spacing_strategy}")
        lines.append(pattern.description)
        lines.append(f"Components: {', '.join(pattern.key_components)}")
        lines.append("")
    return "\n".join(lines)

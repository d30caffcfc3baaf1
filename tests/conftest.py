"""Shared pytest fixtures for the blueprinter test suite.

Provides reusable fixtures for:
- Wireframe element, screen and flow factories
- Projects on each platform class
- A small but realistic multi-screen project
- A mocked ``httpx.AsyncClient`` serving canned API payloads
"""

from __future__ import annotations

import itertools
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from blueprinter.models import (
    Connection,
    ConnectionAction,
    Flow,
    FlowNode,
    Platform,
    Position,
    ProjectInfo,
    Screen,
    ScreenType,
    WireframeElement,
)


_ids = itertools.count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}-{next(_ids)}"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_element() -> Callable[..., WireframeElement]:
    """Factory for wireframe elements.

    Usage::

        make_element("list", items=["A", "B"], y=120, children=[...])
    """

    def factory(
        type_: str,
        *,
        id: str | None = None,
        y: float = 0,
        children: list[WireframeElement] | None = None,
        **properties: Any,
    ) -> WireframeElement:
        return WireframeElement(
            id=id or _next_id("el"),
            type=type_,
            position=Position(x=0, y=y),
            properties=properties,
            children=children or [],
        )

    return factory


@pytest.fixture
def make_screen() -> Callable[..., Screen]:
    """Factory for screens; positional arguments after the name are elements."""

    def factory(
        name: str,
        *elements: WireframeElement,
        id: str | None = None,
        screen_type: ScreenType | str = ScreenType.SCREEN,
        order: int = 0,
        connections: list[Connection] | None = None,
    ) -> Screen:
        return Screen(
            id=id or _next_id("screen"),
            name=name,
            screen_type=ScreenType(screen_type),
            order=order,
            elements=list(elements),
            connections=connections or [],
        )

    return factory


@pytest.fixture
def make_connection() -> Callable[..., Connection]:
    """Factory for connections: ``make_connection("el-1", "navigate", to_screen="s2")``."""

    def factory(
        from_element: str,
        action_type: str = "navigate",
        *,
        item_index: int | None = None,
        **action: Any,
    ) -> Connection:
        return Connection(
            id=_next_id("conn"),
            from_element=from_element,
            trigger="click",
            action=ConnectionAction(type=action_type, **action),
            item_index=item_index,
        )

    return factory


@pytest.fixture
def make_flow() -> Callable[..., Flow]:
    def factory(
        name: str,
        entry_screen: str = "",
        *,
        entry_screen_name: str | None = None,
        nodes: list[tuple[str, str | None]] | None = None,
    ) -> Flow:
        return Flow(
            id=_next_id("flow"),
            name=name,
            entry_screen=entry_screen,
            entry_screen_name=entry_screen_name,
            nodes=[FlowNode(screen_id=sid, screen_name=sname) for sid, sname in nodes or []],
        )

    return factory


@pytest.fixture
def make_project() -> Callable[..., ProjectInfo]:
    def factory(
        platform: Platform | str = Platform.DESKTOP,
        name: str = "Test App",
        description: str | None = None,
    ) -> ProjectInfo:
        return ProjectInfo(
            id="proj-1",
            name=name,
            description=description,
            platform=Platform(platform),
        )

    return factory


# ---------------------------------------------------------------------------
# Sample project
# ---------------------------------------------------------------------------

@pytest.fixture
def login_home_screens(make_element, make_screen, make_connection) -> list[Screen]:
    """Home + Login, where a Home button opens Login."""
    cta = make_element("button-primary", id="cta", label="Sign in", y=200)
    home = make_screen(
        "Home",
        make_element("heading", text="Welcome", y=10),
        cta,
        id="home",
        order=0,
        connections=[make_connection("cta", to_screen="login")],
    )
    login = make_screen(
        "Login",
        make_element("email-input", label="Email", y=40),
        make_element("password-input", label="Password", y=80),
        make_element("button-primary", label="Log in", y=120),
        id="login",
        order=1,
    )
    return [home, login]


# ---------------------------------------------------------------------------
# API payloads & mocked transport
# ---------------------------------------------------------------------------

@pytest.fixture
def api_payloads() -> dict[str, Any]:
    """Canned Waiframe API responses keyed by path suffix."""
    project = {
        "id": "proj-1",
        "name": "Shop App",
        "description": "A tiny shop",
        "platform": "desktop",
        "dimensions": {"width": 1440, "height": 900},
        "createdAt": "2025-01-01T00:00:00Z",
        "updatedAt": "2025-01-02T00:00:00Z",
    }
    screens = [
        {
            "id": "s-home",
            "name": "Home",
            "screenType": "screen",
            "order": 0,
            "elements": [
                {
                    "id": "e-nav",
                    "type": "header",
                    "position": {"x": 0, "y": 0},
                    "size": {"width": 1440, "height": 64},
                    "properties": {"title": "Shop", "items": ["Home", "Cart"]},
                },
                {
                    "id": "e-card-1",
                    "type": "product-card",
                    "position": {"x": 0, "y": 100},
                    "size": {"width": 200, "height": 300},
                    "properties": {"title": "Mug", "price": "$9"},
                },
                {
                    "id": "e-card-2",
                    "type": "product-card",
                    "position": {"x": 220, "y": 100},
                    "size": {"width": 200, "height": 300},
                    "properties": {"title": "Cap", "price": "$15"},
                },
            ],
            "connections": [
                {
                    "id": "c-1",
                    "fromElement": "e-card-1",
                    "trigger": "click",
                    "action": {"type": "navigate", "toScreen": "s-cart"},
                }
            ],
        },
        {
            "id": "s-cart",
            "name": "Cart",
            "screenType": "screen",
            "order": 1,
            "elements": [
                {
                    "id": "e-list",
                    "type": "list",
                    "position": {"x": 0, "y": 80},
                    "size": {"width": 600, "height": 400},
                    "properties": {"items": ["Mug", "Cap"]},
                }
            ],
            "connections": [],
        },
    ]
    return {
        "/projects": {"projects": [{**project, "screenCount": 2, "flowCount": 1}]},
        "/projects/proj-1": {
            "project": project,
            "screens": [
                {"id": "s-home", "name": "Home", "screenType": "screen", "order": 0},
                {"id": "s-cart", "name": "Cart", "screenType": "screen", "order": 1},
            ],
            "flows": [{"id": "f-1", "name": "Main Flow", "description": "Buy something"}],
        },
        "/projects/proj-1/screens": {"screens": screens},
        "/projects/proj-1/flows": {
            "flows": [
                {
                    "id": "f-1",
                    "name": "Main Flow",
                    "entryScreen": "s-home",
                    "entryScreenName": "Home",
                    "nodes": [
                        {"screenId": "s-home", "screenName": "Home"},
                        {"screenId": "s-cart", "screenName": "Cart"},
                    ],
                    "edges": [
                        {"id": "ed-1", "source": "s-home", "target": "s-cart", "label": "buy"}
                    ],
                    "createdAt": "2025-01-01T00:00:00Z",
                }
            ]
        },
        "/projects/proj-1/context": {
            "project": project,
            "context": {
                "appType": "e-commerce",
                "audience": "shoppers",
                "features": ["catalog", "cart"],
                "brandStyle": "playful",
            },
        },
    }


def _json_response(status_code: int, data: Any) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data
    response.text = str(data)
    return response


@pytest.fixture
def mock_api(api_payloads):
    """Patch ``httpx.AsyncClient`` to answer GETs from ``api_payloads``.

    Unknown paths answer 404. Yields the mock client so tests can inspect
    ``mock_client.get.call_args_list``.

    Usage::

        async def test_something(mock_api):
            client = WaiframeClient(api_key="k")
            await client.list_projects()
    """

    async def mock_get(url: str, **kwargs: Any) -> MagicMock:
        path = url.split("/api/mcp", 1)[1]
        if path in api_payloads:
            return _json_response(200, api_payloads[path])
        return _json_response(404, {"error": "not found"})

    mock_client = AsyncMock()
    mock_client.get = AsyncMock(side_effect=mock_get)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)

    with patch("httpx.AsyncClient", return_value=mock_client):
        yield mock_client

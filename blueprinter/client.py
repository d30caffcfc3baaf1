"""Async client for the Waiframe wireframe API.

Wraps the ``/api/mcp`` endpoints (projects, screens, flows, context) with
bearer-key auth, timeout handling and a small time-based response cache.

Typical usage::

    client = WaiframeClient(api_key="wf_...")
    screens = await client.get_screens(project_id)
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from .config import API_KEY_SETTINGS_URL, Config
from .models import ContextResponse, Flow, ProjectDetail, ProjectOverview, Screen


DEFAULT_BASE_URL = "https://waiframe.ai"
DEFAULT_CACHE_TTL = 300.0


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ApiError(Exception):
    """Raised when the Waiframe API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(ApiError):
    """The API key was rejected (HTTP 401)."""


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404)."""


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class WaiframeClient:
    """Async client for the Waiframe REST API.

    Successful responses are cached per URL for ``cache_ttl`` seconds.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.cache_ttl = cache_ttl
        self.timeout = timeout
        self._cache: dict[str, tuple[float, Any]] = {}

    @classmethod
    def from_config(cls, config: Config) -> "WaiframeClient":
        return cls(
            api_key=config.require_api_key(),
            base_url=config.base_url,
            cache_ttl=config.cache_ttl,
            timeout=config.timeout,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` with auth headers and timeout."""
        return httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/mcp{path}"

    def _cached(self, url: str) -> Any:
        entry = self._cache.get(url)
        if entry is None:
            return None
        stored_at, data = entry
        if time.monotonic() - stored_at >= self.cache_ttl:
            del self._cache[url]
            return None
        return data

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code == 401:
            raise AuthenticationError(
                f"Invalid API key. Generate a new key at {API_KEY_SETTINGS_URL}",
                status_code=401,
            )
        if response.status_code == 404:
            raise NotFoundError("Resource not found", status_code=404)
        if response.status_code >= 400:
            raise ApiError(
                f"API error ({response.status_code}): {response.text[:500]}",
                status_code=response.status_code,
            )

    async def _request(self, path: str, use_cache: bool = True) -> Any:
        """GET ``/api/mcp{path}`` and return the decoded JSON body."""
        url = self._url(path)
        if use_cache:
            cached = self._cached(url)
            if cached is not None:
                return cached

        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.ConnectError as exc:
            raise ApiError(f"Cannot connect to Waiframe at {self.base_url}: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise ApiError(f"Request to Waiframe timed out after {self.timeout}s.") from exc
        except httpx.TransportError as exc:
            raise ApiError(f"Request to Waiframe failed: {exc}") from exc

        self._raise_for_status(response)
        data = response.json()
        self._cache[url] = (time.monotonic(), data)
        return data

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def list_projects(self) -> list[ProjectOverview]:
        data = await self._request("/projects")
        return [ProjectOverview.model_validate(p) for p in data.get("projects", [])]

    async def get_project_overview(self, project_id: str) -> ProjectDetail:
        data = await self._request(f"/projects/{project_id}")
        return ProjectDetail.model_validate(data)

    async def get_screens(self, project_id: str) -> list[Screen]:
        data = await self._request(f"/projects/{project_id}/screens")
        return [Screen.model_validate(s) for s in data.get("screens", [])]

    async def get_screen(self, project_id: str, screen_id: str) -> Screen:
        data = await self._request(f"/projects/{project_id}/screens/{screen_id}")
        return Screen.model_validate(data["screen"])

    async def get_flows(self, project_id: str) -> list[Flow]:
        data = await self._request(f"/projects/{project_id}/flows")
        return [Flow.model_validate(f) for f in data.get("flows", [])]

    async def get_context(self, project_id: str) -> ContextResponse:
        data = await self._request(f"/projects/{project_id}/context")
        return ContextResponse.model_validate(data)

    def clear_cache(self) -> None:
        """Drop every cached response."""
        self._cache.clear()

"""Async HTTP client for the Todoist REST API with failure classification."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from ..config import DEFAULT_TODOIST_BASE_URL, Settings
from .errors import (
    DEFAULT_RATE_LIMIT_MESSAGE,
    DEFAULT_SERVER_MESSAGE,
    TodoistAPIError,
    TodoistClientError,
    TodoistNetworkError,
    TodoistRateLimitError,
    TodoistServerError,
    TodoistUnknownError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def _extract_error_detail(response: httpx.Response) -> Optional[str]:
    """Return the most useful error text from a failed response, if any."""

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, Mapping):
        for key in ("error", "message"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None
    if isinstance(payload, str) and payload.strip():
        return payload.strip()

    text = response.text.strip()
    return text or None


def classify_response(response: httpx.Response) -> TodoistAPIError:
    """Map an unsuccessful HTTP response to a classified Todoist failure."""

    status = response.status_code
    detail = _extract_error_detail(response)
    logger.debug("Todoist API error %s: %s", status, detail)

    if status == 429:
        logger.error("Todoist rate limit exceeded")
        return TodoistRateLimitError(detail or DEFAULT_RATE_LIMIT_MESSAGE)
    if 400 <= status < 500:
        return TodoistClientError(detail or f"HTTP {status}: Invalid request", status)
    if status >= 500:
        return TodoistServerError(detail or DEFAULT_SERVER_MESSAGE, status)

    logger.error("Unexpected Todoist response status %s", status)
    return TodoistUnknownError(detail or f"Unexpected HTTP status {status}")


class TodoistClient:
    """Thin wrapper around ``httpx.AsyncClient`` for Todoist REST v2.

    The client never retries; every failure is raised as a
    :class:`TodoistAPIError` subclass whose ``retryable`` flag lets callers
    decide.
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_TODOIST_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "TodoistClient":
        return cls(
            settings.todoist_api_token.get_secret_value(),
            base_url=settings.base_url,
            timeout=settings.request_timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "TodoistClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        try:
            response = await self._http.request(
                method,
                path,
                params=dict(params) if params else None,
                json=dict(json) if json is not None else None,
            )
        except httpx.RequestError as exc:
            logger.error("Network error calling Todoist %s %s: %s", method, path, exc)
            raise TodoistNetworkError() from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Unexpected error calling Todoist %s %s: %s", method, path, exc)
            raise TodoistUnknownError(str(exc) or "Unknown error occurred") from exc

        if not response.is_success:
            raise classify_response(response)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise TodoistUnknownError(
                f"Invalid JSON in Todoist response: {exc}"
            ) from exc

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Perform a GET request and return the decoded body."""

        logger.debug("GET %s %s", path, dict(params) if params else {})
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: Optional[Mapping[str, Any]] = None) -> Any:
        """Perform a POST request and return the decoded body (``None`` if empty)."""

        logger.debug("POST %s %s", path, dict(json) if json else {})
        return await self._request("POST", path, json=json if json is not None else {})

    async def delete(self, path: str) -> None:
        logger.debug("DELETE %s", path)
        await self._request("DELETE", path)


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "TodoistClient", "classify_response"]

"""API Client Transport — envelope unwrapping and error mapping over httpx.

Invariants:
    - {success: true} → the `data` member is returned, nothing else
    - {success: false} or a non-JSON error body → ApiClientError with HTTP status, code, message
    - Transport failures (connect, timeout) → ApiClientError with status 0

Design Decisions:
    - Wrapper over raw httpx.AsyncClient: one place maps failures, resource APIs stay one-liners
    - Caller may inject an httpx transport (tests use ASGITransport against the app)
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api/v1/internal"


class ApiClientError(Exception):
    """The API answered with an error envelope or could not be reached."""

    def __init__(
        self, status: int, code: str, message: str, details: list | None = None,
    ):
        super().__init__(f"[{status} {code}] {message}")
        self.status = status
        self.code = code
        self.message = message
        self.details = details or []


class ApiTransport:
    """Sends requests and unwraps the success envelope."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def request(
        self, method: str, path: str, json: dict | None = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error(f"API request {method} {path} failed: {e}")
            raise ApiClientError(0, "TRANSPORT_ERROR", str(e)) from e
        return self._unwrap(response)

    @staticmethod
    def _unwrap(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            raise ApiClientError(
                response.status_code, "INVALID_RESPONSE",
                f"Non-JSON response ({response.status_code})",
            )
        if isinstance(body, dict) and body.get("success") is True:
            return body.get("data")
        error = body.get("error", {}) if isinstance(body, dict) else {}
        raise ApiClientError(
            response.status_code,
            error.get("code", "ERROR"),
            error.get("message", "Request failed"),
            error.get("details"),
        )

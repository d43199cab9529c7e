"""
TASKTRACK Web Frontend - Core API Client

Thin async REST client for the core API task endpoints.
Every failure, transport or HTTP, surfaces as CoreApiError.
"""

import logging
from typing import Any, Optional

import httpx

from tasktrack_web.config import settings

logger = logging.getLogger(__name__)


class CoreApiError(Exception):
    """The core API could not be reached or rejected the request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_detail(response: httpx.Response) -> str:
    """Pull FastAPI's {"detail": ...} out of an error response when present."""
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"Core API responded with {response.status_code}"


class CoreApiClient:

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.CORE_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.CORE_API_TIMEOUT
        self._transport = transport

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.request(method, path, json=json)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                raise CoreApiError(_error_detail(e.response), e.response.status_code) from e
            except httpx.HTTPError as e:
                raise CoreApiError(f"Core API unreachable: {e}") from e
            except ValueError as e:
                raise CoreApiError(f"Core API returned a malformed body: {e}") from e

    async def list_tasks(self) -> list:
        return await self._request("GET", "/tasks")

    async def get_stats(self) -> dict:
        return await self._request("GET", "/tasks/stats")

    async def get_task(self, task_id: str) -> dict:
        return await self._request("GET", f"/tasks/{task_id}")

    async def create_task(self, payload: dict) -> dict:
        return await self._request("POST", "/tasks", json=payload)

    async def update_task(self, task_id: str, payload: dict) -> dict:
        return await self._request("PUT", f"/tasks/{task_id}", json=payload)

    async def delete_task(self, task_id: str) -> dict:
        return await self._request("DELETE", f"/tasks/{task_id}")

"""Shared HTTP helper for third-party data providers."""

from typing import Any

import httpx


async def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """GET a URL and decode the JSON body, raising on non-2xx responses."""
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(url, params=params, headers=headers)
        response.raise_for_status()
        return response.json()


async def post_json(
    url: str,
    json: Any,
    headers: dict[str, str] | None = None,
) -> Any:
    """POST a JSON body and decode the JSON response, raising on non-2xx responses."""
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.post(url, json=json, headers=headers)
        response.raise_for_status()
        return response.json()

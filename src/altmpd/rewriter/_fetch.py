#!/usr/bin/python3

import httpx

from ..config import DEFAULT_FETCH_TIMEOUT
from .errors import NetworkError


async def fetch_manifest(
    url: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """
    Retrieves the full upstream manifest body.  Any transport failure or non-success status
    is raised as a NetworkError; there are no retries.
    """
    async with httpx.AsyncClient(
        follow_redirects=True, timeout=timeout, transport=transport
    ) as client:
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"Failed to fetch manifest from {url}: {exc}") from exc
        return resp.content

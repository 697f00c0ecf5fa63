"""
services/transport.py – Blocking and async HTTP GET over httpx.

Both helpers return the full response body as bytes and turn every
transport-level failure into a TransportError. A caller-supplied client is
used as-is and left open; otherwise a short-lived client is created for the
single request.
"""

import logging
from typing import Optional

import httpx

from client_3dsdb.services.exceptions import TransportError

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

# HTTP timeout (seconds) for clients created by this module.
HTTP_TIMEOUT: float = 30.0

# ── Public API ───────────────────────────────────────────────────────────────


def get_bytes(url: str, client: Optional[httpx.Client] = None) -> bytes:
    """
    GET *url* on the calling thread and return the response body.

    Raises
    ------
    TransportError
        On network failure, timeout, or a non-success status.
    """
    if client is None:
        with httpx.Client(timeout=HTTP_TIMEOUT, follow_redirects=True) as owned:
            return get_bytes(url, owned)

    logger.debug("GET %s", url)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise _status_error(url, exc) from exc
    except httpx.RequestError as exc:
        raise TransportError(f"Network error while fetching {url}: {exc}", url=url) from exc
    return response.content


async def get_bytes_async(url: str, client: Optional[httpx.AsyncClient] = None) -> bytes:
    """Suspend-capable counterpart of get_bytes(); same errors."""
    if client is None:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, follow_redirects=True) as owned:
            return await get_bytes_async(url, owned)

    logger.debug("GET %s", url)
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise _status_error(url, exc) from exc
    except httpx.RequestError as exc:
        raise TransportError(f"Network error while fetching {url}: {exc}", url=url) from exc
    return response.content


# ── Private helpers ───────────────────────────────────────────────────────────


def _status_error(url: str, exc: httpx.HTTPStatusError) -> TransportError:
    status = exc.response.status_code
    return TransportError(
        f"Server returned HTTP {status} for URL: {url}", url=url, status_code=status
    )

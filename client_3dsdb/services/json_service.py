"""
services/json_service.py – Titles from the region-partitioned JSON feed.

The feed (hax0kartik/3dsdb on GitHub) publishes one JSON file per region.
Fetch a single region with get_releases() / get_releases_async(), or every
region at once with get_all_releases() (async) or
get_all_releases_blocking(), which issue all requests concurrently and
return the results in Region order.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

import httpx

from client_3dsdb.models.release import JsonRelease, Region
from client_3dsdb.services.decoding import decode_json_releases
from client_3dsdb.services.index_service import build_index
from client_3dsdb.services.transport import HTTP_TIMEOUT, get_bytes, get_bytes_async

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

# Per-region list; "{region}" is replaced with the region's short code.
JSON_URL_TEMPLATE: str = (
    "https://raw.githubusercontent.com/hax0kartik/3dsdb/master/jsons/list_{region}.json"
)

# ── Public API ───────────────────────────────────────────────────────────────


def region_url(region: Region) -> str:
    return JSON_URL_TEMPLATE.format(region=region.code)


def get_releases(region: Region, *, client: Optional[httpx.Client] = None) -> List[JsonRelease]:
    """
    Fetch and decode one region's title list, blocking the calling thread.

    Raises
    ------
    TransportError
        On network failure or a non-success status.
    DecodeError
        If the body is not a JSON array of well-formed title objects.
    """
    url = region_url(region)
    releases = decode_json_releases(get_bytes(url, client), url=url)
    logger.info("Fetched %d releases for region %s", len(releases), region)
    return releases


async def get_releases_async(
    region: Region, *, client: Optional[httpx.AsyncClient] = None
) -> List[JsonRelease]:
    """Async counterpart of get_releases(); same decoding and errors."""
    url = region_url(region)
    releases = decode_json_releases(await get_bytes_async(url, client), url=url)
    logger.info("Fetched %d releases for region %s", len(releases), region)
    return releases


async def get_all_releases(*, client: Optional[httpx.AsyncClient] = None) -> List[JsonRelease]:
    """
    Fetch every region concurrently and concatenate the results.

    The output is ordered by Region declaration order, not by which request
    finished first. If any region fails, the first error raised is
    propagated and no releases are returned. The other requests still run to
    completion before the error is raised, so a client created here is only
    closed once nothing is using it.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, follow_redirects=True) as owned:
            return await get_all_releases(client=owned)

    # gather() returns results in submission order, one slot per region.
    tasks = [
        asyncio.ensure_future(get_releases_async(region, client=client)) for region in Region
    ]
    try:
        per_region = await asyncio.gather(*tasks)
    except Exception:
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    releases = [release for batch in per_region for release in batch]
    logger.info("Fetched %d releases across %d regions", len(releases), len(per_region))
    return releases


def get_all_releases_blocking(*, client: Optional[httpx.Client] = None) -> List[JsonRelease]:
    """
    Blocking counterpart of get_all_releases().

    Each region is fetched on its own worker thread. Results are collected
    by region position, so the output is in Region order. If any region
    fails, the error of the first failed region in Region order is raised
    once every request has finished, and no releases are returned.
    """
    if client is None:
        with httpx.Client(timeout=HTTP_TIMEOUT, follow_redirects=True) as owned:
            return get_all_releases_blocking(client=owned)

    regions = list(Region)
    with ThreadPoolExecutor(max_workers=len(regions)) as pool:
        futures = [pool.submit(get_releases, region, client=client) for region in regions]
    per_region = [future.result() for future in futures]
    releases = [release for batch in per_region for release in batch]
    logger.info("Fetched %d releases across %d regions", len(releases), len(per_region))
    return releases


def get_releases_map(
    region: Region, *, client: Optional[httpx.Client] = None
) -> Dict[str, JsonRelease]:
    """Fetch one region (blocking) and index it by title id."""
    return build_index(get_releases(region, client=client))


async def get_all_releases_map(
    *, client: Optional[httpx.AsyncClient] = None
) -> Dict[str, JsonRelease]:
    """Fetch every region and index the combined list by title id."""
    return build_index(await get_all_releases(client=client))

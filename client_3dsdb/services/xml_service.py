"""
services/xml_service.py – Titles from the 3dsdb.com XML catalogue.

The whole catalogue is one document. get_releases() and
get_releases_async() differ only in how they wait on the network; both hand
the raw bytes to the same decoder.
"""

import logging
from typing import Dict, List, Optional

import httpx

from client_3dsdb.models.release import XmlRelease
from client_3dsdb.services.decoding import decode_xml_releases
from client_3dsdb.services.index_service import build_index
from client_3dsdb.services.transport import get_bytes, get_bytes_async

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

CATALOG_URL: str = "http://3dsdb.com/xml.php"

# ── Public API ───────────────────────────────────────────────────────────────


def get_releases(*, client: Optional[httpx.Client] = None) -> List[XmlRelease]:
    """
    Fetch and decode the catalogue, blocking the calling thread.

    Raises
    ------
    TransportError
        On network failure or a non-success status.
    DecodeError
        On malformed XML or an entry that does not match the schema.
    """
    releases = decode_xml_releases(get_bytes(CATALOG_URL, client), url=CATALOG_URL)
    logger.info("Fetched %d releases from %s", len(releases), CATALOG_URL)
    return releases


async def get_releases_async(*, client: Optional[httpx.AsyncClient] = None) -> List[XmlRelease]:
    releases = decode_xml_releases(await get_bytes_async(CATALOG_URL, client), url=CATALOG_URL)
    logger.info("Fetched %d releases from %s", len(releases), CATALOG_URL)
    return releases


def get_releases_map(*, client: Optional[httpx.Client] = None) -> Dict[str, XmlRelease]:
    return build_index(get_releases(client=client))


async def get_releases_map_async(
    *, client: Optional[httpx.AsyncClient] = None
) -> Dict[str, XmlRelease]:
    return build_index(await get_releases_async(client=client))

"""Pytest fixtures: canned feed bodies served through httpx.MockTransport."""

import json

import httpx
import pytest
import pytest_asyncio

from client_3dsdb.models.release import Region
from client_3dsdb.services import json_service, xml_service


def _entry(name, uid, title_id, product_code, publisher="Nintendo"):
    return {
        "Name": name,
        "UID": uid,
        "TitleID": title_id,
        "Version": "N/A",
        "Size": "25.7 MB [206 blocks]",
        "Product Code": product_code,
        "Publisher": publisher,
    }


REGION_ENTRIES = {
    Region.GB: [
        _entry("Shovel Software Insurance Claim", "50010000049535", "000400000F715C00",
               "KTR-N-CF6P", "Batafurai"),
        _entry("Kid Icarus: Uprising", "50010000003742", "0004000000030200", "CTR-P-AKDP"),
    ],
    Region.JP: [
        _entry("Kid Icarus: Uprising", "50010000003001", "0004000000030200", "CTR-P-AKDJ"),
    ],
    Region.KR: [],
    Region.TW: [
        _entry("Pokemon Sun", "50010000040000", "0004000000164800", "CTR-P-BNDZ",
               "The Pokemon Company"),
    ],
    Region.US: [
        _entry("Super Mario 3D Land", "50010000001234", "0004000000054000", "CTR-P-AREE"),
        _entry("Fire Emblem Awakening", "50010000001235", "00040000000A0500", "CTR-P-AFEE"),
    ],
}

CATALOG_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<releases>
  <release>
    <id>1</id>
    <name>Tom Clancys Ghost Recon: Shadow Wars</name>
    <publisher>Ubisoft</publisher>
    <region>EUR</region>
    <languages>en,fr,de,it,es</languages>
    <group>Legacy</group>
    <imagesize>2048</imagesize>
    <serial>CTR-AGRP</serial>
    <titleid>0004000000037500</titleid>
    <imgcrc>5BD0B123</imgcrc>
    <filename>lgc-grsw</filename>
    <releasename>Tom_Clancys_Ghost_Recon_Shadow_Wars_EUR_3DS-LGC</releasename>
    <trimmedsize>229750272</trimmedsize>
    <firmware>1.0.0E</firmware>
    <type>1</type>
    <card>1</card>
  </release>
  <!-- second entry -->
  <release>
    <id>2</id>
    <name>Kid Icarus: Uprising</name>
    <publisher>Nintendo</publisher>
    <region>EUR</region>
    <languages>en,fr,de,it,es</languages>
    <group>Legacy</group>
    <imagesize>2048</imagesize>
    <serial>CTR-AKDP</serial>
    <titleid>0004000000030200</titleid>
    <imgcrc>0A1B2C3D</imgcrc>
    <filename>lgc-kiu</filename>
    <releasename>Kid_Icarus_Uprising_EUR_3DS-LGC</releasename>
    <trimmedsize>1782579200</trimmedsize>
    <firmware>2.1.0E</firmware>
    <type>1</type>
    <card>1</card>
  </release>
</releases>
"""


def _region_body(region: Region) -> bytes:
    return json.dumps(REGION_ENTRIES[region]).encode("utf-8")


def _json_feed_handler(request: httpx.Request) -> httpx.Response:
    for region in Region:
        if str(request.url) == json_service.region_url(region):
            return httpx.Response(200, content=_region_body(region))
    return httpx.Response(404)


def _xml_feed_handler(request: httpx.Request) -> httpx.Response:
    if str(request.url) == xml_service.CATALOG_URL:
        return httpx.Response(200, content=CATALOG_XML)
    return httpx.Response(404)


@pytest.fixture
def json_client():
    with httpx.Client(transport=httpx.MockTransport(_json_feed_handler)) as client:
        yield client


@pytest_asyncio.fixture
async def json_async_client():
    async with httpx.AsyncClient(transport=httpx.MockTransport(_json_feed_handler)) as client:
        yield client


@pytest.fixture
def xml_client():
    with httpx.Client(transport=httpx.MockTransport(_xml_feed_handler)) as client:
        yield client


@pytest_asyncio.fixture
async def xml_async_client():
    async with httpx.AsyncClient(transport=httpx.MockTransport(_xml_feed_handler)) as client:
        yield client


@pytest.fixture
def region_entries():
    return REGION_ENTRIES


@pytest.fixture
def catalog_xml():
    return CATALOG_XML


@pytest.fixture
def region_body():
    """Serialized JSON list for a region, as the feed serves it."""
    return _region_body


@pytest.fixture
def json_feed_handler():
    """MockTransport handler serving every region list; unknown URLs get 404."""
    return _json_feed_handler

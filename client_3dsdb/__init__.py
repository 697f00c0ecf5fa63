"""
client_3dsdb – Client library for 3DS title databases.

Two sources are supported, each in its own service module:

- json_service: hax0kartik/3dsdb on GitHub, one JSON list per Region.
- xml_service:  3dsdb.com, a single XML catalogue.

Every fetch raises a FetchError subclass on failure (TransportError or
DecodeError). build_index() turns any list of releases into a title-id map.
"""

from client_3dsdb.models.release import JsonRelease, Region, XmlRelease
from client_3dsdb.services import json_service, xml_service
from client_3dsdb.services.exceptions import DecodeError, FetchError, TransportError
from client_3dsdb.services.index_service import build_index, find_duplicates

__all__ = [
    "DecodeError",
    "FetchError",
    "JsonRelease",
    "Region",
    "TransportError",
    "XmlRelease",
    "build_index",
    "find_duplicates",
    "json_service",
    "xml_service",
]

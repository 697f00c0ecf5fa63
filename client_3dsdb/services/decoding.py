"""
services/decoding.py – Decode raw feed bodies into release records.

Field renames between the wire format and the record attributes live in the
explicit alias tables below; both the blocking and async fetchers call the
same decode functions on the raw response bytes.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from lxml import etree

from client_3dsdb.models.release import JsonRelease, XmlRelease
from client_3dsdb.services.exceptions import DecodeError


@dataclass(frozen=True)
class FieldAlias:
    """
    Maps one record attribute to its name on the wire.

    Attributes
    ----------
    field : Attribute name on the record dataclass.
    wire  : Name used by the source document.
    kind  : Expected Python type after decoding (str or int).
    """

    field: str
    wire: str
    kind: type = str

    @property
    def names(self) -> Sequence[str]:
        # The record's own attribute name is accepted as well as the wire name.
        return (self.wire,) if self.wire == self.field else (self.wire, self.field)


JSON_FIELDS: Sequence[FieldAlias] = (
    FieldAlias("name", "Name"),
    FieldAlias("uid", "UID"),
    FieldAlias("title_id", "TitleID"),
    FieldAlias("version", "Version"),
    FieldAlias("size", "Size"),
    FieldAlias("product_code", "Product Code"),
    FieldAlias("publisher", "Publisher"),
)

XML_FIELDS: Sequence[FieldAlias] = (
    FieldAlias("id", "id"),
    FieldAlias("name", "name"),
    FieldAlias("publisher", "publisher"),
    FieldAlias("region", "region"),
    FieldAlias("languages", "languages"),
    FieldAlias("group", "group"),
    FieldAlias("image_size", "imagesize", int),
    FieldAlias("serial", "serial"),
    FieldAlias("title_id", "titleid"),
    FieldAlias("img_crc", "imgcrc"),
    FieldAlias("filename", "filename"),
    FieldAlias("release_name", "releasename"),
    FieldAlias("trimmed_size", "trimmedsize", int),
    FieldAlias("firmware", "firmware"),
    FieldAlias("_type", "type"),
    FieldAlias("card", "card"),
)

# ── Public API ───────────────────────────────────────────────────────────────


def decode_json_releases(body: bytes, *, url: Optional[str] = None) -> List[JsonRelease]:
    """
    Decode a JSON array of title objects.

    Raises
    ------
    DecodeError
        If the body is not valid JSON, the root is not an array, or any
        element lacks a field or carries a non-string value.
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Invalid JSON in response: {exc}", url=url) from exc

    if not isinstance(payload, list):
        raise DecodeError(
            f"Expected a JSON array at the document root, got {type(payload).__name__}.",
            url=url,
        )

    releases: List[JsonRelease] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DecodeError(
                f"Entry {position} is a JSON {type(item).__name__}, expected an object.",
                url=url,
            )
        releases.append(JsonRelease(**_map_fields(item, JSON_FIELDS, position, url)))
    return releases


def decode_xml_releases(body: bytes, *, url: Optional[str] = None) -> List[XmlRelease]:
    """
    Decode an XML document whose root element holds one child per title.

    Each child's sub-elements (and attributes) supply the record fields.

    Raises
    ------
    DecodeError
        If the document is malformed or truncated, a child lacks a field, or
        a size field is not an unsigned integer.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise DecodeError(f"Malformed XML in response: {exc}", url=url) from exc

    releases: List[XmlRelease] = []
    position = 0
    for element in root:
        # Comments and processing instructions have non-string tags.
        if not isinstance(element.tag, str):
            continue
        releases.append(XmlRelease(**_map_fields(_element_fields(element), XML_FIELDS, position, url)))
        position += 1
    return releases


# ── Private helpers ───────────────────────────────────────────────────────────


def _element_fields(element: etree._Element) -> Dict[str, str]:
    fields = {etree.QName(key).localname: value for key, value in element.attrib.items()}
    for child in element:
        if isinstance(child.tag, str):
            fields[etree.QName(child).localname] = (child.text or "").strip()
    return fields


def _map_fields(
    source: Mapping[str, Any],
    aliases: Sequence[FieldAlias],
    position: int,
    url: Optional[str],
) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for alias in aliases:
        for name in alias.names:
            if name in source:
                raw = source[name]
                break
        else:
            raise DecodeError(f"Entry {position} is missing field {alias.wire!r}.", url=url)
        values[alias.field] = _coerce(raw, alias, position, url)
    return values


def _coerce(raw: Any, alias: FieldAlias, position: int, url: Optional[str]) -> Any:
    if alias.kind is int:
        text = raw.strip() if isinstance(raw, str) else ""
        if text.isascii() and text.isdigit():
            return int(text)
        raise DecodeError(
            f"Entry {position} field {alias.wire!r} is not an unsigned integer: {raw!r}.",
            url=url,
        )
    if not isinstance(raw, str):
        raise DecodeError(
            f"Entry {position} field {alias.wire!r} should be a string, "
            f"got {type(raw).__name__}.",
            url=url,
        )
    return raw

"""
models/release.py – Immutable data models for 3DS title catalogue entries.

Two record shapes exist, one per data source. They share nothing but the
``title_id`` attribute the indexer keys on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Region(Enum):
    """
    A title region of the JSON feed, which is partitioned by region.

    Declaration order is the order in which an all-regions fetch
    concatenates its results.
    """

    GB = "GB"
    JP = "JP"
    KR = "KR"
    TW = "TW"
    US = "US"

    @property
    def code(self) -> str:
        """Canonical short code, used for display and URL construction."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Region":
        try:
            return cls(code.strip().upper())
        except ValueError:
            known = ", ".join(r.code for r in cls)
            raise ValueError(f"Unknown region code {code!r} (expected one of {known}).") from None

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class JsonRelease:
    """
    One title from the region-partitioned JSON feed.

    Attributes
    ----------
    name         : Title name.
    uid          : Secondary unique identifier assigned by the eShop.
    title_id     : 16-digit hexadecimal title identifier.
    version      : Version string, often "N/A".
    size         : Human-readable size (e.g. "25.7 MB [206 blocks]").
    product_code : Product code (e.g. "KTR-N-CF6P").
    publisher    : Publisher name.
    """

    name: str
    uid: str
    title_id: str
    version: str
    size: str
    product_code: str
    publisher: str

    def __str__(self) -> str:
        return f"{self.name}  [{self.title_id}]"


@dataclass(frozen=True)
class XmlRelease:
    """
    One title from the single-document XML feed.

    Attributes
    ----------
    id           : Row id in the source database.
    languages    : Comma-delimited language codes (e.g. "en,fr,de").
    group        : Release group.
    image_size   : Image size in bytes.
    img_crc      : Image checksum, hexadecimal.
    release_name : Canonical scene release name.
    trimmed_size : Trimmed image size in bytes.
    firmware     : Required firmware version.
    _type        : Title type code.
    card         : Game card type code.
    """

    id: str
    name: str
    publisher: str
    region: str
    languages: str
    group: str
    image_size: int
    serial: str
    title_id: str
    img_crc: str
    filename: str
    release_name: str
    trimmed_size: int
    firmware: str
    _type: str
    card: str

    @property
    def language_list(self) -> List[str]:
        return [lang.strip() for lang in self.languages.split(",") if lang.strip()]

    def __str__(self) -> str:
        parts = [self.name]
        if self.region:
            parts.append(f"[{self.region}]")
        parts.append(f"({self.serial})")
        return "  ".join(parts)

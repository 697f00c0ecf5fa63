"""
services/index_service.py – In-memory lookup tables over fetched releases.
"""

import logging
from typing import Dict, Iterable, List, TypeVar

from client_3dsdb.models.release import JsonRelease, XmlRelease

logger = logging.getLogger(__name__)

Release = TypeVar("Release", JsonRelease, XmlRelease)


def build_index(releases: Iterable[Release]) -> Dict[str, Release]:
    """
    Map each release's title id to the release.

    Releases are inserted in iteration order, so when two share a title id
    the later one wins. Duplicates are logged, never rejected.
    """
    index: Dict[str, Release] = {}
    for release in releases:
        if release.title_id in index:
            logger.warning("Duplicate title id %s: %s replaces %s",
                           release.title_id, release.name, index[release.title_id].name)
        index[release.title_id] = release
    return index


def find_duplicates(releases: Iterable[Release]) -> Dict[str, List[Release]]:
    """Return every title id shared by more than one release, with all of them in order."""
    groups: Dict[str, List[Release]] = {}
    for release in releases:
        groups.setdefault(release.title_id, []).append(release)
    return {title_id: group for title_id, group in groups.items() if len(group) > 1}

"""Discovery of gists that belong to this tool.

A gist is recognised purely by substrings of its description. Earlier
releases of the tool used several names, so every known tag is accepted and
multiple matches are possible; callers must let the user choose.
"""

from __future__ import annotations

from collections.abc import Iterable

from gitsync.contracts.remote import GistDescriptor

DISCOVERY_TAGS: tuple[str, ...] = (
    "Git Sync",
    "git-sync",
    "Cursor Settings Sync",
    "cursor-settings",
)

DEFAULT_DESCRIPTION = "Git Sync - My Settings"


def matches_discovery_tags(description: str, tags: Iterable[str] = DISCOVERY_TAGS) -> bool:
    return any(tag in description for tag in tags)


def filter_candidates(
    descriptors: Iterable[GistDescriptor],
    tags: Iterable[str] = DISCOVERY_TAGS,
) -> list[GistDescriptor]:
    """Return every descriptor whose description contains a known tag, in input order."""
    tag_list = tuple(tags)
    return [descriptor for descriptor in descriptors if matches_discovery_tags(descriptor.description, tag_list)]

"""Remote document store exports."""

from gitsync.remote.discovery import DEFAULT_DESCRIPTION, DISCOVERY_TAGS, filter_candidates, matches_discovery_tags
from gitsync.remote.gist import SETTINGS_FILENAME, GistStore

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DISCOVERY_TAGS",
    "SETTINGS_FILENAME",
    "GistStore",
    "filter_candidates",
    "matches_discovery_tags",
]

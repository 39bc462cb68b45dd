"""M3U playlist reading, writing and filtering."""

from playlistarr.playlist.filters import filter_excluded_titles, filter_scheduled_entries
from playlistarr.playlist.m3u import (
    Playlist,
    PlaylistParseError,
    default_output_path,
    read_playlist,
    sanitize_for_filename,
    write_playlist,
)

__all__ = [
    "Playlist",
    "PlaylistParseError",
    "default_output_path",
    "filter_excluded_titles",
    "filter_scheduled_entries",
    "read_playlist",
    "sanitize_for_filename",
    "write_playlist",
]

"""M3U playlist reading and writing.

Reader:
    #EXTM3U
    #EXTINF:-1 tvg-id="x" group-title="NBA",NBA 27: Rockets vs Clippers (Home) (12.23 5:30PM ET)
    http://provider/stream/27

Each #EXTINF line is paired with the next URI line. Other # lines are
ignored. In strict mode malformed input raises PlaylistParseError; otherwise
the offending lines are skipped.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import tzinfo
from pathlib import Path

from playlistarr.consumers.matching.time_parser import strip_time_tokens
from playlistarr.core.types import Entry
from playlistarr.utilities.tz import format_day_clock, to_viewer_tz

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
EXTINF_PREFIX = "#EXTINF:"

_ATTR_QUOTED = re.compile(r'([a-z0-9\-]+)="([^"]*)"', re.IGNORECASE)
_ATTR_PLAIN = re.compile(r"\b([a-z0-9\-]+)=([^\s,\"]+)", re.IGNORECASE)


class PlaylistParseError(ValueError):
    """Malformed playlist input (strict mode only)."""


@dataclass
class Playlist:
    entries: list[Entry] = field(default_factory=list)
    header_present: bool = False
    skipped: int = 0  # malformed/orphan lines skipped in lenient mode


def split_meta_and_title(payload: str) -> tuple[str, str]:
    """Split '<duration> <attrs>,<title>' on the first comma outside quotes."""
    in_quotes = False
    for i, ch in enumerate(payload):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            return payload[:i], payload[i + 1 :]
    raise PlaylistParseError("invalid EXTINF, missing title separator ','")


def parse_attributes(text: str) -> dict[str, str]:
    """Parse key="value" and key=value pairs; quoted values win."""
    attributes: dict[str, str] = {}
    for key, value in _ATTR_QUOTED.findall(text):
        attributes[key.lower()] = value
    # Drop quoted pairs so their values aren't re-read as plain pairs
    remainder = _ATTR_QUOTED.sub(" ", text)
    for key, value in _ATTR_PLAIN.findall(remainder):
        attributes.setdefault(key.lower(), value)
    return attributes


def parse_extinf(line: str) -> Entry:
    """Parse one #EXTINF line into an Entry without URI.

    Raises:
        PlaylistParseError: line isn't a well-formed #EXTINF
    """
    if not line.startswith(EXTINF_PREFIX):
        raise PlaylistParseError(f"not an EXTINF line: {line!r}")

    meta, title = split_meta_and_title(line[len(EXTINF_PREFIX) :].strip())
    meta = meta.strip()
    if not meta:
        raise PlaylistParseError("missing duration and attributes")

    duration_str, _, attrs = meta.partition(" ")
    try:
        duration = int(duration_str.strip())
    except ValueError:
        raise PlaylistParseError(f"invalid duration {duration_str!r}") from None

    return Entry(
        title=title.strip(),
        uri="",
        attributes=parse_attributes(attrs),
        duration=duration,
        raw=line,
    )


def read_playlist(
    path: str | Path,
    *,
    strict: bool = False,
    group_title: str | None = None,
) -> Playlist:
    """Read an M3U file.

    Args:
        path: Playlist file
        strict: Raise on malformed input instead of skipping it
        group_title: Keep only entries in this group-title (case-insensitive)

    Raises:
        PlaylistParseError: strict mode and malformed input
        OSError: file can't be read
    """
    playlist = Playlist()
    pending: Entry | None = None
    seen_content = False
    group_filter = group_title.lower() if group_title else None

    with open(path, encoding="utf-8", errors="replace") as f:
        for line_num, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue

            if not seen_content:
                seen_content = True
                if line.upper() == HEADER:
                    playlist.header_present = True
                    continue
                if strict:
                    raise PlaylistParseError(f"line {line_num}: expected {HEADER} header")

            if line.startswith(EXTINF_PREFIX):
                try:
                    pending = parse_extinf(line)
                except PlaylistParseError as e:
                    if strict:
                        raise PlaylistParseError(f"line {line_num}: {e}") from e
                    logger.debug("[M3U] Skipping line %d: %s", line_num, e)
                    playlist.skipped += 1
                    pending = None
                continue

            if line.startswith("#"):
                continue

            if pending is None:
                if strict:
                    raise PlaylistParseError(f"line {line_num}: URI without preceding #EXTINF")
                playlist.skipped += 1
                continue

            pending.uri = line
            if group_filter is None or pending.group_title.lower() == group_filter:
                playlist.entries.append(pending)
            pending = None

    if pending is not None and strict:
        raise PlaylistParseError("file ended after #EXTINF without URI")

    logger.info(
        "[M3U] Read %d entries from %s (header=%s, skipped=%d)",
        len(playlist.entries),
        path,
        playlist.header_present,
        playlist.skipped,
    )
    return playlist


def render_title(entry: Entry, viewer_tz: tzinfo | None = None) -> str:
    """Title as written out.

    Timed entries that consolidation didn't normalize get their time tokens
    replaced by a standard ' > DD/MM HH:MM' viewer-local suffix.
    """
    if entry.start_time is None or entry.match_id:
        return entry.title
    local = to_viewer_tz(entry.start_time, viewer_tz)
    return f"{strip_time_tokens(entry.title)} > {format_day_clock(local)}"


def render_extinf(entry: Entry, viewer_tz: tzinfo | None = None) -> str:
    parts = [f"{EXTINF_PREFIX}{entry.duration}"]
    parts.extend(f'{key}="{value}"' for key, value in entry.attributes.items())
    return " ".join(parts) + "," + render_title(entry, viewer_tz)


def write_playlist(path: str | Path, entries: list[Entry], viewer_tz: tzinfo | None = None) -> None:
    """Write entries as an M3U file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(HEADER + "\n")
        for entry in entries:
            f.write(render_extinf(entry, viewer_tz) + "\n")
            f.write(entry.uri + "\n")

    logger.info("[M3U] Wrote %d entries to %s", len(entries), path)


def sanitize_for_filename(value: str | None) -> str:
    """Keep [A-Za-z0-9-], replace everything else with '_' ('' -> 'filtered')."""
    if not value:
        return "filtered"
    return re.sub(r"[^A-Za-z0-9\-]", "_", value)


def default_output_path(input_path: str | Path, group_title: str | None = None) -> Path:
    """'<dir>/<name>.<group>.<ext>' next to the input file."""
    input_path = Path(input_path)
    suffix = sanitize_for_filename(group_title)
    return input_path.with_name(f"{input_path.stem}.{suffix}{input_path.suffix}")

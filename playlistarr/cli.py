"""Command line entry point.

    playlistarr [--group-title NAME] [--out PATH] [--strict] [--start-time]
                [--recent] [--nba] [--log-level LEVEL] INPUT
"""

import argparse
import logging
import sys

from playlistarr.config import VERSION, get_viewer_timezone
from playlistarr.consumers.matching.time_parser import extract_fallback_year
from playlistarr.consumers.orchestrator import PipelineOptions, process_playlist
from playlistarr.playlist.m3u import (
    PlaylistParseError,
    default_output_path,
    read_playlist,
    write_playlist,
)
from playlistarr.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playlistarr",
        description="Filter, normalize and sort sports entries of an M3U playlist.",
    )
    parser.add_argument("input", help="Input .m3u playlist")
    parser.add_argument(
        "--group-title",
        default=None,
        help="Only keep entries with this group-title (case-insensitive)",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output path (default: <input>.<group-title>.m3u next to the input)",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Fail on malformed lines instead of skipping them"
    )
    parser.add_argument(
        "--start-time", action="store_true", help="Only keep entries with a parsed start time"
    )
    parser.add_argument(
        "--recent",
        action="store_true",
        help="Drop entries starting before RECENT_PAST_HOURS ago or after RECENT_FUTURE_HOURS from now",
    )
    parser.add_argument(
        "--nba", action="store_true", help="Match NBA teams in titles and consolidate duplicates"
    )
    parser.add_argument("--log-level", default=None, help="Console log level (default: LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)

    viewer_tz = get_viewer_timezone()
    fallback_year = extract_fallback_year(args.input)
    logger.debug("[CLI] viewer_tz=%s fallback_year=%d", viewer_tz, fallback_year)

    try:
        playlist = read_playlist(args.input, strict=args.strict, group_title=args.group_title)
    except PlaylistParseError as e:
        logger.error("[CLI] Failed to parse %s: %s", args.input, e)
        return 1
    except OSError as e:
        logger.error("[CLI] Failed to read %s: %s", args.input, e)
        return 1

    options = PipelineOptions(
        fallback_year=fallback_year,
        require_start_time=args.start_time,
        recent_only=args.recent,
        nba=args.nba,
    )
    result = process_playlist(playlist.entries, options, viewer_tz=viewer_tz)

    out_path = args.out or default_output_path(args.input, args.group_title)
    try:
        write_playlist(out_path, result.entries, viewer_tz)
    except OSError as e:
        logger.error("[CLI] Failed to write %s: %s", out_path, e)
        return 1

    print(out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import logging
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# =============================================================================
# VERSION - Read from pyproject.toml (single source of truth)
# =============================================================================


def _get_version() -> str:
    """Read version - prefer pyproject.toml, fall back to installed metadata."""
    try:
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
                return data.get("project", {}).get("version", "0.0.0")
    except (OSError, KeyError, ValueError):
        pass

    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("playlistarr")
    except (ImportError, PackageNotFoundError):
        pass

    return "0.0.0"


VERSION = _get_version()

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)


def _split_keywords(raw: str) -> tuple[str, ...]:
    return tuple(k.strip().lower() for k in raw.split(",") if k.strip())


def _is_valid_timezone(name: str | None) -> bool:
    if not name:
        return False
    try:
        ZoneInfo(name)
        return True
    except (ZoneInfoNotFoundError, ValueError):
        return False


class Config:
    """Application configuration singleton.

    All configuration values should be accessed through this class.
    Values are loaded from environment variables with sensible defaults.
    """

    # Viewer timezone - VIEWER_TIMEZONE wins over TZ
    _timezone_from_env: str | None = os.getenv("VIEWER_TIMEZONE") or os.getenv("TZ")
    _timezone_cache: str | None = None

    # Default timezone (used when env is unset or invalid)
    _DEFAULT_TIMEZONE: str = "UTC"

    # Titles containing any of these (case-insensitive) are dropped
    EXCLUDED_TITLE_KEYWORDS: tuple[str, ...] = _split_keywords(
        os.getenv("EXCLUDED_TITLE_KEYWORDS", "no event,offline,no games,no scheduled")
    )

    # --recent window around "now"
    RECENT_PAST_HOURS: int = int(os.getenv("RECENT_PAST_HOURS", "6"))
    RECENT_FUTURE_HOURS: int = int(os.getenv("RECENT_FUTURE_HOURS", "24"))

    @classmethod
    def get_timezone_str(cls) -> str:
        """Get the viewer timezone as a string.

        Priority:
        1. Value set at runtime via set_timezone()
        2. VIEWER_TIMEZONE / TZ env var (if valid)
        3. Default timezone
        """
        if cls._timezone_cache:
            return cls._timezone_cache

        if _is_valid_timezone(cls._timezone_from_env):
            return cls._timezone_from_env

        return cls._DEFAULT_TIMEZONE

    @classmethod
    def get_timezone(cls) -> ZoneInfo:
        """Get the viewer timezone as a ZoneInfo object.

        This is THE method for getting timezone. Use it everywhere.
        """
        return ZoneInfo(cls.get_timezone_str())

    @classmethod
    def set_timezone(cls, timezone: str) -> None:
        """Override the viewer timezone for the rest of the process.

        Unknown zone names are ignored and the current zone stays in effect.
        """
        if not _is_valid_timezone(timezone):
            logger.warning("[CONFIG] Ignoring unknown timezone '%s'", timezone)
            return
        cls._timezone_cache = timezone

    @classmethod
    def clear_timezone_cache(cls) -> None:
        """Drop the runtime override (falls back to env/default)."""
        cls._timezone_cache = None

    @classmethod
    def reload(cls) -> None:
        """Reload configuration from environment.

        Useful for testing or runtime config changes.
        """
        load_dotenv(_ENV_FILE, override=True)
        cls._timezone_from_env = os.getenv("VIEWER_TIMEZONE") or os.getenv("TZ")
        cls.EXCLUDED_TITLE_KEYWORDS = _split_keywords(
            os.getenv("EXCLUDED_TITLE_KEYWORDS", "no event,offline,no games,no scheduled")
        )
        cls.RECENT_PAST_HOURS = int(os.getenv("RECENT_PAST_HOURS", "6"))
        cls.RECENT_FUTURE_HOURS = int(os.getenv("RECENT_FUTURE_HOURS", "24"))


def get_viewer_timezone() -> ZoneInfo:
    """Get the configured viewer timezone.

    Import this function wherever you need the viewer-local zone.
    """
    return Config.get_timezone()


def get_viewer_timezone_str() -> str:
    """Get the configured viewer timezone as a string."""
    return Config.get_timezone_str()


def set_timezone(timezone: str) -> None:
    """Set the viewer timezone override."""
    Config.set_timezone(timezone)


def clear_timezone_cache() -> None:
    """Clear the viewer timezone override."""
    Config.clear_timezone_cache()


def get_excluded_title_keywords() -> tuple[str, ...]:
    """Get lower-cased title keywords that mark placeholder entries."""
    return Config.EXCLUDED_TITLE_KEYWORDS


def get_recent_window_hours() -> tuple[int, int]:
    """Get (past, future) hours for the --recent filter."""
    return Config.RECENT_PAST_HOURS, Config.RECENT_FUTURE_HOURS

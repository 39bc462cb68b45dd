"""Logging setup for the playlistarr command line.

setup_logging() is called once by cli.main(); library modules only do
``logger = logging.getLogger(__name__)`` and log with a ``[TAG]`` prefix.

Console output goes to stderr. Two rotating files are written under the log
directory: playlistarr.log (everything) and playlistarr_errors.log (ERROR+).

Environment variables:
    LOG_LEVEL: console level, DEBUG/INFO/WARNING/ERROR/CRITICAL (default: INFO)
    LOG_DIR: directory for the log files (default: ./logs)
    LOG_FORMAT: "text" or "json" (default: text)
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

MAX_LOG_BYTES = 10 * 1024 * 1024
TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_log_dir() -> Path:
    return Path(os.getenv("LOG_DIR", "logs"))


def _resolve_level(name: str | None) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = getattr(logging, (name or "").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _rotating(path: Path, level: int, backups: int, formatter: logging.Formatter):
    handler = RotatingFileHandler(
        path, maxBytes=MAX_LOG_BYTES, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: str | None = None,
    log_dir: str | Path | None = None,
    use_json: bool | None = None,
) -> None:
    """Install the console and file handlers on the root logger.

    Later calls are no-ops.

    Args:
        log_level: Overrides LOG_LEVEL
        log_dir: Overrides LOG_DIR
        use_json: Overrides LOG_FORMAT (True for JSON lines)
    """
    global _configured
    if _configured:
        return

    level = _resolve_level(log_level or os.getenv("LOG_LEVEL", "INFO"))
    log_path = Path(log_dir) if log_dir else _get_log_dir()
    if use_json is None:
        use_json = os.getenv("LOG_FORMAT", "text").lower() == "json"

    log_path.mkdir(parents=True, exist_ok=True)
    formatter = JSONFormatter() if use_json else logging.Formatter(TEXT_FORMAT, DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console)
    root.addHandler(_rotating(log_path / "playlistarr.log", logging.DEBUG, 5, formatter))
    root.addHandler(_rotating(log_path / "playlistarr_errors.log", logging.ERROR, 3, formatter))

    _configured = True

    from playlistarr.config import VERSION

    logging.getLogger("playlistarr").debug(
        "[STARTUP] Playlistarr %s, logging to %s (%s)",
        VERSION,
        log_path,
        "json" if use_json else "text",
    )

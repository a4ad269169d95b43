"""Record and read the moment SXsv was first run."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from sxsv.platform_setup import home_dir

TIME_FILE_NAME = ".time_sxsv"


def _time_path(home: str | Path | None) -> Path:
    return Path(home if home is not None else home_dir()) / TIME_FILE_NAME


def record_install_time(home: str | Path | None = None, now: datetime | None = None) -> bool:
    """Write the install time unless it is already recorded.

    Returns True if a record existed, False if one was just written.
    Raises OSError if the file cannot be written.
    """
    path = _time_path(home)
    if path.exists():
        return True
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    path.write_text(now.isoformat(), encoding="utf-8")
    return False


def read_install_time(home: str | Path | None = None) -> str:
    """Return the recorded install time, or "Unknown" if it cannot be read."""
    try:
        return _time_path(home).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return "Unknown"
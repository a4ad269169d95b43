"""Detect the host platform and prepare the per-user SXsv files."""

from __future__ import annotations

import enum
import sys
from pathlib import Path

LOG_FILE_NAME = ".log_sxsv"
FOLDER_NAME = ".sxsv"
UNKNOWN_HOME = "Unknown"


class OSKind(enum.Enum):
    """Operating systems SXsv distinguishes between."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"
    NOTSUPPORTED = "notsupported"
    VOID = "void"


_NAMES = {
    "macos": OSKind.MACOS,
    "linux": OSKind.LINUX,
    "windows": OSKind.WINDOWS,
}


def _platform_name() -> str:
    """Return the short name of the running platform ("linux", "macos", ...)."""
    platform = sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "macos"
    if platform in ("win32", "cygwin"):
        return "windows"
    return platform


def home_dir() -> str:
    """Return the current user's home directory, or "Unknown" if it cannot be found."""
    try:
        return str(Path.home())
    except (RuntimeError, KeyError, OSError):
        return UNKNOWN_HOME


def detect_os(name: str | None = None) -> OSKind:
    """Map a platform name to an OSKind; defaults to the running platform."""
    if name is None:
        name = _platform_name()
    return _NAMES.get(name, OSKind.NOTSUPPORTED)


def log_os(home: str | Path | None = None) -> OSKind:
    """Detect the OS and record its name in the log file if none exists yet."""
    name = _platform_name()
    kind = detect_os(name)
    log_path = Path(home if home is not None else home_dir()) / LOG_FILE_NAME
    if not log_path.exists():
        try:
            log_path.write_text(name, encoding="utf-8")
        except OSError:
            pass
    return kind


def create_sxsv_files_folder(os_kind: OSKind, home: str | Path | None = None) -> bool:
    """Create the SXsv folder in the home directory on Unix-like systems.

    Returns False on Windows, where no folder is created, and True otherwise.
    """
    if os_kind in (OSKind.MACOS, OSKind.LINUX):
        folder = Path(home if home is not None else home_dir()) / FOLDER_NAME
        try:
            folder.mkdir()
        except OSError:
            pass
        return True
    if os_kind is OSKind.WINDOWS:
        return False
    return True


def sxsv_setup(home: str | Path | None = None) -> OSKind:
    """Log the OS and prepare the SXsv folder; returns the detected OS."""
    kind = log_os(home)
    create_sxsv_files_folder(kind, home)
    return kind
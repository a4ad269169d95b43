"""Information and help screens."""

from __future__ import annotations

import curses
import sys
import textwrap
from pathlib import Path

from sxsv.editor_csv import Rect
from sxsv.install_time import read_install_time
from sxsv.menu import CyclicSelection
from sxsv.platform_setup import OSKind, detect_os

BUILD_TITLE = "Build 05312025 (1.0.0)"
HEADLINE = "SXSV - fast and neat data formats viewer and editor"
QUIT_KEYS = frozenset({"\x1b", "q"})
BROWSE_NOTICE = "Browse mode is not available in this build"

HELP_OPTIONS = (
    "SXsv browse - global file manager",
    "SXsv new FILE_NAME_WITH_EXTENSION - create a new file (only supported formats)",
    "SXsv info - information about current build",
    "SXsv help - show this message",
    "Supported formats - CSV, TSV, JSON, Parquet and more in the future",
)

_ITALIC = getattr(curses, "A_ITALIC", curses.A_BOLD)


def _quoted(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def info_lines(home: str | Path | None = None, platform_name: str | None = None) -> list[str]:
    """Return the body lines of the information screen."""
    if platform_name is None:
        kind = detect_os()
        platform_name = sys.platform if kind is OSKind.NOTSUPPORTED else kind.value
    return [
        f"Platform: {platform_name}",
        f"Installed current version on: {_quoted(read_install_time(home))}",
    ]


def help_handle_key(selection: CyclicSelection, key: str) -> bool:
    """Apply one key press to the help list; returns False when it should close."""
    if key in QUIT_KEYS:
        return False
    if key == "KEY_DOWN":
        selection.select_next()
    elif key == "KEY_UP":
        selection.select_previous()
    return True


def _put(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    height, width = screen.getmaxyx()
    if not (0 <= y < height and 0 <= x < width):
        return
    text = text[: width - x]
    if not text:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def _draw_box(screen, rect: Rect, title: str = "", corner: str = "┌┐└┘") -> None:
    if rect.width < 2 or rect.height < 2:
        return
    inner = rect.width - 2
    _put(screen, rect.y, rect.x, corner[0] + "─" * inner + corner[1])
    for row in range(rect.y + 1, rect.y + rect.height - 1):
        _put(screen, row, rect.x, "│" + " " * inner + "│")
    _put(screen, rect.y + rect.height - 1, rect.x, corner[2] + "─" * inner + corner[3])
    if title:
        _put(screen, rect.y, rect.x + 1, title[:inner])


def _draw_info(screen, lines: list[str]) -> None:
    height, width = screen.getmaxyx()
    screen.erase()
    area = Rect(0, 0, width, height)
    _draw_box(screen, area, corner="╭╮╰╯")
    inner = max(0, width - 2)
    _put(screen, 0, 1, BUILD_TITLE[:inner])
    headline = HEADLINE[:inner]
    _put(screen, 0, max(1, (width - len(headline)) // 2), headline, curses.A_BOLD)

    row = 3
    for line in lines:
        for piece in textwrap.wrap(line, inner) if inner else []:
            if row >= height - 1:
                break
            _put(screen, row, 1 + (inner - len(piece)) // 2, piece)
            row += 1
    screen.refresh()


def run_info(screen, home: str | Path | None = None) -> None:
    """Show build information until the user quits."""
    while True:
        _draw_info(screen, info_lines(home))
        if screen.getkey() in QUIT_KEYS:
            break


def run_browse(screen) -> str:
    """Show and print the notice that the file manager is unavailable; return it."""
    screen.erase()
    _put(screen, 0, 0, BROWSE_NOTICE)
    screen.refresh()
    print(BROWSE_NOTICE)
    return BROWSE_NOTICE


def run_new(filename: str, screen) -> None:
    """Report that file creation is unavailable in this build."""
    print(f"File creation is not available in this build: {filename}")


def _draw_help(screen, selection: CyclicSelection) -> None:
    height, width = screen.getmaxyx()
    screen.erase()
    area = Rect(5, 5, max(0, width - 10), max(0, height - 10))
    _draw_box(screen, area, "SXsv USAGE")
    inner = max(0, area.width - 2)
    for index, option in enumerate(HELP_OPTIONS):
        row = area.y + 1 + index
        if row >= area.y + area.height - 1:
            break
        if index == selection.selected:
            prefix, attr = ">>", _ITALIC
        else:
            prefix, attr = "  ", 0
        _put(screen, row, area.x + 1, (prefix + option)[:inner], attr)
    screen.refresh()


def run_help(screen) -> None:
    """Show the usage list until the user quits."""
    selection = CyclicSelection(len(HELP_OPTIONS), 0)
    while True:
        _draw_help(screen, selection)
        if not help_handle_key(selection, screen.getkey()):
            break
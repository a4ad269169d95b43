"""Terminal editor screen for CSV documents."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field

from sxsv.menu import CyclicSelection

ACTIONS = ("Sort", "Search", "Info")
QUIT_KEYS = frozenset({"\x1b", "q"})
POPOVER_HEIGHT = 10
POPOVER_TEXT = "Current mode is CSV"
MAIN_TEXT = "Hello, world!"

_ITALIC = getattr(curses, "A_ITALIC", curses.A_BOLD)


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the terminal, in character cells."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class FileSxsv:
    """State of an opened document, shared by every editor."""

    extension: str = ""
    path: str = ""
    contents: str = ""
    log: str = ""
    full_name: str = ""


@dataclass
class CsvEditorState:
    """What the CSV editor shows: the chosen action and whether the popover is open."""

    filename: str
    selection: CyclicSelection = field(
        default_factory=lambda: CyclicSelection(len(ACTIONS), None)
    )
    popover: bool = False

    def handle_key(self, key: str) -> bool:
        """Apply one key press; returns False when the editor should close."""
        if key in QUIT_KEYS:
            return False
        if key in ("KEY_DOWN", "l"):
            self.selection.select_next()
        elif key in ("KEY_UP", "h"):
            self.selection.select_previous()
        elif key == "m":
            self.popover = not self.popover
        return True


def popover_rect(width: int, height: int) -> Rect:
    """Return the popover area centred in a terminal of the given size.

    Raises ValueError when the terminal is too short to hold it.
    """
    if width < 0 or height < POPOVER_HEIGHT:
        raise ValueError(f"terminal of {width}x{height} cannot hold the popover")
    popover_width = width * 30 // 100
    return Rect(
        x=(width - popover_width) // 2,
        y=(height - POPOVER_HEIGHT) // 2,
        width=popover_width,
        height=POPOVER_HEIGHT,
    )


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rectangle taking the given percentages of area, centred in it."""
    for percent in (percent_x, percent_y):
        if not 0 <= percent <= 100:
            raise ValueError(f"percentage out of range: {percent}")
    top = area.height * ((100 - percent_y) // 2) // 100
    left = area.width * ((100 - percent_x) // 2) // 100
    return Rect(
        x=area.x + left,
        y=area.y + top,
        width=area.width * percent_x // 100,
        height=area.height * percent_y // 100,
    )


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


def _draw_box(screen, rect: Rect, title: str = "") -> None:
    if rect.width < 2 or rect.height < 2:
        return
    inner = rect.width - 2
    _put(screen, rect.y, rect.x, "┌" + "─" * inner + "┐")
    for row in range(rect.y + 1, rect.y + rect.height - 1):
        _put(screen, row, rect.x, "│" + " " * inner + "│")
    _put(screen, rect.y + rect.height - 1, rect.x, "└" + "─" * inner + "┘")
    if title:
        _put(screen, rect.y, rect.x + 1, title[:inner])


def _draw(screen, state: CsvEditorState) -> None:
    height, width = screen.getmaxyx()
    left_width = width * 70 // 100
    actions_area = Rect(left_width, 0, width - left_width, height)

    screen.erase()
    _put(screen, 0, 0, MAIN_TEXT[:left_width])

    _draw_box(screen, actions_area, "Actions")
    selected = state.selection.selected
    for index, action in enumerate(ACTIONS):
        row = actions_area.y + 1 + index
        if row >= actions_area.y + actions_area.height - 1:
            break
        if selected is None:
            prefix, attr = "", 0
        elif index == selected:
            prefix, attr = ">>", _ITALIC
        else:
            prefix, attr = "  ", 0
        text = (prefix + action)[: max(0, actions_area.width - 2)]
        _put(screen, row, actions_area.x + 1, text, attr)

    if state.popover:
        try:
            area = popover_rect(width, height)
        except ValueError:
            area = None
        if area is not None:
            _draw_box(screen, area, "Warning")
            _put(screen, area.y + 1, area.x + 1, POPOVER_TEXT[: max(0, area.width - 2)])

    screen.refresh()


def run_csv_editor(screen, filename: str) -> None:
    """Show the CSV editor on screen until the user quits."""
    state = CsvEditorState(filename)
    while True:
        _draw(screen, state)
        if not state.handle_key(screen.getkey()):
            break
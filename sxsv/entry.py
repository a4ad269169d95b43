"""Command-line entry point: parse the command and open the matching screen."""

from __future__ import annotations

import curses
import sys
from dataclasses import dataclass
from typing import Sequence

from sxsv.editor_csv import run_csv_editor
from sxsv.info_menu import run_browse, run_help, run_info
from sxsv.install_time import record_install_time
from sxsv.platform_setup import sxsv_setup


@dataclass(frozen=True)
class Message:
    """Outcome of reading the command line."""

    ok: bool
    text: str


def parse_args_run(args: Sequence[str], screen) -> None:
    """Run the screen named by args[1]; unknown commands show the help."""
    command = args[1]
    if command == "info":
        run_info(screen)
    elif command == "help":
        run_help(screen)
    elif command == "browse":
        run_browse(screen)
    elif command == "new":
        if len(args) < 3:
            print("Error: File name required for 'new' command")
            run_help(screen)
        else:
            run_csv_editor(screen, args[2])
    else:
        run_help(screen)


def arguments_sxsv(args: Sequence[str], screen) -> Message:
    """Run the command in args (program name first) if there is one."""
    if len(args) <= 1:
        return Message(False, "Unrecognized command...")
    parse_args_run(args, screen)
    return Message(True, "loading...")


def main(argv: Sequence[str] | None = None) -> int:
    """Prepare the user files and run the command in the terminal."""
    program = sys.argv[0] if sys.argv else "sxsv"
    rest = sys.argv[1:] if argv is None else list(argv)
    args = [program, *rest]

    record_install_time()
    sxsv_setup()

    curses.wrapper(lambda screen: arguments_sxsv(args, screen))
    return 0
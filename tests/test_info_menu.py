from datetime import datetime, timezone

import pytest

from sxsv.info_menu import (
    BUILD_TITLE,
    HEADLINE,
    HELP_OPTIONS,
    help_handle_key,
    info_lines,
    run_browse,
    run_help,
    run_info,
    run_new,
)
from sxsv.install_time import record_install_time
from sxsv.menu import CyclicSelection


class FakeScreen:
    def __init__(self, keys, size=(30, 200)):
        self.keys = list(keys)
        self.size = size
        self.writes = []
        self.refreshes = 0

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.writes.clear()

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text, attr))

    def refresh(self):
        self.refreshes += 1

    def getkey(self):
        return self.keys.pop(0)

    def text(self):
        return "\n".join(w[2] for w in self.writes)


def test_info_lines_without_record(tmp_path):
    lines = info_lines(tmp_path, "linux")
    assert lines[0] == "Platform: linux"
    assert lines[1] == 'Installed current version on: "Unknown"'


def test_info_lines_with_record(tmp_path):
    record_install_time(tmp_path, datetime(2025, 5, 31, tzinfo=timezone.utc))
    lines = info_lines(tmp_path, "macos")
    assert lines[0] == "Platform: macos"
    assert lines[1] == 'Installed current version on: "2025-05-31T00:00:00+00:00"'


def test_info_lines_escapes_quotes(tmp_path):
    (tmp_path / ".time_sxsv").write_text('a"b', encoding="utf-8")
    assert info_lines(tmp_path, "linux")[1].endswith('"a\\"b"')


def test_help_keys_wrap():
    selection = CyclicSelection(len(HELP_OPTIONS), 0)
    assert help_handle_key(selection, "KEY_UP") is True
    assert selection.selected == len(HELP_OPTIONS) - 1
    assert help_handle_key(selection, "KEY_DOWN") is True
    assert selection.selected == 0


def test_help_ignores_other_keys():
    selection = CyclicSelection(len(HELP_OPTIONS), 2)
    assert help_handle_key(selection, "l") is True
    assert selection.selected == 2


@pytest.mark.parametrize("key", ["q", "\x1b"])
def test_help_quit(key):
    assert help_handle_key(CyclicSelection(len(HELP_OPTIONS), 0), key) is False


def test_run_help_draws_all_options():
    screen = FakeScreen(["KEY_DOWN", "q"])
    run_help(screen)
    assert screen.refreshes == 2
    text = screen.text()
    assert "SXsv USAGE" in text
    for option in HELP_OPTIONS:
        assert option in text
    assert ">>" + HELP_OPTIONS[1] in text


def test_run_info_draws_titles(tmp_path):
    screen = FakeScreen(["x", "\x1b"])
    run_info(screen, tmp_path)
    assert screen.refreshes == 2
    text = screen.text()
    assert BUILD_TITLE in text
    assert HEADLINE in text
    assert "Unknown" in text


def test_run_browse_reports(capsys):
    run_browse(FakeScreen([]))
    assert "Browse mode" in capsys.readouterr().out


def test_run_new_reports(capsys):
    run_new("table.csv", FakeScreen([]))
    assert "table.csv" in capsys.readouterr().out
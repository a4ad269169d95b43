# sxsv

A small curses program for the terminal. It has a usage screen, a build information screen and the shell of a CSV editor. It works on macOS and Linux, and it needs the standard `curses` module.

## Installation

```
pip install .
```

## Usage

```
sxsv help        # show the usage screen
sxsv info        # show the platform and the recorded install time
sxsv new NAME    # open the CSV editor screen, e.g. sxsv new data.csv
sxsv browse      # prints a notice that browsing is not available
```

If you give an unknown command, sxsv opens the usage screen. If you run `sxsv new` without a name, it prints `Error: File name required for 'new' command` and then shows the usage screen. If you give no command, sxsv prepares its files, as described below, and exits.

Each time sxsv starts, it checks for the following items in your home directory and creates any that are missing:

- `~/.time_sxsv` holds the time of the first run, as an ISO 8601 timestamp in UTC.
- `~/.log_sxsv` holds the detected platform name, such as `linux` or `macos`.
- On macOS and Linux, it creates the folder `~/.sxsv`.

### Keys

On every screen, `Esc` or `q` closes the screen.

On the usage screen:

- `Up` and `Down` move through the list.
- The selection wraps around at both ends.

In the CSV editor:

- The side panel lists three actions: Sort, Search and Info.
- No action is selected at first.
- `Down` or `l` selects the next action.
- `Up` or `h` selects the previous action.
- Both selections wrap around.
- `m` shows or hides a notice that reads "Current mode is CSV".

## What it does not do

- sxsv does not read, display, edit or save the contents of any data file.
- `sxsv new NAME` does not create a file. It only opens the editor screen, and the main area of that screen shows placeholder text.
- You can select the editor actions Sort, Search and Info, but selecting one does nothing.
- `sxsv browse` has no file manager. It shows and prints `Browse mode is not available in this build`.
- The usage screen mentions TSV, JSON and Parquet, but sxsv handles none of these formats.

## Library use

Several parts of sxsv work without a terminal:

```python
from sxsv.menu import CyclicSelection
from sxsv.editor_csv import CsvEditorState, Rect, centered_rect, popover_rect
from sxsv.info_menu import info_lines
from sxsv.install_time import read_install_time, record_install_time
from sxsv.platform_setup import detect_os, sxsv_setup

selection = CyclicSelection(3, 2)
selection.select_next()            # 0, wrapped around

state = CsvEditorState("data.csv")
state.handle_key("m")              # True; state.popover is now True
state.handle_key("q")              # False: the editor would close

popover_rect(100, 30)              # Rect(x=35, y=10, width=30, height=10)
centered_rect(50, 50, Rect(0, 0, 100, 40))

detect_os("linux")                 # OSKind.LINUX
```

Summary of these functions:

| Function | What it does |
| --- | --- |
| `record_install_time(home, now)` | Writes `.time_sxsv` under the given home directory, unless the file already exists. Returns `True` if the file already existed. |
| `read_install_time(home)` | Returns the contents of `.time_sxsv`, or `"Unknown"` if it cannot read the file. |
| `sxsv_setup(home)` | Writes the platform log and creates the `.sxsv` folder, then returns the detected `OSKind`. |
| `info_lines(home, platform_name)` | Returns the body lines of the information screen. |

## Development

```
pip install -e .[test]
pytest
```
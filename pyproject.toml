[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sxsv"
version = "0.1.0"
description = "Terminal screens for a data file tool: usage help, build information and a CSV editor shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "terminal", "tui", "curses", "editor"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sxsv = "sxsv.entry:main"

[tool.hatch.build.targets.wheel]
packages = ["sxsv"]

[tool.pytest.ini_options]
addopts = "-ra"

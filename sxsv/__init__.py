"""Curses screens for usage help, build information and a CSV editor shell."""

__version__ = "0.1.0"
"""taskbook - a personal task list on the command line."""

__version__ = "0.1.0"

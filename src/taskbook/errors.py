"""Exception types for taskbook."""

from __future__ import annotations


class TaskbookError(Exception):
    """Base class for all taskbook errors."""


class InvalidFormatError(TaskbookError):
    """A stored line does not have the shape its kind tag requires."""


class InvalidDateFormatError(InvalidFormatError):
    """A date/time string does not match ``yyyy-MM-dd HHmm``."""


class StorageLoadError(TaskbookError):
    """The task file could not be created or read."""


class TaskIndexError(TaskbookError):
    """A task number is outside the current list."""

"""Exceptions raised when exit statuses cannot be classified."""

from __future__ import annotations


class SysexitError(Exception):
    """Base exception for sysexit classification failures."""


class OutOfRangeError(SysexitError, ValueError):
    """Raised when an integer exit code lies outside the 0-255 range."""

    def __init__(self, value: int) -> None:
        super().__init__(f"exit code {value} is outside the valid range 0-255")
        self.value = value


class StatusError(SysexitError, ValueError):
    """Raised when a process status cannot be read as an exit or a signal."""

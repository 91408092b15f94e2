"""Helpers for terminating the current program with a symbolic exit code."""

from __future__ import annotations

import logging
import operator
from typing import IO, NoReturn, Optional, Union

import click

from sysexit.classifier import classify_code, is_valid
from sysexit.codes import Code, SymbolicCode
from sysexit.errors import OutOfRangeError
from sysexit.oserrors import classify_os_error

log = logging.getLogger(__name__)

ExitCodeLike = Union[SymbolicCode, int]


def exit_code(code: ExitCodeLike) -> int:
    """
    Return the integer status to hand to the OS for ``code``.

    Raises:
        OutOfRangeError: If the value lies outside 0-255, including an
            unrepresentable signal-derived ``Unknown``.
    """
    value = operator.index(code)
    if not is_valid(value):
        raise OutOfRangeError(value)
    return int(value)


def exit_with(code: ExitCodeLike, message: Optional[str] = None) -> NoReturn:
    """
    Terminate the program with ``code``, optionally printing ``message`` to stderr.

    Raises:
        SystemExit: Always, carrying the integer exit status.
    """
    status = exit_code(code)
    if message:
        click.echo(message, err=True)
    log.debug("Exiting with %s", classify_code(status))
    raise SystemExit(status)


class ExitCodeException(click.ClickException):
    """Click exception that terminates a command with a symbolic exit code."""

    def __init__(self, message: str, code: ExitCodeLike = Code.SOFTWARE) -> None:
        """Store the message and resolve the exit status Click will use."""
        super().__init__(message)
        self.exit_code = exit_code(code)
        self.code = classify_code(self.exit_code)

    @classmethod
    def from_os_error(cls, error: OSError) -> ExitCodeException:
        """Build an exception whose exit code describes ``error``."""
        return cls(str(error), classify_os_error(error))

    def show(self, file: Optional[IO] = None) -> None:
        """Print the message followed by the rendered exit code."""
        click.echo(f"Error: {self.format_message()} [{self.code}]", err=True, file=file)

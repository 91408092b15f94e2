"""Decomposition of host process statuses into exit-or-signal form."""

from __future__ import annotations

import logging
import operator
import os
from dataclasses import dataclass
from typing import Protocol, Union

from sysexit.errors import StatusError

log = logging.getLogger(__name__)


class ReturnCodeLike(Protocol):
    """Anything exposing a ``subprocess``-style return code."""

    returncode: int | None


@dataclass(frozen=True, slots=True)
class ProcessStatus:
    """How a process terminated: a normal exit code or a terminating signal.

    Exactly one of ``exit_code`` and ``signal`` is set.
    """

    exit_code: int | None = None
    signal: int | None = None

    def __post_init__(self) -> None:
        if (self.exit_code is None) == (self.signal is None):
            raise StatusError("status must carry exactly one of exit_code or signal")
        if self.exit_code is not None and self.exit_code < 0:
            raise StatusError(f"exit code cannot be negative: {self.exit_code}")
        if self.signal is not None and self.signal < 1:
            raise StatusError(f"signal number must be positive: {self.signal}")

    @classmethod
    def exited(cls, exit_code: int) -> ProcessStatus:
        """Build the status of a process that exited with ``exit_code``."""
        return cls(exit_code=exit_code)

    @classmethod
    def signaled(cls, signal: int) -> ProcessStatus:
        """Build the status of a process terminated by ``signal``."""
        return cls(signal=signal)

    @classmethod
    def from_returncode(cls, returncode: int | None) -> ProcessStatus:
        """
        Build a status from a ``subprocess`` return code.

        Non-negative values are normal exits; a negative value ``-N`` means the
        child was terminated by signal ``N``.

        Parameters:
            returncode (int | None): Value of ``Popen.returncode`` or
                ``CompletedProcess.returncode``.

        Returns:
            ProcessStatus: The decomposed status.

        Raises:
            StatusError: If the process has not terminated yet (``None``).
        """
        if returncode is None:
            raise StatusError("process has not terminated yet")
        if returncode < 0:
            return cls.signaled(-returncode)
        return cls.exited(returncode)

    @classmethod
    def from_wait_status(cls, wait_status: int) -> ProcessStatus:
        """
        Build a status from a raw ``os.wait``/``os.waitpid`` status word.

        Raises:
            StatusError: If the status reports a stopped or continued process.
        """
        if os.WIFEXITED(wait_status):
            return cls.exited(os.WEXITSTATUS(wait_status))
        if os.WIFSIGNALED(wait_status):
            return cls.signaled(os.WTERMSIG(wait_status))
        raise StatusError(f"wait status {wait_status:#x} does not describe a terminated process")

    @property
    def exited_normally(self) -> bool:
        """Return whether the process exited on its own."""
        return self.exit_code is not None

    @property
    def was_signaled(self) -> bool:
        """Return whether the process was terminated by a signal."""
        return self.signal is not None


StatusLike = Union[ProcessStatus, int, ReturnCodeLike]


def coerce_status(status: StatusLike) -> ProcessStatus:
    """
    Normalize any supported status representation into a ProcessStatus.

    Integers are read as ``subprocess`` return codes. Objects with a
    ``returncode`` attribute (``CompletedProcess``, ``Popen``,
    ``asyncio.subprocess.Process``) are read through that attribute.

    Raises:
        StatusError: If ``status`` has no usable exit information.
    """
    if isinstance(status, ProcessStatus):
        return status
    if isinstance(status, int):
        return ProcessStatus.from_returncode(status)

    try:
        returncode = status.returncode
    except AttributeError:
        raise StatusError(f"unsupported process status: {status!r}") from None
    if returncode is not None:
        try:
            returncode = operator.index(returncode)
        except TypeError:
            raise StatusError(f"return code must be an integer: {returncode!r}") from None

    log.debug("Reading return code %s from %s", returncode, type(status).__name__)
    return ProcessStatus.from_returncode(returncode)

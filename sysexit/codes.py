"""Symbolic exit codes and the constant tables that define them.

Exit statuses fall between 0 and 255 (inclusive) and anything above zero
indicates failure. The named codes come from three conventions:

* sysexits(3) from BSD, 64-78;
* statuses bash reports itself, 126-128;
* fatal signals, reported by shells as ``128 + N`` for signal ``N``,
  129-165 (signals 1-37 in Linux numbering).

Every other value in range is an :class:`Unknown` carrying its raw integer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, unique
from types import MappingProxyType
from typing import Mapping, Union

MIN_CODE = 0
MAX_CODE = 255
SIGNAL_BASE = 128

SYSEXITS_RANGE = range(64, 79)
SHELL_RANGE = range(126, 129)
SIGNAL_RANGE = range(129, 166)

# Shell-specific statuses, then fatal signals up to the last named signal code.
RESERVED_RANGES = (range(125, 129), range(129, SIGNAL_RANGE.stop))

LABEL_FORMAT = "{phrase} ({value})"


@unique
class Code(IntEnum):
    """Named exit codes; each member's value is the status passed to the OS."""

    def __new__(cls, value: int, phrase: str) -> Code:
        member = int.__new__(cls, value)
        member._value_ = value
        member.phrase = phrase
        return member

    SUCCESS = 0, "success"

    USAGE = 64, "usage error"
    DATAERR = 65, "data format error"
    NOINPUT = 66, "cannot open input"
    NOUSER = 67, "addressee unknown"
    NOHOST = 68, "host name unknown"
    UNAVAILABLE = 69, "service unavailable"
    SOFTWARE = 70, "internal software error"
    OSERR = 71, "system error"
    OSFILE = 72, "critical os file missing"
    CANTCREAT = 73, "cannot create output file"
    IOERR = 74, "i/o error"
    TEMPFAIL = 75, "temporary failure"
    PROTOCOL = 76, "remote protocol error"
    NOPERM = 77, "permission denied"
    CONFIG = 78, "configuration error"

    NOT_EXECUTABLE = 126, "command cannot execute"
    NOT_FOUND = 127, "command not found"
    INVALID_EXIT = 128, "invalid exit argument"

    SIGHUP = SIGNAL_BASE + 1, "hangup signal"
    SIGINT = SIGNAL_BASE + 2, "terminal interrupt signal"
    SIGQUIT = SIGNAL_BASE + 3, "terminal quit signal"
    SIGILL = SIGNAL_BASE + 4, "illegal instruction signal"
    SIGTRAP = SIGNAL_BASE + 5, "trace trap signal"
    SIGABRT = SIGNAL_BASE + 6, "abort signal"
    SIGBUS = SIGNAL_BASE + 7, "bus error signal"
    SIGFPE = SIGNAL_BASE + 8, "floating point exception signal"
    SIGKILL = SIGNAL_BASE + 9, "kill signal"
    SIGUSR1 = SIGNAL_BASE + 10, "user-defined signal 1"
    SIGSEGV = SIGNAL_BASE + 11, "segmentation violation signal"
    SIGUSR2 = SIGNAL_BASE + 12, "user-defined signal 2"
    SIGPIPE = SIGNAL_BASE + 13, "write on a pipe with no one to read it signal"
    SIGALRM = SIGNAL_BASE + 14, "alarm clock signal"
    SIGTERM = SIGNAL_BASE + 15, "termination signal"
    SIGSTKFLT = SIGNAL_BASE + 16, "stack fault signal"
    SIGCHLD = SIGNAL_BASE + 17, "child status changed signal"
    SIGCONT = SIGNAL_BASE + 18, "continue signal"
    SIGSTOP = SIGNAL_BASE + 19, "stop signal"
    SIGTSTP = SIGNAL_BASE + 20, "terminal stop signal"
    SIGTTIN = SIGNAL_BASE + 21, "background read from terminal signal"
    SIGTTOU = SIGNAL_BASE + 22, "background write to terminal signal"
    SIGURG = SIGNAL_BASE + 23, "urgent socket condition signal"
    SIGXCPU = SIGNAL_BASE + 24, "cpu time limit exceeded signal"
    SIGXFSZ = SIGNAL_BASE + 25, "file size limit exceeded signal"
    SIGVTALRM = SIGNAL_BASE + 26, "virtual timer expired signal"
    SIGPROF = SIGNAL_BASE + 27, "profiling timer expired signal"
    SIGWINCH = SIGNAL_BASE + 28, "window size change signal"
    SIGIO = SIGNAL_BASE + 29, "i/o possible signal"
    SIGPWR = SIGNAL_BASE + 30, "power failure signal"
    SIGSYS = SIGNAL_BASE + 31, "bad system call signal"
    # 32 and 33 are taken by the threading library on glibc.
    SIG32 = SIGNAL_BASE + 32, "real-time signal 32"
    SIG33 = SIGNAL_BASE + 33, "real-time signal 33"
    SIGRTMIN = SIGNAL_BASE + 34, "real-time signal 34"
    SIGRTMIN_1 = SIGNAL_BASE + 35, "real-time signal 35"
    SIGRTMIN_2 = SIGNAL_BASE + 36, "real-time signal 36"
    SIGRTMIN_3 = SIGNAL_BASE + 37, "real-time signal 37"

    def __str__(self) -> str:
        return LABEL_FORMAT.format(phrase=self.phrase, value=self.value)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @property
    def is_sysexit(self) -> bool:
        """Return whether the code belongs to the sysexits(3) family."""
        return self.value in SYSEXITS_RANGE

    @property
    def is_shell(self) -> bool:
        """Return whether the code is a status bash reports itself."""
        return self.value in SHELL_RANGE

    @property
    def is_signal(self) -> bool:
        """Return whether the code reports termination by a fatal signal."""
        return self.value in SIGNAL_RANGE

    @property
    def signal_number(self) -> int | None:
        """Return the terminating signal number, or ``None`` for non-signal codes."""
        if not self.is_signal:
            return None
        return self.value - SIGNAL_BASE

    @property
    def signal_name(self) -> str | None:
        """Return the conventional signal name, e.g. ``SIGRTMIN+1``."""
        if not self.is_signal:
            return None
        return self.name.replace("_", "+")


@dataclass(frozen=True, slots=True)
class Unknown:
    """Catch-all for exit codes without a named meaning.

    ``value`` is normally within 0-255. A signal-derived value above 255 is
    kept as computed so callers can still log it; such an instance reports
    ``is_representable`` as ``False`` and must not be used as an exit status.
    """

    value: int

    phrase = "unknown error"

    def __str__(self) -> str:
        return LABEL_FORMAT.format(phrase=self.phrase, value=self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    @property
    def is_representable(self) -> bool:
        """Return whether the value fits in an exit status."""
        return MIN_CODE <= self.value <= MAX_CODE


SymbolicCode = Union[Code, Unknown]

CODES_BY_VALUE: Mapping[int, Code] = MappingProxyType({code.value: code for code in Code})

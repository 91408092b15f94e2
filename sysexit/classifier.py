"""Classification of raw exit codes and process statuses into symbolic codes."""

from __future__ import annotations

import logging
import operator

from sysexit.codes import (
    CODES_BY_VALUE,
    MAX_CODE,
    MIN_CODE,
    RESERVED_RANGES,
    SIGNAL_BASE,
    Code,
    SymbolicCode,
    Unknown,
)
from sysexit.errors import OutOfRangeError, StatusError
from sysexit.status import StatusLike, coerce_status

log = logging.getLogger(__name__)


def is_valid(n: int) -> bool:
    """Return whether ``n`` fits in an exit status (0-255 inclusive)."""
    return MIN_CODE <= n <= MAX_CODE


def is_reserved(n: int) -> bool:
    """
    Return whether ``n`` has a shell- or signal-specific meaning.

    The reserved ranges are 125-128 (shell statuses) and 129-165 (fatal
    signals 1-37). Values outside 0-255 are simply not reserved; use
    :func:`is_valid` to check overall legality.
    """
    return any(n in reserved for reserved in RESERVED_RANGES)


def classify_code(n: int) -> SymbolicCode:
    """
    Map a raw exit code to its symbolic code.

    Parameters:
        n (int): Exit code as reported for a normal exit.

    Returns:
        SymbolicCode: The named :class:`Code`, or :class:`Unknown` carrying ``n``.

    Raises:
        TypeError: If ``n`` is not an integer.
        OutOfRangeError: If ``n`` lies outside 0-255. Callers holding untrusted
            values should check :func:`is_valid` first.
    """
    n = operator.index(n)
    if not is_valid(n):
        raise OutOfRangeError(n)
    code = CODES_BY_VALUE.get(n)
    if code is None:
        return Unknown(n)
    return code


def classify_signal(signal: int) -> SymbolicCode:
    """Map a terminating signal number to the shell's ``128 + N`` code."""
    if signal < 1:
        raise StatusError(f"signal number must be positive: {signal}")
    value = SIGNAL_BASE + signal
    if not is_valid(value):
        log.warning(
            "Signal %s maps to exit code %s, which cannot be represented as an exit status",
            signal,
            value,
        )
        return Unknown(value)
    return classify_code(value)


def classify_status(status: StatusLike) -> SymbolicCode:
    """
    Classify how a process terminated.

    A normal exit with code ``n`` classifies as :func:`classify_code` ``(n)``.
    Termination by signal ``s`` classifies as the code for ``128 + s``; when
    that exceeds 255 the result is an :class:`Unknown` holding the unclamped
    value, which is never valid as an exit status.

    Parameters:
        status: A :class:`~sysexit.status.ProcessStatus`, a ``subprocess``
            return code, or an object with a ``returncode`` attribute.

    Raises:
        StatusError: If ``status`` cannot be decomposed.
        OutOfRangeError: If a normal exit reports a code above 255.
    """
    process_status = coerce_status(status)
    if process_status.was_signaled:
        return classify_signal(process_status.signal)
    return classify_code(process_status.exit_code)


def is_success(status: StatusLike) -> bool:
    """Return whether the process exited normally with code 0."""
    process_status = coerce_status(status)
    return process_status.exit_code == Code.SUCCESS


def is_error(status: StatusLike) -> bool:
    """Return whether the process failed or was killed by a signal."""
    return not is_success(status)


def describe_status(status: StatusLike) -> str:
    """
    Render a one-line diagnostic for a process status.

    Examples: ``"exited: i/o error (74)"`` and
    ``"killed by SIGTERM: termination signal (143)"``.
    """
    process_status = coerce_status(status)
    code = classify_status(process_status)
    if not process_status.was_signaled:
        return f"exited: {code}"
    if isinstance(code, Code):
        return f"killed by {code.signal_name}: {code}"
    return f"killed by signal {process_status.signal}: {code}"

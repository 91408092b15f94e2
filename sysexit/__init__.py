"""Classify process exit statuses into sysexits, shell and signal codes."""

from sysexit.__version__ import __version__
from sysexit.classifier import (
    classify_code,
    classify_signal,
    classify_status,
    describe_status,
    is_error,
    is_reserved,
    is_success,
    is_valid,
)
from sysexit.codes import Code, SymbolicCode, Unknown
from sysexit.errors import OutOfRangeError, StatusError, SysexitError
from sysexit.exiting import ExitCodeException, exit_code, exit_with
from sysexit.oserrors import classify_os_error
from sysexit.status import ProcessStatus, coerce_status

__all__ = [
    "Code",
    "ExitCodeException",
    "OutOfRangeError",
    "ProcessStatus",
    "StatusError",
    "SymbolicCode",
    "SysexitError",
    "Unknown",
    "__version__",
    "classify_code",
    "classify_os_error",
    "classify_signal",
    "classify_status",
    "coerce_status",
    "describe_status",
    "exit_code",
    "exit_with",
    "is_error",
    "is_reserved",
    "is_success",
    "is_valid",
]

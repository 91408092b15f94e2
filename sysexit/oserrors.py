"""Mapping of operating system errors onto sysexits(3) codes."""

from __future__ import annotations

import errno
from types import MappingProxyType
from typing import Mapping

from sysexit.codes import Code

OS_ERROR_CODES: Mapping[int, Code] = MappingProxyType(
    {
        errno.ENOENT: Code.OSFILE,
        errno.EACCES: Code.NOPERM,
        errno.EPERM: Code.NOPERM,
        errno.EADDRINUSE: Code.UNAVAILABLE,
        errno.EADDRNOTAVAIL: Code.UNAVAILABLE,
        errno.ECONNREFUSED: Code.PROTOCOL,
        errno.ECONNRESET: Code.PROTOCOL,
        errno.ECONNABORTED: Code.PROTOCOL,
        errno.ENOTCONN: Code.PROTOCOL,
        errno.EPIPE: Code.PROTOCOL,
        errno.EEXIST: Code.CANTCREAT,
        errno.EINVAL: Code.DATAERR,
    }
)


def classify_os_error(error: OSError) -> Code:
    """
    Pick the sysexits code that best describes an ``OSError``.

    Errors without an ``errno``, or with one not listed in
    :data:`OS_ERROR_CODES`, fall back to :attr:`Code.IOERR`.
    """
    return OS_ERROR_CODES.get(error.errno, Code.IOERR)

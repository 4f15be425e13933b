"""Exception types raised by freqctl."""

from __future__ import annotations


class FreqctlError(Exception):
    """Base exception for freqctl errors."""

    pass


class SysfsIOError(FreqctlError):
    """Raised when a kernel pseudo-file cannot be opened, read or written.

    Carries the path, the operation that failed ("read" or "write") and the
    underlying OSError, which is also chained as ``__cause__``.
    """

    def __init__(self, path: str, operation: str, os_error: OSError) -> None:
        self.path = path
        self.operation = operation
        self.os_error = os_error
        reason = os_error.strerror or str(os_error)
        super().__init__(f"Failed to {operation} {path}: {reason}")


class SysfsParseError(FreqctlError, ValueError):
    """Raised when a pseudo-file is not valid text or, on a numeric path,
    does not hold a base-10 integer.
    """

    def __init__(self, path: str, content: str) -> None:
        self.path = path
        self.content = content
        super().__init__(f"Could not parse {path} as an integer: {content!r}")


class ProcStatError(FreqctlError):
    """Raised when /proc/stat is malformed or lacks the requested cpu line."""

    pass

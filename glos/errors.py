"""Errors raised while reading or validating GLOS data."""

from __future__ import annotations


class GlosError(Exception):
    """Base class for every GLOS format error."""


class InvalidMagicError(GlosError):
    """The file does not start with the expected magic bytes."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid magic: {detail}")


class UnsupportedVersionError(GlosError):
    """The format version is not one this package understands."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Unsupported version: found {found}, expected {expected}")


class CrcMismatchError(GlosError):
    """A stored CRC32 does not match the computed one."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"CRC mismatch: expected {expected:08x}, found {found:08x}")


class CorruptedError(GlosError):
    """Data is damaged or otherwise unreadable."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Corrupted data: {detail}")


class InvalidBlockSizeError(GlosError):
    """A block declares a size that cannot be valid."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Invalid block size: {size}")


class GlosIOError(GlosError):
    """An underlying I/O operation failed."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"I/O error: {error}")


class FormatViolationError(GlosError):
    """The data breaks the format specification."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Format violation: {detail}")
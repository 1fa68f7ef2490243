"""Exception hierarchy shared by the TLE codec."""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "TleError",
    "InvalidLength",
    "MalformedField",
    "MalformedLine",
    "ValueOutOfRange",
    "MantissaOverflow",
    "InconsistentRecord",
    "ChecksumMismatch",
]


class TleError(ValueError):
    """Base class for every error raised while encoding or decoding a TLE."""


class InvalidLength(TleError):
    """Raised when a line or field does not have its fixed width."""

    def __init__(self, what: str, expected: int, actual: int, at_most: bool = False) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        bound = f"at most {expected}" if at_most else str(expected)
        super().__init__(f"{what} must be {bound} characters, received {actual}")


class MalformedField(TleError):
    """Raised when a field substring cannot be decoded."""

    def __init__(self, field: str, raw: str, reason: Optional[str] = None) -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        message = f"malformed {field}: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedLine(MalformedField):
    """Raised by the line parsers; names the first field that failed."""

    def __init__(
        self, line_number: int, field: str, raw: str, reason: Optional[str] = None
    ) -> None:
        self.line_number = line_number
        super().__init__(field, raw, reason)
        self.args = (f"line {line_number}: {self.args[0]}",)


class ValueOutOfRange(TleError):
    """Raised when a value cannot be rendered into its fixed-width field."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        message = f"{field} out of range: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MantissaOverflow(ValueOutOfRange):
    """Raised when an exponential field cannot hold the magnitude of a value."""


class InconsistentRecord(TleError):
    """Raised when line 1 and line 2 describe different objects."""


class ChecksumMismatch(TleError):
    """Raised when a line's trailing digit disagrees with its content."""

    def __init__(self, line_number: int, expected: int, actual: Optional[int]) -> None:
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"line {line_number}: checksum is {actual!r}, content sums to {expected}"
        )

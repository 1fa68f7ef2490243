"""Modulo-10 line checksum used by both element lines."""

from __future__ import annotations

from ..errors import InvalidLength, MalformedField

LINE_LENGTH = 69
CHECKSUM_INDEX = 68


def _require_length(line: str, expected: int) -> None:
    if len(line) != expected:
        raise InvalidLength("line", expected, len(line))


def compute(line68: str) -> int:
    """Return the checksum digit for the first 68 characters of a line.

    Digits count for their value and each minus sign counts as one; every
    other character (blanks, letters, ``+`` and ``.``) is ignored.
    """

    _require_length(line68, CHECKSUM_INDEX)
    total = 0
    for ch in line68:
        if "0" <= ch <= "9":
            total += ord(ch) - ord("0")
        elif ch == "-":
            total += 1
    return total % 10


def extract(line69: str) -> int:
    """Return the checksum digit printed at the end of ``line69``."""

    _require_length(line69, LINE_LENGTH)
    digit = line69[CHECKSUM_INDEX]
    if not "0" <= digit <= "9":
        raise MalformedField("checksum", digit, "expected a digit")
    return int(digit)


def verify(line69: str) -> bool:
    """Return ``True`` when ``line69`` satisfies the NORAD checksum rule."""

    _require_length(line69, LINE_LENGTH)
    digit = line69[CHECKSUM_INDEX]
    if not "0" <= digit <= "9":
        return False
    return compute(line69[:CHECKSUM_INDEX]) == int(digit)


def append(line68: str) -> str:
    """Return ``line68`` terminated by its checksum digit."""

    return f"{line68}{compute(line68)}"


__all__ = ["LINE_LENGTH", "CHECKSUM_INDEX", "compute", "extract", "verify", "append"]

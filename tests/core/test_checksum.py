from __future__ import annotations

import pytest

from tle_codec.core import checksum
from tle_codec.errors import InvalidLength, MalformedField

LINE = "1 26411U 00041B   16338.86320548  .00000515  00000-0  00000+0 0  9996"
AKEBONO_LINE1 = "1 19822C 89016A   16330.54185827  .00020730 -54173-7  42980-3 0  9995"
AKEBONO_LINE2 = "2 19822  75.0338 162.9721 1946869 124.1907 255.9297 11.60242208885551"


def test_compute_matches_published_digit() -> None:
    assert checksum.compute(LINE[:68]) == 6
    assert checksum.extract(LINE) == 6


def test_minus_sign_counts_as_one() -> None:
    assert checksum.compute("-" + " " * 67) == 1
    assert checksum.compute("+" * 34 + "." * 34) == 0
    assert checksum.compute("ABCDEFGH" + " " * 60) == 0


@pytest.mark.parametrize("line, digit", [(AKEBONO_LINE1, 5), (AKEBONO_LINE2, 1)])
def test_lines_have_independent_checksums(line: str, digit: int) -> None:
    assert checksum.verify(line)
    assert checksum.extract(line) == digit


def test_verify_detects_stale_digit() -> None:
    assert not checksum.verify(LINE[:68] + "7")
    assert not checksum.verify(LINE[:68] + "X")


def test_append_terminates_line() -> None:
    assert checksum.append(LINE[:68]) == LINE


@pytest.mark.parametrize("length", [0, 67, 69])
def test_compute_requires_68_characters(length: int) -> None:
    with pytest.raises(InvalidLength):
        checksum.compute("1" * length)


@pytest.mark.parametrize("length", [68, 70])
def test_verify_and_extract_require_69_characters(length: int) -> None:
    with pytest.raises(InvalidLength):
        checksum.verify("1" * length)
    with pytest.raises(InvalidLength):
        checksum.extract("1" * length)


def test_extract_rejects_non_digit() -> None:
    with pytest.raises(MalformedField):
        checksum.extract(LINE[:68] + "x")

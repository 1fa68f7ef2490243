"""Immutable TLE records and the text-level parsers that produce them."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .config import CodecConfig, load_config
from .core import checksum
from .core.lines import parse_line1, parse_line2
from .core.types import InternationalDesignator, Line1Fields, Line2Fields
from .errors import InconsistentRecord, InvalidLength, TleError
from .logging import get_logger, log_context

logger = get_logger(__name__)

MAX_TITLE_LENGTH = 24


@dataclass(frozen=True)
class TleRecord:
    """A validated element set.

    ``line1`` and ``line2`` are the lines exactly as received (or as rendered
    by :class:`~tle_codec.builder.TleBuilder`); the typed values live in
    ``line1_fields`` and ``line2_fields`` and are mirrored by the read-only
    properties below.
    """

    title: Optional[str]
    line1: str
    line2: str
    line1_fields: Line1Fields
    line2_fields: Line2Fields

    # line 1
    @property
    def satellite_number(self) -> int:
        return self.line1_fields.satellite_number

    @property
    def classification(self) -> str:
        return self.line1_fields.classification

    @property
    def international_designator(self) -> InternationalDesignator:
        return self.line1_fields.international_designator

    @property
    def epoch_year(self) -> int:
        return self.line1_fields.epoch_year

    @property
    def epoch_day(self) -> float:
        return self.line1_fields.epoch_day

    @property
    def epoch(self) -> dt.datetime:
        """Epoch as a timezone-aware UTC datetime."""
        return self.line1_fields.epoch

    @property
    def mean_motion_first_derivative(self) -> float:
        return self.line1_fields.mean_motion_first_derivative

    @property
    def mean_motion_second_derivative(self) -> float:
        return self.line1_fields.mean_motion_second_derivative

    @property
    def drag_term(self) -> float:
        return self.line1_fields.drag_term

    @property
    def ephemeris_type(self) -> int:
        return self.line1_fields.ephemeris_type

    @property
    def element_set_number(self) -> int:
        return self.line1_fields.element_set_number

    @property
    def checksum_line1(self) -> int:
        return self.line1_fields.checksum

    # line 2
    @property
    def inclination(self) -> float:
        return self.line2_fields.inclination

    @property
    def raan(self) -> float:
        return self.line2_fields.raan

    @property
    def eccentricity(self) -> float:
        return self.line2_fields.eccentricity

    @property
    def argument_of_perigee(self) -> float:
        return self.line2_fields.argument_of_perigee

    @property
    def mean_anomaly(self) -> float:
        return self.line2_fields.mean_anomaly

    @property
    def mean_motion(self) -> float:
        return self.line2_fields.mean_motion

    @property
    def revolutions(self) -> int:
        return self.line2_fields.revolutions

    @property
    def checksum_line2(self) -> int:
        return self.line2_fields.checksum

    # checksums
    @property
    def line1_checksum_ok(self) -> bool:
        return checksum.verify(self.line1)

    @property
    def line2_checksum_ok(self) -> bool:
        return checksum.verify(self.line2)

    @property
    def checksums_valid(self) -> bool:
        return self.line1_checksum_ok and self.line2_checksum_ok

    def as_text(self, three_line: bool = True) -> str:
        if three_line and self.title:
            return f"{self.title}\n{self.line1}\n{self.line2}\n"
        return f"{self.line1}\n{self.line2}\n"

    def __str__(self) -> str:
        return self.as_text().rstrip("\n")


def normalize_title(title: Optional[str]) -> Optional[str]:
    """Trim a title line; blank titles become ``None``."""

    if title is None:
        return None
    title = title.strip()
    if not title:
        return None
    if len(title) > MAX_TITLE_LENGTH:
        raise InvalidLength("title", MAX_TITLE_LENGTH, len(title), at_most=True)
    return title


def parse_record(
    line1: str,
    line2: str,
    title: Optional[str] = None,
    config: Optional[CodecConfig] = None,
) -> TleRecord:
    """Parse an optional title plus two element lines into a :class:`TleRecord`.

    Lines must be exactly 69 characters. Stale checksums are logged and
    reported through :attr:`TleRecord.checksums_valid`; with
    ``config.strict_checksums`` they raise
    :class:`~tle_codec.errors.ChecksumMismatch` instead.
    """

    config = config or load_config()
    title = normalize_title(title)

    with log_context(title=title):
        fields1 = parse_line1(line1, verify_checksum=config.strict_checksums)
        fields2 = parse_line2(line2, verify_checksum=config.strict_checksums)
        if fields1.satellite_number != fields2.satellite_number:
            logger.error(
                "record.satellite_mismatch",
                extra={
                    "line1_satellite": fields1.satellite_number,
                    "line2_satellite": fields2.satellite_number,
                },
            )
            raise InconsistentRecord(
                f"satellite number differs between lines: "
                f"{fields1.satellite_number} != {fields2.satellite_number}"
            )

        record = TleRecord(
            title=title,
            line1=line1,
            line2=line2,
            line1_fields=fields1,
            line2_fields=fields2,
        )
        if not record.checksums_valid:
            logger.warning(
                "record.checksum_mismatch",
                extra={
                    "satellite_number": record.satellite_number,
                    "line1_ok": record.line1_checksum_ok,
                    "line2_ok": record.line2_checksum_ok,
                },
            )
        logger.debug("record.parsed", extra={"satellite_number": record.satellite_number})
    return record


def _starts_element_set(line: str) -> bool:
    return line.startswith("1 ") and len(line) > MAX_TITLE_LENGTH


def iter_records(text: str, config: Optional[CodecConfig] = None) -> Iterator[TleRecord]:
    """Yield every record of a 2-line or 3-line TLE text.

    Blank lines and surrounding whitespace are ignored. A line that does not
    start an element set is taken as the title of the following one.
    """

    config = config or load_config()
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    index = 0
    while index < len(lines):
        title: Optional[str] = None
        if not _starts_element_set(lines[index]):
            title = lines[index]
            index += 1
        if index + 1 >= len(lines):
            raise TleError(f"incomplete element set after {len(lines)} non-blank lines")
        yield parse_record(lines[index], lines[index + 1], title=title, config=config)
        index += 2


def parse_records(text: str, config: Optional[CodecConfig] = None) -> List[TleRecord]:
    records = list(iter_records(text, config=config))
    logger.debug("records.parsed", extra={"count": len(records)})
    return records


def parse_text(text: str, config: Optional[CodecConfig] = None) -> TleRecord:
    """Parse exactly one record from two or three lines of text."""

    records = parse_records(text, config=config)
    if len(records) != 1:
        raise TleError(f"expected one element set, found {len(records)}")
    return records[0]


__all__ = [
    "MAX_TITLE_LENGTH",
    "TleRecord",
    "normalize_title",
    "parse_record",
    "iter_records",
    "parse_records",
    "parse_text",
]

"""Parse and format complete 69-column TLE lines."""

from __future__ import annotations

from typing import Any, Callable, Dict, Sequence, Tuple

from ..errors import ChecksumMismatch, InvalidLength, MalformedField, MalformedLine
from ..logging import get_logger
from . import checksum, fields
from .types import Line1Fields, Line2Fields

logger = get_logger(__name__)

Column = Tuple[str, int, int, Callable[[str], Any]]

# Zero-based, half-open column ranges of the NORAD layout.
LINE1_COLUMNS: Sequence[Column] = (
    ("satellite_number", 2, 7, fields.parse_satellite_number),
    ("classification", 7, 8, fields.parse_classification),
    ("international_designator", 9, 17, fields.parse_international_designator),
    ("epoch_year", 18, 20, fields.parse_epoch_year),
    ("epoch_day", 20, 32, fields.parse_epoch_day),
    ("mean_motion_first_derivative", 33, 43, fields.parse_mean_motion_first_derivative),
    ("mean_motion_second_derivative", 44, 52, fields.parse_mean_motion_second_derivative),
    ("drag_term", 53, 61, fields.parse_drag_term),
    ("ephemeris_type", 62, 63, fields.parse_ephemeris_type),
    ("element_set_number", 64, 68, fields.parse_element_set_number),
)
LINE1_BLANKS = (1, 8, 17, 32, 43, 52, 61, 63)

LINE2_COLUMNS: Sequence[Column] = (
    ("satellite_number", 2, 7, fields.parse_satellite_number),
    ("inclination", 8, 16, fields.parse_inclination),
    ("raan", 17, 25, fields.parse_raan),
    ("eccentricity", 26, 33, fields.parse_eccentricity),
    ("argument_of_perigee", 34, 42, fields.parse_argument_of_perigee),
    ("mean_anomaly", 43, 51, fields.parse_mean_anomaly),
    ("mean_motion", 52, 63, fields.parse_mean_motion),
    ("revolutions", 63, 68, fields.parse_revolutions),
)
LINE2_BLANKS = (1, 7, 16, 25, 33, 42, 51)


def _check_frame(line: str, line_number: int, blanks: Sequence[int]) -> None:
    if len(line) != checksum.LINE_LENGTH:
        raise InvalidLength(f"line {line_number}", checksum.LINE_LENGTH, len(line))
    if line[0] != str(line_number):
        raise MalformedLine(line_number, "line number", line[0], f"expected {line_number}")
    for index in blanks:
        if line[index] != " ":
            raise MalformedLine(
                line_number, f"separator at column {index + 1}", line[index], "expected a blank"
            )


def _parse_columns(line: str, line_number: int, columns: Sequence[Column]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for attr, start, stop, parser in columns:
        try:
            values[attr] = parser(line[start:stop])
        except MalformedField as exc:
            raise MalformedLine(line_number, exc.field, exc.raw, exc.reason) from exc
    return values


def _parse_checksum(line: str, line_number: int, verify_checksum: bool) -> int:
    try:
        printed = checksum.extract(line)
    except MalformedField as exc:
        raise MalformedLine(line_number, exc.field, exc.raw, exc.reason) from exc
    expected = checksum.compute(line[: checksum.CHECKSUM_INDEX])
    if printed != expected:
        if verify_checksum:
            raise ChecksumMismatch(line_number, expected, printed)
        logger.debug(
            "line.checksum_mismatch",
            extra={"line_number": line_number, "printed": printed, "expected": expected},
        )
    return printed


def parse_line1(line: str, verify_checksum: bool = False) -> Line1Fields:
    """Decode TLE line 1.

    The returned ``checksum`` is the digit printed on the line. A stale digit
    is tolerated unless ``verify_checksum`` is set, in which case
    :class:`~tle_codec.errors.ChecksumMismatch` is raised.
    """

    _check_frame(line, 1, LINE1_BLANKS)
    values = _parse_columns(line, 1, LINE1_COLUMNS)
    values["checksum"] = _parse_checksum(line, 1, verify_checksum)
    return Line1Fields(**values)


def parse_line2(line: str, verify_checksum: bool = False) -> Line2Fields:
    """Decode TLE line 2; see :func:`parse_line1` for checksum handling."""

    _check_frame(line, 2, LINE2_BLANKS)
    values = _parse_columns(line, 2, LINE2_COLUMNS)
    values["checksum"] = _parse_checksum(line, 2, verify_checksum)
    return Line2Fields(**values)


def format_line1(line1: Line1Fields) -> str:
    """Render line 1 with a freshly computed checksum.

    The ``checksum`` attribute of ``line1`` is ignored.
    """

    body = (
        "1 "
        f"{fields.format_satellite_number(line1.satellite_number)}"
        f"{fields.format_classification(line1.classification)} "
        f"{fields.format_international_designator(line1.international_designator)} "
        f"{fields.format_epoch_year(line1.epoch_year)}"
        f"{fields.format_epoch_day(line1.epoch_day)} "
        f"{fields.format_mean_motion_first_derivative(line1.mean_motion_first_derivative)} "
        f"{fields.format_mean_motion_second_derivative(line1.mean_motion_second_derivative)} "
        f"{fields.format_drag_term(line1.drag_term)} "
        f"{fields.format_ephemeris_type(line1.ephemeris_type)} "
        f"{fields.format_element_set_number(line1.element_set_number)}"
    )
    return checksum.append(body)


def format_line2(line2: Line2Fields) -> str:
    """Render line 2 with a freshly computed checksum."""

    body = (
        "2 "
        f"{fields.format_satellite_number(line2.satellite_number)} "
        f"{fields.format_inclination(line2.inclination)} "
        f"{fields.format_raan(line2.raan)} "
        f"{fields.format_eccentricity(line2.eccentricity)} "
        f"{fields.format_argument_of_perigee(line2.argument_of_perigee)} "
        f"{fields.format_mean_anomaly(line2.mean_anomaly)} "
        f"{fields.format_mean_motion(line2.mean_motion)}"
        f"{fields.format_revolutions(line2.revolutions)}"
    )
    return checksum.append(body)


__all__ = [
    "LINE1_COLUMNS",
    "LINE2_COLUMNS",
    "parse_line1",
    "parse_line2",
    "format_line1",
    "format_line2",
]

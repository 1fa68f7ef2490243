"""Column-exact parse/format pairs for the individual TLE fields.

Every ``parse_*`` function takes the exact fixed-width substring of its field
and raises :class:`~tle_codec.errors.MalformedField` when the content cannot be
decoded. Every ``format_*`` function returns a string of exactly the field
width or raises :class:`~tle_codec.errors.ValueOutOfRange`.
"""

from __future__ import annotations

import math
import re

from ..errors import InvalidLength, MalformedField, ValueOutOfRange
from . import exponential
from .epoch import MAX_DAY, contract_year, expand_year
from .types import InternationalDesignator

SATELLITE_NUMBER_WIDTH = 5
CLASSIFICATION_WIDTH = 1
DESIGNATOR_WIDTH = 8
EPOCH_YEAR_WIDTH = 2
EPOCH_DAY_WIDTH = 12
FIRST_DERIVATIVE_WIDTH = 10
EPHEMERIS_TYPE_WIDTH = 1
ELEMENT_SET_WIDTH = 4
ANGLE_WIDTH = 8
ECCENTRICITY_WIDTH = 7
MEAN_MOTION_WIDTH = 11
REVOLUTIONS_WIDTH = 5

_INTEGER_RE = re.compile(r"\d+", re.ASCII)
_UNSIGNED_RE = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)
_SIGNED_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)", re.ASCII)
_DESIGNATOR_RE = re.compile(r"(\d{2})(\d{3})([A-Z]{1,3}) {0,2}", re.ASCII)
_PIECE_RE = re.compile(r"[A-Z]{1,3}", re.ASCII)


# ----------------------------------------------------------------- helpers


def _require_width(name: str, raw: str, width: int) -> None:
    if len(raw) != width:
        raise InvalidLength(name, width, len(raw))


def _parse_int(name: str, raw: str, width: int, low: int, high: int) -> int:
    _require_width(name, raw, width)
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise MalformedField(name, raw, "expected an integer")
    value = int(text)
    if not low <= value <= high:
        raise MalformedField(name, raw, f"expected {low}-{high}")
    return value


def _parse_decimal(
    name: str, raw: str, width: int, low: float, high: float, signed: bool = False
) -> float:
    _require_width(name, raw, width)
    text = raw.strip()
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    if not pattern.fullmatch(text):
        raise MalformedField(name, raw, "expected a decimal number")
    value = float(text)
    if not low <= value <= high:
        raise MalformedField(name, raw, f"expected {low:g}-{high:g}")
    return value


def _format_int(name: str, value: int, width: int, low: int, high: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueOutOfRange(name, value, "expected an integer")
    if not low <= value <= high:
        raise ValueOutOfRange(name, value, f"expected {low}-{high}")
    return f"{value:{width}d}"


def _format_fixed(
    name: str, value: float, width: int, decimals: int, low: float, high: float, fill: str = ""
) -> str:
    if not math.isfinite(value) or not low <= value <= high:
        raise ValueOutOfRange(name, value, f"expected {low:g}-{high:g}")
    text = f"{value:{fill}{width}.{decimals}f}"
    if len(text) != width:
        raise ValueOutOfRange(name, value, f"does not fit in {width} columns")
    return text


# ------------------------------------------------------------------ line 1


def parse_satellite_number(raw: str) -> int:
    return _parse_int("satellite number", raw, SATELLITE_NUMBER_WIDTH, 1, 99999)


def format_satellite_number(value: int) -> str:
    return _format_int("satellite number", value, SATELLITE_NUMBER_WIDTH, 1, 99999)


def parse_classification(raw: str) -> str:
    _require_width("classification", raw, CLASSIFICATION_WIDTH)
    if raw.isspace():
        raise MalformedField("classification", raw, "blank")
    return raw


def format_classification(value: str) -> str:
    if (
        not isinstance(value, str)
        or len(value) != CLASSIFICATION_WIDTH
        or not value.isascii()
        or not value.isprintable()
        or value.isspace()
    ):
        raise ValueOutOfRange("classification", value, "expected one printable character")
    return value


def parse_international_designator(raw: str) -> InternationalDesignator:
    """Parse columns 10-17: ``YYNNNPPP`` with the piece left-justified."""

    _require_width("international designator", raw, DESIGNATOR_WIDTH)
    match = _DESIGNATOR_RE.fullmatch(raw)
    if match is None:
        raise MalformedField("international designator", raw, "expected YYNNNPPP")
    year, number, piece = match.groups()
    return InternationalDesignator(launch_year=int(year), launch_number=int(number), piece=piece)


def format_international_designator(value: InternationalDesignator) -> str:
    name = "international designator"
    if not 0 <= value.launch_year <= 99:
        raise ValueOutOfRange(name, value, "launch year must be 0-99")
    if not 0 <= value.launch_number <= 999:
        raise ValueOutOfRange(name, value, "launch number must be 0-999")
    if not _PIECE_RE.fullmatch(value.piece):
        raise ValueOutOfRange(name, value, "piece must be 1-3 uppercase letters")
    return f"{value.launch_year:02d}{value.launch_number:03d}{value.piece:<3}"


def parse_epoch_year(raw: str) -> int:
    """Return the four-digit year encoded in the 2-digit epoch year field."""

    _require_width("epoch year", raw, EPOCH_YEAR_WIDTH)
    if not _INTEGER_RE.fullmatch(raw):
        raise MalformedField("epoch year", raw, "expected two digits")
    return expand_year(int(raw))


def format_epoch_year(year: int) -> str:
    return f"{contract_year(year):02d}"


def parse_epoch_day(raw: str) -> float:
    return _parse_decimal("epoch day", raw, EPOCH_DAY_WIDTH, 0.0, MAX_DAY)


def format_epoch_day(value: float) -> str:
    return _format_fixed("epoch day", value, EPOCH_DAY_WIDTH, 8, 0.0, MAX_DAY, fill="0")


def parse_mean_motion_first_derivative(raw: str) -> float:
    name = "mean motion first derivative"
    value = _parse_decimal(name, raw, FIRST_DERIVATIVE_WIDTH, -1.0, 1.0, signed=True)
    if abs(value) >= 1.0:
        raise MalformedField(name, raw, "magnitude must be below 1")
    return value


def format_mean_motion_first_derivative(value: float) -> str:
    """Render ``" .DDDDDDDD"`` or ``"-.DDDDDDDD"``."""

    name = "mean motion first derivative"
    if not math.isfinite(value):
        raise ValueOutOfRange(name, value, "not a finite number")
    digits = f"{abs(value):.8f}"
    if not digits.startswith("0."):
        raise ValueOutOfRange(name, value, "magnitude must be below 1")
    digits = digits[1:]
    sign = "-" if value < 0 and digits != ".00000000" else " "
    return sign + digits


def parse_mean_motion_second_derivative(raw: str) -> float:
    return exponential.decode(raw, name="mean motion second derivative")


def format_mean_motion_second_derivative(value: float) -> str:
    return exponential.encode(
        value, zero=exponential.DERIVATIVE_ZERO, name="mean motion second derivative"
    )


def parse_drag_term(raw: str) -> float:
    return exponential.decode(raw, name="drag term")


def format_drag_term(value: float) -> str:
    return exponential.encode(value, zero=exponential.DRAG_ZERO, name="drag term")


def parse_ephemeris_type(raw: str) -> int:
    _require_width("ephemeris type", raw, EPHEMERIS_TYPE_WIDTH)
    if not _INTEGER_RE.fullmatch(raw):
        raise MalformedField("ephemeris type", raw, "expected a digit")
    return int(raw)


def format_ephemeris_type(value: int) -> str:
    return _format_int("ephemeris type", value, EPHEMERIS_TYPE_WIDTH, 0, 9)


def parse_element_set_number(raw: str) -> int:
    return _parse_int("element set number", raw, ELEMENT_SET_WIDTH, 0, 9999)


def format_element_set_number(value: int) -> str:
    return _format_int("element set number", value, ELEMENT_SET_WIDTH, 0, 9999)


# ------------------------------------------------------------------ line 2


def _parse_angle(name: str, raw: str, high: float) -> float:
    return _parse_decimal(name, raw, ANGLE_WIDTH, 0.0, high)


def _format_angle(name: str, value: float, high: float) -> str:
    return _format_fixed(name, value, ANGLE_WIDTH, 4, 0.0, high)


def parse_inclination(raw: str) -> float:
    return _parse_angle("inclination", raw, 180.0)


def format_inclination(value: float) -> str:
    return _format_angle("inclination", value, 180.0)


def parse_raan(raw: str) -> float:
    return _parse_angle("right ascension of the ascending node", raw, 360.0)


def format_raan(value: float) -> str:
    return _format_angle("right ascension of the ascending node", value, 360.0)


def parse_argument_of_perigee(raw: str) -> float:
    return _parse_angle("argument of perigee", raw, 360.0)


def format_argument_of_perigee(value: float) -> str:
    return _format_angle("argument of perigee", value, 360.0)


def parse_mean_anomaly(raw: str) -> float:
    return _parse_angle("mean anomaly", raw, 360.0)


def format_mean_anomaly(value: float) -> str:
    return _format_angle("mean anomaly", value, 360.0)


def parse_eccentricity(raw: str) -> float:
    """Decode seven digits with an implied leading ``0.``."""

    _require_width("eccentricity", raw, ECCENTRICITY_WIDTH)
    if not _INTEGER_RE.fullmatch(raw):
        raise MalformedField("eccentricity", raw, "expected seven digits")
    return float("0." + raw)


def format_eccentricity(value: float) -> str:
    if not math.isfinite(value) or not 0.0 <= value < 1.0:
        raise ValueOutOfRange("eccentricity", value, "expected 0 <= e < 1")
    text = f"{value:.7f}"
    if not text.startswith("0."):
        raise ValueOutOfRange("eccentricity", value, "rounds to 1")
    return text[2:]


def parse_mean_motion(raw: str) -> float:
    value = _parse_decimal("mean motion", raw, MEAN_MOTION_WIDTH, 0.0, 100.0)
    if value >= 100.0:
        raise MalformedField("mean motion", raw, "expected below 100")
    return value


def format_mean_motion(value: float) -> str:
    # Right-justified, so a leading zero of DD.DDDDDDDD comes out as a blank.
    if value >= 100.0:
        raise ValueOutOfRange("mean motion", value, "expected below 100")
    return _format_fixed("mean motion", value, MEAN_MOTION_WIDTH, 8, 0.0, 100.0)


def parse_revolutions(raw: str) -> int:
    return _parse_int("revolution number", raw, REVOLUTIONS_WIDTH, 0, 99999)


def format_revolutions(value: int) -> str:
    return _format_int("revolution number", value, REVOLUTIONS_WIDTH, 0, 99999)

"""Value objects produced and consumed by the line codec."""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass

from ..errors import MalformedField
from .epoch import contract_year, to_absolute_time

_DESIGNATOR_RE = re.compile(r"(\d{2})(\d{3})\s{0,2}([A-Z]{1,3})", re.ASCII)


@dataclass(frozen=True)
class InternationalDesignator:
    """COSPAR designator: launch year, launch number of the year and piece."""

    launch_year: int
    launch_number: int
    piece: str

    @classmethod
    def parse(cls, text: str) -> "InternationalDesignator":
        """Parse the compact ``"89016A"`` form (blanks before the piece allowed)."""

        match = _DESIGNATOR_RE.fullmatch(text.strip())
        if match is None:
            raise MalformedField("international designator", text, "expected YYNNNP[PP]")
        year, number, piece = match.groups()
        return cls(launch_year=int(year), launch_number=int(number), piece=piece)

    def __str__(self) -> str:
        return f"{self.launch_year:02d}{self.launch_number:03d}{self.piece}"


@dataclass(frozen=True)
class Line1Fields:
    """Typed contents of TLE line 1.

    ``epoch_year`` holds the four-digit year; ``checksum`` is the digit
    printed on the line, which may disagree with the line content.
    """

    satellite_number: int
    classification: str
    international_designator: InternationalDesignator
    epoch_year: int
    epoch_day: float
    mean_motion_first_derivative: float
    mean_motion_second_derivative: float
    drag_term: float
    ephemeris_type: int
    element_set_number: int
    checksum: int

    @property
    def epoch(self) -> dt.datetime:
        return to_absolute_time(contract_year(self.epoch_year), self.epoch_day)


@dataclass(frozen=True)
class Line2Fields:
    """Typed contents of TLE line 2. Angles are in degrees."""

    satellite_number: int
    inclination: float
    raan: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    revolutions: int
    checksum: int


__all__ = ["InternationalDesignator", "Line1Fields", "Line2Fields"]

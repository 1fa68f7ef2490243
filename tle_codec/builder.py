"""Staged construction of TLE records from typed values.

Each step object only exposes the next legal call, so required values are
supplied in order::

    record = (
        TleBuilder.new("ISS (ZARYA)")
        .satellite_number(25544)
        .international_designator("98067A")
        .epoch(24, 45.54896019)
        .orbital_elements(51.6412, 207.4925, 0.0004948, 290.5508, 178.9792, 15.49583488)
        .revolutions(43959)
        .drag_term(0.00030093)
        .build()
    )

Every step call returns a new step over a copy of the collected values, so a
partially built step can be reused as a template for several records.
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from .config import CodecConfig
from .core import fields
from .core.epoch import contract_year, expand_year, from_absolute_time, to_absolute_time
from .core.lines import format_line1, format_line2
from .core.types import InternationalDesignator, Line1Fields, Line2Fields
from .errors import InconsistentRecord, MalformedField
from .logging import get_logger
from .record import TleRecord, normalize_title, parse_record

logger = get_logger(__name__)

_SATELLITE_NUMBER_RE = re.compile(r"\d{1,5}", re.ASCII)

DEFAULT_CLASSIFICATION = "U"
DEFAULT_EPHEMERIS_TYPE = 0
DEFAULT_ELEMENT_SET_NUMBER = 999


@dataclass(frozen=True)
class _BuildState:
    title: Optional[str] = None
    satellite_number: int = 0
    international_designator: Optional[InternationalDesignator] = None
    epoch_year: int = 0
    epoch_day: float = 0.0
    inclination: float = 0.0
    raan: float = 0.0
    eccentricity: float = 0.0
    argument_of_perigee: float = 0.0
    mean_anomaly: float = 0.0
    mean_motion: float = 0.0
    revolutions: int = 0
    classification: str = DEFAULT_CLASSIFICATION
    mean_motion_first_derivative: float = 0.0
    mean_motion_second_derivative: float = 0.0
    drag_term: float = 0.0
    ephemeris_type: int = DEFAULT_EPHEMERIS_TYPE
    element_set_number: int = DEFAULT_ELEMENT_SET_NUMBER


class _Step:
    def __init__(self, state: _BuildState) -> None:
        self._state = state

    def _with(self, **changes: Any) -> _BuildState:
        return replace(self._state, **changes)


class TleBuilder:
    """Entry point of the staged builder."""

    @staticmethod
    def new(title: Optional[str] = None) -> "SatelliteNumberStep":
        return SatelliteNumberStep(_BuildState(title=normalize_title(title)))


class SatelliteNumberStep(_Step):
    def satellite_number(self, value: Union[int, str]) -> "InternationalDesignatorStep":
        """Set the catalog number, given as an int or a 1-5 digit string."""

        if isinstance(value, str):
            text = value.strip()
            if not _SATELLITE_NUMBER_RE.fullmatch(text):
                raise MalformedField("satellite number", value, "expected 1-5 digits")
            value = int(text)
        fields.format_satellite_number(value)
        return InternationalDesignatorStep(self._with(satellite_number=value))


class InternationalDesignatorStep(_Step):
    def international_designator(
        self, value: Union[str, InternationalDesignator]
    ) -> "EpochStep":
        """Set the designator, e.g. ``"89016A"``."""

        if isinstance(value, str):
            value = InternationalDesignator.parse(value)
        fields.format_international_designator(value)
        return EpochStep(self._with(international_designator=value))


class EpochStep(_Step):
    def epoch(self, year: int, day: float) -> "OrbitalElementsStep":
        """Set the epoch from a 2- or 4-digit year and a fractional day of year."""

        if 0 <= year <= 99:
            year = expand_year(year)
        fields.format_epoch_year(year)
        fields.format_epoch_day(day)
        to_absolute_time(contract_year(year), day)
        return OrbitalElementsStep(self._with(epoch_year=year, epoch_day=day))

    def epoch_at(self, instant: dt.datetime) -> "OrbitalElementsStep":
        """Set the epoch from a timezone-aware datetime."""

        two_digit_year, day = from_absolute_time(instant)
        return self.epoch(two_digit_year, day)


class OrbitalElementsStep(_Step):
    def orbital_elements(
        self,
        inclination: float,
        raan: float,
        eccentricity: float,
        argument_of_perigee: float,
        mean_anomaly: float,
        mean_motion: float,
    ) -> "RevolutionsStep":
        """Set the Keplerian elements (degrees, rev/day)."""

        fields.format_inclination(inclination)
        fields.format_raan(raan)
        fields.format_eccentricity(eccentricity)
        fields.format_argument_of_perigee(argument_of_perigee)
        fields.format_mean_anomaly(mean_anomaly)
        fields.format_mean_motion(mean_motion)
        state = self._with(
            inclination=inclination,
            raan=raan,
            eccentricity=eccentricity,
            argument_of_perigee=argument_of_perigee,
            mean_anomaly=mean_anomaly,
            mean_motion=mean_motion,
        )
        return RevolutionsStep(state)


class RevolutionsStep(_Step):
    def revolutions(self, value: int) -> "BuildStep":
        fields.format_revolutions(value)
        return BuildStep(self._with(revolutions=value))


class BuildStep(_Step):
    """Optional values followed by :meth:`build`."""

    def classification(self, value: str) -> "BuildStep":
        fields.format_classification(value)
        return BuildStep(self._with(classification=value))

    def mean_motion_first_derivative(self, value: float) -> "BuildStep":
        fields.format_mean_motion_first_derivative(value)
        return BuildStep(self._with(mean_motion_first_derivative=value))

    def mean_motion_second_derivative(self, value: float) -> "BuildStep":
        fields.format_mean_motion_second_derivative(value)
        return BuildStep(self._with(mean_motion_second_derivative=value))

    def drag_term(self, value: float) -> "BuildStep":
        fields.format_drag_term(value)
        return BuildStep(self._with(drag_term=value))

    def ephemeris_type(self, value: int) -> "BuildStep":
        fields.format_ephemeris_type(value)
        return BuildStep(self._with(ephemeris_type=value))

    def element_set_number(self, value: int) -> "BuildStep":
        fields.format_element_set_number(value)
        return BuildStep(self._with(element_set_number=value))

    def build(self) -> TleRecord:
        """Render both lines with fresh checksums and parse them back."""

        state = self._state
        if state.international_designator is None:
            raise InconsistentRecord("international designator was never set")
        line1 = format_line1(
            Line1Fields(
                satellite_number=state.satellite_number,
                classification=state.classification,
                international_designator=state.international_designator,
                epoch_year=state.epoch_year,
                epoch_day=state.epoch_day,
                mean_motion_first_derivative=state.mean_motion_first_derivative,
                mean_motion_second_derivative=state.mean_motion_second_derivative,
                drag_term=state.drag_term,
                ephemeris_type=state.ephemeris_type,
                element_set_number=state.element_set_number,
                checksum=0,
            )
        )
        line2 = format_line2(
            Line2Fields(
                satellite_number=state.satellite_number,
                inclination=state.inclination,
                raan=state.raan,
                eccentricity=state.eccentricity,
                argument_of_perigee=state.argument_of_perigee,
                mean_anomaly=state.mean_anomaly,
                mean_motion=state.mean_motion,
                revolutions=state.revolutions,
                checksum=0,
            )
        )
        record = parse_record(
            line1, line2, title=state.title, config=CodecConfig(strict_checksums=True)
        )
        logger.debug("builder.built", extra={"satellite_number": record.satellite_number})
        return record


__all__ = [
    "TleBuilder",
    "SatelliteNumberStep",
    "InternationalDesignatorStep",
    "EpochStep",
    "OrbitalElementsStep",
    "RevolutionsStep",
    "BuildStep",
]

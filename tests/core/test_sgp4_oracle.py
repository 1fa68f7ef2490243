"""Cross-check decoded fields against the sgp4 reference element reader."""

from __future__ import annotations

import math

import pytest
from sgp4.api import Satrec, jday

from tle_codec.core.lines import parse_line1, parse_line2

# Minutes per day over radians per revolution.
XPDOTP = 1440.0 / (2.0 * math.pi)

ELEMENT_SETS = [
    (
        "1 19822C 89016A   16330.54185827  .00020730 -54173-7  42980-3 0  9995",
        "2 19822  75.0338 162.9721 1946869 124.1907 255.9297 11.60242208885551",
    ),
    (
        "1 20580S 90037B   70331.22271991  .00000809  00000-0  39233-4 1 99992",
        "2 20580  28.4701 268.4992 0002921 147.0303  79.7254 15.08603912259602",
    ),
    (
        "1  2359U 63014J   17206.36072750 -.00000913  00000-0 -33763+0 0  9995",
        "2  2359  87.1923 343.7678 0637449  64.2561 302.2681  8.68874989632466",
    ),
]


@pytest.mark.parametrize("line1, line2", ELEMENT_SETS)
def test_fields_agree_with_sgp4(line1: str, line2: str) -> None:
    sat = Satrec.twoline2rv(line1, line2)
    first = parse_line1(line1, verify_checksum=True)
    second = parse_line2(line2, verify_checksum=True)

    assert first.satellite_number == sat.satnum
    assert first.epoch_year % 100 == sat.epochyr
    assert first.epoch_day == pytest.approx(sat.epochdays, abs=1e-12)
    assert first.mean_motion_first_derivative == pytest.approx(
        sat.ndot * XPDOTP * 1440.0, rel=1e-9, abs=1e-15
    )
    assert first.mean_motion_second_derivative == pytest.approx(
        sat.nddot * XPDOTP * 1440.0 * 1440.0, rel=1e-9, abs=1e-15
    )
    assert first.drag_term == pytest.approx(sat.bstar, rel=1e-12, abs=1e-15)
    assert first.element_set_number == sat.elnum

    assert second.eccentricity == pytest.approx(sat.ecco, rel=1e-12)
    assert second.inclination == pytest.approx(math.degrees(sat.inclo), rel=1e-9)
    assert second.raan == pytest.approx(math.degrees(sat.nodeo), rel=1e-9)
    assert second.argument_of_perigee == pytest.approx(math.degrees(sat.argpo), rel=1e-9)
    assert second.mean_anomaly == pytest.approx(math.degrees(sat.mo), rel=1e-9)
    assert second.mean_motion == pytest.approx(sat.no_kozai * XPDOTP, rel=1e-9)
    assert second.revolutions == sat.revnum


@pytest.mark.parametrize("line1, line2", ELEMENT_SETS)
def test_epoch_agrees_with_sgp4(line1: str, line2: str) -> None:
    sat = Satrec.twoline2rv(line1, line2)
    epoch = parse_line1(line1).epoch
    jd, fr = jday(
        epoch.year,
        epoch.month,
        epoch.day,
        epoch.hour,
        epoch.minute,
        epoch.second + epoch.microsecond / 1e6,
    )
    assert (jd + fr) == pytest.approx(sat.jdsatepoch + sat.jdsatepochF, abs=1e-8)

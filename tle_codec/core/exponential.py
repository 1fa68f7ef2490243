"""Compressed scientific notation used by the drag and second-derivative fields.

The 8-character field ``[sign][mantissa x5][exponent sign][exponent]`` stands
for ``sign * 0.mantissa * 10 ** exponent``; ``" 21821-4"`` is ``0.21821e-4``.
"""

from __future__ import annotations

import math
import re

from ..errors import InvalidLength, MalformedField, MantissaOverflow, ValueOutOfRange

FIELD_WIDTH = 8
DRAG_ZERO = " 00000+0"
DERIVATIVE_ZERO = " 00000-0"

_FIELD_RE = re.compile(r"([ +-])(\d{5})([+-])(\d)", re.ASCII)


def decode(field: str, name: str = "exponential value") -> float:
    """Decode an 8-character exponential field into a float."""

    if len(field) != FIELD_WIDTH:
        raise InvalidLength(name, FIELD_WIDTH, len(field))
    match = _FIELD_RE.fullmatch(field)
    if match is None:
        raise MalformedField(name, field, "expected [sign]DDDDD[+-]D")
    sign, mantissa, exp_sign, exponent = match.groups()
    if int(mantissa) == 0:
        return 0.0
    return float(f"{'-' if sign == '-' else ''}0.{mantissa}e{exp_sign}{exponent}")


def encode(value: float, zero: str = DRAG_ZERO, name: str = "exponential value") -> str:
    """Encode ``value`` with five significant digits.

    ``zero`` is the literal emitted for an exact zero; the drag term
    conventionally uses :data:`DRAG_ZERO` and the second derivative of mean
    motion :data:`DERIVATIVE_ZERO`.
    """

    if zero not in (DRAG_ZERO, DERIVATIVE_ZERO):
        raise ValueError(f"unsupported zero literal: {zero!r}")
    if not math.isfinite(value):
        raise ValueOutOfRange(name, value, "not a finite number")
    if value == 0:
        return zero

    # "d.dddde[+-]XX" rounds to five significant digits, carrying into the
    # exponent when the mantissa rounds up to 10.
    digits, _, exponent = f"{abs(value):.4e}".partition("e")
    power = int(exponent) + 1
    if not -9 <= power <= 9:
        raise MantissaOverflow(name, value, "exponent does not fit in one digit")
    sign = "-" if value < 0 else " "
    exp_sign = "-" if power < 0 else "+"
    return f"{sign}{digits.replace('.', '')}{exp_sign}{abs(power)}"


__all__ = ["FIELD_WIDTH", "DRAG_ZERO", "DERIVATIVE_ZERO", "decode", "encode"]

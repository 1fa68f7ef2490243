"""Column-level codec for NORAD two-line element sets."""

from . import checksum, epoch, exponential, fields
from .lines import format_line1, format_line2, parse_line1, parse_line2
from .types import InternationalDesignator, Line1Fields, Line2Fields

__all__ = [
    "checksum",
    "epoch",
    "exponential",
    "fields",
    "parse_line1",
    "parse_line2",
    "format_line1",
    "format_line2",
    "InternationalDesignator",
    "Line1Fields",
    "Line2Fields",
]

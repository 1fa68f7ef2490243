"""Encode and decode NORAD Two-Line Element sets.

The :mod:`tle_codec.core` package holds the column-exact codec (checksums,
compressed exponential fields, per-field parse/format pairs, epoch conversion
and whole-line parsing). :class:`TleRecord` and :class:`TleBuilder` are the
record-level API built on top of it.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .builder import TleBuilder
from .config import CodecConfig, load_config
from .core import (
    InternationalDesignator,
    Line1Fields,
    Line2Fields,
    format_line1,
    format_line2,
    parse_line1,
    parse_line2,
)
from .errors import (
    ChecksumMismatch,
    InconsistentRecord,
    InvalidLength,
    MalformedField,
    MalformedLine,
    MantissaOverflow,
    TleError,
    ValueOutOfRange,
)
from .logging import configure_logging, get_logger, log_context
from .record import TleRecord, iter_records, parse_record, parse_records, parse_text

__all__ = [
    "__version__",
    "TleBuilder",
    "TleRecord",
    "parse_record",
    "parse_text",
    "parse_records",
    "iter_records",
    "parse_line1",
    "parse_line2",
    "format_line1",
    "format_line2",
    "InternationalDesignator",
    "Line1Fields",
    "Line2Fields",
    "CodecConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "log_context",
    "TleError",
    "InvalidLength",
    "MalformedField",
    "MalformedLine",
    "ValueOutOfRange",
    "MantissaOverflow",
    "InconsistentRecord",
    "ChecksumMismatch",
]

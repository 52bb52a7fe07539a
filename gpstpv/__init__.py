"""Fixed-point NMEA 0183 decoding into Time-Position-Velocity records."""

from gpstpv.gnss import NMEAReader
from gpstpv.nmea import (
    INVALID_VALUE,
    LAT_LON_FACTOR,
    NULL_TIME,
    TPV,
    VALUE_FACTOR,
    DecodeError,
    Mode,
    Result,
    SentenceType,
    Timestamp,
    calculate_checksum,
    decode,
    decode_or_raise,
    encode,
    error_string,
)

__all__ = [
    "INVALID_VALUE",
    "LAT_LON_FACTOR",
    "NULL_TIME",
    "TPV",
    "VALUE_FACTOR",
    "DecodeError",
    "Mode",
    "NMEAReader",
    "Result",
    "SentenceType",
    "Timestamp",
    "calculate_checksum",
    "decode",
    "decode_or_raise",
    "encode",
    "error_string",
]

"""NMEA 0183 codec for GGA, GLL, GSA, RMC, VTG and ZDA sentences."""

from gpstpv.nmea.checksum import calculate_checksum
from gpstpv.nmea.decoder import DecodeError, decode, decode_or_raise, error_string
from gpstpv.nmea.encoder import encode
from gpstpv.nmea.sentences import SentenceType
from gpstpv.nmea.types import (
    INVALID_VALUE,
    LAT_LON_FACTOR,
    NULL_TIME,
    TPV,
    VALUE_FACTOR,
    Mode,
    Result,
    Timestamp,
)

__all__ = [
    "INVALID_VALUE",
    "LAT_LON_FACTOR",
    "NULL_TIME",
    "TPV",
    "VALUE_FACTOR",
    "DecodeError",
    "Mode",
    "Result",
    "SentenceType",
    "Timestamp",
    "calculate_checksum",
    "decode",
    "decode_or_raise",
    "encode",
    "error_string",
]

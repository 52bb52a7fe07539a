"""RMC sentence extractor.

RMC (Recommended Minimum Specific GNSS Data) is the only sentence besides
ZDA that carries a date, and the only one that reports position, speed and
track together.

RMC Sentence Format:
    $GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62
           |      | |       | |        | |     |     |      |
           |      | |       | |        | |     |     |      +-- Magnetic variation (ignored)
           |      | |       | |        | |     |     +-- Date (DDMMYY)
           |      | |       | |        | |     +-- Track, true north (degrees)
           |      | |       | |        | +-- Speed over ground (knots)
           |      | |       | +--------+-- Longitude + E/W
           |      | +-------+-- Latitude + N/S
           |      +-- Status (A=valid, V=invalid)
           +-- UTC time

Nothing is written unless the status is "A". The speed is always knots and
the track always true north, so the units are fixed rather than read from
the sentence.
"""

from gpstpv.nmea.fields import (
    is_status_valid,
    parse_angular_distance,
    parse_speed,
    parse_track,
)
from gpstpv.nmea.timestamp import parse_date, parse_time
from gpstpv.nmea.types import TPV

MINIMUM_TOKEN_COUNT = 9


def extract_rmc(tpv: TPV, tokens: list[str]) -> None:
    """Write time, position, track, speed and date from a valid RMC sentence."""
    if not is_status_valid(tokens[1][:1]):
        return
    parse_time(tpv.time, tokens[0])
    tpv.latitude = parse_angular_distance(tokens[2], tokens[3][:1])
    tpv.longitude = parse_angular_distance(tokens[4], tokens[5][:1])
    tpv.track = parse_track(tokens[7], "T")
    tpv.speed = parse_speed(tokens[6], "N")
    parse_date(tpv.time, tokens[8])

"""GLL sentence extractor.

GLL (Geographic Position - Latitude/Longitude) reports a position and the
UTC time it was computed.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,*1D
           |       | |        | |      |
           |       | |        | |      +-- Status (A=valid, V=invalid)
           |       | |        | +-- UTC time
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S

Nothing is written unless the status is "A".
"""

from gpstpv.nmea.fields import is_status_valid, parse_angular_distance
from gpstpv.nmea.timestamp import parse_time
from gpstpv.nmea.types import TPV

MINIMUM_TOKEN_COUNT = 6


def extract_gll(tpv: TPV, tokens: list[str]) -> None:
    """Write latitude, longitude and time from a valid GLL sentence."""
    if not is_status_valid(tokens[5][:1]):
        return
    tpv.latitude = parse_angular_distance(tokens[0], tokens[1][:1])
    tpv.longitude = parse_angular_distance(tokens[2], tokens[3][:1])
    parse_time(tpv.time, tokens[4])

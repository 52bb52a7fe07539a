"""GGA sentence extractor.

GGA (Global Positioning System Fix Data) provides the position fix: time,
coordinates and altitude. The fix quality, satellite count and dilution
fields are not part of the TPV record and are skipped.

GGA Sentence Format:
    $GPGGA,172814.0,3723.46587704,N,12202.26957864,W,2,6,1.2,18.893,M,-25.669,M,2.0,0031*4F
           |        |             | |              | | | |   |      | |       | |   |
           |        |             | |              | | | |   |      | |       | |   +-- DGPS station ID
           |        |             | |              | | | |   |      | |       | +-- DGPS age
           |        |             | |              | | | |   |      | +-------+-- Geoid separation
           |        |             | |              | | | |   +------+-- Altitude above MSL (token 8/9)
           |        |             | |              | | | +-- HDOP
           |        |             | |              | | +-- Number of satellites
           |        |             | |              | +-- Fix quality
           |        |             | +--------------+-- Longitude + E/W (token 3/4)
           |        +-------------+-- Latitude + N/S (token 1/2)
           +-- UTC time (token 0)

GGA carries no validity gate: every field is applied, and fields that fail
to parse become None.
"""

from gpstpv.nmea.fields import parse_altitude, parse_angular_distance
from gpstpv.nmea.timestamp import parse_time
from gpstpv.nmea.types import TPV

# Highest token index read is the altitude unit at 9
MINIMUM_TOKEN_COUNT = 10


def extract_gga(tpv: TPV, tokens: list[str]) -> None:
    """Write time, latitude, longitude and altitude from GGA tokens."""
    parse_time(tpv.time, tokens[0])
    tpv.latitude = parse_angular_distance(tokens[1], tokens[2][:1])
    tpv.longitude = parse_angular_distance(tokens[3], tokens[4][:1])
    tpv.altitude = parse_altitude(tokens[8], tokens[9][:1])

"""VTG sentence extractor.

VTG (Track Made Good and Ground Speed) provides velocity information from
GNSS: the heading relative to true north and the ground speed.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (ignored)
           |     | |     | |     | +-----+-- Speed in km/h (token 6/7)
           |     | |     | +-----+-- Speed in knots (ignored)
           |     | +-----+-- Track (magnetic north, ignored)
           +-----+-- Track (true north, token 0/1)

The speed is taken from the km/h pair and converted to m/s. When stationary
the track field is usually empty, which leaves the track None.
"""

from gpstpv.nmea.fields import parse_speed, parse_track
from gpstpv.nmea.types import TPV

MINIMUM_TOKEN_COUNT = 8


def extract_vtg(tpv: TPV, tokens: list[str]) -> None:
    """Write track and speed from VTG tokens."""
    tpv.track = parse_track(tokens[0], tokens[1][:1])
    tpv.speed = parse_speed(tokens[6], tokens[7][:1])

"""ZDA sentence extractor.

ZDA (Time and Date) reports UTC time with a full four-digit year.

ZDA Sentence Format:
    $GPZDA,201530.00,04,07,2002,00,00*60
           |         |  |  |    |  |
           |         |  |  |    +--+-- Local zone hours/minutes (ignored)
           |         |  |  +-- Year
           |         |  +-- Month
           |         +-- Day
           +-- UTC time
"""

from gpstpv.nmea.timestamp import parse_extended_date, parse_time
from gpstpv.nmea.types import TPV

MINIMUM_TOKEN_COUNT = 4


def extract_zda(tpv: TPV, tokens: list[str]) -> None:
    """Write time and date from ZDA tokens."""
    parse_time(tpv.time, tokens[0])
    parse_extended_date(tpv.time, tokens[1], tokens[2], tokens[3])

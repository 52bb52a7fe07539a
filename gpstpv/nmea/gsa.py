"""GSA sentence extractor.

GSA (GNSS DOP and Active Satellites) is only used for its fix type; the
satellite PRNs and dilution values are not part of the TPV record.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | |
           | +-- Fix type (1=no fix, 2=2D, 3=3D)
           +-- Selection mode (M=manual, A=automatic)
"""

from gpstpv.nmea.fields import parse_mode
from gpstpv.nmea.types import TPV

MINIMUM_TOKEN_COUNT = 2


def extract_gsa(tpv: TPV, tokens: list[str]) -> None:
    """Write the fix mode from GSA tokens."""
    tpv.mode = parse_mode(tokens[1][:1])

"""NMEA data types for decoded sentences.

This module defines the Time-Position-Velocity (TPV) record that every
decoded sentence writes into, together with the fix mode and result code
enumerations and the scale factors callers need to interpret the values.

Design Decisions:
    1. Scaled integers, no floats: latitude and longitude are degrees times
       ``LAT_LON_FACTOR`` (10^6); altitude, track and speed are meters,
       degrees and meters per second times ``VALUE_FACTOR`` (10^3). Dividing
       by the factor recovers the decimal value without rounding surprises.

    2. Optional fields (int | None): a field that has never been decoded, or
       whose last decode failed, is ``None``. ``INVALID_VALUE`` is kept only
       for callers that need a fixed-width wire sentinel.

    3. Timestamp as fixed-width digit strings: NMEA splits date and time
       across sentences, and a malformed field stops writing at the first bad
       digit. Storing each component as its digit string lets a partial
       update persist exactly, and the ISO 8601 text is formatted once on
       demand.
"""

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

__all__ = [
    "INVALID_VALUE",
    "LAT_LON_FACTOR",
    "NULL_TIME",
    "VALUE_FACTOR",
    "Mode",
    "Result",
    "TPV",
    "Timestamp",
]

# Scale factor for altitude, track and speed
VALUE_FACTOR = 1000

# Scale factor for latitude and longitude
LAT_LON_FACTOR = 1_000_000

# Largest signed 32-bit value, never produced by a legitimate scaled field
INVALID_VALUE = 0x7FFFFFFF

NULL_TIME = "0000-00-00T00:00:00.000Z"


class Mode(IntEnum):
    """NMEA fix mode as reported by GSA.

    UNKNOWN means no sentence carrying fix information has been decoded yet,
    or the last one carried an unrecognised mode character.
    """

    UNKNOWN = 0
    NO_FIX = 1
    FIX_2D = 2
    FIX_3D = 3


class Result(IntEnum):
    """Outcome of a decode call.

    Only framing problems are reported here. Malformed field values never
    produce an error; they leave the affected field ``None`` instead.
    """

    OK = 0
    ERROR_HEADER = 1
    ERROR_FOOTER = 2
    ERROR_CHECKSUM = 3
    ERROR_TRUNCATED = 4
    ERROR_UNSUPPORTED = 5


@dataclass
class Timestamp:
    """UTC date and time assembled from NMEA time and date fields.

    Each component is a fixed-width string of ASCII digits. The all-zero
    value is the initial state, before any time or date field was decoded.

    Attributes:
        year: Four digits. RMC dates always produce "20YY"; ZDA copies the
            reported year digits verbatim.
        month: Two digits, 00 until a date has been decoded.
        day: Two digits, 00 until a date has been decoded.
        hour: Two digits.
        minute: Two digits.
        second: Two digits.
        millisecond: Three digits; sentences without a fractional second
            write "000".

    Example:
        >>> ts = Timestamp(hour="17", minute="28", second="14")
        >>> str(ts)
        '0000-00-00T17:28:14.000Z'
    """

    year: str = "0000"
    month: str = "00"
    day: str = "00"
    hour: str = "00"
    minute: str = "00"
    second: str = "00"
    millisecond: str = "000"

    def isoformat(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
        return (
            f"{self.year}-{self.month}-{self.day}"
            f"T{self.hour}:{self.minute}:{self.second}.{self.millisecond}Z"
        )

    def __str__(self) -> str:
        return self.isoformat()

    def to_datetime(self) -> datetime | None:
        """Convert to an aware UTC ``datetime``.

        Returns:
            The corresponding datetime, or None if the components do not form
            a valid calendar date and time (e.g. the all-zero initial value,
            or a time-only timestamp whose date was never decoded).
        """
        try:
            return datetime(
                int(self.year),
                int(self.month),
                int(self.day),
                int(self.hour),
                int(self.minute),
                int(self.second),
                int(self.millisecond) * 1000,
                tzinfo=timezone.utc,
            )
        except ValueError:
            return None


@dataclass
class TPV:
    """Time-Position-Velocity record holding the best-known fix state.

    A freshly constructed record is in the initialised state. Each successful
    decode mutates only the fields its sentence type carries; everything else
    keeps the value from earlier sentences.

    Attributes:
        mode: Fix mode from the last GSA sentence.
        altitude: Altitude above mean sea level, meters times 10^3.
        latitude: Latitude in degrees times 10^6, positive=North.
        longitude: Longitude in degrees times 10^6, positive=East.
        track: Course over ground, degrees from true north times 10^3.
        speed: Speed over ground, meters per second times 10^3.
        time: UTC timestamp, see ``Timestamp``.
        talker_id: Two-character source identifier of the last decoded
            sentence (e.g. "GP"), empty until the first successful decode.

    Example:
        >>> tpv = TPV()
        >>> decode(tpv, "$GPGGA,172814.0,3723.46587704,N,...*4F\\r\\n")
        <Result.OK: 0>
        >>> tpv.latitude / LAT_LON_FACTOR
        37.391097
    """

    mode: Mode = Mode.UNKNOWN
    altitude: int | None = None
    latitude: int | None = None
    longitude: int | None = None
    track: int | None = None
    speed: int | None = None
    time: Timestamp = field(default_factory=Timestamp)
    talker_id: str = ""

    def reset(self) -> None:
        """Restore the initialised state in place."""
        self.mode = Mode.UNKNOWN
        self.altitude = None
        self.latitude = None
        self.longitude = None
        self.track = None
        self.speed = None
        self.time = Timestamp()
        self.talker_id = ""

    def copy(self) -> "TPV":
        """Return an independent snapshot of this record."""
        return replace(self, time=replace(self.time))

    def as_dict(self) -> dict[str, Any]:
        """Return the record as plain values suitable for JSON."""
        data = asdict(self)
        data["mode"] = self.mode.name
        data["time"] = self.time.isoformat()
        return data

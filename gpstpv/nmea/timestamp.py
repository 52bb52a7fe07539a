"""Reconstruction of ISO 8601 timestamps from NMEA time and date fields.

NMEA carries time of day (``HHMMSS.sss``) and date (``DDMMYY``, or separate
day, month and four-digit year fields in ZDA) in different fields and often
in different sentences. These helpers merge whichever part a sentence
carries into a ``Timestamp``, leaving the other part untouched.

Digits are validated left to right against per-position ranges. Every digit
that passes is written; the first digit that fails stops the update, so a
malformed field leaves the remaining components at their previous values.
"""

from gpstpv.nmea.types import Timestamp

__all__ = ["parse_date", "parse_extended_date", "parse_time"]

# Allowed (low, high) digit per position
_TIME_PATTERN = (("0", "2"), ("0", "9"), ("0", "5"), ("0", "9"), ("0", "5"), ("0", "9"))
_DATE_PATTERN = (("0", "3"), ("0", "9"), ("0", "1"), ("0", "9"), ("0", "9"), ("0", "9"))
_DAY_PATTERN = _DATE_PATTERN[0:2]
_MONTH_PATTERN = _DATE_PATTERN[2:4]

_MILLISECOND_DIGITS = 3
_YEAR_DIGITS = 4

# RMC reports a two-digit year; dates before 2000 are not representable
_CENTURY = "20"


def _match_digits(value: str, pattern: tuple[tuple[str, str], ...]) -> str:
    """Return the longest prefix of ``value`` whose digits fit ``pattern``."""
    matched = 0
    for character, (low, high) in zip(value, pattern):
        if not low <= character <= high:
            break
        matched += 1
    return value[:matched]


def _leading_digits(value: str, limit: int) -> str:
    return _match_digits(value, (("0", "9"),) * limit)


def _overwrite(current: str, digits: str, offset: int = 0) -> str:
    """Overwrite ``current`` with ``digits`` starting at ``offset``."""
    digits = digits[: len(current) - offset]
    return current[:offset] + digits + current[offset + len(digits) :]


def parse_time(timestamp: Timestamp, value: str) -> None:
    """Merge an NMEA ``HHMMSS(.sss)?`` time field into ``timestamp``.

    Hours must match ``[0-2][0-9]`` and minutes and seconds ``[0-5][0-9]``.
    When all six digits are valid, up to three digits after an optional
    decimal point overwrite the leading millisecond digits; with no decimal
    point the milliseconds become "000".

    Example:
        >>> ts = Timestamp()
        >>> parse_time(ts, "172814.0")
        >>> str(ts)
        '0000-00-00T17:28:14.000Z'
    """
    digits = _match_digits(value, _TIME_PATTERN)
    timestamp.hour = _overwrite(timestamp.hour, digits[0:2])
    timestamp.minute = _overwrite(timestamp.minute, digits[2:4])
    timestamp.second = _overwrite(timestamp.second, digits[4:6])
    if len(digits) < len(_TIME_PATTERN):
        return

    rest = value[len(_TIME_PATTERN) :]
    if rest.startswith("."):
        fraction = _leading_digits(rest[1:], _MILLISECOND_DIGITS)
        timestamp.millisecond = _overwrite(timestamp.millisecond, fraction)
    else:
        timestamp.millisecond = "0" * _MILLISECOND_DIGITS


def parse_date(timestamp: Timestamp, value: str) -> None:
    """Merge an NMEA ``DDMMYY`` date field into ``timestamp``.

    The two-digit year is placed in the last two year positions; the
    century "20" is written only once all six digits have been validated.

    Example:
        >>> ts = Timestamp()
        >>> parse_date(ts, "230394")
        >>> str(ts)
        '2094-03-23T00:00:00.000Z'
    """
    digits = _match_digits(value, _DATE_PATTERN)
    timestamp.day = _overwrite(timestamp.day, digits[0:2])
    timestamp.month = _overwrite(timestamp.month, digits[2:4])
    timestamp.year = _overwrite(timestamp.year, digits[4:6], offset=2)
    if len(digits) == len(_DATE_PATTERN):
        timestamp.year = _overwrite(timestamp.year, _CENTURY)


def parse_extended_date(
    timestamp: Timestamp, day: str, month: str, year: str
) -> None:
    """Merge ZDA's separate day, month and year fields into ``timestamp``.

    Day and month are validated like ``parse_date``. Once both are complete,
    the leading digits of ``year`` (at most four) are copied as-is with no
    range check.
    """
    day_digits = _match_digits(day, _DAY_PATTERN)
    timestamp.day = _overwrite(timestamp.day, day_digits)
    if len(day_digits) < len(_DAY_PATTERN):
        return

    month_digits = _match_digits(month, _MONTH_PATTERN)
    timestamp.month = _overwrite(timestamp.month, month_digits)
    if len(month_digits) < len(_MONTH_PATTERN):
        return

    timestamp.year = _overwrite(timestamp.year, _leading_digits(year, _YEAR_DIGITS))

"""NMEA field parsing utilities.

This module provides the fixed-point scanners used by the sentence
extractors. Every scanner reads an ASCII digit run directly into a scaled
integer, so no floating point is ever involved. Fields that are empty or do
not match the expected grammar return None, allowing callers to distinguish
"no data" from "zero value".
"""

from gpstpv.nmea.types import LAT_LON_FACTOR, VALUE_FACTOR, Mode

__all__ = [
    "is_status_valid",
    "parse_altitude",
    "parse_angular_distance",
    "parse_mode",
    "parse_number",
    "parse_speed",
    "parse_track",
]

# Maximum number of fractional digits kept by each scanner
_NUMBER_FRACTION_DIGITS = 3
_ARC_MINUTE_FRACTION_DIGITS = 6

# Hemisphere indicator -> (sign, number of whole-degree digits)
_DIRECTIONS: dict[str, tuple[int, int]] = {
    "N": (1, 2),
    "S": (-1, 2),
    "E": (1, 3),
    "W": (-1, 3),
}

_MODES: dict[str, Mode] = {
    "1": Mode.NO_FIX,
    "2": Mode.FIX_2D,
    "3": Mode.FIX_3D,
}


def _is_digit(character: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    return "0" <= character <= "9"


def _truncating_divide(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, as fixed-width integer code does."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def _scan_fraction(
    value: str, position: int, factor: int, limit: int
) -> tuple[int, int, int]:
    """Accumulate up to ``limit`` fractional digits starting at ``position``.

    Returns:
        Tuple of (digits as an integer, remaining factor, digit count)
    """
    digits = 0
    count = 0
    while count < limit and position + count < len(value):
        character = value[position + count]
        if not _is_digit(character):
            break
        digits = digits * 10 + int(character)
        factor //= 10
        count += 1
    return digits, factor, count


def parse_number(value: str) -> int | None:
    """Parse a decimal field into an integer scaled by ``VALUE_FACTOR``.

    The accepted grammar is ``-?[0-9]+(\\.[0-9]{1,3})?``. Digits beyond the
    third fractional place are ignored, as is anything following the matched
    number.

    Args:
        value: String value from an NMEA field

    Returns:
        The value times 1000, or None if the field is empty or does not start
        with a digit (after an optional minus sign)

    Example:
        >>> parse_number("545.4")
        545400
        >>> parse_number("-25.669")
        -25669
        >>> parse_number("")  # empty field
        None
    """
    sign = 1
    position = 0
    if value.startswith("-"):
        sign = -1
        position = 1

    start = position
    number = 0
    while position < len(value) and _is_digit(value[position]):
        number = number * 10 + int(value[position])
        position += 1
    if position == start:
        return None

    factor = VALUE_FACTOR
    if value[position : position + 1] == ".":
        fraction, factor, count = _scan_fraction(
            value, position + 1, factor, _NUMBER_FRACTION_DIGITS
        )
        number = number * 10**count + fraction

    return number * factor * sign


def parse_angular_distance(value: str, direction: str) -> int | None:
    """Convert an NMEA coordinate to degrees scaled by ``LAT_LON_FACTOR``.

    NMEA uses degrees-minutes format with a hemisphere indicator:
    ``DDMM.mmmmmm`` for latitude (N/S) and ``DDDMM.mmmmmm`` for longitude
    (E/W). The whole-degree width is fixed by the direction, exactly two
    minute digits and a decimal point must follow, then one to six
    fractional minute digits.

    The conversion is ``degrees * 10^6 + (minutes * 10^6) // 60``. The
    division by 60 truncates, so the result can be up to one micro-degree
    below the exact value.

    Args:
        value: Coordinate field (e.g., "4807.038")
        direction: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Scaled degrees (positive for N/E, negative for S/W), or None if the
        direction is unknown or the field does not match the grammar

    Example:
        >>> parse_angular_distance("4807.038", "N")
        48117300
        >>> parse_angular_distance("12202.26957864", "W")
        -122037826
    """
    if direction not in _DIRECTIONS:
        return None
    sign, degree_digits = _DIRECTIONS[direction]

    whole = value[: degree_digits + 2]
    if len(whole) != degree_digits + 2 or not all(_is_digit(c) for c in whole):
        return None
    if value[degree_digits + 2 : degree_digits + 3] != ".":
        return None

    degrees = int(whole[:degree_digits]) * LAT_LON_FACTOR
    minutes = int(whole[degree_digits:])

    fraction, factor, count = _scan_fraction(
        value, degree_digits + 3, LAT_LON_FACTOR, _ARC_MINUTE_FRACTION_DIGITS
    )
    if count == 0:
        return None
    minutes = (minutes * 10**count + fraction) * factor

    return (degrees + minutes // 60) * sign


def parse_altitude(value: str, unit: str) -> int | None:
    """Parse an altitude field; the unit must be meters ("M")."""
    if unit != "M":
        return None
    return parse_number(value)


def parse_track(value: str, kind: str) -> int | None:
    """Parse a course field; only true-north tracks ("T") are accepted."""
    if kind != "T":
        return None
    return parse_number(value)


def parse_speed(value: str, unit: str) -> int | None:
    """Parse a speed field and convert it to meters per second.

    The conversions are integer approximations of the SI factors:
    km/h uses ``* 10 / 36`` and knots use ``* 1000 / 1944``, both truncated
    toward zero.

    Args:
        value: Speed field
        unit: "K" for km/h or "N" for knots

    Returns:
        Speed in m/s times 1000, or None for an unknown unit or an
        unparseable number

    Example:
        >>> parse_speed("010.2", "K")
        2833
        >>> parse_speed("005.5", "N")
        2829
    """
    if unit == "K":
        multiplier, divisor = 10, 36
    elif unit == "N":
        multiplier, divisor = 1000, 1944
    else:
        return None

    speed = parse_number(value)
    if speed is None:
        return None
    return _truncating_divide(speed * multiplier, divisor)


def parse_mode(value: str) -> Mode:
    """Map a GSA fix type character to a ``Mode``; anything else is UNKNOWN."""
    return _MODES.get(value, Mode.UNKNOWN)


def is_status_valid(value: str) -> bool:
    """Return True for the "A" (active) data status used by GLL and RMC."""
    return value == "A"

"""NMEA checksum helpers.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,172814.0,3723.46587704,N,12202.26957864,W,2,6,1.2,18.893,M,-25.669,M,2.0,0031*4F
    ^                         checksum content                                            ^^
    start                                                              checksum (0x4F = 79)
"""

__all__ = ["calculate_checksum", "format_hex_byte", "parse_hex_byte"]

_HEX_DIGITS = "0123456789ABCDEF"


def calculate_checksum(content: str, initial: int = 0) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content. This is a simple error-detection mechanism that can
    detect single-bit errors and some multi-bit errors.

    Args:
        content: The string between '$' and '*' (exclusive)
        initial: Running checksum to continue from

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("PMTK251,38400")
        39
    """
    result = initial
    for character in content:
        result ^= ord(character)
    return result & 0xFF


def _hex_nibble(character: str) -> int:
    # Unrecognised characters decode to 0, so a garbled checksum still
    # reaches the comparison and fails there.
    if "0" <= character <= "9":
        return ord(character) - ord("0")
    if "A" <= character <= "F":
        return ord(character) - ord("A") + 10
    if "a" <= character <= "f":
        return ord(character) - ord("a") + 10
    return 0


def parse_hex_byte(high: str, low: str) -> int:
    """Decode two hexadecimal characters into a byte value.

    Both upper and lower case digits are accepted. Any other character,
    including an empty string for a missing digit, decodes as 0.

    Example:
        >>> parse_hex_byte("4", "F")
        79
        >>> parse_hex_byte("Z", "1")
        1
    """
    return (_hex_nibble(high) << 4) | _hex_nibble(low)


def format_hex_byte(value: int) -> str:
    """Format a byte value as two uppercase hexadecimal digits."""
    return _HEX_DIGITS[(value & 0xF0) >> 4] + _HEX_DIGITS[value & 0x0F]

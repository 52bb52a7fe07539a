"""NMEA sentence framing.

The encoder does not build sentences field by field. The caller supplies
the comma separated body (talker and sentence ID included) and gets back a
complete sentence with header, checksum and CRLF footer.
"""

from gpstpv.nmea.checksum import calculate_checksum, format_hex_byte

__all__ = ["encode"]

HEADER = "$"
CHECKSUM_DELIMITER = "*"
FOOTER = "\r\n"


def encode(message: str) -> str:
    """Wrap a sentence body with header, checksum and footer.

    The body is not validated. The result is always six characters longer
    than ``message``.

    Args:
        message: Comma separated fields without '$', checksum or CRLF

    Returns:
        The framed sentence

    Example:
        >>> encode("PMTK251,38400")
        '$PMTK251,38400*27\\r\\n'
        >>> encode("")
        '$*00\\r\\n'
    """
    checksum = format_hex_byte(calculate_checksum(message))
    return f"{HEADER}{message}{CHECKSUM_DELIMITER}{checksum}{FOOTER}"

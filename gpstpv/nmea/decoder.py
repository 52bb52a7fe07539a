"""NMEA sentence decoder.

``decode`` validates the framing of a single sentence and, if it is sound,
hands the fields to the extractor for its sentence type:

    $GPGGA,172814.0,...,0031*4F\\r\\n
    ^ ^ ^  ^                ^ ^ ^
    | | |  |                | | +-- footer (CRLF)
    | | |  |                | +-- checksum (two hex digits)
    | | |  +----------------+-- fields, split on ','
    | | +-- sentence ID (GGA, GLL, GSA, RMC, VTG or ZDA)
    | +-- talker ID
    +-- header

Framing errors are returned as a ``Result`` and leave the TPV record
untouched. Field errors are not errors at this level: the affected field is
set to None (or ``Mode.UNKNOWN``) and decoding still succeeds.
"""

import logging

from gpstpv.nmea.checksum import calculate_checksum, parse_hex_byte
from gpstpv.nmea.encoder import CHECKSUM_DELIMITER, FOOTER, HEADER
from gpstpv.nmea.sentences import SENTENCE_ID_LENGTH, extract, lookup
from gpstpv.nmea.types import TPV, Result

__all__ = ["DecodeError", "decode", "decode_or_raise", "error_string"]

logger = logging.getLogger(__name__)

_TALKER_ID_LENGTH = 2
_FIELD_DELIMITER = ","

_ERROR_STRINGS: dict[int, str] = {
    Result.OK: "No error while parsing NMEA",
    Result.ERROR_HEADER: "Header '$' missing",
    Result.ERROR_FOOTER: "Footer CRLF missing",
    Result.ERROR_CHECKSUM: "Checksum did not match",
    Result.ERROR_TRUNCATED: "Sentence truncated",
    Result.ERROR_UNSUPPORTED: "Unsupported NMEA sentence",
}


class DecodeError(Exception):
    """Raised by ``decode_or_raise`` when a sentence is rejected."""

    def __init__(self, result: Result) -> None:
        super().__init__(error_string(result))
        self.result = result


def error_string(code: int) -> str:
    """Return a human-readable description of a result code.

    Example:
        >>> error_string(Result.ERROR_CHECKSUM)
        'Checksum did not match'
        >>> error_string(42)
        'Unknown error'
    """
    return _ERROR_STRINGS.get(code, "Unknown error")


def _as_text(sentence: str | bytes | bytearray) -> str:
    if isinstance(sentence, (bytes, bytearray)):
        # latin-1 maps every byte to one character, so the XOR matches the raw bytes
        return sentence.decode("latin-1")
    return sentence


def _tokenize(sentence: str, start: int) -> tuple[list[str], int, int] | None:
    """Split the sentence body into fields while computing its checksum.

    Scans forward from ``start`` (the first sentence ID character) up to the
    checksum delimiter, XORing every character and noting every field
    delimiter. Fields are the slices between delimiters; the sentence ID
    before the first delimiter is not a field.

    Returns:
        Tuple of (fields, partial checksum, index of '*'), or None if the
        sentence ends before '*'
    """
    checksum = 0
    boundaries: list[int] = []
    position = start
    while position < len(sentence):
        character = sentence[position]
        if character == CHECKSUM_DELIMITER:
            break
        checksum ^= ord(character)
        if character == _FIELD_DELIMITER:
            boundaries.append(position)
        position += 1
    else:
        return None

    boundaries.append(position)
    fields = [
        sentence[left + 1 : right] for left, right in zip(boundaries, boundaries[1:])
    ]
    return fields, checksum, position


def _reject(result: Result, sentence: str) -> Result:
    logger.debug("Rejected sentence %r: %s", sentence, error_string(result))
    return result


def decode(tpv: TPV, sentence: str | bytes | bytearray) -> Result:
    """Decode one NMEA sentence into ``tpv``.

    The sentence must be complete, including the trailing CRLF. Characters
    after the footer are ignored. The input itself is never modified.

    The stages run in order and each one aborts the decode on failure:
    1. Header '$'                      -> ERROR_HEADER
    2. Two-character talker ID         -> ERROR_TRUNCATED
    3. Known three-character ID        -> ERROR_TRUNCATED / ERROR_UNSUPPORTED
    4. Fields up to '*'                -> ERROR_TRUNCATED
    5. Checksum matches                -> ERROR_CHECKSUM
    6. Footer CRLF                     -> ERROR_FOOTER
    7. Talker ID stored, fields extracted

    Args:
        tpv: Record updated with the fields this sentence type carries
        sentence: Raw sentence as text or bytes

    Returns:
        ``Result.OK`` if the sentence was decoded, otherwise the first
        framing error found

    Example:
        >>> tpv = TPV()
        >>> decode(tpv, "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25\\r\\n")
        <Result.OK: 0>
        >>> tpv.speed
        2833
    """
    # Anything after an embedded NUL is not part of the sentence
    sentence = _as_text(sentence).split("\0", 1)[0]

    if not sentence.startswith(HEADER):
        return _reject(Result.ERROR_HEADER, sentence)

    talker_start = len(HEADER)
    id_start = talker_start + _TALKER_ID_LENGTH
    talker_id = sentence[talker_start:id_start]
    if len(talker_id) < _TALKER_ID_LENGTH:
        return _reject(Result.ERROR_TRUNCATED, sentence)
    checksum = calculate_checksum(talker_id)

    sentence_id = sentence[id_start : id_start + SENTENCE_ID_LENGTH]
    if len(sentence_id) < SENTENCE_ID_LENGTH:
        return _reject(Result.ERROR_TRUNCATED, sentence)
    sentence_type = lookup(sentence_id)
    if sentence_type is None:
        return _reject(Result.ERROR_UNSUPPORTED, sentence)

    tokenized = _tokenize(sentence, id_start)
    if tokenized is None:
        return _reject(Result.ERROR_TRUNCATED, sentence)
    fields, body_checksum, end = tokenized
    checksum = (checksum ^ body_checksum) & 0xFF

    checksum_start = end + len(CHECKSUM_DELIMITER)
    high = sentence[checksum_start : checksum_start + 1]
    low = sentence[checksum_start + 1 : checksum_start + 2]
    if checksum != parse_hex_byte(high, low):
        return _reject(Result.ERROR_CHECKSUM, sentence)

    footer_start = checksum_start + 2
    if sentence[footer_start : footer_start + len(FOOTER)] != FOOTER:
        return _reject(Result.ERROR_FOOTER, sentence)

    tpv.talker_id = talker_id
    extract(sentence_type, tpv, fields)
    return Result.OK


def decode_or_raise(tpv: TPV, sentence: str | bytes | bytearray) -> None:
    """Decode like ``decode`` but raise ``DecodeError`` on rejection."""
    result = decode(tpv, sentence)
    if result != Result.OK:
        raise DecodeError(result)

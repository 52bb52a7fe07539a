"""Supported sentence types and their extractors.

Each member of ``SentenceType`` is bound to exactly one extractor and the
minimum number of tokens that extractor reads. ``lookup`` turns the three
characters after the talker ID into a member.
"""

from collections.abc import Callable
from enum import Enum
from typing import NamedTuple

from gpstpv.nmea import gga, gll, gsa, rmc, vtg, zda
from gpstpv.nmea.types import TPV

__all__ = ["SentenceType", "extract", "lookup"]

SENTENCE_ID_LENGTH = 3

Extractor = Callable[[TPV, list[str]], None]


class _Handler(NamedTuple):
    extractor: Extractor
    minimum_token_count: int


class SentenceType(Enum):
    """The six NMEA sentence IDs that can be decoded."""

    GGA = "GGA"
    GLL = "GLL"
    GSA = "GSA"
    RMC = "RMC"
    VTG = "VTG"
    ZDA = "ZDA"


_HANDLERS: dict[SentenceType, _Handler] = {
    SentenceType.GGA: _Handler(gga.extract_gga, gga.MINIMUM_TOKEN_COUNT),
    SentenceType.GLL: _Handler(gll.extract_gll, gll.MINIMUM_TOKEN_COUNT),
    SentenceType.GSA: _Handler(gsa.extract_gsa, gsa.MINIMUM_TOKEN_COUNT),
    SentenceType.RMC: _Handler(rmc.extract_rmc, rmc.MINIMUM_TOKEN_COUNT),
    SentenceType.VTG: _Handler(vtg.extract_vtg, vtg.MINIMUM_TOKEN_COUNT),
    SentenceType.ZDA: _Handler(zda.extract_zda, zda.MINIMUM_TOKEN_COUNT),
}


def lookup(sentence_id: str) -> SentenceType | None:
    """Return the sentence type for a three-character ID, or None."""
    try:
        return SentenceType(sentence_id)
    except ValueError:
        return None


def extract(sentence_type: SentenceType, tpv: TPV, tokens: list[str]) -> None:
    """Run the extractor for ``sentence_type`` over ``tokens``.

    Sentences with fewer fields than the extractor reads are padded with
    empty tokens, which every field parser treats as missing data.
    """
    handler = _HANDLERS[sentence_type]
    missing = handler.minimum_token_count - len(tokens)
    if missing > 0:
        tokens = tokens + [""] * missing
    handler.extractor(tpv, tokens)

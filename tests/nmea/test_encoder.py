"""Tests for NMEA sentence framing."""

from gpstpv import TPV, Mode, Result, decode, encode


class TestEncode:
    """Tests for encode function."""

    def test_pmtk_command(self):
        assert encode("PMTK251,38400") == "$PMTK251,38400*27\r\n"

    def test_empty_message(self):
        assert encode("") == "$*00\r\n"

    def test_framing_adds_six_characters(self):
        message = "GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1"
        assert len(encode(message)) == len(message) + 6

    def test_encoded_sentence_decodes(self):
        tpv = TPV()
        sentence = encode("GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1")
        assert sentence == "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39\r\n"
        assert decode(tpv, sentence) is Result.OK
        assert tpv.mode is Mode.FIX_3D

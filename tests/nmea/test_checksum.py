"""Tests for NMEA checksum helpers."""

from gpstpv import calculate_checksum
from gpstpv.nmea.checksum import format_hex_byte, parse_hex_byte

GGA_BODY = "GPGGA,172814.0,3723.46587704,N,12202.26957864,W,2,6,1.2,18.893,M,-25.669,M,2.0,0031"


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_gga_body(self):
        assert calculate_checksum(GGA_BODY) == 0x4F

    def test_pmtk_command(self):
        assert calculate_checksum("PMTK251,38400") == 0x27

    def test_empty_string(self):
        assert calculate_checksum("") == 0

    def test_continues_from_initial_value(self):
        partial = calculate_checksum("GP")
        assert calculate_checksum(GGA_BODY[2:], partial) == 0x4F

    def test_repeated_character_cancels_out(self):
        assert calculate_checksum("AA") == 0


class TestParseHexByte:
    """Tests for parse_hex_byte function."""

    def test_uppercase(self):
        assert parse_hex_byte("4", "F") == 0x4F

    def test_lowercase(self):
        assert parse_hex_byte("a", "b") == 0xAB

    def test_unknown_characters_decode_as_zero(self):
        assert parse_hex_byte("Z", "1") == 0x01
        assert parse_hex_byte("G", "G") == 0

    def test_missing_characters_decode_as_zero(self):
        assert parse_hex_byte("", "") == 0


class TestFormatHexByte:
    """Tests for format_hex_byte function."""

    def test_pads_to_two_digits(self):
        assert format_hex_byte(0x07) == "07"

    def test_uppercase_digits(self):
        assert format_hex_byte(0xAF) == "AF"

"""Tests for RMC sentence decoding."""

from gpstpv import TPV, Result, Timestamp, decode

RMC_VALID = "$GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62\r\n"
RMC_MOVING = "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*68\r\n"
RMC_VOID = "$GPRMC,225446,V,4916.45,N,12311.12,W,000.5,054.7,191194,020.3,E*7F\r\n"


class TestDecodeRMC:
    """Tests for RMC extraction through decode."""

    def test_valid_rmc(self):
        tpv = TPV()
        assert decode(tpv, RMC_VALID) is Result.OK
        assert str(tpv.time) == "2098-09-13T08:18:36.000Z"
        assert tpv.latitude == -37860833
        assert tpv.longitude == 145122666
        assert tpv.speed == 0
        assert tpv.track == 360000

    def test_speed_in_knots_converted(self):
        tpv = TPV()
        assert decode(tpv, RMC_MOVING) is Result.OK
        assert tpv.speed == 257
        assert tpv.track == 54700
        assert str(tpv.time) == "2094-11-19T22:54:46.000Z"

    def test_void_status_leaves_record_untouched(self):
        previous = Timestamp("2020", "01", "02", "03", "04", "05", "006")
        tpv = TPV(latitude=1, longitude=2, track=3, speed=4, time=previous)
        assert decode(tpv, RMC_VOID) is Result.OK
        assert tpv.latitude == 1
        assert tpv.longitude == 2
        assert tpv.track == 3
        assert tpv.speed == 4
        assert str(tpv.time) == "2020-01-02T03:04:05.006Z"

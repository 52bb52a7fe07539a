"""Tests for the TPV record and Timestamp value."""

from datetime import datetime, timezone

from gpstpv import NULL_TIME, TPV, Mode, Timestamp


class TestTimestamp:
    def test_initial_value_is_null_time(self):
        assert str(Timestamp()) == NULL_TIME
        assert len(str(Timestamp())) == 24

    def test_to_datetime(self):
        ts = Timestamp("2002", "07", "04", "20", "15", "30", "250")
        assert ts.to_datetime() == datetime(
            2002, 7, 4, 20, 15, 30, 250000, tzinfo=timezone.utc
        )

    def test_to_datetime_without_date(self):
        assert Timestamp(hour="17").to_datetime() is None


class TestTPV:
    def test_initial_state(self):
        tpv = TPV()
        assert tpv.mode is Mode.UNKNOWN
        assert tpv.altitude is None
        assert tpv.latitude is None
        assert tpv.longitude is None
        assert tpv.track is None
        assert tpv.speed is None
        assert str(tpv.time) == NULL_TIME
        assert tpv.talker_id == ""

    def test_reset_restores_initial_state(self):
        tpv = TPV(mode=Mode.FIX_3D, latitude=1, time=Timestamp(hour="12"), talker_id="GP")
        tpv.reset()
        assert tpv == TPV()

    def test_copy_is_independent(self):
        tpv = TPV(latitude=1)
        snapshot = tpv.copy()
        tpv.latitude = 2
        tpv.time.hour = "05"
        assert snapshot.latitude == 1
        assert snapshot.time.hour == "00"

    def test_as_dict(self):
        tpv = TPV(mode=Mode.FIX_2D, speed=2833, talker_id="GN")
        data = tpv.as_dict()
        assert data["mode"] == "FIX_2D"
        assert data["speed"] == 2833
        assert data["latitude"] is None
        assert data["time"] == NULL_TIME
        assert data["talker_id"] == "GN"

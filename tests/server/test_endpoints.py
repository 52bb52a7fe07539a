"""Tests for the decode and encode HTTP endpoints."""

from fastapi.testclient import TestClient

from server.main import app
from server.sensors import create_gnss_reader

GGA_VALID = (
    "$GPGGA,172814.0,3723.46587704,N,12202.26957864,W,2,6,1.2,18.893,M,"
    "-25.669,M,2.0,0031*4F\r\n"
)


def test_decode_valid_sentence() -> None:
    with TestClient(app) as client:
        response = client.post("/decode", json={"sentence": GGA_VALID})
    assert response.status_code == 200
    body = response.json()
    assert body["result"] == 0
    assert body["message"] == "No error while parsing NMEA"
    assert body["tpv"]["latitude"] == 37391097
    assert body["tpv"]["time"] == "0000-00-00T17:28:14.000Z"


def test_decode_rejected_sentence() -> None:
    with TestClient(app) as client:
        response = client.post("/decode", json={"sentence": GGA_VALID[1:]})
    body = response.json()
    assert body["result"] == 1
    assert body["message"] == "Header '$' missing"
    assert body["tpv"] is None


def test_encode_message() -> None:
    with TestClient(app) as client:
        response = client.post("/encode", json={"message": "PMTK251,38400"})
    assert response.json() == {"sentence": "$PMTK251,38400*27\r\n"}


def test_gnss_reader_configured_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GPSTPV_GPSD_HOST", "receiver.local")
    monkeypatch.setenv("GPSTPV_GPSD_PORT", "3000")
    reader = create_gnss_reader()
    assert (reader._host, reader._port) == ("receiver.local", 3000)

"""Tests for websocket streaming and connection lifecycle."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from gpstpv import TPV, Mode
from server.broadcaster import Broadcaster, _enqueue_message
from server.formatters import format_tpv_message
from server.main import _send_messages_until_disconnect, app
from tests.server.conftest import ControlledNMEAReader


def _make_tpv() -> TPV:
    return TPV(mode=Mode.FIX_3D, latitude=37391097, longitude=-122037826, talker_id="GP")


def test_tpv_message_routing(gnss_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        gnss_controller.message_queue.put(_make_tpv())
        data = websocket.receive_json()
        assert data["type"] == "tpv"
        assert data["latitude"] == 37391097
        assert data["mode"] == "FIX_3D"
        assert data["lat_lon_factor"] == 1_000_000


def test_multiple_clients(gnss_controller: ControlledNMEAReader) -> None:
    with (
        TestClient(app) as client,
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        gnss_controller.message_queue.put(_make_tpv())
        assert socket_one.receive_json()["type"] == "tpv"
        assert socket_two.receive_json()["type"] == "tpv"


def test_drop_oldest_overflow() -> None:
    message_queue: asyncio.Queue[str] = asyncio.Queue(maxsize=2)
    _enqueue_message(message_queue, "message_one")
    _enqueue_message(message_queue, "message_two")
    _enqueue_message(message_queue, "message_three")
    assert message_queue.qsize() == 2
    assert message_queue.get_nowait() == "message_two"
    assert message_queue.get_nowait() == "message_three"


def test_broadcaster_subscriptions() -> None:
    broadcaster = Broadcaster()
    message_queue: asyncio.Queue[str] = asyncio.Queue()
    broadcaster.subscribe(message_queue)
    assert len(broadcaster) == 1
    loop = MagicMock()
    broadcaster.publish("message", loop)
    loop.call_soon_threadsafe.assert_called_once_with(
        _enqueue_message, message_queue, "message"
    )
    broadcaster.unsubscribe(message_queue)
    assert len(broadcaster) == 0


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("server.main._TIMEOUT_SECONDS", 0.05)
    with (
        TestClient(app) as client,
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def send_text(self, _text: str) -> None:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        message_queue = MagicMock(spec=asyncio.Queue)
        message_queue.get = AsyncMock(return_value="message")
        websocket = MockWebSocket()
        await _send_messages_until_disconnect(message_queue, websocket)  # type: ignore[arg-type]

    asyncio.run(_run())


def test_format_tpv_message_keeps_scaled_integers() -> None:
    data = json.loads(format_tpv_message(TPV(speed=2833)))
    assert data["speed"] == 2833
    assert data["value_factor"] == 1000
    assert data["altitude"] is None

"""FastAPI web server for decoding NMEA sentences and streaming TPV fixes.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one
``type="tpv"`` JSON message per sentence gpsd relays. ``POST /decode`` and
``POST /encode`` expose the codec for one-off use.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI, WebSocket, WebSocketDisconnect

from gpstpv.gnss import NMEAReader
from gpstpv.nmea import TPV, decode, encode
from server.broadcaster import broadcaster
from server.formatters import format_decode_response
from server.sensors import create_gnss_reader, run_gnss_loop

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


def _run_gnss_thread(gnss: NMEAReader, loop: asyncio.AbstractEventLoop) -> None:
    try:
        with gnss:
            run_gnss_loop(loop, gnss)
    except OSError as e:
        # The HTTP endpoints stay usable without a receiver
        logger.error("GNSS stream unavailable: %s", e)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    gnss = create_gnss_reader()
    executor = ThreadPoolExecutor(max_workers=1)
    loop.run_in_executor(executor, _run_gnss_thread, gnss, loop)
    yield
    gnss.cancel()
    executor.shutdown(wait=False)
    logger.info("GNSS thread stopped")


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Push one JSON message per accepted sentence to the client.

    Every connection reads from its own queue of ``_QUEUE_MAX_SIZE``
    messages; a full queue loses its oldest entry, never blocking the reader
    thread. After ``_TIMEOUT_SECONDS`` without traffic the socket is closed
    with code 1001 and the client is expected to reconnect.
    """
    await websocket.accept()
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    broadcaster.subscribe(queue)
    try:
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.unsubscribe(queue)


@app.post("/decode")
def decode_sentence(sentence: str = Body(embed=True)) -> dict[str, object]:
    """Decode one sentence into a fresh TPV record.

    Framing errors are reported in the body with their result code, not as
    HTTP errors: a rejected sentence is a normal outcome.
    """
    tpv = TPV()
    result = decode(tpv, sentence)
    return format_decode_response(result, tpv)


@app.post("/encode")
def encode_message(message: str = Body(embed=True)) -> dict[str, str]:
    """Frame a comma separated body with header, checksum and CRLF."""
    return {"sentence": encode(message)}

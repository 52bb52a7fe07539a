"""Background GNSS reading loop."""

import asyncio
import logging
import os

from gpstpv.gnss import NMEAReader
from gpstpv.gnss.reader import DEFAULT_HOST, DEFAULT_PORT
from server.broadcaster import broadcaster
from server.formatters import format_tpv_message

__all__ = ["create_gnss_reader", "run_gnss_loop"]

logger = logging.getLogger(__name__)

_HOST_VARIABLE = "GPSTPV_GPSD_HOST"
_PORT_VARIABLE = "GPSTPV_GPSD_PORT"


def create_gnss_reader() -> NMEAReader:
    """Build an ``NMEAReader`` for the gpsd instance named in the environment.

    ``GPSTPV_GPSD_HOST`` and ``GPSTPV_GPSD_PORT`` override the reader's
    defaults (localhost:2947).
    """
    host = os.environ.get(_HOST_VARIABLE, DEFAULT_HOST)
    port = int(os.environ.get(_PORT_VARIABLE, str(DEFAULT_PORT)))
    return NMEAReader(host=host, port=port)


def run_gnss_loop(loop: asyncio.AbstractEventLoop, gnss: NMEAReader) -> None:
    """Read TPV snapshots continuously and broadcast them to the event loop.

    The caller owns *gnss* and must use it as an open context manager. The
    loop exits when ``gnss.cancel()`` is called, which causes the underlying
    ``NMEAReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        gnss: An open ``NMEAReader`` instance managed by the caller.
    """
    try:
        for tpv in gnss:
            broadcaster.publish(format_tpv_message(tpv), loop)
    except EOFError:
        logger.info("GNSS stream closed")

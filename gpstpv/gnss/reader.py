"""NMEAReader: decode the raw NMEA stream relayed by gpsd.

The receiver stays owned by gpsd, which may keep serving other clients such
as Chrony. This reader opens a TCP connection to gpsd (localhost:2947 by
default) and asks it to pass the receiver's sentences through unchanged.

Line handling:
    After the WATCH request gpsd answers with a few JSON objects (VERSION,
    DEVICES, WATCH) before the first sentence. Only lines beginning with '$'
    are decoded. All sentences go into one TPV record kept by the reader, so
    a GSA fix mode and a GGA position seen a moment apart end up side by
    side in the same record.
"""

import contextlib
import logging
import socket
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

from gpstpv.nmea.decoder import DecodeError, decode_or_raise
from gpstpv.nmea.encoder import FOOTER, HEADER
from gpstpv.nmea.types import TPV

__all__ = ["NMEAReader"]

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 2947
_CONNECT_TIMEOUT = 2.0

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'


class NMEAReader:
    """Context manager yielding TPV snapshots from gpsd's NMEA relay.

    Iterate for a continuous feed::

        with NMEAReader() as gnss:
            for tpv in gnss:
                process(tpv)

    or poll one fix at a time::

        with NMEAReader() as gnss:
            tpv = gnss.read()

    A snapshot is a copy of the session record taken right after a sentence
    was accepted by the decoder. Rejected sentences are dropped with a DEBUG
    log line.

    Args:
        host: Address of the gpsd daemon.
        port: gpsd TCP port.
    """

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._stream: IO[Any] | None = None
        self._cancelled = False
        self._tpv = TPV()

    @property
    def tpv(self) -> TPV:
        """The live session record, updated in place by every decode."""
        return self._tpv

    def __enter__(self) -> "NMEAReader":
        """Connect, request the NMEA relay and start from an empty record."""
        self._sock = socket.create_connection(
            (self._host, self._port), timeout=_CONNECT_TIMEOUT
        )
        try:
            # gpsd may stay quiet for long stretches; cancel() unblocks reads
            self._sock.settimeout(None)
            self._sock.sendall(_WATCH_CMD)
            self._stream = self._sock.makefile("rb")
        except OSError:
            self._sock.close()
            self._sock = None
            raise
        self._cancelled = False
        self._tpv.reset()
        logger.info("Connected to gpsd at %s:%d", self._host, self._port)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.info("Disconnected from gpsd at %s:%d", self._host, self._port)

    def cancel(self) -> None:
        """Stop a reader blocked in another thread.

        The socket is shut down so a pending ``readline()`` returns at once
        and the blocked ``read()`` raises ``EOFError``.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _next_line(self) -> str:
        """Return the next line from gpsd.

        Raises:
            RuntimeError: Outside a ``with`` block.
            EOFError: After ``cancel()``, or once gpsd hangs up.
        """
        if self._stream is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        try:
            raw: bytes = self._stream.readline()
        except OSError as e:
            if self._cancelled:
                raise EOFError("gpsd read cancelled.") from e
            raise EOFError("gpsd connection closed.") from e
        if not raw:
            if self._cancelled:
                raise EOFError("gpsd read cancelled.")
            raise EOFError("gpsd stream ended.")
        return raw.decode("latin-1")

    def _dispatch(self, line: str) -> TPV | None:
        """Decode one sentence line and return a snapshot on success."""
        if not line.startswith(HEADER):
            return None
        # Some gpsd builds terminate relayed sentences with a bare LF
        sentence = line.rstrip("\r\n") + FOOTER
        try:
            decode_or_raise(self._tpv, sentence)
        except DecodeError as e:
            logger.debug("Skipping %r: %s", sentence, e)
            return None
        return self._tpv.copy()

    def read(self) -> TPV:
        """Block until a sentence is accepted and return a TPV snapshot.

        Raises:
            RuntimeError: Outside a ``with`` block.
            EOFError: After ``cancel()``, or once gpsd hangs up.
        """
        if self._sock is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        while True:
            snapshot = self._dispatch(self._next_line())
            if snapshot is not None:
                return snapshot

    def __iter__(self) -> Iterator[TPV]:
        """Yield a snapshot per accepted sentence until ``read()`` raises."""
        while True:
            yield self.read()

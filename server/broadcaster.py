"""Fan-out of TPV messages from the reader thread to WebSocket subscribers."""

import asyncio

__all__ = ["Broadcaster", "broadcaster"]


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Slow subscribers lose their oldest message rather than stall the reader
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Registry of subscriber queues fed from a non-asyncio thread."""

    def __init__(self) -> None:
        self._queues: list[asyncio.Queue[str]] = []

    def __len__(self) -> int:
        return len(self._queues)

    def subscribe(self, queue: asyncio.Queue[str]) -> None:
        self._queues.append(queue)

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._queues.remove(queue)

    def publish(self, message: str, loop: asyncio.AbstractEventLoop) -> None:
        """Schedule ``message`` onto every subscriber queue via ``loop``."""
        for queue in list(self._queues):
            loop.call_soon_threadsafe(_enqueue_message, queue, message)


broadcaster = Broadcaster()

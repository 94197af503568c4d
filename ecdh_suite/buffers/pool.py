import io
import threading
from typing import Protocol


class ScratchBufferProvider(Protocol):
    def acquire(self) -> io.BytesIO:
        ...

    def release(self, buffer: io.BytesIO) -> None:
        ...


class BytesBufferPool:
    """
    Thread-safe pool of reusable in-memory byte buffers.
    Released buffers are emptied before they are handed out again.
    Releasing a buffer the pool has not handed out (including a second
    release of the same handle) is a no-op.
    """

    def __init__(self, max_retained: int = 16):
        if max_retained < 0:
            raise ValueError("max_retained must be >= 0")
        self.max_retained = max_retained
        self._free = []
        self._in_use = set()
        self._lock = threading.Lock()

    def acquire(self) -> io.BytesIO:
        with self._lock:
            buffer = self._free.pop() if self._free else io.BytesIO()
            self._in_use.add(buffer)
            return buffer

    def release(self, buffer: io.BytesIO) -> None:
        with self._lock:
            if buffer not in self._in_use:
                return
            self._in_use.discard(buffer)
            buffer.seek(0)
            buffer.truncate()
            if len(self._free) < self.max_retained:
                self._free.append(buffer)

    @property
    def retained(self) -> int:
        with self._lock:
            return len(self._free)

    @property
    def in_use(self) -> int:
        with self._lock:
            return len(self._in_use)

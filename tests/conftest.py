import io

import pytest


class RecordingPool:
    """Scratch-buffer provider that counts acquire/release calls."""

    def __init__(self):
        self.acquired = 0
        self.released = 0
        self.outstanding = []

    def acquire(self) -> io.BytesIO:
        self.acquired += 1
        buffer = io.BytesIO()
        self.outstanding.append(buffer)
        return buffer

    def release(self, buffer: io.BytesIO) -> None:
        self.released += 1
        self.outstanding.remove(buffer)


class FixedEntropy:
    def __init__(self, byte_value: int):
        self.byte_value = byte_value

    def fill(self, buffer: bytearray) -> None:
        buffer[:] = bytes([self.byte_value]) * len(buffer)


class BrokenEntropy:
    def fill(self, buffer: bytearray) -> None:
        raise OSError("entropy pool unavailable")


@pytest.fixture
def recording_pool():
    return RecordingPool()

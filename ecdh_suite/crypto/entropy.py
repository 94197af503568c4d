import os
from typing import Protocol

from .errors import KeyGenerationFailure


class EntropySource(Protocol):
    def fill(self, buffer: bytearray) -> None:
        ...


class SystemEntropySource:
    """
    Fills buffers from the operating system CSPRNG.
    """

    def fill(self, buffer: bytearray) -> None:
        buffer[:] = os.urandom(len(buffer))


def sample_scalar(order: int, entropy: EntropySource, max_attempts: int = 64) -> int:
    """
    Draws a private scalar uniformly from [1, order - 1] by rejection sampling.
    """
    bits = order.bit_length()
    size = (bits + 7) // 8
    # Candidate keeps exactly bit_length(order) bits.
    excess = size * 8 - bits

    for _ in range(max_attempts):
        buffer = bytearray(size)
        try:
            entropy.fill(buffer)
        except Exception as exc:
            raise KeyGenerationFailure("Entropy source failed during key generation") from exc

        if len(buffer) != size:
            raise KeyGenerationFailure(
                f"Entropy source returned {len(buffer)} bytes, expected {size}"
            )

        candidate = int.from_bytes(bytes(buffer), "big") >> excess
        if 1 <= candidate < order:
            return candidate

    raise KeyGenerationFailure(
        f"No valid private scalar after {max_attempts} attempts"
    )

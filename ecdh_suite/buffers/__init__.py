from .pool import BytesBufferPool, ScratchBufferProvider

__all__ = ["BytesBufferPool", "ScratchBufferProvider"]

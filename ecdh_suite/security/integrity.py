import hashlib


def sha3_512_hex(data: bytes) -> str:
    return hashlib.sha3_512(data).hexdigest()


def fingerprint(data: bytes) -> str:
    if not data:
        return "none"
    # Short, safe fingerprint for audit trails (never log raw key material).
    return hashlib.sha256(data).hexdigest()[:24]

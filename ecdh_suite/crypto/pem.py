import base64
import binascii
import re
from typing import NamedTuple, Optional

_PEM_BLOCK_RE = re.compile(
    rb"-----BEGIN (?P<label>[^-\r\n]*)-----\r?\n"
    rb"(?P<body>.*?)"
    rb"-----END (?P=label)-----",
    re.DOTALL,
)

# DER encoding of id-ecPublicKey (1.2.840.10045.2.1).
_EC_PUBLIC_KEY_OID = b"\x06\x07\x2a\x86\x48\xce\x3d\x02\x01"


class PemBlock(NamedTuple):
    label: str
    payload: bytes


def _strip_headers(body: bytes) -> bytes:
    # RFC 1421 "Key: value" lines precede the base64 text, optionally followed by a blank line.
    lines = body.splitlines()
    index = 0
    while index < len(lines) and b":" in lines[index]:
        index += 1
    if index and index < len(lines) and not lines[index].strip():
        index += 1
    return b"".join(b"".join(line.split()) for line in lines[index:])


def decode_first_block(data: bytes) -> Optional[PemBlock]:
    """
    Returns the first well-formed PEM block found in ``data``, or None.
    Candidates whose body is not valid base64 are skipped and the search
    continues after their BEGIN line. Text around the block is ignored.
    """
    pos = 0
    while True:
        match = _PEM_BLOCK_RE.search(data, pos)
        if match is None:
            return None

        try:
            payload = base64.b64decode(_strip_headers(match.group("body")), validate=True)
        except (binascii.Error, ValueError):
            pos = match.start() + 1
            continue

        return PemBlock(match.group("label").decode("ascii", "replace"), payload)


def _read_header(der: bytes, offset: int):
    """Returns (tag, content_offset, content_length) of the DER element at offset."""
    tag = der[offset]
    length = der[offset + 1]
    offset += 2
    if length & 0x80:
        size = length & 0x7F
        length = int.from_bytes(der[offset:offset + size], "big")
        offset += size
    return tag, offset, length


def is_ec_public_key_info(der: bytes) -> bool:
    """
    True when a SubjectPublicKeyInfo names id-ecPublicKey as its algorithm.
    Anything unparsable counts as not EC.
    """
    try:
        tag, offset, _ = _read_header(der, 0)
        if tag != 0x30:
            return False
        tag, offset, _ = _read_header(der, offset)
        if tag != 0x30:
            return False
    except IndexError:
        return False
    return der[offset:offset + len(_EC_PUBLIC_KEY_OID)] == _EC_PUBLIC_KEY_OID

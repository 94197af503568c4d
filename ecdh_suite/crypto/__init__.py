from .curves import CurveType
from .errors import (
    CurveMismatch,
    ECDHError,
    EncodingFailure,
    InvalidPeerKey,
    KeyGenerationFailure,
    MalformedPeerKey,
    UnsupportedCurve,
)
from .primitive_ecdh import ECDHAgent, get_ecdh_agent, load_peer_public_key

__all__ = [
    "CurveType",
    "ECDHAgent",
    "get_ecdh_agent",
    "load_peer_public_key",
    "ECDHError",
    "UnsupportedCurve",
    "KeyGenerationFailure",
    "EncodingFailure",
    "InvalidPeerKey",
    "CurveMismatch",
    "MalformedPeerKey",
]

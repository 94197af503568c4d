class ECDHError(Exception):
    """Base class for every failure raised by the ECDH agent."""


class UnsupportedCurve(ECDHError, ValueError):
    pass


class KeyGenerationFailure(ECDHError):
    pass


class EncodingFailure(ECDHError):
    pass


class InvalidPeerKey(ECDHError, ValueError):
    pass


class CurveMismatch(InvalidPeerKey):
    """Peer key is a valid EC key, but on a different curve than the agent."""


class MalformedPeerKey(ECDHError, ValueError):
    pass

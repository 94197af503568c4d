from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from ecdh_suite.buffers import BytesBufferPool, ScratchBufferProvider
from ecdh_suite.core.audit_logger import get_audit_logger
from ecdh_suite.core.config import config
from ecdh_suite.security.integrity import fingerprint, sha3_512_hex
from ecdh_suite.security.models import PublicKeyAnnouncement
from .curves import CurveType
from .entropy import EntropySource, SystemEntropySource, sample_scalar
from .errors import (
    CurveMismatch,
    EncodingFailure,
    InvalidPeerKey,
    KeyGenerationFailure,
    MalformedPeerKey,
)
from .pem import decode_first_block, is_ec_public_key_info

P224 = CurveType.P224
P256 = CurveType.P256
P384 = CurveType.P384
P521 = CurveType.P521

audit = get_audit_logger()
_default_pool = BytesBufferPool(max_retained=config.buffer_pool_size)


def load_peer_public_key(
    peer_pem: Union[str, bytes],
    buffer_pool: Optional[ScratchBufferProvider] = None,
) -> ec.EllipticCurvePublicKey:
    """
    Stages the peer text in a scratch buffer, decodes its first PEM block and
    returns the EC public key it carries.
    """
    pool = buffer_pool if buffer_pool is not None else _default_pool
    data = peer_pem.encode("utf-8") if isinstance(peer_pem, str) else bytes(peer_pem)

    buffer = pool.acquire()
    try:
        buffer.write(data)
        block = decode_first_block(buffer.getvalue())
    finally:
        pool.release(buffer)

    if block is None:
        raise InvalidPeerKey("Public Key not valid")

    try:
        peer_key = serialization.load_der_public_key(block.payload)
    except UnsupportedAlgorithm as exc:
        if is_ec_public_key_info(block.payload):
            raise CurveMismatch(f"Peer key curve is not supported: {exc}") from exc
        raise InvalidPeerKey("Public Key not valid") from exc
    except (ValueError, TypeError) as exc:
        raise MalformedPeerKey(f"Public Key could not be parsed: {exc}") from exc

    if not isinstance(peer_key, ec.EllipticCurvePublicKey):
        raise InvalidPeerKey("Public Key not valid")

    return peer_key


class ECDHAgent:
    """
    Holds one EC key pair and derives SHA3-512 shared secrets with peers.
    Immutable after construction.
    """
    def __init__(
        self,
        curve_type: Union[CurveType, str],
        entropy: Optional[EntropySource] = None,
        keygen_attempts: Optional[int] = None,
    ):
        self._curve_type = CurveType.from_name(curve_type)

        attempts = keygen_attempts if keygen_attempts is not None else config.keygen_attempts
        try:
            scalar = sample_scalar(
                self._curve_type.order,
                entropy if entropy is not None else SystemEntropySource(),
                attempts,
            )
        except KeyGenerationFailure:
            audit.warning("ECDHAgent init: key generation failed curve=%s", self._curve_type.value)
            raise

        # scalar is in [1, n - 1].
        self._private_key = ec.derive_private_key(scalar, self._curve_type.curve)

        audit.info(
            "ECDHAgent init: curve=%s public_fp=%s",
            self._curve_type.value,
            self.public_key_fingerprint(),
        )

    @property
    def curve_type(self) -> CurveType:
        return self._curve_type

    @property
    def public_key(self) -> ec.EllipticCurvePublicKey:
        return self._private_key.public_key()

    def export_public_key(self) -> bytes:
        # PEM 'PUBLIC KEY' armor over the SubjectPublicKeyInfo DER.
        try:
            return self.public_key.public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        except (ValueError, TypeError) as exc:
            raise EncodingFailure("Public key serialization failed") from exc

    def public_key_fingerprint(self) -> str:
        return fingerprint(self.export_public_key())

    def announce(self) -> PublicKeyAnnouncement:
        return PublicKeyAnnouncement(
            curve=self._curve_type.value,
            public_key_pem=self.export_public_key().decode("ascii"),
        )

    def derive_shared_secret(
        self,
        peer_pem: Union[str, bytes],
        buffer_pool: Optional[ScratchBufferProvider] = None,
    ) -> str:
        """
        Computes SHA3-512 over the X coordinate of peer_point * own scalar
        and returns it as 128 lowercase hex characters.

        The X coordinate is hashed in its minimal big-endian form, i.e.
        without leading zero bytes.
        """
        try:
            peer_key = load_peer_public_key(peer_pem, buffer_pool)
        except (InvalidPeerKey, MalformedPeerKey) as exc:
            audit.warning("ECDHAgent derive: rejected peer key: %s", exc)
            raise

        peer_curve = CurveType.from_curve(peer_key.curve)
        if peer_curve is not self._curve_type:
            audit.warning(
                "ECDHAgent derive: curve mismatch own=%s peer=%s",
                self._curve_type.value,
                peer_key.curve.name,
            )
            raise CurveMismatch(
                f"Peer key curve {peer_key.curve.name} does not match {self._curve_type.value}"
            )

        shared_x = self._private_key.exchange(ec.ECDH(), peer_key)
        digest = sha3_512_hex(shared_x.lstrip(b"\x00"))

        audit.info(
            "ECDHAgent derive: curve=%s peer_fp=%s",
            self._curve_type.value,
            fingerprint(peer_key.public_bytes(
                encoding=serialization.Encoding.X962,
                format=serialization.PublicFormat.UncompressedPoint,
            )),
        )
        return digest


def get_ecdh_agent(curve_type: Union[CurveType, str, None] = None) -> ECDHAgent:
    return ECDHAgent(curve_type if curve_type is not None else config.default_curve)

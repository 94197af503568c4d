import base64

import pytest

from ecdh_suite.crypto import CurveType, KeyGenerationFailure
from ecdh_suite.crypto.entropy import SystemEntropySource, sample_scalar
from ecdh_suite.crypto.pem import decode_first_block, is_ec_public_key_info
from tests.conftest import FixedEntropy


class _ShortEntropy:
    def fill(self, buffer: bytearray) -> None:
        buffer[:] = b"\x01"


def test_system_entropy_fills_whole_buffer():
    buffer = bytearray(32)
    SystemEntropySource().fill(buffer)
    assert len(buffer) == 32


@pytest.mark.parametrize("curve", list(CurveType))
def test_sampled_scalar_is_in_range(curve):
    scalar = sample_scalar(curve.order, SystemEntropySource())
    assert 1 <= scalar < curve.order


def test_all_ones_entropy_is_rejected_for_p256():
    # 2**256 - 1 is above the P-256 order.
    with pytest.raises(KeyGenerationFailure):
        sample_scalar(CurveType.P256.order, FixedEntropy(0xFF), max_attempts=2)


def test_p521_draw_is_truncated_to_order_width():
    scalar = sample_scalar(CurveType.P521.order, FixedEntropy(0x01))
    assert scalar.bit_length() <= 521


def test_short_fill_is_key_generation_failure():
    with pytest.raises(KeyGenerationFailure):
        sample_scalar(CurveType.P224.order, _ShortEntropy())


def test_decode_first_block_skips_preamble_and_trailer():
    payload = b"\x30\x03\x02\x01\x05"
    text = (
        b"preamble\n-----BEGIN PUBLIC KEY-----\n"
        + base64.b64encode(payload)
        + b"\n-----END PUBLIC KEY-----\ntrailer"
    )
    block = decode_first_block(text)
    assert block.label == "PUBLIC KEY"
    assert block.payload == payload


def test_decode_first_block_returns_first_of_many():
    first = b"-----BEGIN A-----\nAQI=\n-----END A-----\n"
    second = b"-----BEGIN B-----\nAwQ=\n-----END B-----\n"
    assert decode_first_block(first + second).payload == b"\x01\x02"


@pytest.mark.parametrize(
    "text",
    [
        b"",
        b"no armor here",
        b"-----BEGIN PUBLIC KEY-----\nAQI=\n",
        b"-----BEGIN PUBLIC KEY-----\nAQI=\n-----END PRIVATE KEY-----\n",
        b"-----BEGIN PUBLIC KEY-----\n***not base64***\n-----END PUBLIC KEY-----\n",
    ],
)
def test_decode_first_block_rejects(text):
    assert decode_first_block(text) is None


def test_decode_skips_bad_candidate_and_finds_next():
    text = (
        b"-----BEGIN X-----\n!!!\n-----END X-----\n"
        b"-----BEGIN PUBLIC KEY-----\nAQI=\n-----END PUBLIC KEY-----\n"
    )
    block = decode_first_block(text)
    assert block.label == "PUBLIC KEY"
    assert block.payload == b"\x01\x02"


def test_decode_skips_rfc1421_headers():
    text = (
        b"-----BEGIN PUBLIC KEY-----\n"
        b"Proc-Type: 4,ENCRYPTED\n"
        b"DEK-Info: AES-128-CBC,00\n"
        b"\n"
        b"AQI=\n"
        b"-----END PUBLIC KEY-----\n"
    )
    assert decode_first_block(text).payload == b"\x01\x02"


def test_is_ec_public_key_info():
    ec_spki = bytes.fromhex("30143010" "06072a8648ce3d0201" "06052b81040006" "0300")
    assert is_ec_public_key_info(ec_spki)
    assert not is_ec_public_key_info(bytes.fromhex("300c300506032a03040303000102"))
    assert not is_ec_public_key_info(b"")
    assert not is_ec_public_key_info(b"\x30")

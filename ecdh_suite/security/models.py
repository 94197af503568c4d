import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

_SHA3_512_HEX_RE = re.compile(r"^[a-f0-9]{128}$")
_PEM_BEGIN = "-----BEGIN PUBLIC KEY-----"
_PEM_END = "-----END PUBLIC KEY-----"


class PublicKeyAnnouncement(BaseModel):
    """
    What one party hands to the other: its curve and PEM public key.
    """
    curve: Literal["P224", "P256", "P384", "P521"] = Field(..., description="Curve identifier (P224, P256, P384, P521)")
    public_key_pem: str = Field(..., description="PKIX public key in PEM armor")

    @field_validator("public_key_pem")
    @classmethod
    def _validate_pem(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped.startswith(_PEM_BEGIN) or not stripped.endswith(_PEM_END):
            raise ValueError("public_key_pem must be a PEM 'PUBLIC KEY' block")
        return value


class SharedSecretDigest(BaseModel):
    digest: str = Field(..., description="SHA3-512 of the shared X coordinate, lowercase hex")

    @field_validator("digest")
    @classmethod
    def _validate_digest(cls, value: str) -> str:
        if not _SHA3_512_HEX_RE.fullmatch(value):
            raise ValueError("digest must be 128 lowercase hex chars")
        return value

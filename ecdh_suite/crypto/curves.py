from enum import Enum

from cryptography.hazmat.primitives.asymmetric import ec

from .errors import UnsupportedCurve


class CurveType(str, Enum):
    """
    Supported NIST curves, keyed by the identifier callers pass in.
    """
    P224 = "P224"
    P256 = "P256"
    P384 = "P384"
    P521 = "P521"

    @property
    def curve(self) -> ec.EllipticCurve:
        return _CURVES[self][0]()

    @property
    def order(self) -> int:
        # Group order n; private scalars live in [1, n - 1].
        return _CURVES[self][1]

    @classmethod
    def from_name(cls, name: str) -> "CurveType":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except (ValueError, TypeError) as exc:
            raise UnsupportedCurve(f"Curve Type not supported: {name!r}") from exc

    @classmethod
    def from_curve(cls, curve: ec.EllipticCurve) -> "CurveType | None":
        for member, (curve_cls, _) in _CURVES.items():
            if curve.name == curve_cls.name:
                return member
        return None


_CURVES = {
    CurveType.P224: (
        ec.SECP224R1,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFF16A2E0B8F03E13DD29455C5C2A3D,
    ),
    CurveType.P256: (
        ec.SECP256R1,
        0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    ),
    CurveType.P384: (
        ec.SECP384R1,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF581A0DB248B0A77AECEC196ACCC52973,
    ),
    CurveType.P521: (
        ec.SECP521R1,
        0x01FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFA51868783BF2F966B7FCC0148F709A5D03BB5C9B8899C47AEBB6FB71E91386409,
    ),
}

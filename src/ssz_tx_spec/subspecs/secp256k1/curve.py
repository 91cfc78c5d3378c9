"""
secp256k1 curve arithmetic in affine coordinates.

Only what public-key recovery needs: point addition, scalar multiplication
and lifting an x-coordinate back onto the curve. `None` is the point at
infinity.
"""

from __future__ import annotations

from typing import Final

from ssz_tx_spec.types import Bytes65

Point = tuple[int, int]
"""An affine curve point `(x, y)`."""

P: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
"""secp256k1 field prime."""

N: Final = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
"""secp256k1 group order."""

G: Final[Point] = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
"""secp256k1 generator."""

UNCOMPRESSED_PUBKEY_SIZE: Final = 65
"""Uncompressed public key: 0x04 + 32-byte x + 32-byte y."""


def modinv(a: int, m: int) -> int:
    """Modular inverse via Fermat's little theorem (m must be prime)."""
    return pow(a, m - 2, m)


def point_add(p1: Point | None, p2: Point | None) -> Point | None:
    """Add two curve points."""
    if p1 is None:
        return p2
    if p2 is None:
        return p1

    x1, y1 = p1
    x2, y2 = p2

    if x1 == x2 and (y1 + y2) % P == 0:
        return None

    if x1 == x2:
        lam = (3 * x1 * x1 * modinv(2 * y1, P)) % P
    else:
        lam = ((y2 - y1) * modinv(x2 - x1, P)) % P

    x3 = (lam * lam - x1 - x2) % P
    y3 = (lam * (x1 - x3) - y1) % P
    return (x3, y3)


def point_mul(k: int, point: Point | None) -> Point | None:
    """Scalar multiplication using double-and-add."""
    result = None
    addend = point
    while k:
        if k & 1:
            result = point_add(result, addend)
        addend = point_add(addend, addend)
        k >>= 1
    return result


def lift_x(x: int, y_parity: int) -> Point | None:
    """
    Return the curve point with x-coordinate `x` and the given y parity.

    Returns None when `x` is not the x-coordinate of any curve point.
    """
    if not 0 <= x < P:
        return None
    y_sq = (pow(x, 3, P) + 7) % P
    y = pow(y_sq, (P + 1) // 4, P)
    if (y * y) % P != y_sq:
        return None
    if (y & 1) != y_parity:
        y = P - y
    return (x, y)


def encode_uncompressed(point: Point) -> Bytes65:
    """Encode a point as `0x04 ‖ x ‖ y`."""
    x, y = point
    return Bytes65(b"\x04" + x.to_bytes(32, "big") + y.to_bytes(32, "big"))

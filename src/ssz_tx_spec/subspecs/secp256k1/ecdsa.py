"""
Recoverable secp256k1 ECDSA over 32-byte signing roots.

Signatures are 65 bytes: `r (32, big-endian) ‖ s (32, big-endian) ‖ y_parity (1)`.
Signing uses deterministic RFC 6979 nonces from `cryptography` and always
produces a low-s signature. The signer is identified by recovering the public
key from the signature, so no public key travels with the transaction.
"""

from __future__ import annotations

from typing import Final

from Crypto.Hash import keccak
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed, decode_dss_signature

from ssz_tx_spec.exceptions import InvalidSignatureError
from ssz_tx_spec.subspecs.domain.types import ExecutionAddress
from ssz_tx_spec.types import Bytes32, Bytes65

from .curve import (
    G,
    N,
    UNCOMPRESSED_PUBKEY_SIZE,
    Point,
    encode_uncompressed,
    lift_x,
    modinv,
    point_add,
    point_mul,
)

SECP256K1_HALF_N: Final = N // 2
"""Largest `s` accepted by `is_low_s`."""


def split_signature(signature: Bytes65) -> tuple[int, int, int]:
    """Return `(r, s, y_parity)` of a 65-byte signature."""
    raw = bytes(Bytes65(signature))
    return (
        int.from_bytes(raw[:32], "big"),
        int.from_bytes(raw[32:64], "big"),
        raw[64],
    )


def is_low_s(signature: Bytes65) -> bool:
    """Return True if `s` is in the lower half of the group order."""
    _, s, _ = split_signature(signature)
    return s <= SECP256K1_HALF_N


def _private_key(private_key: Bytes32) -> ec.EllipticCurvePrivateKey:
    scalar = int.from_bytes(Bytes32(private_key), "big")
    if not 0 < scalar < N:
        raise ValueError("Private key scalar must be in [1, n-1]")
    return ec.derive_private_key(scalar, ec.SECP256K1())


def _public_point(private_key: Bytes32) -> Point:
    numbers = _private_key(private_key).public_key().public_numbers()
    return (numbers.x, numbers.y)


def _recover_point(r: int, s: int, y_parity: int, message_hash: Bytes32) -> Point:
    """
    Recover the signer's public point from `(r, s, y_parity)`.

    Q = r^-1 * (s*R - z*G), where R is the nonce point with x = r.
    """
    if not 0 < r < N:
        raise InvalidSignatureError("r out of range")
    if not 0 < s < N:
        raise InvalidSignatureError("s out of range")
    if y_parity not in (0, 1):
        raise InvalidSignatureError(f"y_parity must be 0 or 1, got {y_parity}")

    nonce_point = lift_x(r, y_parity)
    if nonce_point is None:
        raise InvalidSignatureError("r is not the x-coordinate of a curve point")

    z = int.from_bytes(Bytes32(message_hash), "big") % N
    r_inv = modinv(r, N)
    u1 = (-z * r_inv) % N
    u2 = (s * r_inv) % N

    public_point = point_add(point_mul(u1, G), point_mul(u2, nonce_point))
    if public_point is None:
        raise InvalidSignatureError("recovered the point at infinity")
    return public_point


def private_key_to_public_key(private_key: Bytes32) -> Bytes65:
    """Return the uncompressed public key of a 32-byte private key."""
    return encode_uncompressed(_public_point(private_key))


def public_key_to_address(public_key: Bytes65) -> ExecutionAddress:
    """
    Derive the account address of an uncompressed public key.

    address = keccak256(x ‖ y)[12:]
    """
    raw = bytes(public_key)
    if len(raw) != UNCOMPRESSED_PUBKEY_SIZE or raw[0] != 0x04:
        raise ValueError("Expected a 65-byte uncompressed public key")
    k = keccak.new(digest_bits=256)
    k.update(raw[1:])
    return ExecutionAddress(k.digest()[12:])


def sign(private_key: Bytes32, message_hash: Bytes32) -> Bytes65:
    """
    Sign a 32-byte hash, returning a low-s recoverable signature.

    The hash is signed as-is: it is already the signing root, so it is
    passed to `cryptography` as a prehashed digest.
    """
    key = _private_key(private_key)
    der_signature = key.sign(
        bytes(Bytes32(message_hash)),
        ec.ECDSA(Prehashed(hashes.SHA256()), deterministic_signing=True),
    )
    r, s = decode_dss_signature(der_signature)
    if s > SECP256K1_HALF_N:
        s = N - s

    # The DER form drops the nonce point's y parity; find it by trial recovery.
    expected = _public_point(private_key)
    for y_parity in (0, 1):
        if _recover_point(r, s, y_parity, message_hash) == expected:
            return Bytes65(r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([y_parity]))
    raise InvalidSignatureError("no y parity recovers the signing key")


def recover_public_key(signature: Bytes65, message_hash: Bytes32) -> Bytes65:
    """
    Recover the uncompressed public key that produced `signature` over `message_hash`.

    Raises:
        InvalidSignatureError: If the signature is malformed or unrecoverable.
    """
    r, s, y_parity = split_signature(signature)
    return encode_uncompressed(_recover_point(r, s, y_parity, message_hash))

"""Recoverable secp256k1 signatures for transaction signing roots."""

from .ecdsa import (
    is_low_s,
    private_key_to_public_key,
    public_key_to_address,
    recover_public_key,
    sign,
)

__all__ = [
    "is_low_s",
    "private_key_to_public_key",
    "public_key_to_address",
    "recover_public_key",
    "sign",
]

"""
SSZ Merkleization entry point (`hash_tree_root`).

Every root in the signature scheme goes through this function: the
fork-data root, the signing root and the transaction identifier.
Callers that need a different tree hash inject their own function of the
same shape (`RootHasher`).
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Callable

from ssz_tx_spec.types.byte_arrays import BaseBytes, Bytes32
from ssz_tx_spec.types.container import Container
from ssz_tx_spec.types.uint import BaseUint

from .merkleization import Merkle
from .pack import Packer

RootHasher = Callable[[Any], Bytes32]
"""Signature of a deterministic, collision-resistant root-hash function."""


@singledispatch
def hash_tree_root(value: object) -> Bytes32:
    """
    Compute `hash_tree_root(value)` for SSZ values.

    Raises:
        TypeError: If `value` has no registered specialization.
    """
    raise TypeError(f"hash_tree_root: unsupported value type {type(value).__name__}")


@hash_tree_root.register
def _htr_uint(value: BaseUint) -> Bytes32:
    """Basic scalars merkleize as `merkleize(pack(bytes))`."""
    return Merkle.merkleize(Packer.pack_bytes(value.encode_bytes()))


@hash_tree_root.register
def _htr_bytevector(value: BaseBytes) -> Bytes32:
    return Merkle.merkleize(Packer.pack_bytes(value.encode_bytes()))


@hash_tree_root.register
def _htr_bytes(value: bytes) -> Bytes32:
    """Treat raw bytes like a ByteVector of the same length."""
    return Merkle.merkleize(Packer.pack_bytes(value))


@hash_tree_root.register
def _htr_container(value: Container) -> Bytes32:
    # Declared field order is part of the hash domain.
    leaves = [hash_tree_root(getattr(value, name)) for name, _ in value.field_types()]
    return Merkle.merkleize(leaves)

"""
Signing-root derivation.

The value handed to the signature primitive is never the transaction
identifier. It is the root of a `SigningData` pair that mixes the unsigned
transaction root with a domain naming the transaction type, the fork that
introduced it and the network it belongs to.
"""

from __future__ import annotations

from typing import SupportsIndex

from ssz_tx_spec.subspecs.ssz.hash import RootHasher, hash_tree_root
from ssz_tx_spec.types import Container

from .fork_data import compute_execution_domain
from .registry import domain_type_for_transaction_type
from .types import Domain, Hash32, Root, Version


class SigningData(Container):
    """Pair of an object root and the domain it is signed under."""

    object_root: Root
    domain: Domain


def compute_transaction_domain(
    tx_type: SupportsIndex,
    tx_type_fork_version: Version,
    genesis_hash: Hash32,
    chain_id: SupportsIndex,
    *,
    hash_fn: RootHasher = hash_tree_root,
) -> Domain:
    """
    Return the signing domain of transactions of type `tx_type` on a network.

    Args:
        tx_type: 1-byte transaction type tag.
        tx_type_fork_version: Fork version at which `tx_type` was introduced.
        genesis_hash: Genesis block hash of the network.
        chain_id: Chain identifier of the network.
        hash_fn: Root-hash function used for the fork-data root.
    """
    domain_type = domain_type_for_transaction_type(tx_type)
    return compute_execution_domain(
        domain_type, tx_type_fork_version, genesis_hash, chain_id, hash_fn=hash_fn
    )


def compute_signing_root(
    message: object,
    domain: Domain,
    *,
    hash_fn: RootHasher = hash_tree_root,
) -> Root:
    """Return `hash_fn(SigningData(object_root=hash_fn(message), domain=domain))`."""
    signing_data = SigningData(object_root=Root(hash_fn(message)), domain=Domain(domain))
    return Root(hash_fn(signing_data))

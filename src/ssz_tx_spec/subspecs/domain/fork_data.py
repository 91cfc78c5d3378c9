"""Binding of a domain type to network identity and fork version."""

from __future__ import annotations

from typing import SupportsIndex

from ssz_tx_spec.subspecs.ssz.hash import RootHasher, hash_tree_root
from ssz_tx_spec.types import Container

from .types import ChainId, Domain, DomainType, Hash32, Root, Version

DOMAIN_TYPE_LENGTH = DomainType.LENGTH
"""Number of leading domain bytes that identify the signing context."""

FORK_DATA_ROOT_PREFIX_LENGTH = Domain.LENGTH - DOMAIN_TYPE_LENGTH
"""Number of fork-data-root bytes kept in a domain (28)."""


class ExecutionForkData(Container):
    """
    Network identity of an execution-layer signing domain.

    The field order is fixed; it is part of the hash domain.
    """

    fork_version: Version
    """Fork at which the transaction type was introduced."""

    genesis_hash: Hash32
    """Hash of the chain's first block."""

    chain_id: ChainId
    """Replay-protection chain identifier."""


def compute_execution_fork_data_root(
    fork_version: Version,
    genesis_hash: Hash32,
    chain_id: SupportsIndex,
    *,
    hash_fn: RootHasher = hash_tree_root,
) -> Root:
    """
    Return the root of `ExecutionForkData(fork_version, genesis_hash, chain_id)`.

    Args:
        fork_version: 4-byte fork tag.
        genesis_hash: 32-byte genesis block hash.
        chain_id: Chain identifier; must fit in 256 bits.
        hash_fn: Root-hash function applied to the container.
    """
    fork_data = ExecutionForkData(
        fork_version=Version(fork_version),
        genesis_hash=Hash32(genesis_hash),
        chain_id=ChainId(chain_id),
    )
    return Root(hash_fn(fork_data))


def compute_execution_domain(
    domain_type: DomainType,
    fork_version: Version,
    genesis_hash: Hash32,
    chain_id: SupportsIndex,
    *,
    hash_fn: RootHasher = hash_tree_root,
) -> Domain:
    """
    Return the 32-byte domain `domain_type ‖ fork_data_root[:28]`.

    Keeping 28 bytes of the fork-data root leaves 224 bits of collision
    resistance for the network binding. The signing root still commits to
    the full 32-byte root of the unsigned transaction.
    """
    fork_data_root = compute_execution_fork_data_root(
        fork_version, genesis_hash, chain_id, hash_fn=hash_fn
    )
    return Domain(
        bytes(DomainType(domain_type)) + bytes(fork_data_root)[:FORK_DATA_ROOT_PREFIX_LENGTH]
    )

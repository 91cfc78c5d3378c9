"""Merkleization utilities per SSZ."""

from __future__ import annotations

from typing import List, Sequence

from ssz_tx_spec.subspecs.ssz.constants import ZERO_HASH
from ssz_tx_spec.subspecs.ssz.utils import get_power_of_two_ceil, hash_nodes
from ssz_tx_spec.types.byte_arrays import Bytes32


class Merkle:
    """Static Merkle helpers for SSZ."""

    @staticmethod
    def merkleize(chunks: Sequence[Bytes32]) -> Bytes32:
        """
        Compute the Merkle root of `chunks`.

        - The leaf layer is padded with zero chunks to the next power of two.
        - No chunks at all merkleize to `ZERO_HASH`.
        - A single chunk is its own root.
        """
        n = len(chunks)
        if n == 0:
            return ZERO_HASH

        width = get_power_of_two_ceil(n)
        level: List[Bytes32] = list(chunks) + [ZERO_HASH] * (width - n)

        # Pairwise reduction; the padded width keeps every level even.
        while len(level) > 1:
            level = [hash_nodes(level[i], level[i + 1]) for i in range(0, len(level), 2)]
        return level[0]

"""Constants defined by SSZ Merkleization."""

from typing import Final

from ssz_tx_spec.types.byte_arrays import ZERO_HASH

BYTES_PER_CHUNK: Final = 32
"""Number of bytes per Merkle chunk."""

__all__ = ["BYTES_PER_CHUNK", "ZERO_HASH"]

"""Packing of serialized data into 32-byte Merkle chunks."""

from __future__ import annotations

from typing import List

from ssz_tx_spec.subspecs.ssz.constants import BYTES_PER_CHUNK
from ssz_tx_spec.types.byte_arrays import Bytes32


class Packer:
    """Static helpers that arrange already-serialized bytes into chunks."""

    @staticmethod
    def _right_pad_to_chunk(b: bytes) -> bytes:
        """Right-pad `b` with zeros up to a multiple of BYTES_PER_CHUNK."""
        remainder = len(b) % BYTES_PER_CHUNK
        if remainder == 0:
            return b
        return b + b"\x00" * (BYTES_PER_CHUNK - remainder)

    @staticmethod
    def pack_bytes(data: bytes) -> List[Bytes32]:
        """
        Pack raw bytes (a serialized basic value or byte vector) into chunks.

        Empty input packs to no chunks at all; `Merkle.merkleize` turns that
        into the zero hash.
        """
        padded = Packer._right_pad_to_chunk(data)
        return [
            Bytes32(padded[i : i + BYTES_PER_CHUNK]) for i in range(0, len(padded), BYTES_PER_CHUNK)
        ]

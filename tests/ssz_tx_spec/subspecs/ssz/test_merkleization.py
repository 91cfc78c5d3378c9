"""Tests for chunk packing and Merkle reduction."""

import hashlib

import pytest

from ssz_tx_spec.subspecs.ssz.merkleization import Merkle
from ssz_tx_spec.subspecs.ssz.pack import Packer
from ssz_tx_spec.subspecs.ssz.utils import get_power_of_two_ceil, hash_nodes
from ssz_tx_spec.types import ZERO_HASH, Bytes32

ZERO_HASH_DEPTH_1 = Bytes32("0xf5a5fd42d16a20302798ef6ed309979b43003d2320d9f0e8ea9831a92759fb4b")
"""Root of a tree with two zero leaves."""

ZERO_HASH_DEPTH_2 = Bytes32("0xdb56114e00fdd4c1f85c892bf35ac9a89289aaecb1ebd0a96cde606a748b5d71")
"""Root of a tree with four zero leaves."""


def chunk(byte: int) -> Bytes32:
    return Bytes32(bytes([byte]) * 32)


@pytest.mark.parametrize(
    "x,expected", [(0, 1), (1, 1), (2, 2), (3, 4), (4, 4), (5, 8), (33, 64)]
)
def test_get_power_of_two_ceil(x: int, expected: int) -> None:
    assert get_power_of_two_ceil(x) == expected


def test_hash_nodes_is_sha256_of_concatenation() -> None:
    a, b = chunk(1), chunk(2)
    assert hash_nodes(a, b) == hashlib.sha256(bytes(a) + bytes(b)).digest()


class TestPack:
    def test_empty_packs_to_no_chunks(self) -> None:
        assert Packer.pack_bytes(b"") == []

    def test_short_input_is_right_padded(self) -> None:
        assert Packer.pack_bytes(b"\x01\x02") == [Bytes32(b"\x01\x02" + b"\x00" * 30)]

    def test_exact_chunk_boundary_is_not_padded(self) -> None:
        data = bytes(range(64))
        assert Packer.pack_bytes(data) == [Bytes32(data[:32]), Bytes32(data[32:])]

    def test_partial_second_chunk(self) -> None:
        chunks = Packer.pack_bytes(b"\xff" * 33)
        assert len(chunks) == 2
        assert chunks[1] == Bytes32(b"\xff" + b"\x00" * 31)


class TestMerkleize:
    def test_zero_hash_constants(self) -> None:
        assert hash_nodes(ZERO_HASH, ZERO_HASH) == ZERO_HASH_DEPTH_1
        assert hash_nodes(ZERO_HASH_DEPTH_1, ZERO_HASH_DEPTH_1) == ZERO_HASH_DEPTH_2

    def test_empty_is_zero_hash(self) -> None:
        assert Merkle.merkleize([]) == ZERO_HASH

    def test_single_chunk_is_its_own_root(self) -> None:
        assert Merkle.merkleize([chunk(7)]) == chunk(7)

    def test_two_chunks(self) -> None:
        assert Merkle.merkleize([chunk(1), chunk(2)]) == hash_nodes(chunk(1), chunk(2))

    def test_three_chunks_pad_to_four(self) -> None:
        expected = hash_nodes(hash_nodes(chunk(1), chunk(2)), hash_nodes(chunk(3), ZERO_HASH))
        assert Merkle.merkleize([chunk(1), chunk(2), chunk(3)]) == expected


    def test_zero_leaves_give_zero_subtree_roots(self) -> None:
        assert Merkle.merkleize([ZERO_HASH, ZERO_HASH]) == ZERO_HASH_DEPTH_1
        assert Merkle.merkleize([ZERO_HASH] * 3) == ZERO_HASH_DEPTH_2

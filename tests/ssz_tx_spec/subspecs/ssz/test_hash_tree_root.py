"""Tests for `hash_tree_root` over basic types and containers."""

import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ssz_tx_spec.subspecs.ssz import ZERO_HASH, hash_tree_root
from ssz_tx_spec.types import Bytes4, Bytes32, Bytes65, Container, Uint8, Uint64, Uint256


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def pad32(data: bytes) -> bytes:
    return data + b"\x00" * (32 - len(data))


class ThreeFields(Container):
    """Three leaves, so the tree is padded to four."""

    a: Uint64
    b: Bytes4
    c: Bytes32


class Swapped(Container):
    """Same field types as `ThreeFields`, first two swapped by name."""

    b: Bytes4
    a: Uint64
    c: Bytes32


class TestBasicTypes:
    def test_uint_root_is_padded_little_endian(self) -> None:
        assert hash_tree_root(Uint64(0x0102)) == pad32(b"\x02\x01")
        assert hash_tree_root(Uint8(0xAB)) == pad32(b"\xab")

    def test_uint256_fills_one_chunk(self) -> None:
        value = Uint256(2**256 - 1)
        assert hash_tree_root(value) == b"\xff" * 32

    def test_zero_uint_is_zero_hash(self) -> None:
        assert hash_tree_root(Uint64(0)) == ZERO_HASH

    def test_bytes32_is_its_own_root(self) -> None:
        value = Bytes32(bytes(range(32)))
        assert hash_tree_root(value) == value

    def test_short_bytes_are_padded(self) -> None:
        assert hash_tree_root(Bytes4("0xdeadbeef")) == pad32(b"\xde\xad\xbe\xef")

    def test_bytes65_spans_three_chunks(self) -> None:
        data = bytes(range(65))
        left = sha256(data[:32] + data[32:64])
        right = sha256(pad32(data[64:]) + bytes(32))
        assert hash_tree_root(Bytes65(data)) == sha256(left + right)

    def test_raw_bytes_match_byte_vector(self) -> None:
        data = bytes(range(20))
        assert hash_tree_root(data) == pad32(data)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="unsupported"):
            hash_tree_root(1.5)


class TestContainer:
    def test_container_root_matches_manual_tree(self) -> None:
        value = ThreeFields(a=Uint64(5), b=Bytes4("0x01020304"), c=Bytes32(b"\x22" * 32))
        expected = sha256(
            sha256(pad32((5).to_bytes(8, "little")) + pad32(b"\x01\x02\x03\x04"))
            + sha256(b"\x22" * 32 + bytes(32))
        )
        assert hash_tree_root(value) == expected

    def test_field_order_changes_the_root(self) -> None:
        a, b, c = Uint64(5), Bytes4("0x01020304"), Bytes32(b"\x22" * 32)
        assert hash_tree_root(ThreeFields(a=a, b=b, c=c)) != hash_tree_root(Swapped(a=a, b=b, c=c))

    @given(st.integers(min_value=0, max_value=2**64 - 1), st.binary(min_size=32, max_size=32))
    def test_root_is_deterministic(self, a: int, c: bytes) -> None:
        first = ThreeFields(a=Uint64(a), b=Bytes4.zero(), c=Bytes32(c))
        second = ThreeFields(a=Uint64(a), b=Bytes4.zero(), c=Bytes32(c))
        assert hash_tree_root(first) == hash_tree_root(second)
        assert len(hash_tree_root(first)) == 32

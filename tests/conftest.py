"""Pytest configuration and shared fixtures."""

import pytest
from hypothesis import settings

from ssz_tx_spec.subspecs.domain import ChainId, ExecutionAddress
from ssz_tx_spec.subspecs.network import REFERENCE_NETWORK_CONFIG, NetworkConfig
from ssz_tx_spec.subspecs.transactions import ExampleTransaction
from ssz_tx_spec.types import Bytes32, Uint64, Uint256

# Curve arithmetic is pure Python; disable the per-example deadline.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")

TEST_PRIVATE_KEY = Bytes32(b"\x46" * 32)
"""Private key 0x4646...46."""

TEST_SIGNER = ExecutionAddress("0x9d8a62f656a8d1615c1294fd71e9cfb3e4855a4f")
"""Address of `TEST_PRIVATE_KEY`."""


@pytest.fixture
def network() -> NetworkConfig:
    """Network of the reference vector."""
    return REFERENCE_NETWORK_CONFIG


@pytest.fixture
def private_key() -> Bytes32:
    return TEST_PRIVATE_KEY


@pytest.fixture
def signer_address() -> ExecutionAddress:
    return TEST_SIGNER


@pytest.fixture
def example_transaction() -> ExampleTransaction:
    """Unsigned transaction of the reference vector."""
    return ExampleTransaction(
        chain_id=ChainId(424242),
        nonce=Uint64(42),
        max_fee_per_gas=Uint256(69123456789),
        gas=Uint64(21000),
        tx_to=ExecutionAddress("0xd8da6bf26964af9d7eed9e03e53415d37aa96045"),
        tx_value=Uint256(3141592653),
    )

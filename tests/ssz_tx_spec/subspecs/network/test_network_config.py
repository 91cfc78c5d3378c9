"""Tests for the network configuration loader."""

import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from ssz_tx_spec.exceptions import UnknownTransactionTypeError
from ssz_tx_spec.subspecs.domain import (
    ChainId,
    Hash32,
    TransactionType,
    Version,
    compute_transaction_domain,
)
from ssz_tx_spec.subspecs.network import (
    REFERENCE_NETWORK_CONFIG,
    NetworkConfig,
    TransactionTypeAssignment,
)

REFERENCE_YAML = """
GENESIS_HASH: 0x000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f
CHAIN_ID: 424242
TRANSACTION_TYPES:
- TX_TYPE: 0xab
  FORK_VERSION: 0x12345678
"""


class TestFromYaml:
    def test_reference_yaml_matches_constant(self) -> None:
        assert NetworkConfig.from_yaml(REFERENCE_YAML) == REFERENCE_NETWORK_CONFIG

    def test_hex_integers_keep_leading_zero_bytes(self) -> None:
        config = NetworkConfig.from_yaml(REFERENCE_YAML)
        assert config.genesis_hash == Hash32(bytes(range(32)))
        assert config.genesis_hash[0] == 0

    def test_quoted_hex_strings(self) -> None:
        config = NetworkConfig.from_yaml(
            'GENESIS_HASH: "0x' + "11" * 32 + '"\n'
            "CHAIN_ID: 1\n"
            "TRANSACTION_TYPES:\n"
            '- TX_TYPE: 2\n  FORK_VERSION: "0x00000001"\n'
        )
        assert config.genesis_hash == Hash32(b"\x11" * 32)
        assert config.fork_version_for(2) == Version("0x00000001")

    def test_transaction_types_default_to_empty(self) -> None:
        config = NetworkConfig.from_yaml("GENESIS_HASH: 0x01\nCHAIN_ID: 1\n")
        assert config.transaction_types == ()

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="ssz_tx_spec.subspecs.network.config"):
            NetworkConfig.from_yaml(REFERENCE_YAML)
        assert "chain_id=424242" in caplog.text

    def test_invalid_yaml(self) -> None:
        with pytest.raises(yaml.YAMLError):
            NetworkConfig.from_yaml("CHAIN_ID: [1,")

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            NetworkConfig.from_yaml("CHAIN_ID: 1\n")

    def test_unknown_key(self) -> None:
        with pytest.raises(ValidationError):
            NetworkConfig.from_yaml(REFERENCE_YAML + "EXTRA: 1\n")

    def test_oversized_genesis_hash(self) -> None:
        with pytest.raises(ValidationError):
            NetworkConfig.from_yaml("GENESIS_HASH: 0x" + "ff" * 33 + "\nCHAIN_ID: 1\n")

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "network.yaml"
        path.write_text(REFERENCE_YAML, encoding="utf-8")
        assert NetworkConfig.from_yaml_file(path) == REFERENCE_NETWORK_CONFIG
        assert NetworkConfig.from_yaml_file(str(path)) == REFERENCE_NETWORK_CONFIG

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            NetworkConfig.from_yaml_file(tmp_path / "absent.yaml")


class TestTransactionTypes:
    def test_duplicate_assignment_rejected(self) -> None:
        with pytest.raises(ValidationError, match="more than once"):
            NetworkConfig(
                genesis_hash=Hash32.zero(),
                chain_id=ChainId(1),
                transaction_types=(
                    TransactionTypeAssignment(
                        tx_type=TransactionType(1), fork_version=Version("0x00000001")
                    ),
                    TransactionTypeAssignment(
                        tx_type=TransactionType(1), fork_version=Version("0x00000002")
                    ),
                ),
            )

    def test_fork_version_lookup(self) -> None:
        assert REFERENCE_NETWORK_CONFIG.fork_version_for(0xAB) == Version("0x12345678")
        assert REFERENCE_NETWORK_CONFIG.fork_version_for(TransactionType(0xAB)) == Version(
            "0x12345678"
        )

    def test_unknown_type(self) -> None:
        with pytest.raises(UnknownTransactionTypeError) as exc_info:
            REFERENCE_NETWORK_CONFIG.fork_version_for(0x02)
        assert exc_info.value.tx_type == 0x02
        assert exc_info.value.context == "network config"
        assert "0x02" in str(exc_info.value)

    def test_transaction_domain(self) -> None:
        config = REFERENCE_NETWORK_CONFIG
        assert config.transaction_domain(0xAB) == compute_transaction_domain(
            0xAB, Version("0x12345678"), config.genesis_hash, config.chain_id
        )

    def test_unknown_type_has_no_domain(self) -> None:
        with pytest.raises(UnknownTransactionTypeError):
            REFERENCE_NETWORK_CONFIG.transaction_domain(0x03)


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        REFERENCE_NETWORK_CONFIG.chain_id = ChainId(1)  # type: ignore[misc]

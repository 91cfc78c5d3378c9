"""
Network configuration loader.

Everything the signing domain needs to know about a network is fixed when
the network is defined: its genesis hash, its chain id and the fork at which
each transaction type was introduced. `NetworkConfig` holds those values in
one frozen object that is passed explicitly to every domain computation.

The YAML format uses uppercase keys:

    GENESIS_HASH: 0x000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f
    CHAIN_ID: 424242
    TRANSACTION_TYPES:
    - TX_TYPE: 0xab
      FORK_VERSION: 0x12345678
"""

from __future__ import annotations

import logging
import operator
from pathlib import Path
from typing import Any, SupportsIndex

import yaml
from pydantic import Field, field_validator, model_validator
from typing_extensions import Final

from ssz_tx_spec.exceptions import UnknownTransactionTypeError
from ssz_tx_spec.subspecs.domain import (
    ChainId,
    Domain,
    Hash32,
    TransactionType,
    Version,
    compute_transaction_domain,
)
from ssz_tx_spec.types import StrictBaseModel

logger = logging.getLogger(__name__)


def _hex_from_yaml_int(value: Any, length: int) -> Any:
    """
    Undo YAML's parsing of `0x...` scalars as integers.

    Leading zero bytes are lost in the integer, so it is re-padded to `length` bytes.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return f"0x{value:0{length * 2}x}"
    return value


class TransactionTypeAssignment(StrictBaseModel):
    """The fork at which one transaction type was introduced."""

    tx_type: TransactionType = Field(alias="TX_TYPE")
    """1-byte transaction type tag."""

    fork_version: Version = Field(alias="FORK_VERSION")
    """Fork version in effect when the type was assigned. Never recomputed."""

    @field_validator("fork_version", mode="before")
    @classmethod
    def parse_hex_version(cls, v: Any) -> Any:
        """Accept fork versions that YAML parsed as integers."""
        return _hex_from_yaml_int(v, Version.LENGTH)


class NetworkConfig(StrictBaseModel):
    """
    Immutable per-network signing configuration.

    Established once before any signing or verification happens and only
    read afterwards, so one instance can be shared by any number of threads.
    """

    genesis_hash: Hash32 = Field(alias="GENESIS_HASH")
    """Hash of the network's genesis block."""

    chain_id: ChainId = Field(alias="CHAIN_ID")
    """Replay-protection chain identifier."""

    transaction_types: tuple[TransactionTypeAssignment, ...] = Field(
        default=(), alias="TRANSACTION_TYPES"
    )
    """Introduction fork of every transaction type known to this network."""

    @field_validator("genesis_hash", mode="before")
    @classmethod
    def parse_hex_genesis_hash(cls, v: Any) -> Any:
        """Accept genesis hashes that YAML parsed as integers."""
        return _hex_from_yaml_int(v, Hash32.LENGTH)

    @field_validator("transaction_types", mode="before")
    @classmethod
    def parse_assignments(cls, v: Any) -> tuple[TransactionTypeAssignment, ...]:
        """Build assignments from YAML mappings; a list from YAML becomes a tuple."""
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"transaction_types must be a list, got {type(v).__name__}")
        return tuple(
            item
            if isinstance(item, TransactionTypeAssignment)
            else TransactionTypeAssignment.model_validate(item)
            for item in v
        )

    @model_validator(mode="after")
    def check_unique_transaction_types(self) -> NetworkConfig:
        """A transaction type is assigned to exactly one fork."""
        seen: set[int] = set()
        for assignment in self.transaction_types:
            tag = int(assignment.tx_type)
            if tag in seen:
                raise ValueError(f"Transaction type {tag:#04x} is assigned more than once")
            seen.add(tag)
        return self

    def fork_version_for(self, tx_type: SupportsIndex) -> Version:
        """
        Look up the fork version at which `tx_type` was introduced.

        Raises:
            UnknownTransactionTypeError: If the network never assigned `tx_type`.
        """
        tag = operator.index(tx_type)
        for assignment in self.transaction_types:
            if int(assignment.tx_type) == tag:
                return assignment.fork_version
        raise UnknownTransactionTypeError(tag, "network config")

    def transaction_domain(self, tx_type: SupportsIndex) -> Domain:
        """Return the signing domain of `tx_type` on this network."""
        return compute_transaction_domain(
            tx_type, self.fork_version_for(tx_type), self.genesis_hash, self.chain_id
        )

    @classmethod
    def from_yaml(cls, content: str) -> NetworkConfig:
        """
        Load configuration from a YAML string.

        Raises:
            yaml.YAMLError: If the content is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        config = cls.model_validate(yaml.safe_load(content))
        logger.info(
            "Loaded network config: chain_id=%d, %d transaction type(s)",
            int(config.chain_id),
            len(config.transaction_types),
        )
        return config

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> NetworkConfig:
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(path)
        logger.debug("Reading network config from %s", path)
        return cls.from_yaml(path.read_text(encoding="utf-8"))


REFERENCE_NETWORK_CONFIG: Final = NetworkConfig(
    genesis_hash=Hash32(bytes(range(32))),
    chain_id=ChainId(424242),
    transaction_types=(
        TransactionTypeAssignment(
            tx_type=TransactionType(0xAB), fork_version=Version("0x12345678")
        ),
    ),
)
"""Network of the published reference vector: transaction type 0xab at fork 0x12345678."""

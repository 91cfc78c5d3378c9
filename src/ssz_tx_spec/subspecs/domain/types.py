"""Types of the signing-domain computation."""

from ssz_tx_spec.types import Bytes4, Bytes20, Bytes32, Uint8, Uint256


class TransactionType(Uint8):
    """External (wire-level) transaction-type discriminant."""


class ChainId(Uint256):
    """Numeric chain identifier used for replay protection."""


class DomainType(Bytes4):
    """4-byte signing-domain separator: `[mask | type_tag | mask | mask]`."""


class Version(Bytes4):
    """Fork version at which a transaction type was introduced."""


class Hash32(Bytes32):
    """A 32-byte hash, e.g. the genesis block hash."""


class Root(Bytes32):
    """A 32-byte Merkle root."""


class Domain(Bytes32):
    """Final signing domain: `domain_type ‖ fork_data_root[:28]`."""


class ExecutionAddress(Bytes20):
    """20-byte account address derived from a secp256k1 public key."""

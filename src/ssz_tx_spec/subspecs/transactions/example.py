"""Reference transaction scheme used by the published test vector."""

from ssz_tx_spec.subspecs.domain import ChainId, ExecutionAddress, TransactionType
from ssz_tx_spec.types import Bytes65, Container, Uint64, Uint256

from .scheme import SignedTransaction


class ExampleTransaction(Container):
    """A minimal value-transfer payload."""

    chain_id: ChainId
    nonce: Uint64
    max_fee_per_gas: Uint256
    gas: Uint64
    tx_to: ExecutionAddress
    tx_value: Uint256


class ExampleSignature(Bytes65):
    """secp256k1 signature `r ‖ s ‖ y_parity`."""


class ExampleSignedTransaction(SignedTransaction):
    """Envelope of `ExampleTransaction`, assigned type tag 0xab."""

    TX_TYPE = TransactionType(0xAB)

    message: ExampleTransaction
    signature: ExampleSignature

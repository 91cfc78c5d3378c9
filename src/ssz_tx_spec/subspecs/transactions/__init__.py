"""Transaction model, typed codec and signing."""

from .codec import DEFAULT_TRANSACTION_SCHEMES, decode_typed_transaction, encode_typed_transaction
from .example import ExampleSignature, ExampleSignedTransaction, ExampleTransaction
from .scheme import (
    SignedTransaction,
    TransactionSchemeRegistry,
    compute_ssz_sig_hash,
    compute_ssz_tx_hash,
)
from .signer import (
    is_valid_transaction_signature,
    recover_transaction_signer,
    sign_transaction,
    transaction_sig_hash,
)

__all__ = [
    "DEFAULT_TRANSACTION_SCHEMES",
    "ExampleSignature",
    "ExampleSignedTransaction",
    "ExampleTransaction",
    "SignedTransaction",
    "TransactionSchemeRegistry",
    "compute_ssz_sig_hash",
    "compute_ssz_tx_hash",
    "decode_typed_transaction",
    "encode_typed_transaction",
    "is_valid_transaction_signature",
    "recover_transaction_signer",
    "sign_transaction",
    "transaction_sig_hash",
]

"""
Signing and signature validation of transactions.

Validation answers a single question: does the signature recover to the
expected signer under this network's domain for this transaction type?
A wrong chain, a wrong type and a corrupted signature all give the same
answer, `False`.
"""

from __future__ import annotations

import logging
from typing import Type, TypeVar

from ssz_tx_spec.exceptions import InvalidSignatureError, TransactionError
from ssz_tx_spec.subspecs.domain import ExecutionAddress, Root
from ssz_tx_spec.subspecs.network import NetworkConfig
from ssz_tx_spec.subspecs.secp256k1 import (
    is_low_s,
    public_key_to_address,
    recover_public_key,
    sign,
)
from ssz_tx_spec.types import Bytes32, Bytes65, Container, SSZError

from .scheme import SignedTransaction, compute_ssz_sig_hash

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=SignedTransaction)


def transaction_sig_hash(
    scheme: Type[SignedTransaction], message: Container, network: NetworkConfig
) -> Root:
    """
    Return the signing root of `message` as a `scheme` transaction on `network`.

    Raises:
        UnknownTransactionTypeError: If `network` has no fork for the scheme's type.
    """
    return compute_ssz_sig_hash(message, network.transaction_domain(scheme.TX_TYPE))


def sign_transaction(
    scheme: Type[S],
    message: Container,
    private_key: Bytes32,
    network: NetworkConfig,
) -> S:
    """Sign `message` under the domain of `scheme` on `network` and build the envelope."""
    sig_hash = transaction_sig_hash(scheme, message, network)
    signature = scheme.signature_type()(sign(private_key, sig_hash))
    return scheme(message=message, signature=signature)


def recover_transaction_signer(
    signed: SignedTransaction, network: NetworkConfig
) -> ExecutionAddress:
    """
    Recover the address that signed `signed` on `network`.

    Raises:
        InvalidSignatureError: If the signature is malformed, high-s or unrecoverable.
        SSZLengthError: If the scheme's signature payload is not 65 bytes.
        UnknownTransactionTypeError: If `network` has no fork for the transaction type.
    """
    signature = Bytes65(signed.signature)
    if not is_low_s(signature):
        raise InvalidSignatureError("s is in the upper half of the curve order")

    sig_hash = transaction_sig_hash(type(signed), signed.message, network)
    return public_key_to_address(recover_public_key(signature, sig_hash))


def is_valid_transaction_signature(
    signed: SignedTransaction,
    network: NetworkConfig,
    expected_signer: ExecutionAddress,
) -> bool:
    """Return True if `signed` recovers to `expected_signer` on `network`."""
    try:
        signer = recover_transaction_signer(signed, network)
    except (TransactionError, SSZError) as e:
        logger.debug("Rejected %s signature: %s", type(signed).__name__, e)
        return False
    return bytes(signer) == bytes(expected_signer)

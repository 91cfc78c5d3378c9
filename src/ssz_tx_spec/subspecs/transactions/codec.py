"""
Typed transaction wire form.

A typed transaction is its 1-byte type tag followed by the SSZ encoding of
its signed envelope. Decoding reads the tag first and hands the rest to the
envelope class registered for it.
"""

from __future__ import annotations

import logging

from typing_extensions import Final

from ssz_tx_spec.types import SSZDecodeError

from .example import ExampleSignedTransaction
from .scheme import SignedTransaction, TransactionSchemeRegistry

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTION_SCHEMES: Final = TransactionSchemeRegistry(ExampleSignedTransaction)
"""Schemes understood by default."""


def encode_typed_transaction(signed: SignedTransaction) -> bytes:
    """Return `TX_TYPE ‖ ssz(signed)`."""
    return type(signed).TX_TYPE.encode_bytes() + signed.encode_bytes()


def decode_typed_transaction(
    data: bytes,
    schemes: TransactionSchemeRegistry = DEFAULT_TRANSACTION_SCHEMES,
) -> SignedTransaction:
    """
    Decode a typed transaction, dispatching on its leading type byte.

    Raises:
        SSZDecodeError: If `data` is empty or the envelope bytes are malformed.
        UnknownTransactionTypeError: If no scheme is registered for the tag.
    """
    if not data:
        raise SSZDecodeError("SignedTransaction", "missing transaction type byte", offset=0)

    scheme = schemes.scheme_for(data[0])
    logger.debug("Decoding transaction type %#04x as %s", data[0], scheme.__name__)
    return scheme.decode_bytes(bytes(data[1:]))

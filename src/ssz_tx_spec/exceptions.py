"""Errors raised while building, signing and decoding transactions."""

from __future__ import annotations


class TransactionError(Exception):
    """Base exception for transaction-level errors."""


class UnknownTransactionTypeError(TransactionError):
    """
    Raised when a transaction type has no scheme or no fork assignment.

    Attributes:
        tx_type: The unrecognised 1-byte type tag.
        context: Where the lookup failed (e.g. "network config", "scheme registry").
    """

    def __init__(self, tx_type: int, context: str) -> None:
        self.tx_type = int(tx_type)
        self.context = context
        super().__init__(f"Unknown transaction type {self.tx_type:#04x} in {context}")


class InvalidSignatureError(TransactionError):
    """
    Raised when a signature cannot be parsed or does not recover to a public key.

    Attributes:
        reason: Why the signature was rejected.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid signature: {reason}")

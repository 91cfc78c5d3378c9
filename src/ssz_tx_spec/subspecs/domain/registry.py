"""Mapping of transaction types onto signing-domain types."""

from typing import SupportsIndex

from .constants import DOMAIN_EXECUTION_TRANSACTION_BASE, TRANSACTION_TYPE_BYTE_INDEX
from .types import DomainType, TransactionType


def domain_type_for_transaction_type(tx_type: SupportsIndex) -> DomainType:
    """
    Derive the signing-domain type of a transaction type.

    Byte 1 of `DOMAIN_EXECUTION_TRANSACTION_BASE` is replaced by `tx_type`;
    bytes 0, 2 and 3 are kept. The map is injective over all 256 tags.

    Raises:
        SSZOverflowError: If `tx_type` does not fit in one byte.
    """
    tag = TransactionType(tx_type)
    base = bytes(DOMAIN_EXECUTION_TRANSACTION_BASE)
    return DomainType(
        base[:TRANSACTION_TYPE_BYTE_INDEX]
        + tag.encode_bytes()
        + base[TRANSACTION_TYPE_BYTE_INDEX + 1 :]
    )

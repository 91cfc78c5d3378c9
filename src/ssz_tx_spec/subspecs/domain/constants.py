"""
Domain type masks.

Signing domains share one 4-byte namespace with the consensus layer. The
execution-transaction range sets `0x01` in byte 0 and the execution mask
in byte 3, which keeps it disjoint from consensus-application domains.
"""

from typing_extensions import Final

from .types import DomainType

DOMAIN_APPLICATION_MASK: Final = DomainType("0x00000001")
"""Mask reserved for consensus-layer application domains."""

DOMAIN_EXECUTION_MASK: Final = DomainType("0x00000002")
"""Mask reserved for execution-layer domains."""

DOMAIN_EXECUTION_TRANSACTION_BASE: Final = DomainType("0x01000002")
"""Base of the execution-transaction domain range; byte 1 carries the transaction type."""

TRANSACTION_TYPE_BYTE_INDEX: Final = 1
"""The only byte of the base that a transaction type may overwrite."""

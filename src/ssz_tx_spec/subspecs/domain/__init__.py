"""Signing-domain separation for execution-layer transactions."""

from .constants import (
    DOMAIN_APPLICATION_MASK,
    DOMAIN_EXECUTION_MASK,
    DOMAIN_EXECUTION_TRANSACTION_BASE,
)
from .fork_data import (
    ExecutionForkData,
    compute_execution_domain,
    compute_execution_fork_data_root,
)
from .registry import domain_type_for_transaction_type
from .signing import SigningData, compute_signing_root, compute_transaction_domain
from .types import (
    ChainId,
    Domain,
    DomainType,
    ExecutionAddress,
    Hash32,
    Root,
    TransactionType,
    Version,
)

__all__ = [
    "DOMAIN_APPLICATION_MASK",
    "DOMAIN_EXECUTION_MASK",
    "DOMAIN_EXECUTION_TRANSACTION_BASE",
    "ChainId",
    "Domain",
    "DomainType",
    "ExecutionAddress",
    "ExecutionForkData",
    "Hash32",
    "Root",
    "SigningData",
    "TransactionType",
    "Version",
    "compute_execution_domain",
    "compute_execution_fork_data_root",
    "compute_signing_root",
    "compute_transaction_domain",
    "domain_type_for_transaction_type",
]

"""Per-network signing configuration."""

from .config import REFERENCE_NETWORK_CONFIG, NetworkConfig, TransactionTypeAssignment

__all__ = [
    "REFERENCE_NETWORK_CONFIG",
    "NetworkConfig",
    "TransactionTypeAssignment",
]

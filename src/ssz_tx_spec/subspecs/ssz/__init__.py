"""SSZ (Simple Serialize) Merkleization."""

from .constants import ZERO_HASH
from .hash import RootHasher, hash_tree_root

__all__ = [
    "RootHasher",
    "hash_tree_root",
    "ZERO_HASH",
]

"""Reusable SSZ type definitions."""

from .base import StrictBaseModel
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes4, Bytes20, Bytes32, Bytes65
from .container import Container
from .exceptions import (
    SSZDecodeError,
    SSZError,
    SSZLengthError,
    SSZOverflowError,
    SSZSerializationError,
    SSZStreamError,
    SSZTypeDefinitionError,
    SSZTypeError,
    SSZValueError,
)
from .ssz_base import SSZType
from .uint import BaseUint, Uint8, Uint64, Uint256

__all__ = [
    # Core types
    "BaseUint",
    "Uint8",
    "Uint64",
    "Uint256",
    "BaseBytes",
    "Bytes4",
    "Bytes20",
    "Bytes32",
    "Bytes65",
    "ZERO_HASH",
    "StrictBaseModel",
    "SSZType",
    "Container",
    # Exceptions
    "SSZError",
    "SSZTypeError",
    "SSZTypeDefinitionError",
    "SSZValueError",
    "SSZOverflowError",
    "SSZLengthError",
    "SSZSerializationError",
    "SSZDecodeError",
    "SSZStreamError",
]

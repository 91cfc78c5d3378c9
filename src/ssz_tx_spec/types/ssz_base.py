"""Abstract interface implemented by every SSZ type."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import IO

from typing_extensions import Self

from .exceptions import SSZStreamError


class SSZType(ABC):
    """
    Abstract base class for all SSZ types.

    Scalars (`BaseUint`, `BaseBytes`) subclass a builtin and this class
    directly; composite types go through `Container`.
    """

    @classmethod
    @abstractmethod
    def is_fixed_size(cls) -> bool:
        """Return True if every value of the type encodes to the same number of bytes."""
        ...

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """
        Return the encoded byte length of a fixed-size type.

        Raises:
            SSZTypeError: If the type is variable-size.
        """
        ...

    @abstractmethod
    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the SSZ encoding of the value to `stream`.

        Returns:
            int: The number of bytes written.
        """
        ...

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read a value of this type occupying exactly `scope` bytes of `stream`.

        Args:
            stream (IO[bytes]): The stream to read from.
            scope (int): The number of bytes that belong to this value.
        """
        ...

    def encode_bytes(self) -> bytes:
        """Return the SSZ encoding of the value."""
        with io.BytesIO() as stream:
            self.serialize(stream)
            return stream.getvalue()

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Decode a complete SSZ encoding into a value of this type."""
        with io.BytesIO(data) as stream:
            return cls.deserialize(stream, len(data))


def read_exact(stream: IO[bytes], size: int, type_name: str) -> bytes:
    """
    Read exactly `size` bytes from `stream`.

    Raises:
        SSZStreamError: If the stream holds fewer than `size` bytes.
    """
    data = stream.read(size)
    if len(data) != size:
        raise SSZStreamError(type_name, expected_bytes=size, actual_bytes=len(data))
    return data

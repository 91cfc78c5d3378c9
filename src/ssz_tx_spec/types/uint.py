"""Unsigned Integer Type Specification."""

from __future__ import annotations

import operator
from typing import IO, Any, ClassVar, SupportsIndex

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import SSZDecodeError, SSZError, SSZOverflowError
from .ssz_base import SSZType, read_exact


class BaseUint(int, SSZType):
    """
    A fixed-width unsigned integer that encodes as `BITS // 8` little-endian bytes.

    Subclasses only set `BITS`.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsIndex) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            TypeError: If `value` is a bool or is not an integer (floats are never truncated).
            SSZOverflowError: If `value` is outside `[0, 2**BITS - 1]`.
        """
        if isinstance(value, bool):
            raise TypeError(f"{cls.__name__} does not accept bool values")
        int_value = operator.index(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise SSZOverflowError(int_value, cls.__name__, max_value=2**cls.BITS - 1)
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            if isinstance(value, cls):
                return value
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{cls.__name__} expects an int, got {type(value).__name__}")
            try:
                return cls(value)
            except SSZError as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Advertise the bit width in generated JSON schemas."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    @classmethod
    def is_fixed_size(cls) -> bool:
        """Unsigned integers are always fixed-size."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Return `BITS // 8`."""
        return cls.BITS // 8

    def encode_bytes(self) -> bytes:
        """Return the little-endian SSZ encoding."""
        return int(self).to_bytes(self.get_byte_length(), "little")

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Decode exactly `BITS // 8` little-endian bytes."""
        if len(data) != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little"))

    def serialize(self, stream: IO[bytes]) -> int:
        """Write the little-endian encoding to `stream`."""
        data = self.encode_bytes()
        stream.write(data)
        return len(data)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """Read one integer from `stream`; `scope` must equal the byte length."""
        if scope != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"invalid scope {scope}, expected {cls.get_byte_length()}"
            )
        return cls.decode_bytes(read_exact(stream, scope, cls.__name__))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __hash__(self) -> int:
        return hash((type(self), int(self)))


class Uint8(BaseUint):
    """An 8-bit unsigned integer (uint8)."""

    BITS = 8


class Uint64(BaseUint):
    """A 64-bit unsigned integer (uint64)."""

    BITS = 64


class Uint256(BaseUint):
    """A 256-bit unsigned integer (uint256)."""

    BITS = 256

"""
Fixed-length byte vector SSZ types.

`BaseBytes` subclasses pin an exact `LENGTH`; every protocol value in the
signature scheme (versions, domain types, hashes, addresses, signatures) is
one of them.
"""

from __future__ import annotations

from typing import IO, Any, ClassVar, Iterable, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import SSZDecodeError, SSZError, SSZLengthError, SSZTypeDefinitionError
from .ssz_base import SSZType, read_exact


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray`
      - Hex strings, with or without a '0x' prefix
      - Iterables of integers in [0, 255]

    Raises:
        TypeError: For anything else. A bare int is rejected: `bytes(n)` would
            silently build `n` zero bytes.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        return bytes(bytearray(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to bytes")


class BaseBytes(bytes, SSZType):
    """
    A fixed-length, immutable byte string.

    The length is checked on construction: short or long inputs are rejected,
    never padded or truncated.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new instance.

        Raises:
            SSZTypeDefinitionError: If the class does not define `LENGTH`.
            TypeError: If `value` is not bytes, a hex string or an iterable of ints.
            SSZLengthError: If the coerced value is not exactly `LENGTH` bytes.
        """
        if not hasattr(cls, "LENGTH"):
            raise SSZTypeDefinitionError(cls.__name__, missing_attr="LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise SSZLengthError(cls.__name__, expected=cls.LENGTH, actual=len(b))
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Return the all-zero value of this type."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def is_fixed_size(cls) -> bool:
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.LENGTH

    def serialize(self, stream: IO[bytes]) -> int:
        """Write the raw bytes to `stream`."""
        stream.write(self)
        return len(self)

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """Read exactly `LENGTH` bytes from `stream`."""
        if scope != cls.LENGTH:
            raise SSZDecodeError(cls.__name__, f"invalid scope {scope}, expected {cls.LENGTH}")
        return cls(read_exact(stream, scope, cls.__name__))

    def encode_bytes(self) -> bytes:
        return bytes(self)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        if len(data) != cls.LENGTH:
            raise SSZDecodeError(cls.__name__, f"expected {cls.LENGTH} bytes, got {len(data)}")
        return cls(data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        Instances of the class pass through untouched. Anything else is coerced
        with the class constructor, so hex strings from YAML or JSON work too.
        Serialization emits a `0x`-prefixed hex string.
        """

        def validate(value: Any) -> BaseBytes:
            try:
                return cls(value)
            except (SSZError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(validate),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: "0x" + x.hex()
            ),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"

    def __hash__(self) -> int:
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)


class Bytes4(BaseBytes):
    """Fixed-size byte array of exactly 4 bytes."""

    LENGTH = 4


class Bytes20(BaseBytes):
    """Fixed-size byte array of exactly 20 bytes."""

    LENGTH = 20


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32


class Bytes65(BaseBytes):
    """Fixed-size byte array of exactly 65 bytes."""

    LENGTH = 65


ZERO_HASH: Bytes32 = Bytes32.zero()
"""32 zero bytes; the padding chunk of every Merkle tree."""

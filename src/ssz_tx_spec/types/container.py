"""
SSZ Container Type: ordered heterogeneous collections with named fields.

Field order is part of a container's identity: both the serialization and
the hash tree root walk the fields in definition order, so reordering fields
changes every derived hash.

Only fixed-size fields are supported. Every value the signature scheme
hashes (versions, hashes, chain ids, addresses, signatures) is fixed-width.
"""

from __future__ import annotations

from typing import IO, Any, Type, cast

from typing_extensions import Self

from .base import StrictBaseModel
from .exceptions import SSZDecodeError, SSZTypeDefinitionError
from .ssz_base import SSZType, read_exact


class Container(StrictBaseModel, SSZType):
    """
    SSZ Container: a strict, frozen, ordered collection of named fields.

    Example:
        >>> class ExecutionForkData(Container):
        ...     fork_version: Version
        ...     genesis_hash: Hash32
        ...     chain_id: ChainId

    Serialization is the concatenation of the field encodings:
        [field_1][field_2]...[field_n]
    """

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Reject fields that are not fixed-size SSZ types."""
        super().__pydantic_init_subclass__(**kwargs)
        for name, info in cls.model_fields.items():
            annotation = info.annotation
            if not (isinstance(annotation, type) and issubclass(annotation, SSZType)):
                raise SSZTypeDefinitionError(
                    cls.__name__, detail=f"field '{name}' is not an SSZ type"
                )
            if not annotation.is_fixed_size():
                raise SSZTypeDefinitionError(
                    cls.__name__, detail=f"field '{name}' is not fixed-size"
                )

    @classmethod
    def field_types(cls) -> list[tuple[str, Type[SSZType]]]:
        """Return `(name, type)` pairs in definition order."""
        return [
            (name, cast(Type[SSZType], info.annotation)) for name, info in cls.model_fields.items()
        ]

    @classmethod
    def is_fixed_size(cls) -> bool:
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Sum the byte lengths of all fields."""
        return sum(field_type.get_byte_length() for _, field_type in cls.field_types())

    def serialize(self, stream: IO[bytes]) -> int:
        """Write every field encoding to `stream` in definition order."""
        return sum(getattr(self, name).serialize(stream) for name, _ in self.field_types())

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read a container occupying exactly `scope` bytes of `stream`.

        Raises:
            SSZDecodeError: If `scope` differs from the container's byte length.
            SSZStreamError: If the stream ends early.
        """
        if scope != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {scope}"
            )

        fields = {}
        for name, field_type in cls.field_types():
            size = field_type.get_byte_length()
            fields[name] = field_type.decode_bytes(read_exact(stream, size, cls.__name__))
        return cls(**fields)

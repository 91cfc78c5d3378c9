"""Exception hierarchy for the SSZ type layer."""

from __future__ import annotations


class SSZError(Exception):
    """
    Base exception for all SSZ-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class SSZTypeError(SSZError):
    """Base class for errors in how a type is defined or used."""


class SSZTypeDefinitionError(SSZTypeError):
    """
    Raised when an SSZ type class is declared with the wrong shape.

    Attributes:
        type_name: The name of the offending class.
        missing_attr: The class attribute that was not defined, if any.
        detail: Free-form description of what is wrong, if any.
    """

    def __init__(
        self,
        type_name: str,
        *,
        missing_attr: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.missing_attr = missing_attr
        self.detail = detail

        if missing_attr:
            msg = f"{type_name} must define {missing_attr}"
        elif detail:
            msg = f"{type_name}: {detail}"
        else:
            msg = f"{type_name} has an invalid type definition"

        super().__init__(msg)


class SSZValueError(SSZError):
    """Base class for values that do not fit their SSZ type."""


class SSZOverflowError(SSZValueError):
    """
    Raised when an integer does not fit in an unsigned SSZ integer type.

    Attributes:
        value: The rejected integer.
        type_name: The target type.
        max_value: The largest value the type can hold.
    """

    def __init__(self, value: int, type_name: str, *, max_value: int) -> None:
        self.value = value
        self.type_name = type_name
        self.max_value = max_value

        super().__init__(f"{value} is out of range for {type_name} (valid range: [0, {max_value}])")


class SSZLengthError(SSZValueError):
    """
    Raised when a fixed-width byte value has the wrong number of bytes.

    Attributes:
        type_name: The fixed-width type.
        expected: The exact length the type requires.
        actual: The length that was supplied.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual

        super().__init__(f"{type_name} expects exactly {expected} bytes, got {actual}")


class SSZSerializationError(SSZError):
    """Base class for encoding and decoding errors."""


class SSZDecodeError(SSZSerializationError):
    """
    Raised when bytes cannot be decoded into the requested type.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        offset: The byte offset of the problem, when known.
    """

    def __init__(self, type_name: str, detail: str, *, offset: int | None = None) -> None:
        self.type_name = type_name
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode {type_name}: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)


class SSZStreamError(SSZSerializationError):
    """
    Raised when a stream ends before a value could be read in full.

    Attributes:
        type_name: The type being read.
        expected_bytes: Number of bytes that were needed.
        actual_bytes: Number of bytes the stream produced.
    """

    def __init__(self, type_name: str, *, expected_bytes: int, actual_bytes: int) -> None:
        self.type_name = type_name
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes

        super().__init__(
            f"Stream ended prematurely while reading {type_name}: "
            f"expected {expected_bytes} bytes, got {actual_bytes}"
        )

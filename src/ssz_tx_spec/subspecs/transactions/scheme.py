"""
Signed transaction envelopes and the registry that dispatches on their type tag.

Each transaction scheme is a `SignedTransaction` subclass: a container with
exactly two fields, `message` then `signature`, and a class-level `TX_TYPE`.
The envelope's hash tree root is the transaction identifier; the signature
covers a different root, the signing root of `message` under the type's
domain.
"""

from __future__ import annotations

import operator
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, SupportsIndex, Type, cast

from typing_extensions import Final

from ssz_tx_spec.exceptions import UnknownTransactionTypeError
from ssz_tx_spec.subspecs.domain import Domain, Root, TransactionType, compute_signing_root
from ssz_tx_spec.subspecs.ssz.hash import RootHasher, hash_tree_root
from ssz_tx_spec.types import Container, SSZType, SSZTypeDefinitionError

ENVELOPE_FIELDS: Final = ("message", "signature")
"""Required field names of a signed envelope, in order."""


class SignedTransaction(Container):
    """
    Base class of signed transaction envelopes.

    Subclasses set `TX_TYPE` and declare the `message` and `signature`
    fields with their scheme-specific types:

        class ExampleSignedTransaction(SignedTransaction):
            TX_TYPE = TransactionType(0xAB)

            message: ExampleTransaction
            signature: ExampleSignature
    """

    TX_TYPE: ClassVar[TransactionType]
    """1-byte tag of this scheme; also selects the signing domain."""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Reject envelope classes without a type tag or with the wrong field layout."""
        super().__pydantic_init_subclass__(**kwargs)
        if not hasattr(cls, "TX_TYPE"):
            raise SSZTypeDefinitionError(cls.__name__, missing_attr="TX_TYPE")
        field_names = tuple(cls.model_fields)
        if field_names != ENVELOPE_FIELDS:
            raise SSZTypeDefinitionError(
                cls.__name__,
                detail=f"envelope fields must be {ENVELOPE_FIELDS}, got {field_names}",
            )

    @classmethod
    def message_type(cls) -> Type[SSZType]:
        """Return the type of the unsigned payload."""
        return cast(Type[SSZType], cls.model_fields["message"].annotation)

    @classmethod
    def signature_type(cls) -> Type[SSZType]:
        """Return the type of the signature payload."""
        return cast(Type[SSZType], cls.model_fields["signature"].annotation)


def compute_ssz_sig_hash(
    message: Container, domain: Domain, *, hash_fn: RootHasher = hash_tree_root
) -> Root:
    """Return the signing root of an unsigned transaction under `domain`."""
    return compute_signing_root(message, domain, hash_fn=hash_fn)


def compute_ssz_tx_hash(
    signed: SignedTransaction, *, hash_fn: RootHasher = hash_tree_root
) -> Root:
    """Return the transaction identifier: the root of the whole signed envelope."""
    return Root(hash_fn(signed))


class TransactionSchemeRegistry:
    """
    Immutable table of transaction schemes keyed by their type tag.

    Built once from a fixed set of schemes; lookups never mutate it.
    """

    def __init__(self, *schemes: Type[SignedTransaction]) -> None:
        table: dict[int, Type[SignedTransaction]] = {}
        for scheme in schemes:
            tag = int(scheme.TX_TYPE)
            if tag in table:
                raise ValueError(
                    f"Transaction type {tag:#04x} claimed by both "
                    f"{table[tag].__name__} and {scheme.__name__}"
                )
            table[tag] = scheme
        self._schemes = MappingProxyType(table)

    def scheme_for(self, tx_type: SupportsIndex) -> Type[SignedTransaction]:
        """
        Return the envelope class registered for `tx_type`.

        Raises:
            UnknownTransactionTypeError: If no scheme uses `tx_type`.
        """
        tag = operator.index(tx_type)
        try:
            return self._schemes[tag]
        except KeyError:
            raise UnknownTransactionTypeError(tag, "scheme registry") from None

    def __contains__(self, tx_type: object) -> bool:
        return isinstance(tx_type, int) and int(tx_type) in self._schemes

    def __iter__(self) -> Iterator[Type[SignedTransaction]]:
        return iter(self._schemes.values())

    def __len__(self) -> int:
        return len(self._schemes)

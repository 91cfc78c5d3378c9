"""Strict pydantic base model shared by every container and config object."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    An immutable pydantic model that rejects unknown fields and loose coercion.

    Frozen instances can be shared freely between threads: signing and
    validation only ever read them.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

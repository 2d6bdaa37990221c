"""Instantiation functionality: zero values, fresh values, and materialized records."""

from typemeta.instantiate.instantiator import (
    Instantiator,
    fresh_value,
    is_self_reference,
    zero_value,
)

__all__ = [
    "Instantiator",
    "zero_value",
    "fresh_value",
    "is_self_reference",
]

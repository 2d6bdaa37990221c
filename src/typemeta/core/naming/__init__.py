"""Naming functionality: structural strings and canonical registry names."""

from typemeta.core.naming.core import canonical_name, is_equal_name, name_of, type_string

__all__ = [
    "canonical_name",
    "is_equal_name",
    "name_of",
    "type_string",
]

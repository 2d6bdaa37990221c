"""Registry functionality: name-to-type mapping and builtin registrations."""

from typemeta.registry.defaults import (
    DURATION,
    ErrorString,
    Time,
    create_registry,
    new_error,
    register_builtin_types,
)
from typemeta.registry.registry import TypeRegistry, descriptor_of

__all__ = [
    "TypeRegistry",
    "descriptor_of",
    "create_registry",
    "register_builtin_types",
    "new_error",
    "ErrorString",
    "Time",
    "DURATION",
]

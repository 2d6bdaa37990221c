"""typemeta: runtime type metadata, instantiation, and identity-preserving deep copy.

Usage:
    from dataclasses import dataclass
    from typemeta import Instantiator, Pointer, create_registry, deep_copy, record

    @record
    @dataclass
    class Node:
        label: str
        next: Pointer["Node"] | None = None

    registry = create_registry()
    name = registry.insert(Node)

    node = Instantiator(registry).make(name).data
    clone = deep_copy(node)
"""

__version__ = "0.1.0"

# Configuration
from typemeta.config import TypeMetaSettings

# Copying
from typemeta.copying import CopyContext, DeepCopyEngine, deep_copy

# Core primitives
from typemeta.core import (
    BOOL,
    CALLABLE,
    COMPLEX64,
    COMPLEX128,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    STRING,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    Channel,
    Dynamic,
    Field,
    Kind,
    NotFoundError,
    NotSettableError,
    Pointer,
    Struct,
    TypeDescriptor,
    TypeMetaError,
    UnsupportedKindError,
    Value,
    address_of,
    array_of,
    canonical_name,
    channel_of,
    dynamic,
    is_equal_name,
    mapping_of,
    name_of,
    named,
    opaque,
    record,
    record_type,
    reference_to,
    sequence_of,
    type_of,
)

# Instantiation
from typemeta.instantiate import Instantiator

# Probing
from typemeta.probe import any_settable

# Registry
from typemeta.registry import (
    TypeRegistry,
    create_registry,
    new_error,
    register_builtin_types,
)

__all__ = [
    # Version
    "__version__",
    # Descriptors
    "Kind",
    "Field",
    "TypeDescriptor",
    "BOOL",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "FLOAT32",
    "FLOAT64",
    "COMPLEX64",
    "COMPLEX128",
    "STRING",
    "CALLABLE",
    "array_of",
    "sequence_of",
    "mapping_of",
    "reference_to",
    "channel_of",
    "dynamic",
    "opaque",
    "record_type",
    "named",
    "address_of",
    "record",
    "type_of",
    # Values
    "Value",
    "Pointer",
    "Channel",
    "Dynamic",
    "Struct",
    # Naming
    "canonical_name",
    "is_equal_name",
    "name_of",
    # Registry
    "TypeRegistry",
    "create_registry",
    "register_builtin_types",
    "new_error",
    # Instantiation
    "Instantiator",
    # Copying
    "CopyContext",
    "DeepCopyEngine",
    "deep_copy",
    # Probing
    "any_settable",
    # Config
    "TypeMetaSettings",
    # Errors
    "TypeMetaError",
    "NotFoundError",
    "UnsupportedKindError",
    "NotSettableError",
]

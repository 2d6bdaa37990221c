"""Descriptor functionality: kinds, fields, constructors, and the record decorator."""

from typemeta.core.descriptor.core import (
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
    address_of,
    array_of,
    channel_of,
    descriptor_for,
    dynamic,
    mapping_of,
    named,
    opaque,
    record,
    record_type,
    reference_to,
    sequence_of,
    type_of,
)
from typemeta.core.descriptor.models import Field, Kind, TypeDescriptor

__all__ = [
    # Models
    "Kind",
    "Field",
    "TypeDescriptor",
    # Builtin descriptors
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
    # Constructors
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
    # Python integration
    "record",
    "descriptor_for",
    "type_of",
]

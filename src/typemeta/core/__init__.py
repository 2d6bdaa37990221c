"""Core functionalities: stateless descriptors, values, and naming.

Architecture Note:
    core/ contains pure, stateless building blocks with no process-wide state.
    For stateful services, see registry/, instantiate/, copying/, and probe/.
"""

from typemeta.core.descriptor import (
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
    Field,
    Kind,
    TypeDescriptor,
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
from typemeta.core.errors import (
    NotFoundError,
    NotSettableError,
    TypeMetaError,
    UnsupportedKindError,
)
from typemeta.core.naming import canonical_name, is_equal_name, name_of, type_string
from typemeta.core.value import Channel, Dynamic, Pointer, Struct, Value

__all__ = [
    # Descriptor
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
    "descriptor_for",
    "type_of",
    # Value
    "Value",
    "Pointer",
    "Channel",
    "Dynamic",
    "Struct",
    # Naming
    "canonical_name",
    "is_equal_name",
    "name_of",
    "type_string",
    # Errors
    "TypeMetaError",
    "NotFoundError",
    "UnsupportedKindError",
    "NotSettableError",
]

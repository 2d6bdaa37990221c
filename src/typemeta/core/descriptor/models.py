"""Descriptor models: kinds, fields, and the TypeDescriptor itself.

A TypeDescriptor is the uniform, recursive description of a type's shape.
Every other component walks descriptors; none of them inspects Python
classes directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Kind(Enum):
    """Structural kind of a type. Fixed when the descriptor is created."""

    BOOL = "bool"
    INT = "int"  # signed, see width
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    ARRAY = "array"  # fixed length
    SEQUENCE = "sequence"  # growable
    MAPPING = "mapping"
    RECORD = "record"
    REFERENCE = "reference"
    DYNAMIC = "dynamic"  # polymorphic container
    CHANNEL = "channel"
    CALLABLE = "callable"
    OPAQUE = "opaque"  # raw memory, never instantiated or copied

    @property
    def is_scalar(self) -> bool:
        """Kinds copied by value with no nested storage."""
        return self in _SCALAR_KINDS

    @property
    def has_element(self) -> bool:
        """Kinds whose `elem` descriptor describes their contents."""
        return self in _ELEMENT_KINDS


_SCALAR_KINDS = frozenset(
    {Kind.BOOL, Kind.INT, Kind.UINT, Kind.FLOAT, Kind.COMPLEX, Kind.STRING}
)
_ELEMENT_KINDS = frozenset(
    {Kind.ARRAY, Kind.SEQUENCE, Kind.MAPPING, Kind.REFERENCE, Kind.CHANNEL}
)


@dataclass(frozen=True, slots=True)
class Field:
    """One record field. Restricted (non-exported) fields are never written by copies."""

    name: str
    type: TypeDescriptor
    exported: bool = True


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class TypeDescriptor:
    """Immutable description of a type's shape and name.

    Two descriptors are the same type iff named types share kind, namespace
    and name, and anonymous types are recursively structurally identical.

    Attributes:
        kind: Structural kind.
        name: Declared name, empty for anonymous types.
        namespace: Owning module/package path, empty for builtin or anonymous types.
        width: Bit width for numeric kinds.
        length: Length for fixed arrays.
        elem: Element (array, sequence, reference, channel) or value (mapping) type.
        key: Key type for mappings.
        fields: Ordered record fields; None while a record is still being declared.
        py_type: Python class record instances materialize as (not part of identity).
        mutable: False for frozen record classes (not part of identity).
    """

    kind: Kind
    name: str = ""
    namespace: str = ""
    width: int = 0
    length: int = 0
    elem: TypeDescriptor | None = None
    key: TypeDescriptor | None = None
    fields: tuple[Field, ...] | None = None
    py_type: type | None = None
    mutable: bool = True

    @property
    def is_named(self) -> bool:
        return bool(self.name)

    @property
    def record_fields(self) -> tuple[Field, ...]:
        """Fields of a record, empty for other kinds and undefined records."""
        return self.fields or ()

    def define_fields(self, fields: Any) -> None:
        """Fill the field list of a record declared without one.

        Allowed exactly once, which is what lets a record refer to itself
        through its own descriptor.

        Raises:
            TypeError: If this is not a record or its fields are already defined.
        """
        if self.kind is not Kind.RECORD:
            raise TypeError(f"cannot define fields on {self.kind.value} type {self}")
        if self.fields is not None:
            raise TypeError(f"fields of {self} are already defined")
        object.__setattr__(self, "fields", tuple(fields))

    def _identity(self) -> tuple[Any, ...]:
        if self.name:
            return (self.kind, self.namespace, self.name)
        return (self.kind, self.width, self.length, self.elem, self.key, self.fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self is other or self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        # Late import to avoid circular dependency
        from typemeta.core.naming import type_string

        return type_string(self)

    def __repr__(self) -> str:
        return f"TypeDescriptor({self.kind.name}, {str(self)!r})"

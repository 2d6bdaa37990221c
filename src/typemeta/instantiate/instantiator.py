"""Zero-value and fresh-value instantiation from descriptors.

Usage:
    instantiator = Instantiator(registry)
    zero = instantiator.make_zero("example.graph.Node")
    buf = instantiator.make_fresh(sequence_of(INT), 16)    # 16 zeroed ints
    node = instantiator.make(Node.__type_descriptor__)     # pointers allocated

Fresh references are never null. `make` additionally allocates the reference
and sequence fields of records, skipping a reference field whose pointee is
the enclosing record (or a reference to it). Longer cycles (A -> B -> A) are
not detected and recurse without bound.
"""

from __future__ import annotations

import logging
from typing import Any

from typemeta.config import TypeMetaSettings
from typemeta.core.descriptor import Kind, TypeDescriptor, reference_to
from typemeta.core.errors import UnsupportedKindError
from typemeta.core.naming import canonical_name
from typemeta.core.value import Channel, Pointer, Value, build_record, write_field
from typemeta.registry import TypeRegistry

logger = logging.getLogger(__name__)

_SCALAR_ZEROS: dict[Kind, Any] = {
    Kind.BOOL: False,
    Kind.INT: 0,
    Kind.UINT: 0,
    Kind.FLOAT: 0.0,
    Kind.COMPLEX: 0j,
    Kind.STRING: "",
}


def zero_value(t: TypeDescriptor) -> Any:
    """Zero representation of `t`, allocating no nested storage.

    Arrays and records are values and are zeroed element by element;
    sequences, mappings, references, channels, callables and dynamic
    slots are None.

    Raises:
        UnsupportedKindError: If `t` is or contains an opaque kind.
    """
    kind = t.kind
    if kind is Kind.OPAQUE:
        raise UnsupportedKindError(kind, canonical_name(t))
    if kind.is_scalar:
        return _SCALAR_ZEROS[kind]
    if kind is Kind.ARRAY:
        return [zero_value(t.elem) for _ in range(t.length)]  # type: ignore[arg-type]
    if kind is Kind.RECORD:
        return build_record(t, {f.name: zero_value(f.type) for f in t.record_fields})
    return None


def fresh_value(t: TypeDescriptor, capacity: int = 0) -> Any:
    """Freshly allocated value of `t`.

    Args:
        t: Descriptor to instantiate.
        capacity: Channel buffer size, or length of a new sequence.

    Returns:
        A reference to a new zero pointee, a channel, a sequence of
        `capacity` zero elements, an empty mapping, or the zero value.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    kind = t.kind
    if kind is Kind.REFERENCE:
        return Pointer(t.elem, zero_value(t.elem))  # type: ignore[arg-type]
    if kind is Kind.CHANNEL:
        return Channel(t.elem, capacity)  # type: ignore[arg-type]
    if kind is Kind.SEQUENCE:
        return [zero_value(t.elem) for _ in range(capacity)]  # type: ignore[arg-type]
    if kind is Kind.MAPPING:
        return {}
    return zero_value(t)


def is_self_reference(owner: TypeDescriptor, field_type: TypeDescriptor) -> bool:
    """Check if a reference field points back at its enclosing record.

    Only the direct forms are detected: a reference to `owner` or a
    reference to a reference to `owner`.
    """
    if field_type.kind is not Kind.REFERENCE:
        return False
    return field_type.elem == owner or field_type.elem == reference_to(owner)


class Instantiator:
    """Builds zero-valued and freshly allocated instances.

    Every entry point accepts a descriptor or a name registered in the
    registry; unknown names raise NotFoundError. Produced values are
    addressable.

    Args:
        registry: Registry used to resolve names.
        settings: Supplies the default capacity for make_fresh.
    """

    def __init__(self, registry: TypeRegistry, settings: TypeMetaSettings | None = None):
        self._registry = registry
        self._default_capacity = settings.default_capacity if settings is not None else 0

    def _resolve(self, t: TypeDescriptor | str) -> TypeDescriptor:
        return self._registry.lookup(t) if isinstance(t, str) else t

    def make_zero(self, t: TypeDescriptor | str) -> Value:
        """Zero value of a type, with no nested storage allocated."""
        desc = self._resolve(t)
        return Value(desc, zero_value(desc), addressable=True)

    def make_fresh(self, t: TypeDescriptor | str, capacity: int | None = None) -> Value:
        """Freshly allocated value of a type.

        Args:
            t: Descriptor or registered name.
            capacity: Channel buffer size or sequence length; defaults to the
                configured default capacity.

        Returns:
            Addressable Value holding the new instance.
        """
        desc = self._resolve(t)
        cap = self._default_capacity if capacity is None else capacity
        return Value(desc, fresh_value(desc, cap), addressable=True)

    def make(self, t: TypeDescriptor | str) -> Value:
        """Fresh value with record reference and sequence fields allocated."""
        desc = self._resolve(t)
        data = fresh_value(desc, 0)
        if desc.kind is Kind.REFERENCE:
            data.value = self._materialize(desc.elem, data.value)  # type: ignore[arg-type]
        else:
            data = self._materialize(desc, data)
        return Value(desc, data, addressable=True)

    def _materialize(self, t: TypeDescriptor, data: Any) -> Any:
        if t.kind is not Kind.RECORD:
            return data
        for field in t.record_fields:
            current = getattr(data, field.name)
            write_field(data, field.name, self._materialize_field(t, field.type, current))
        return data

    def _materialize_field(self, owner: TypeDescriptor, ft: TypeDescriptor, current: Any) -> Any:
        if ft.kind is Kind.REFERENCE:
            if is_self_reference(owner, ft):
                logger.debug("leaving self-referential field of %s as None", owner)
                return current
            return Pointer(ft.elem, self._materialize(ft.elem, zero_value(ft.elem)))  # type: ignore[arg-type]
        if ft.kind is Kind.SEQUENCE:
            return []
        if ft.kind is Kind.RECORD:
            return self._materialize(ft, current)
        return current

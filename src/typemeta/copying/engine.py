"""Identity-preserving deep copy of descriptor-typed value graphs.

Usage:
    engine = DeepCopyEngine()
    copied = engine.copy(Value.of(root))      # Value in, Value out
    clone = deep_copy(root)                   # raw object in, raw object out

References are the only identity-tracked kind: two references to one source
cell become two references to one destination cell, and cycles through
references terminate. Everything else is a value and is duplicated.
Channels are copied empty, callables are shared, and restricted record
fields are left at their zero value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

from typemeta.copying.models import CopyContext
from typemeta.core.descriptor import Kind, TypeDescriptor, type_of
from typemeta.core.errors import UnsupportedKindError
from typemeta.core.naming import canonical_name
from typemeta.core.value import Channel, Dynamic, Pointer, Value, build_record
from typemeta.instantiate import zero_value

_Handler: TypeAlias = Callable[[TypeDescriptor, Any, CopyContext], Any]


class DeepCopyEngine:
    """Walks a value graph and builds a structurally equal, independent copy."""

    def __init__(self) -> None:
        self._handlers: dict[Kind, _Handler] = {
            Kind.BOOL: self._copy_scalar,
            Kind.INT: self._copy_scalar,
            Kind.UINT: self._copy_scalar,
            Kind.FLOAT: self._copy_scalar,
            Kind.COMPLEX: self._copy_scalar,
            Kind.STRING: self._copy_scalar,
            Kind.CALLABLE: self._copy_scalar,
            Kind.ARRAY: self._copy_list,
            Kind.SEQUENCE: self._copy_list,
            Kind.MAPPING: self._copy_mapping,
            Kind.REFERENCE: self._copy_reference,
            Kind.DYNAMIC: self._copy_dynamic,
            Kind.RECORD: self._copy_record,
            Kind.CHANNEL: self._copy_channel,
            Kind.OPAQUE: self._copy_opaque,
        }

    def copy(self, value: Value) -> Value:
        """Deep copy a value.

        Args:
            value: Source value; the invalid value copies to the invalid value.

        Returns:
            Copy with the same type and addressability.

        Raises:
            UnsupportedKindError: If an opaque kind is reachable from the value.
        """
        if value.type is None:
            return Value.invalid()
        data = self._copy(value.type, value.data, CopyContext())
        return Value(value.type, data, addressable=value.addressable)

    def copy_object(self, obj: Any) -> Any:
        """Deep copy a live object whose type can be inferred."""
        return self.copy(Value.of(obj)).data

    def _copy(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        return self._handlers[t.kind](t, data, ctx)

    def _copy_scalar(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        # Immutable in Python; callables are shared code
        return data

    def _copy_list(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        if data is None:
            return None
        return [self._copy(t.elem, item, ctx) for item in data]  # type: ignore[arg-type]

    def _copy_mapping(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        if data is None:
            return None
        return {
            self._copy(t.key, k, ctx): self._copy(t.elem, v, ctx)  # type: ignore[arg-type]
            for k, v in data.items()
        }

    def _copy_reference(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        if data is None:
            return None
        existing = ctx.get(data)
        if existing is not None:
            return existing
        dst: Pointer[Any] = Pointer(data.elem)
        # Registered before descending so cycles resolve to dst
        ctx.remember(data, dst)
        dst.value = self._copy(data.elem, data.value, ctx)
        return dst

    def _copy_dynamic(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        if data is None:
            return None
        if isinstance(data, Dynamic):
            return Dynamic(data.type, self._copy(data.type, data.value, ctx))
        return self._copy(type_of(data), data, ctx)  # type: ignore[arg-type]

    def _copy_record(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        if data is None:
            return None
        values = {
            f.name: (
                self._copy(f.type, getattr(data, f.name), ctx)
                if f.exported
                else zero_value(f.type)
            )
            for f in t.record_fields
        }
        return build_record(t, values)

    def _copy_channel(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        if data is None:
            return None
        return Channel(t.elem, data.capacity)  # type: ignore[arg-type]

    def _copy_opaque(self, t: TypeDescriptor, data: Any, ctx: CopyContext) -> Any:
        raise UnsupportedKindError(t.kind, canonical_name(t))


_engine = DeepCopyEngine()


def deep_copy(obj: Any) -> Any:
    """Deep copy a Value (returning a Value) or a live object (returning the object)."""
    if isinstance(obj, Value):
        return _engine.copy(obj)
    return _engine.copy_object(obj)

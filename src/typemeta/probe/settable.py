"""Settability probe: is any reachable leaf of a value writable?

A leaf is writable when it is reached through an addressable location.
Addressability starts from the value itself (values built by the
Instantiator are addressable, values wrapped with Value.of are not) and
propagates as follows:

    reference pointee   always addressable
    sequence element    always addressable
    array element       inherits
    record field        inherits, only for exported fields of mutable records
    mapping value       never (keys are not visited)
    dynamic contents    never
"""

from __future__ import annotations

from typing import Any

from typemeta.core.descriptor import Kind, TypeDescriptor, type_of
from typemeta.core.value import Dynamic, Value


def any_settable(value: Value) -> bool:
    """Check if any leaf reachable from `value` is externally writable.

    Args:
        value: Value to probe; has no side effects on it.

    Returns:
        True as soon as one writable leaf is found, False otherwise.
    """
    if value.type is None:
        return False
    return _any_settable(value.type, value.data, value.addressable)


def _any_settable(t: TypeDescriptor, data: Any, addressable: bool) -> bool:
    kind = t.kind
    if kind is Kind.ARRAY:
        return data is not None and any(
            _any_settable(t.elem, item, addressable) for item in data  # type: ignore[arg-type]
        )
    if kind is Kind.SEQUENCE:
        return data is not None and any(_any_settable(t.elem, item, True) for item in data)  # type: ignore[arg-type]
    if kind is Kind.MAPPING:
        return data is not None and any(
            _any_settable(t.elem, item, False) for item in data.values()  # type: ignore[arg-type]
        )
    if kind is Kind.REFERENCE:
        return data is not None and _any_settable(data.elem, data.value, True)
    if kind is Kind.DYNAMIC:
        if data is None:
            return False
        if isinstance(data, Dynamic):
            return _any_settable(data.type, data.value, False)
        return _any_settable(type_of(data), data, False)  # type: ignore[arg-type]
    if kind is Kind.RECORD:
        if data is None:
            return False
        writable = addressable and t.mutable
        return any(
            _any_settable(f.type, getattr(data, f.name), writable and f.exported)
            for f in t.record_fields
        )
    return addressable

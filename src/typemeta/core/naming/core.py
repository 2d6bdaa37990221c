"""Canonical type names.

Named types are qualified by their full namespace. Anonymous and dynamic
types are named by their structural string, with the short qualifier of the
innermost named element widened to its full namespace so qualification
survives inside composite names:

    sequence_of(Item)  ->  "[]example.com/shop/models.Item"
"""

from __future__ import annotations

import inspect
import re
from typing import Any

from typemeta.core.descriptor.core import type_of
from typemeta.core.descriptor.models import Kind, TypeDescriptor


def _short(namespace: str) -> str:
    """Last path segment of a namespace."""
    return namespace.rsplit("/", 1)[-1]


def _record_string(t: TypeDescriptor) -> str:
    if not t.record_fields:
        return "struct {}"
    body = "; ".join(f"{f.name} {type_string(f.type)}" for f in t.record_fields)
    return f"struct {{ {body} }}"


def type_string(t: TypeDescriptor) -> str:
    """Structural string form of a descriptor.

    Named types print as `short.Name`; composite types print their shape
    (`[3]T`, `[]T`, `map[K]V`, `*T`, `chan T`, `struct { A T }`).

    Args:
        t: Descriptor to render.

    Returns:
        Structural string. Deterministic for a given structure.
    """
    if t.name:
        return f"{_short(t.namespace)}.{t.name}" if t.namespace else t.name
    kind = t.kind
    if kind is Kind.ARRAY:
        return f"[{t.length}]{type_string(t.elem)}"  # type: ignore[arg-type]
    if kind is Kind.SEQUENCE:
        return f"[]{type_string(t.elem)}"  # type: ignore[arg-type]
    if kind is Kind.MAPPING:
        return f"map[{type_string(t.key)}]{type_string(t.elem)}"  # type: ignore[arg-type]
    if kind is Kind.REFERENCE:
        return f"*{type_string(t.elem)}"  # type: ignore[arg-type]
    if kind is Kind.CHANNEL:
        return f"chan {type_string(t.elem)}"  # type: ignore[arg-type]
    if kind is Kind.RECORD:
        return _record_string(t)
    if kind is Kind.DYNAMIC:
        return "interface {}"
    if kind is Kind.CALLABLE:
        return "func()"
    if t.width:
        return f"{kind.value}{t.width}"
    return kind.value


def _element_namespace(t: TypeDescriptor | None) -> str:
    """Namespace of the first named type found descending through elements."""
    while t is not None:
        if t.namespace:
            return t.namespace
        if not t.kind.has_element:
            return ""
        t = t.elem
    return ""


def canonical_name(t: TypeDescriptor) -> str:
    """Canonical registry name of a descriptor.

    Args:
        t: Descriptor to name.

    Returns:
        `namespace.name` for named non-dynamic types (just `name` for builtin
        ones), otherwise the qualified structural string.
    """
    if t.name and t.kind is not Kind.DYNAMIC:
        return f"{t.namespace}.{t.name}" if t.namespace else t.name
    text = type_string(t)
    namespace = _element_namespace(t)
    if not namespace:
        return text
    short = re.escape(_short(namespace))
    return re.sub(rf"(?<![\w./-]){short}\.", lambda _: f"{namespace}.", text, count=1)


def is_equal_name(obj: Any, name: str) -> bool:
    """Check whether a value's type has the canonical name `name`."""
    t = type_of(obj)
    return (canonical_name(t) if t is not None else "") == name


def name_of(obj: Any) -> str:
    """Name of a value's type, or the qualified name of a function.

    Returns:
        "" for None or the invalid Value, `module.qualname` for functions and
        methods, otherwise the canonical name of the inferred type.
    """
    if obj is None:
        return ""
    if inspect.isfunction(obj) or inspect.ismethod(obj) or inspect.isbuiltin(obj):
        return f"{obj.__module__}.{obj.__qualname__}"
    t = type_of(obj)
    return canonical_name(t) if t is not None else ""

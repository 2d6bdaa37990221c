"""Descriptor constructors, the record decorator, and type inference.

Usage:
    @record
    @dataclass
    class Node:
        label: str
        weight: Annotated[int, INT32]
        next: Pointer["Node"] | None = None

    node_t = Node.__type_descriptor__
    ints = sequence_of(INT)
    index = mapping_of(STRING, reference_to(node_t))
"""

from __future__ import annotations

import collections.abc
import dataclasses
import types
import typing
from collections.abc import Callable, Iterable
from typing import Annotated, Any, TypeVar, get_args, get_origin, overload

from typemeta.core.descriptor.models import Field, Kind, TypeDescriptor
from typemeta.core.value.core import is_pydantic
from typemeta.core.value.models import Channel, Dynamic, Pointer, Value


def _primitive(kind: Kind, name: str, width: int = 0) -> TypeDescriptor:
    return TypeDescriptor(kind, name=name, width=width)


BOOL = _primitive(Kind.BOOL, "bool")
INT = _primitive(Kind.INT, "int", 64)
INT8 = _primitive(Kind.INT, "int8", 8)
INT16 = _primitive(Kind.INT, "int16", 16)
INT32 = _primitive(Kind.INT, "int32", 32)
INT64 = _primitive(Kind.INT, "int64", 64)
UINT = _primitive(Kind.UINT, "uint", 64)
UINT8 = _primitive(Kind.UINT, "uint8", 8)
UINT16 = _primitive(Kind.UINT, "uint16", 16)
UINT32 = _primitive(Kind.UINT, "uint32", 32)
UINT64 = _primitive(Kind.UINT, "uint64", 64)
FLOAT32 = _primitive(Kind.FLOAT, "float32", 32)
FLOAT64 = _primitive(Kind.FLOAT, "float64", 64)
COMPLEX64 = _primitive(Kind.COMPLEX, "complex64", 64)
COMPLEX128 = _primitive(Kind.COMPLEX, "complex128", 128)
STRING = _primitive(Kind.STRING, "string")
CALLABLE = TypeDescriptor(Kind.CALLABLE)

_PY_SCALARS: dict[type, TypeDescriptor] = {
    bool: BOOL,
    int: INT,
    float: FLOAT64,
    complex: COMPLEX128,
    str: STRING,
}


def array_of(elem: TypeDescriptor, length: int) -> TypeDescriptor:
    if length < 0:
        raise ValueError(f"array length must be non-negative, got {length}")
    return TypeDescriptor(Kind.ARRAY, length=length, elem=elem)


def sequence_of(elem: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(Kind.SEQUENCE, elem=elem)


def mapping_of(key: TypeDescriptor, value: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(Kind.MAPPING, key=key, elem=value)


def reference_to(elem: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(Kind.REFERENCE, elem=elem)


def channel_of(elem: TypeDescriptor) -> TypeDescriptor:
    return TypeDescriptor(Kind.CHANNEL, elem=elem)


def dynamic(name: str = "", namespace: str = "") -> TypeDescriptor:
    """Polymorphic container type; unnamed means the empty interface."""
    return TypeDescriptor(Kind.DYNAMIC, name=name, namespace=namespace)


def opaque(name: str = "", namespace: str = "") -> TypeDescriptor:
    """Raw-memory type that can be named and registered but never built or copied."""
    return TypeDescriptor(Kind.OPAQUE, name=name, namespace=namespace)


def record_type(
    name: str = "",
    namespace: str = "",
    fields: Iterable[Field] | None = None,
    *,
    py_type: type | None = None,
    mutable: bool = True,
) -> TypeDescriptor:
    """Describe a record.

    A named record may be created without fields and completed later with
    `define_fields`, so its fields can reference the record itself.
    Anonymous records are identified by their fields and get them now.

    Args:
        name: Declared name, empty for an anonymous record.
        namespace: Owning module/package path.
        fields: Ordered fields, or None to declare them later.
        py_type: Class instances should materialize as.
        mutable: False if instances are frozen.

    Returns:
        Record descriptor.
    """
    if fields is None and not name:
        fields = ()
    return TypeDescriptor(
        Kind.RECORD,
        name=name,
        namespace=namespace,
        fields=tuple(fields) if fields is not None else None,
        py_type=py_type,
        mutable=mutable,
    )


def named(name: str, namespace: str, underlying: TypeDescriptor) -> TypeDescriptor:
    """Declare a named type with the shape of `underlying` (e.g. a named sequence).

    Raises:
        TypeError: For records, which are declared with `record_type`.
    """
    if underlying.kind is Kind.RECORD:
        raise TypeError("named records are declared with record_type()")
    return dataclasses.replace(underlying, name=name, namespace=namespace)


T = TypeVar("T")


def address_of(obj: T, elem: TypeDescriptor | None = None) -> Pointer[T]:
    """Create a Pointer to `obj`, inferring the pointee type unless given."""
    pointee = elem if elem is not None else type_of(obj)
    if pointee is None:
        raise TypeError("cannot take the address of None without an explicit type")
    return Pointer(pointee, obj)


def descriptor_for(annotation: Any) -> TypeDescriptor:
    """Map a Python annotation to a descriptor.

    Args:
        annotation: Resolved annotation (not a string).

    Returns:
        Descriptor for the annotation.

    Raises:
        TypeError: If the annotation has no descriptor equivalent.
    """
    if isinstance(annotation, TypeDescriptor):
        return annotation
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        for meta in annotation.__metadata__:
            if isinstance(meta, TypeDescriptor):
                return meta
        return descriptor_for(args[0])
    if origin in (typing.Union, types.UnionType):
        # X | None is a nullable slot; nil is always representable
        non_null = [a for a in args if a is not type(None)]
        if len(non_null) == 1:
            return descriptor_for(non_null[0])
        return dynamic()
    if annotation is Any or annotation is object:
        return dynamic()
    if annotation in _PY_SCALARS:
        return _PY_SCALARS[annotation]
    if annotation is collections.abc.Callable or origin is collections.abc.Callable:
        return CALLABLE
    if origin is list or annotation is list:
        return sequence_of(descriptor_for(args[0]) if args else dynamic())
    if origin is dict or annotation is dict:
        if args:
            return mapping_of(descriptor_for(args[0]), descriptor_for(args[1]))
        return mapping_of(dynamic(), dynamic())
    if origin is Pointer:
        return reference_to(descriptor_for(args[0]))
    if origin is Channel:
        return channel_of(descriptor_for(args[0]))
    if isinstance(annotation, type):
        desc = annotation.__dict__.get("__type_descriptor__")
        if isinstance(desc, TypeDescriptor):
            return desc
    raise TypeError(f"cannot describe annotation {annotation!r}; is it a @record?")


def _record_annotations(cls: type) -> tuple[dict[str, Any], bool]:
    """Field name to annotation, plus whether instances are frozen."""
    if dataclasses.is_dataclass(cls):
        hints = typing.get_type_hints(cls, localns={cls.__name__: cls}, include_extras=True)
        frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
        return {f.name: hints[f.name] for f in dataclasses.fields(cls)}, frozen

    annotations: dict[str, Any] = {}
    for name, info in cls.model_fields.items():  # type: ignore[attr-defined]
        explicit = [m for m in info.metadata if isinstance(m, TypeDescriptor)]
        annotations[name] = explicit[0] if explicit else info.annotation
    return annotations, bool(cls.model_config.get("frozen"))  # type: ignore[attr-defined]


def _holds_by_value(t: TypeDescriptor, owner: TypeDescriptor) -> bool:
    """Check if `t` embeds `owner` directly or through fixed arrays."""
    while t.kind is Kind.ARRAY:
        t = t.elem  # type: ignore[assignment]
    return t is owner


@overload
def record(cls: type) -> type: ...


@overload
def record(
    cls: None = None, *, name: str | None = None, namespace: str | None = None
) -> Callable[[type], type]: ...


def record(
    cls: type | None = None, *, name: str | None = None, namespace: str | None = None
) -> type | Callable[[type], type]:
    """Describe a dataclass or Pydantic model as a record type.

    Supports three forms:
        @record                              # bare decorator
        @record()                            # parenthesized, no args
        @record(name="errorString", namespace="errors")

    The descriptor is attached as `cls.__type_descriptor__`. Registration in a
    TypeRegistry is a separate, explicit step.

    Args:
        cls: The class to describe, or None if called with arguments.
        name: Declared name, defaults to the class qualname.
        namespace: Owning namespace, defaults to the class module.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is neither a dataclass nor Pydantic model, or a
            field annotation has no descriptor equivalent, or a field holds
            the record itself by value.

    Note:
        Apply @record AFTER @dataclass:

        >>> @record
        ... @dataclass(slots=True)
        ... class Point:
        ...     x: float
    """

    def decorator(c: type) -> type:
        if not (dataclasses.is_dataclass(c) or is_pydantic(c)):
            raise TypeError(
                f"Record {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        annotations, frozen = _record_annotations(c)
        desc = record_type(
            name or c.__qualname__,
            c.__module__ if namespace is None else namespace,
            py_type=c,
            mutable=not frozen,
        )
        c.__type_descriptor__ = desc  # type: ignore[attr-defined]
        fields = [
            Field(n, descriptor_for(a), exported=not n.startswith("_"))
            for n, a in annotations.items()
        ]
        for f in fields:
            if _holds_by_value(f.type, desc):
                raise TypeError(
                    f"invalid recursive type {c.__name__}: field {f.name!r} holds "
                    f"{c.__name__} by value. Use Pointer[{c.__name__}] instead."
                )
        desc.define_fields(fields)
        return c

    if cls is None:
        return decorator
    return decorator(cls)


def type_of(obj: Any) -> TypeDescriptor | None:
    """Infer the descriptor of a live object.

    Args:
        obj: Any object.

    Returns:
        Its descriptor, or None for None and the invalid Value.

    Raises:
        TypeError: If the object's type cannot be inferred (e.g. a bare list).
    """
    if obj is None:
        return None
    if isinstance(obj, (Value, Dynamic)):
        return obj.type
    scalar = _PY_SCALARS.get(type(obj))
    if scalar is not None:
        return scalar
    if isinstance(obj, Pointer):
        return reference_to(obj.elem)
    if isinstance(obj, Channel):
        return channel_of(obj.elem)
    desc = getattr(obj, "__type_descriptor__", None)
    if isinstance(desc, TypeDescriptor) and not isinstance(obj, type):
        return desc
    if callable(obj):
        return CALLABLE
    raise TypeError(
        f"cannot infer a type for {type(obj).__name__}; wrap it in Value or Dynamic"
    )

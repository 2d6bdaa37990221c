"""Runtime value models.

Null references, nil sequences and mappings, nil channels and absent dynamic
values are all represented by None. Scalars are plain Python objects; fixed
arrays and sequences are lists; mappings are dicts.

Usage:
    node_t = record_type("Node", "example/graph")
    p = Pointer(node_t, Struct(node_t))
    v = Value.of(p)
"""

from __future__ import annotations

import queue
from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typemeta.core.descriptor.models import Kind, TypeDescriptor
from typemeta.core.errors import NotSettableError

T = TypeVar("T")


class Pointer(Generic[T]):
    """Reference cell whose identity is distinct from its pointee."""

    __slots__ = ("elem", "value")

    def __init__(self, elem: TypeDescriptor, value: T | None = None) -> None:
        self.elem = elem
        self.value = value

    def __repr__(self) -> str:
        return f"Pointer(*{self.elem}, at 0x{id(self):x})"


class Channel(Generic[T]):
    """FIFO channel with a declared element type and capacity.

    Capacity 0 is an unbuffered channel; hand-off blocking is not modeled, so
    only buffered channels bound the number of queued items.
    """

    __slots__ = ("elem", "capacity", "_buffer")

    def __init__(self, elem: TypeDescriptor, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"channel capacity must be non-negative, got {capacity}")
        self.elem = elem
        self.capacity = capacity
        self._buffer: deque[T] = deque()

    def send(self, item: T) -> None:
        """Queue an item.

        Raises:
            queue.Full: If a buffered channel already holds `capacity` items.
        """
        if self.capacity and len(self._buffer) >= self.capacity:
            raise queue.Full
        self._buffer.append(item)

    def receive(self) -> T:
        """Take the oldest queued item.

        Raises:
            queue.Empty: If nothing is queued.
        """
        if not self._buffer:
            raise queue.Empty
        return self._buffer.popleft()

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"Channel(chan {self.elem}, capacity={self.capacity}, queued={len(self)})"


@dataclass(frozen=True, slots=True)
class Dynamic:
    """Tagged union of a concrete type and a value, for polymorphic slots."""

    type: TypeDescriptor
    value: Any


class Struct:
    """Generic record instance for record types without a bound Python class."""

    def __init__(self, type_: TypeDescriptor, **values: Any) -> None:
        if type_.kind is not Kind.RECORD:
            raise TypeError(f"Struct requires a record type, got {type_}")
        self.__type_descriptor__ = type_
        for field in type_.record_fields:
            setattr(self, field.name, values.get(field.name))

    def _values(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in self.__type_descriptor__.record_fields}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Struct):
            return NotImplemented
        return (
            self.__type_descriptor__ == other.__type_descriptor__
            and self._values() == other._values()
        )

    # Mutable, compared by content
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._values().items())
        return f"{self.__type_descriptor__}({inner})"


@dataclass(slots=True)
class Value:
    """A typed value handed across the public API.

    Attributes:
        type: Descriptor of `data`, None for the absent/invalid value.
        data: The Python object.
        addressable: True when `data` lives in storage this process may write.
    """

    type: TypeDescriptor | None
    data: Any = None
    addressable: bool = False

    @classmethod
    def of(cls, obj: Any) -> Value:
        """Wrap a live object, inferring its type. Not addressable.

        A Dynamic is wrapped as the empty interface holding it.
        """
        if isinstance(obj, Value):
            return obj
        # Late import to avoid circular dependency
        from typemeta.core.descriptor.core import dynamic, type_of

        if isinstance(obj, Dynamic):
            return cls(dynamic(), obj)
        return cls(type_of(obj), obj)

    @classmethod
    def invalid(cls) -> Value:
        return cls(None)

    @property
    def is_valid(self) -> bool:
        return self.type is not None

    @property
    def kind(self) -> Kind | None:
        return self.type.kind if self.type is not None else None

    def set(self, data: Any) -> None:
        """Assign new contents.

        Raises:
            NotSettableError: If the value is not addressable.
        """
        if not self.addressable:
            raise NotSettableError(f"value of type {self.type} is not addressable")
        self.data = data

"""Type registry mapping canonical names to descriptors.

Usage:
    registry = TypeRegistry()
    registry.insert(Node)                         # record class
    registry.insert(sequence_of(Node.__type_descriptor__))
    registry.insert_named("node", Node)

    node_t = registry.lookup("example.graph.Node")

Registration is expected during single-threaded startup. Once it completes,
lookups are read-only and may be shared between threads.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from typemeta.core.descriptor import TypeDescriptor, type_of
from typemeta.core.errors import NotFoundError
from typemeta.core.naming import canonical_name

logger = logging.getLogger(__name__)


def descriptor_of(item: Any) -> TypeDescriptor:
    """Resolve anything registrable to its descriptor.

    Args:
        item: A descriptor, a @record class, a Value, or an inferable object.

    Returns:
        The item's descriptor.

    Raises:
        TypeError: If no descriptor can be derived.
    """
    if isinstance(item, TypeDescriptor):
        return item
    if isinstance(item, type):
        desc = item.__dict__.get("__type_descriptor__")
        if isinstance(desc, TypeDescriptor):
            return desc
        raise TypeError(f"{item.__name__} is not a @record class")
    t = type_of(item)
    if t is None:
        raise TypeError("cannot register the invalid value")
    return t


class TypeRegistry:
    """Mapping from canonical name to TypeDescriptor.

    Insertion never overwrites: the first registration of a name wins and
    later ones are silent no-ops. There is no removal.

    Args:
        log_registrations: Log insertions at INFO instead of DEBUG.
    """

    def __init__(self, log_registrations: bool = False) -> None:
        """Initialize empty type registry."""
        self._by_name: dict[str, TypeDescriptor] = {}
        self._log_level = logging.INFO if log_registrations else logging.DEBUG

    def _store(self, name: str, t: TypeDescriptor) -> None:
        if name in self._by_name:
            logger.debug("type %s already registered, ignoring", name)
            return
        self._by_name[name] = t
        logger.log(self._log_level, "registered type %s as %s", name, t)

    def insert(self, item: Any) -> str:
        """Register a type under its canonical name.

        Args:
            item: A descriptor, a @record class, a Value, or an inferable object.

        Returns:
            The canonical name the type is (or already was) stored under.
        """
        t = descriptor_of(item)
        name = canonical_name(t)
        self._store(name, t)
        return name

    def insert_named(self, name: str, item: Any) -> None:
        """Register a type under a caller-supplied name, bypassing naming.

        Used to alias one type under several names.
        """
        self._store(name, descriptor_of(item))

    def lookup(self, name: str) -> TypeDescriptor:
        """Get the descriptor registered under `name`.

        Raises:
            NotFoundError: If nothing is registered under `name`.
        """
        try:
            return self._by_name[name]
        except KeyError:
            logger.debug("type %s not found", name)
            raise NotFoundError(name) from None

    def get(self, name: str, default: TypeDescriptor | None = None) -> TypeDescriptor | None:
        """Get the descriptor registered under `name`, or `default`."""
        return self._by_name.get(name, default)

    def items(self) -> Iterator[tuple[str, TypeDescriptor]]:
        yield from self._by_name.items()

    def dump(self, stream: TextIO | None = None) -> None:
        """Write every `name<TAB>type` pair, one per line. Order is not guaranteed."""
        out = stream if stream is not None else sys.stdout
        for name, t in self._by_name.items():
            print(name, t, sep="\t", file=out)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

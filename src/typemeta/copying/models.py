"""Copy models: the per-call identity table."""

from __future__ import annotations

from typing import Any


class CopyContext:
    """Maps source reference identity to its destination for one copy call.

    Source objects are kept alive for the lifetime of the context so their
    id() values cannot be reused by other objects mid-copy.
    """

    __slots__ = ("_copies", "_sources")

    def __init__(self) -> None:
        self._copies: dict[int, Any] = {}
        self._sources: list[Any] = []

    def get(self, source: Any) -> Any | None:
        """Destination already built for `source`, if any."""
        return self._copies.get(id(source))

    def remember(self, source: Any, copy: Any) -> None:
        """Record the destination for `source`. Must happen before recursing into it."""
        self._copies[id(source)] = copy
        self._sources.append(source)

    def __contains__(self, source: object) -> bool:
        return id(source) in self._copies

    def __len__(self) -> int:
        return len(self._copies)

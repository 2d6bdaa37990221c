"""Exceptions raised by typemeta.

Only registry lookups on unknown names and encounters with raw-memory
(opaque) kinds are failure points. Naming and structural walks never fail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typemeta.core.descriptor.models import Kind


class TypeMetaError(Exception):
    """Base class for all typemeta errors."""

    pass


class NotFoundError(TypeMetaError, LookupError):
    """Raised when a type name is absent from the registry."""

    def __init__(self, name: str):
        super().__init__(f"type not found: {name}")
        self.name = name


class UnsupportedKindError(TypeMetaError, TypeError):
    """Raised when instantiating or copying a raw-memory / opaque kind."""

    def __init__(self, kind: Kind, type_name: str = ""):
        detail = f" ({type_name})" if type_name else ""
        super().__init__(f"kind {kind.value} is not supported{detail}")
        self.kind = kind


class NotSettableError(TypeMetaError):
    """Raised when assigning into a value that is not addressable."""

    pass

"""Runtime value functionality: typed values, references, channels, dynamic slots."""

from typemeta.core.value.core import build_record, is_pydantic, write_field
from typemeta.core.value.models import Channel, Dynamic, Pointer, Struct, Value

__all__ = [
    # Models
    "Value",
    "Pointer",
    "Channel",
    "Dynamic",
    "Struct",
    # Core
    "build_record",
    "is_pydantic",
    "write_field",
]

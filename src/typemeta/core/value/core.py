"""Record construction and field access shared by the instantiator and the copier."""

from __future__ import annotations

from typing import Any

from typemeta.core.descriptor.models import TypeDescriptor
from typemeta.core.value.models import Struct


def is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def build_record(type_: TypeDescriptor, values: dict[str, Any]) -> Any:
    """Create a record instance of `type_` holding exactly `values`.

    Bypasses __init__ (and validation for Pydantic models) so that zero
    values and copied values can be placed in any record, frozen or not.

    Args:
        type_: Record descriptor.
        values: Field name to value, one entry per field.

    Returns:
        Instance of `type_.py_type`, or a Struct when no class is bound.
    """
    cls = type_.py_type
    if cls is None:
        return Struct(type_, **values)
    if is_pydantic(cls):
        return cls.model_construct(**values)  # type: ignore[attr-defined]
    obj = object.__new__(cls)
    for name, value in values.items():
        object.__setattr__(obj, name, value)
    return obj


def write_field(obj: Any, name: str, value: Any) -> None:
    """Set a record field, including on frozen instances."""
    object.__setattr__(obj, name, value)

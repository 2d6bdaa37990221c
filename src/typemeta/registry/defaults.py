"""Builtin types and the registry composition root.

Usage:
    registry = create_registry()
    registry.lookup("*errors.errorString")
    registry.lookup("time.Duration")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Annotated

from typemeta.config import TypeMetaSettings
from typemeta.core.descriptor import (
    BOOL,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    STRING,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    named,
    record,
    record_type,
    reference_to,
    sequence_of,
)
from typemeta.core.value import Pointer
from typemeta.registry.registry import TypeRegistry

logger = logging.getLogger(__name__)


@record(name="errorString", namespace="errors")
@dataclass(frozen=True, slots=True)
class ErrorString:
    """Plain error value. Its text is not externally writable."""

    _s: str = ""

    def __str__(self) -> str:
        return self._s


@record(name="Time", namespace="time")
@dataclass(slots=True)
class Time:
    """Instant as seconds and nanoseconds since the Unix epoch, UTC."""

    seconds: Annotated[int, INT64] = 0
    nanoseconds: Annotated[int, INT32] = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> Time:
        delta = dt.astimezone(UTC) - datetime(1970, 1, 1, tzinfo=UTC)
        seconds = delta.days * 86400 + delta.seconds
        return cls(seconds=seconds, nanoseconds=delta.microseconds * 1000)

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds, tz=UTC).replace(
            microsecond=self.nanoseconds // 1000
        )


DURATION = named("Duration", "time", INT64)
"""Elapsed time in nanoseconds."""

ERROR_ALIASES = ("os.errorString", "error", "errors.errorString")


def new_error(text: str) -> Pointer[ErrorString]:
    """Create a plain error value."""
    return Pointer(ErrorString.__type_descriptor__, ErrorString(text))  # type: ignore[attr-defined]


def register_builtin_types(registry: TypeRegistry) -> None:
    """Register the base primitive, text, time and byte-sequence types.

    Args:
        registry: Registry to populate. Already-present names are left alone.
    """
    error_t = reference_to(ErrorString.__type_descriptor__)  # type: ignore[attr-defined]
    registry.insert(error_t)
    for alias in ERROR_ALIASES:
        registry.insert_named(alias, error_t)

    time_t = Time.__type_descriptor__  # type: ignore[attr-defined]
    for t in (
        STRING,
        INT,
        INT8,
        INT16,
        INT32,
        INT64,
        UINT,
        UINT8,
        UINT16,
        UINT32,
        UINT64,
        BOOL,
        FLOAT32,
        FLOAT64,
        time_t,
    ):
        registry.insert(t)
        registry.insert(reference_to(t))
    registry.insert(sequence_of(UINT8))
    registry.insert(DURATION)
    registry.insert(sequence_of(STRING))
    registry.insert(record_type())
    logger.debug("registered %d builtin types", len(registry))


def create_registry(settings: TypeMetaSettings | None = None) -> TypeRegistry:
    """Build a fresh registry, with the builtin types unless disabled.

    Args:
        settings: Settings to use; loaded from the environment when None.

    Returns:
        New TypeRegistry owned by the caller.
    """
    settings = settings if settings is not None else TypeMetaSettings()
    registry = TypeRegistry(log_registrations=settings.log_registrations)
    if settings.register_builtins:
        register_builtin_types(registry)
    return registry

"""Tests for the type registry and builtin registrations."""

import io
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

import pytest

from typemeta import (
    INT,
    STRING,
    NotFoundError,
    TypeMetaSettings,
    TypeRegistry,
    Value,
    canonical_name,
    create_registry,
    new_error,
    record,
    record_type,
    reference_to,
    sequence_of,
)
from typemeta.registry import DURATION, ErrorString, Time
from typemeta.registry.defaults import ERROR_ALIASES


@record(namespace="example.com/inventory")
@dataclass
class Widget:
    name: str
    count: int = 0


@dataclass
class Plain:
    value: int


BUILTIN_NAMES = [
    "string",
    "*string",
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "*int",
    "*int8",
    "*uint64",
    "bool",
    "*bool",
    "float32",
    "*float32",
    "float64",
    "*float64",
    "[]uint8",
    "time.Time",
    "*time.Time",
    "time.Duration",
    "[]string",
    "struct {}",
    "*errors.errorString",
    "errors.errorString",
    "os.errorString",
    "error",
]


@pytest.mark.parametrize("name", BUILTIN_NAMES)
def test_builtins_are_available_immediately(registry, name):
    """Builtin types are registered when the registry is created."""
    assert name in registry
    registry.lookup(name)


def test_lookup_returns_descriptor_named_by_key(registry):
    """Every non-alias key is the canonical name of its descriptor."""
    for name, t in registry.items():
        if name in ERROR_ALIASES:
            continue
        assert canonical_name(t) == name


def test_error_aliases_share_one_type(registry):
    """All error aliases resolve to the same descriptor."""
    error_t = registry.lookup("*errors.errorString")

    for alias in ERROR_ALIASES:
        assert registry.lookup(alias) is error_t


def test_insert_returns_canonical_name(empty_registry):
    name = empty_registry.insert(Widget)

    assert name == "example.com/inventory.Widget"
    assert empty_registry.lookup(name) is Widget.__type_descriptor__


def test_insert_is_idempotent(empty_registry):
    """CRITICAL: Inserting the same type twice is a silent no-op.

    Why: Modules register their types at import and may be imported repeatedly.
    """
    empty_registry.insert(sequence_of(INT))
    empty_registry.insert(sequence_of(INT))
    empty_registry.insert(Value(sequence_of(INT), [1, 2]))

    assert len(empty_registry) == 1
    assert list(empty_registry) == ["[]int"]


def test_first_registration_wins(empty_registry):
    """A later type under an existing name never replaces the first."""
    empty_registry.insert_named("alias", INT)
    empty_registry.insert_named("alias", STRING)

    assert empty_registry.lookup("alias") is INT


def test_insert_accepts_values_and_objects(empty_registry):
    assert empty_registry.insert(5) == "int"
    assert empty_registry.insert(new_error("boom")) == "*errors.errorString"
    assert empty_registry.insert(Widget("w")) == "example.com/inventory.Widget"


def test_insert_rejects_unregistrable(empty_registry):
    """Classes without @record cannot be registered."""
    with pytest.raises(TypeError, match="not a @record"):
        empty_registry.insert(Plain)
    with pytest.raises(TypeError):
        empty_registry.insert(None)


def test_lookup_missing_raises(empty_registry):
    with pytest.raises(NotFoundError, match="type not found: nope") as exc_info:
        empty_registry.lookup("nope")

    assert exc_info.value.name == "nope"
    assert isinstance(exc_info.value, LookupError)


def test_get_returns_default_when_missing(empty_registry):
    assert empty_registry.get("nope") is None
    assert empty_registry.get("nope", INT) is INT


def test_dump_lists_every_entry(empty_registry):
    """dump writes one tab-separated line per registered name."""
    empty_registry.insert(INT)
    empty_registry.insert(reference_to(Widget.__type_descriptor__))
    out = io.StringIO()

    empty_registry.dump(out)

    lines = sorted(out.getvalue().splitlines())
    assert lines == ["*example.com/inventory.Widget\t*inventory.Widget", "int\tint"]


def test_dump_defaults_to_stdout(empty_registry, capsys):
    empty_registry.insert(STRING)
    empty_registry.dump()

    assert capsys.readouterr().out == "string\tstring\n"


def test_create_registry_without_builtins():
    """Builtins can be disabled through settings."""
    registry = create_registry(TypeMetaSettings(register_builtins=False))

    assert len(registry) == 0


def test_registrations_logged_at_configured_level(caplog):
    registry = TypeRegistry(log_registrations=True)

    with caplog.at_level(logging.INFO, logger="typemeta.registry.registry"):
        registry.insert(INT)
        registry.insert(INT)

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert messages == ["registered type int as int"]


def test_duplicate_insert_logged_at_debug(caplog):
    """Ignored duplicates are logged at DEBUG only."""
    registry = TypeRegistry()

    with caplog.at_level(logging.DEBUG, logger="typemeta.registry.registry"):
        registry.insert(INT)
        registry.insert(INT)

    assert "type int already registered, ignoring" in caplog.text


def test_anonymous_record_registration(empty_registry):
    name = empty_registry.insert(record_type())

    assert name == "struct {}"


def test_new_error_wraps_text():
    err = new_error("boom")

    assert str(err.value) == "boom"
    assert isinstance(err.value, ErrorString)


def test_time_round_trips_datetime():
    """Time converts to and from an aware UTC datetime."""
    dt = datetime(2024, 5, 17, 12, 30, 15, 250000, tzinfo=UTC)
    t = Time.from_datetime(dt)

    assert t.nanoseconds == 250_000_000
    assert t.to_datetime() == dt


def test_duration_is_named_int64():
    assert canonical_name(DURATION) == "time.Duration"
    assert DURATION.width == 64

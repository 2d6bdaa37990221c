"""Tests for type descriptors, the record decorator and type inference."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any

import pytest
from pydantic import BaseModel

from typemeta import (
    BOOL,
    CALLABLE,
    COMPLEX128,
    FLOAT64,
    INT,
    INT32,
    INT64,
    STRING,
    UINT8,
    Channel,
    Dynamic,
    Field,
    Kind,
    Pointer,
    Struct,
    Value,
    address_of,
    array_of,
    channel_of,
    dynamic,
    mapping_of,
    named,
    record,
    record_type,
    reference_to,
    sequence_of,
    type_of,
)


@record
@dataclass
class Node:
    label: str
    weight: Annotated[int, INT32]
    next: Pointer[Node] | None = None
    _secret: int = 0


@record(name="Sink", namespace="example.com/kitchen")
@dataclass(frozen=True)
class KitchenSink:
    flag: bool
    ratio: float
    z: complex
    items: list[int]
    index: dict[str, float]
    anything: Any
    hook: Callable[[], None]
    events: Channel[int]
    small: Annotated[int, UINT8]


@record
class Account(BaseModel):
    owner: str
    balance: Annotated[int, INT64] = 0
    tags: list[str] = []


def test_named_types_compare_by_name():
    """Named types are the same type iff kind, namespace and name agree."""
    a = record_type("Item", "example.com/shop", [Field("id", INT)])
    b = record_type("Item", "example.com/shop", [Field("sku", STRING)])
    c = record_type("Item", "example.com/other", [Field("id", INT)])

    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_anonymous_types_compare_structurally():
    assert sequence_of(INT) == sequence_of(INT)
    assert hash(mapping_of(STRING, INT)) == hash(mapping_of(STRING, INT))
    assert sequence_of(INT) != sequence_of(INT64)
    assert array_of(INT, 3) != array_of(INT, 4)
    assert reference_to(INT) != sequence_of(INT)


def test_builtin_int_and_int64_are_distinct():
    """Same kind and width but different declared names."""
    assert INT.kind is INT64.kind
    assert INT.width == INT64.width
    assert INT != INT64


def test_define_fields_only_once():
    node_t = record_type("Later", "example.com/graph")
    assert node_t.fields is None
    assert node_t.record_fields == ()

    node_t.define_fields([Field("next", reference_to(node_t))])

    assert node_t.record_fields[0].type.elem is node_t
    with pytest.raises(TypeError, match="already defined"):
        node_t.define_fields([])


def test_define_fields_rejects_non_records():
    with pytest.raises(TypeError, match="cannot define fields"):
        INT.define_fields([])


def test_anonymous_record_gets_fields_immediately():
    assert record_type().fields == ()


def test_record_decorator_describes_dataclass():
    desc = Node.__type_descriptor__

    assert desc.kind is Kind.RECORD
    assert desc.name == "Node"
    assert desc.namespace == __name__
    assert desc.py_type is Node
    assert desc.mutable
    assert [f.name for f in desc.record_fields] == ["label", "weight", "next", "_secret"]


def test_record_decorator_resolves_self_reference():
    """Pointer[Node] inside Node refers to Node's own descriptor."""
    desc = Node.__type_descriptor__
    next_field = desc.record_fields[2]

    assert next_field.type == reference_to(desc)
    assert next_field.type.elem is desc


def test_record_decorator_marks_underscore_fields_restricted():
    exported = {f.name: f.exported for f in Node.__type_descriptor__.record_fields}
    assert exported == {"label": True, "weight": True, "next": True, "_secret": False}


def test_annotated_descriptor_overrides_python_type():
    weight = Node.__type_descriptor__.record_fields[1]
    assert weight.type is INT32


def test_record_decorator_maps_annotations():
    desc = KitchenSink.__type_descriptor__
    types = {f.name: f.type for f in desc.record_fields}

    assert desc.name == "Sink"
    assert desc.namespace == "example.com/kitchen"
    assert not desc.mutable
    assert types == {
        "flag": BOOL,
        "ratio": FLOAT64,
        "z": COMPLEX128,
        "items": sequence_of(INT),
        "index": mapping_of(STRING, FLOAT64),
        "anything": dynamic(),
        "hook": CALLABLE,
        "events": channel_of(INT),
        "small": UINT8,
    }


def test_record_decorator_describes_pydantic_model():
    desc = Account.__type_descriptor__
    types = {f.name: f.type for f in desc.record_fields}

    assert desc.py_type is Account
    assert types == {"owner": STRING, "balance": INT64, "tags": sequence_of(STRING)}


def test_record_requires_dataclass():
    with pytest.raises(TypeError, match="must be a dataclass"):

        @record
        class NotADataclass:  # Missing @dataclass!
            value: int


def test_record_rejects_unsupported_annotation():
    with pytest.raises(TypeError, match="cannot describe annotation"):

        @record
        @dataclass
        class HasSet:
            values: set[int]


def test_record_rejects_optional_self_by_value():
    """A record cannot hold itself by value, even through `X | None`.

    Why: zeroing such a record would build an infinite chain of records.
    """
    with pytest.raises(TypeError, match=r"invalid recursive type.*Pointer\[OptNode\]"):

        @record
        @dataclass
        class OptNode:
            label: str = ""
            child: OptNode | None = None


def test_record_rejects_plain_self_by_value():
    with pytest.raises(TypeError, match="holds Loop by value"):

        @record
        @dataclass
        class Loop:
            inner: Loop


def test_named_gives_shape_a_name():
    vec = named("Vector", "example.com/linalg", sequence_of(FLOAT64))

    assert vec.kind is Kind.SEQUENCE
    assert vec.elem == FLOAT64
    assert vec != sequence_of(FLOAT64)


def test_named_rejects_records():
    with pytest.raises(TypeError):
        named("Alias", "example.com/x", record_type())


def test_array_length_must_be_non_negative():
    with pytest.raises(ValueError):
        array_of(INT, -1)


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        (True, BOOL),
        (42, INT),
        (3.5, FLOAT64),
        (1 + 2j, COMPLEX128),
        ("text", STRING),
        (Pointer(INT, 1), reference_to(INT)),
        (Channel(STRING, 2), channel_of(STRING)),
        (Dynamic(sequence_of(INT), [1]), sequence_of(INT)),
        (Value(mapping_of(STRING, INT), {}), mapping_of(STRING, INT)),
        (len, CALLABLE),
    ],
)
def test_type_of_infers_descriptor(obj, expected):
    assert type_of(obj) == expected


def test_type_of_record_instances():
    node = Node("a", 1)
    pair_t = record_type("Pair", "example.com/x", [Field("a", INT)])

    assert type_of(node) is Node.__type_descriptor__
    assert type_of(Struct(pair_t, a=1)) is pair_t


def test_type_of_none_and_invalid():
    assert type_of(None) is None
    assert type_of(Value.invalid()) is None


def test_type_of_rejects_bare_containers():
    with pytest.raises(TypeError, match="cannot infer"):
        type_of([1, 2, 3])


def test_address_of_infers_pointee():
    node = Node("a", 1)
    p = address_of(node)

    assert p.value is node
    assert p.elem is Node.__type_descriptor__
    with pytest.raises(TypeError):
        address_of(None)
    assert address_of(None, INT).value is None


def test_descriptor_repr_is_finite_for_self_reference():
    assert repr(Node.__type_descriptor__) == f"TypeDescriptor(RECORD, '{__name__}.Node')"

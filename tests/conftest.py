"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from typemeta import (
    DeepCopyEngine,
    Instantiator,
    TypeMetaSettings,
    TypeRegistry,
    create_registry,
)


@pytest.fixture
def registry():
    """Fresh registry with the builtin types registered."""
    return create_registry(TypeMetaSettings(register_builtins=True, default_capacity=0))


@pytest.fixture
def empty_registry():
    """Fresh registry with nothing registered."""
    return TypeRegistry()


@pytest.fixture
def instantiator(registry):
    return Instantiator(registry)


@pytest.fixture
def engine():
    return DeepCopyEngine()

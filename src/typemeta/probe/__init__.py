"""Probe functionality: diagnostics over live values."""

from typemeta.probe.settable import any_settable

__all__ = [
    "any_settable",
]

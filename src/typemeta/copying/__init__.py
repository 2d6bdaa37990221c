"""Copy functionality: identity-preserving deep copies."""

from typemeta.copying.engine import DeepCopyEngine, deep_copy
from typemeta.copying.models import CopyContext

__all__ = [
    "CopyContext",
    "DeepCopyEngine",
    "deep_copy",
]

"""Configuration module using Pydantic Settings.

Usage:
    from typemeta.config import TypeMetaSettings

    settings = TypeMetaSettings(default_capacity=4)
"""

from typemeta.config.settings import TypeMetaSettings

__all__ = [
    "TypeMetaSettings",
]

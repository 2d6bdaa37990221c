"""Configuration settings using Pydantic Settings.

Usage:
    from typemeta.config import TypeMetaSettings

    # Load from environment variables (TYPEMETA_*)
    settings = TypeMetaSettings()

    # Or override with explicit values
    settings = TypeMetaSettings(register_builtins=False, default_capacity=8)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeMetaSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for registries and instantiators.

    Attributes:
        register_builtins: Register the builtin primitive, text, time and byte
            types when a registry is created.
        default_capacity: Capacity hint used by make_fresh when none is given.
        log_registrations: Log every insertion at INFO instead of DEBUG.

    Environment Variables:
        TYPEMETA_REGISTER_BUILTINS
        TYPEMETA_DEFAULT_CAPACITY
        TYPEMETA_LOG_REGISTRATIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    register_builtins: bool = True
    default_capacity: int = Field(default=0, ge=0)
    log_registrations: bool = False
